"""Per-request caller information built from inbound headers."""

from typing import Mapping, Optional

from orderhub.application.interfaces import IRequestContext


BEARER_PREFIX = "bearer "


class RequestContext(IRequestContext):
    """
    Request context over a header mapping.

    The HTTP layer that enforces authentication is external; it hands the
    raw headers to this object.
    """

    def __init__(self, headers: Optional[Mapping[str, str]] = None):
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}

    def get_bearer_token(self) -> Optional[str]:
        header = self._headers.get("authorization", "").strip()
        if not header.lower().startswith(BEARER_PREFIX):
            return None
        token = header[len(BEARER_PREFIX):].strip()
        return token or None
