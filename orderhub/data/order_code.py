"""
Human-readable order codes.

Format: <prefix><UTC yyyyMMdd><4 random digits 1000-9999>, e.g.
ORD202610191234. Uniqueness is probed through the code index; on collision
a new suffix is drawn (same date) up to a fixed number of attempts.
"""
import logging
import random
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from orderhub.domain.exceptions import OrderCodeExhaustedError


logger = logging.getLogger(__name__)

SUFFIX_MIN = 1000
SUFFIX_MAX = 9999


class OrderCodeGenerator:
    """Generates order codes not yet used by any stored order."""

    def __init__(
        self,
        exists_by_code: Callable[[str], Awaitable[bool]],
        prefix: str = "ORD",
        max_attempts: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            exists_by_code: Coroutine probing the code index
            prefix: Literal code prefix
            max_attempts: Candidates tried before giving up
            clock: Returns current UTC time (injectable for tests)
            rng: Random source exposing randint (injectable for tests)
        """
        self._exists_by_code = exists_by_code
        self.prefix = prefix
        self.max_attempts = max_attempts
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._rng = rng or random.Random()

    def candidate(self, date_part: str) -> str:
        return f"{self.prefix}{date_part}{self._rng.randint(SUFFIX_MIN, SUFFIX_MAX)}"

    async def generate(self) -> str:
        """Return a unique code.

        Raises:
            OrderCodeExhaustedError: Every attempt collided
        """
        date_part = self._clock().strftime("%Y%m%d")

        for attempt in range(1, self.max_attempts + 1):
            code = self.candidate(date_part)
            if not await self._exists_by_code(code):
                return code
            logger.warning(f"Order code collision on attempt {attempt}/{self.max_attempts}: {code}")

        logger.error(f"Order code space exhausted after {self.max_attempts} attempts")
        raise OrderCodeExhaustedError(self.max_attempts)
