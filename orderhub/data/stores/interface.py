"""
Document store contract.

A table of documents keyed by one string attribute. Reads are bounded and
forward-only: each returns at most `limit` documents and an opaque
continuation token when more remain. Secondary indexes are sparse: a
document is indexed only if it carries the partition attribute.
"""
import base64
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from ..attributes import AttributeValue, Document


@dataclass(frozen=True)
class IndexDefinition:
    """Secondary index: equality on partition_key, ordered by sort_key."""

    name: str
    partition_key: str
    sort_key: str


@dataclass
class ReadResult:
    items: List[Document] = field(default_factory=list)
    next_token: Optional[str] = None


def scalar_of(value: Optional[AttributeValue]) -> Optional[str]:
    """String form of a scalar attribute value, used as key material."""
    if not value:
        return None
    for tag in ("S", "N"):
        if tag in value:
            return str(value[tag])
    if "BOOL" in value:
        return "true" if value["BOOL"] else "false"
    return None


def encode_token(*parts: Any) -> str:
    raw = json.dumps(list(parts), separators=(",", ":"))
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode_token(token: str) -> List[Any]:
    return json.loads(base64.urlsafe_b64decode(token.encode("ascii")).decode("utf-8"))


class DocumentStore(ABC):
    """Abstract document table."""

    def __init__(self, table_name: str, key_attribute: str, indexes: Sequence[IndexDefinition] = ()):
        self.table_name = table_name
        self.key_attribute = key_attribute
        self.indexes: Mapping[str, IndexDefinition] = {index.name: index for index in indexes}

    def _index(self, index_name: str) -> IndexDefinition:
        try:
            return self.indexes[index_name]
        except KeyError:
            raise ValueError(f"Unknown index {index_name!r} on table {self.table_name!r}") from None

    def _key_of(self, doc: Document) -> str:
        key = scalar_of(doc.get(self.key_attribute))
        if key is None:
            raise ValueError(f"Document is missing key attribute {self.key_attribute!r}")
        return key

    @abstractmethod
    async def get_item(self, key: str) -> Optional[Document]:
        """Fetch one document by primary key."""

    @abstractmethod
    async def put_item(self, doc: Document) -> None:
        """Insert or replace a document and refresh its index entries."""

    @abstractmethod
    async def delete_item(self, key: str) -> None:
        """Delete a document if present."""

    @abstractmethod
    async def scan(self, limit: int, start_token: Optional[str] = None) -> ReadResult:
        """Read the whole table in storage order.

        Args:
            limit: Maximum documents returned by this read
            start_token: Token returned by the previous read, if any

        Returns:
            ReadResult with next_token set only when more documents remain
        """

    @abstractmethod
    async def query(
        self,
        index_name: str,
        key_value: str,
        limit: int,
        start_token: Optional[str] = None,
    ) -> ReadResult:
        """Read documents whose index partition attribute equals key_value.

        Results are ordered by the index sort key, then primary key.
        """
