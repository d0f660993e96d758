"""In-memory document store, used for tests and local runs."""

import copy
import itertools
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..attributes import Document
from .interface import (
    DocumentStore,
    IndexDefinition,
    ReadResult,
    decode_token,
    encode_token,
    scalar_of,
)


logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """
    Dict-backed store.

    Documents are deep-copied on the way in and out so callers never share
    state with the store. Scan order is insertion order; replacing a
    document keeps its position.
    """

    def __init__(self, table_name: str, key_attribute: str, indexes: Sequence[IndexDefinition] = ()):
        super().__init__(table_name, key_attribute, indexes)
        self._documents: Dict[str, Tuple[int, Document]] = {}
        self._sequence = itertools.count(1)

    async def get_item(self, key: str) -> Optional[Document]:
        entry = self._documents.get(key)
        return copy.deepcopy(entry[1]) if entry else None

    async def put_item(self, doc: Document) -> None:
        key = self._key_of(doc)
        existing = self._documents.get(key)
        seq = existing[0] if existing else next(self._sequence)
        self._documents[key] = (seq, copy.deepcopy(doc))
        logger.debug(f"[{key}] Stored document in {self.table_name}")

    async def delete_item(self, key: str) -> None:
        self._documents.pop(key, None)

    async def scan(self, limit: int, start_token: Optional[str] = None) -> ReadResult:
        after = decode_token(start_token)[0] if start_token else 0
        rows = sorted(
            ((seq, doc) for seq, doc in self._documents.values() if seq > after),
            key=lambda row: row[0],
        )
        page = rows[:limit]
        next_token = encode_token(page[-1][0]) if len(rows) > limit else None
        return ReadResult(items=[copy.deepcopy(doc) for _, doc in page], next_token=next_token)

    async def query(
        self,
        index_name: str,
        key_value: str,
        limit: int,
        start_token: Optional[str] = None,
    ) -> ReadResult:
        index = self._index(index_name)

        rows: List[Tuple[str, str, Document]] = []
        for key, (_, doc) in self._documents.items():
            if scalar_of(doc.get(index.partition_key)) != key_value:
                continue
            rows.append((scalar_of(doc.get(index.sort_key)) or "", key, doc))
        rows.sort(key=lambda row: (row[0], row[1]))

        if start_token:
            last_sort, last_key = decode_token(start_token)
            rows = [row for row in rows if (row[0], row[1]) > (last_sort, last_key)]

        page = rows[:limit]
        next_token = encode_token(page[-1][0], page[-1][1]) if len(rows) > limit else None
        return ReadResult(items=[copy.deepcopy(doc) for _, _, doc in page], next_token=next_token)
