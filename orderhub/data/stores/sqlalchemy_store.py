"""
Relational document store on SQLAlchemy async.

Document bodies are kept as JSON; secondary indexes are materialized into
an index-entry table on every write. Cursors are keyset based: the
insertion sequence for scans, (sort value, pk) for index queries.
"""
import logging
from typing import Optional, Sequence

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..attributes import Document
from ..models.document_model import DocumentModel, IndexEntryModel
from .interface import (
    DocumentStore,
    IndexDefinition,
    ReadResult,
    decode_token,
    encode_token,
    scalar_of,
)


logger = logging.getLogger(__name__)


class SqlAlchemyDocumentStore(DocumentStore):
    """DocumentStore backed by the documents/index-entries tables."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        table_name: str,
        key_attribute: str,
        indexes: Sequence[IndexDefinition] = (),
    ):
        """
        Args:
            session_factory: SQLAlchemy async session factory
            table_name: Logical table the documents belong to
            key_attribute: Attribute holding the primary key
            indexes: Secondary indexes to maintain
        """
        super().__init__(table_name, key_attribute, indexes)
        self._session_factory = session_factory

    async def get_item(self, key: str) -> Optional[Document]:
        async with self._session_factory() as session:
            row = await self._find(session, key)
            return row.body if row else None

    async def put_item(self, doc: Document) -> None:
        key = self._key_of(doc)
        async with self._session_factory() as session:
            async with session.begin():
                row = await self._find(session, key)
                if row is None:
                    session.add(DocumentModel(table_name=self.table_name, pk=key, body=doc))
                else:
                    row.body = doc

                await session.execute(
                    delete(IndexEntryModel).where(
                        IndexEntryModel.table_name == self.table_name,
                        IndexEntryModel.pk == key,
                    )
                )
                for index in self.indexes.values():
                    partition_value = scalar_of(doc.get(index.partition_key))
                    if partition_value is None:
                        continue
                    session.add(
                        IndexEntryModel(
                            table_name=self.table_name,
                            index_name=index.name,
                            partition_value=partition_value,
                            sort_value=scalar_of(doc.get(index.sort_key)) or "",
                            pk=key,
                        )
                    )
        logger.debug(f"[{key}] Stored document in {self.table_name}")

    async def delete_item(self, key: str) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(
                    delete(IndexEntryModel).where(
                        IndexEntryModel.table_name == self.table_name,
                        IndexEntryModel.pk == key,
                    )
                )
                await session.execute(
                    delete(DocumentModel).where(
                        DocumentModel.table_name == self.table_name,
                        DocumentModel.pk == key,
                    )
                )

    async def scan(self, limit: int, start_token: Optional[str] = None) -> ReadResult:
        stmt = select(DocumentModel).where(DocumentModel.table_name == self.table_name)
        if start_token:
            stmt = stmt.where(DocumentModel.id > decode_token(start_token)[0])
        stmt = stmt.order_by(DocumentModel.id).limit(limit + 1)

        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).scalars().all()

        page = rows[:limit]
        next_token = encode_token(page[-1].id) if len(rows) > limit else None
        return ReadResult(items=[row.body for row in page], next_token=next_token)

    async def query(
        self,
        index_name: str,
        key_value: str,
        limit: int,
        start_token: Optional[str] = None,
    ) -> ReadResult:
        self._index(index_name)

        stmt = (
            select(IndexEntryModel.sort_value, IndexEntryModel.pk, DocumentModel.body)
            .join(
                DocumentModel,
                and_(
                    DocumentModel.table_name == IndexEntryModel.table_name,
                    DocumentModel.pk == IndexEntryModel.pk,
                ),
            )
            .where(
                IndexEntryModel.table_name == self.table_name,
                IndexEntryModel.index_name == index_name,
                IndexEntryModel.partition_value == key_value,
            )
        )
        if start_token:
            last_sort, last_pk = decode_token(start_token)
            stmt = stmt.where(
                or_(
                    IndexEntryModel.sort_value > last_sort,
                    and_(IndexEntryModel.sort_value == last_sort, IndexEntryModel.pk > last_pk),
                )
            )
        stmt = stmt.order_by(IndexEntryModel.sort_value, IndexEntryModel.pk).limit(limit + 1)

        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()

        page = rows[:limit]
        next_token = encode_token(page[-1].sort_value, page[-1].pk) if len(rows) > limit else None
        return ReadResult(items=[row.body for row in page], next_token=next_token)

    async def _find(self, session: AsyncSession, key: str) -> Optional[DocumentModel]:
        result = await session.execute(
            select(DocumentModel).where(
                DocumentModel.table_name == self.table_name,
                DocumentModel.pk == key,
            )
        )
        return result.scalar_one_or_none()
