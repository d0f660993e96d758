"""SQLAlchemy ORM models backing the relational document store."""

from sqlalchemy import JSON, Column, Index, Integer, String, UniqueConstraint

from .base import Base


class DocumentModel(Base):
    """
    One stored document.

    `id` is an insertion sequence used as the scan cursor; `pk` is the
    document's primary key within `table_name`.
    """

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(100), nullable=False)
    pk = Column(String(255), nullable=False)
    body = Column(JSON, nullable=False)

    __table_args__ = (
        UniqueConstraint("table_name", "pk", name="uq_documents_table_pk"),
    )


class IndexEntryModel(Base):
    """Secondary index entry. Only documents carrying the partition attribute get one."""

    __tablename__ = "document_index_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(100), nullable=False)
    index_name = Column(String(100), nullable=False)
    partition_value = Column(String(255), nullable=False)
    sort_value = Column(String(255), nullable=False, default="")
    pk = Column(String(255), nullable=False)

    __table_args__ = (
        Index(
            "ix_index_entries_lookup",
            "table_name", "index_name", "partition_value", "sort_value", "pk",
        ),
        Index("ix_index_entries_pk", "table_name", "pk"),
    )
