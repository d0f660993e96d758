"""Document stores with cursor-only iteration and secondary indexes."""

from .in_memory import InMemoryDocumentStore
from .interface import DocumentStore, IndexDefinition, ReadResult
from .sqlalchemy_store import SqlAlchemyDocumentStore

__all__ = [
    "DocumentStore",
    "IndexDefinition",
    "ReadResult",
    "InMemoryDocumentStore",
    "SqlAlchemyDocumentStore",
]
