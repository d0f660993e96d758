"""Database models."""

from .base import Base
from .document_model import DocumentModel, IndexEntryModel

__all__ = ["Base", "DocumentModel", "IndexEntryModel"]
