"""Database engine and session helpers."""

from .config import close_database, create_engine, get_session_factory, init_database

__all__ = ["create_engine", "get_session_factory", "init_database", "close_database"]
