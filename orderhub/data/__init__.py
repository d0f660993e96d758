"""Persistence layer: document codec, stores and repositories."""
