"""Declarative base for OrderHub tables."""

from sqlalchemy.orm import declarative_base


Base = declarative_base()
