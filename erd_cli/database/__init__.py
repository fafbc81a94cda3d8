"""Catalog sources for erd-cli.

This module fetches the raw catalog rows that the schema mapper turns
into a Schema, with a PostgreSQL implementation.
"""

from .base import CatalogSource
from .postgres import PostgresCatalog

__all__ = [
    "CatalogSource",
    "PostgresCatalog",
]
