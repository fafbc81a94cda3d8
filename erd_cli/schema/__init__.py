"""Schema model, filtering rules and catalog row mapping."""

from .models import Column, Table, Relation, Index, Schema
from .filters import should_include, relation_included
from .mapper import (
    CatalogMapper,
    build_schema,
    is_primary_key,
    wrap_description,
)

__all__ = [
    # Data models
    "Column",
    "Table",
    "Relation",
    "Index",
    "Schema",
    # Filtering
    "should_include",
    "relation_included",
    # Mapping
    "CatalogMapper",
    "build_schema",
    "is_primary_key",
    "wrap_description",
]
