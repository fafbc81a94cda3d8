"""Schema data models extracted from the database catalog."""

from typing import Optional, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class Column:
    """Represents a table column as reported by the catalog.

    ``nullable`` keeps the catalog's own 'YES'/'NO' string rather than a
    boolean. ``table_description`` repeats the owning table's description
    on every column so drawers that only see a column can still use it.
    """
    name: str
    data_type: str
    index: int
    default: Optional[str] = None
    nullable: str = "YES"
    max_chars: Optional[int] = None
    description: Optional[str] = None
    table_description: Optional[str] = None
    primary_key: bool = False


@dataclass(frozen=True)
class Table:
    """Represents a database table with columns in ordinal order."""
    name: str
    description: Optional[str] = None
    columns: Tuple[Column, ...] = ()

    def get_column(self, name: str) -> Optional[Column]:
        """Find a column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    @property
    def primary_key_columns(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.columns if c.primary_key)


@dataclass(frozen=True)
class Relation:
    """A foreign-key edge from the referencing column to the referenced one."""
    on_table: str  # referencing table
    on_field: str
    to_table: str  # referenced table
    to_field: str


@dataclass(frozen=True)
class Index:
    """Catalog index; only used to resolve primary key columns."""
    table: str
    name: str
    primary: bool
    unique: bool
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Schema:
    """Represents a loaded database schema."""
    tables: Tuple[Table, ...] = ()
    relations: Tuple[Relation, ...] = ()
    # (table name, partially loaded table names) pairs; unused by drawers
    partial_tables: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    def get_table_by_name(self, table_name: str) -> Optional[Table]:
        """Find a table by name."""
        for table in self.tables:
            if table.name == table_name:
                return table
        return None

    def table_names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self.tables)
