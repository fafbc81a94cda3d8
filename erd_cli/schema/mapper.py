"""Map raw catalog rows onto the schema model.

Three independently fetched row sets feed the mapper:

* column rows, positional, ordered by table name then ordinal position
* foreign-key rows, keyed by column name
* index rows, positional

Indexes are converted first so that primary key flags can be resolved
while columns are built. Tables, relations and indexes are all filtered
with the same include/exclude rules.
"""

import logging
import textwrap
from itertools import groupby
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..errors import MissingFieldError
from .filters import relation_included, should_include
from .models import Column, Index, Relation, Schema, Table

logger = logging.getLogger(__name__)

COLUMN_FIELDS = (
    "table_name",
    "column_name",
    "data_type",
    "ordinal_position",
    "column_default",
    "is_nullable",
    "character_maximum_length",
    "column_description",
    "table_description",
)

INDEX_FIELDS = (
    "table_name",
    "index_name",
    "primary_key",
    "unique",
    "columns",
)

RELATION_FIELDS = ("on_table", "on_field", "to_table", "to_field")


def _field_at(row: Sequence[Any], position: int, names: Sequence[str]) -> Any:
    try:
        return row[position]
    except IndexError:
        raise MissingFieldError(names[position]) from None


def _unpack(row: Sequence[Any], names: Sequence[str]) -> List[Any]:
    """Read every named position of a row, failing on the first missing one."""
    return [_field_at(row, position, names) for position in range(len(names))]


def _fetch_field(row: Mapping[str, Any], key: str) -> Any:
    try:
        return row[key]
    except KeyError:
        raise MissingFieldError(key) from None


def parse_array_literal(value: str) -> List[str]:
    """Split a catalog array literal such as ``{id,name}`` into its items."""
    return value.strip("{}").split(",")


def wrap_description(text: Optional[str], width: Optional[int]) -> Optional[str]:
    """Wrap a description to the given width.

    Each existing line is wrapped on its own so line breaks already in the
    text survive. A width of 0 or None leaves the text unchanged.
    """
    if text is None or not width:
        return text
    return "\n".join(
        textwrap.fill(line, width) if line else line
        for line in text.split("\n")
    )


def is_primary_key(table: str, column: str, indexes: Iterable[Index]) -> bool:
    """True if a primary index on ``table`` covers ``column``."""
    return any(
        idx.table == table and idx.primary and column in idx.fields
        for idx in indexes
    )


def index_from_row(row: Sequence[Any]) -> Index:
    """Convert a positional index row to an Index."""
    table, name, primary, unique, columns = _unpack(row, INDEX_FIELDS)
    return Index(
        table=table,
        name=name,
        primary=bool(primary),
        unique=bool(unique),
        fields=tuple(parse_array_literal(columns)),
    )


def relation_from_row(row: Mapping[str, Any]) -> Relation:
    """Convert a foreign-key row, accessed by column name, to a Relation."""
    return Relation(*(_fetch_field(row, key) for key in RELATION_FIELDS))


class CatalogMapper:
    """Builds a Schema from catalog rows.

    Example usage:
        mapper = CatalogMapper(exclude=["schema_migrations"], column_description_wrap=40)
        schema = mapper.build(column_rows, relation_rows, index_rows)
    """

    def __init__(
        self,
        include: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
        column_description_wrap: Optional[int] = None,
        table_description_wrap: Optional[int] = None,
    ):
        """Initialize the mapper.

        Args:
            include: Load-time include list (None loads every table)
            exclude: Load-time exclude list
            column_description_wrap: Wrap width for column descriptions
            table_description_wrap: Wrap width for table descriptions
        """
        self.include = include
        self.exclude = exclude
        self.column_description_wrap = column_description_wrap
        self.table_description_wrap = table_description_wrap

    def build_indexes(self, index_rows: Iterable[Sequence[Any]]) -> List[Index]:
        """Convert index rows of included tables; other rows are never read."""
        return [
            index_from_row(row)
            for row in index_rows
            if should_include(_field_at(row, 0, INDEX_FIELDS), self.include, self.exclude)
        ]

    def build_column(self, row: Sequence[Any], indexes: Sequence[Index]) -> Column:
        """Convert a positional column row to a Column."""
        (
            table_name, name, data_type, position, default,
            nullable, max_chars, description, table_description,
        ) = _unpack(row, COLUMN_FIELDS)

        return Column(
            name=name,
            data_type=data_type,
            index=int(position),
            default=default,
            nullable=nullable,
            max_chars=int(max_chars) if max_chars is not None else None,
            description=wrap_description(description, self.column_description_wrap),
            table_description=table_description,
            primary_key=is_primary_key(table_name, name, indexes),
        )

    def build_tables(
        self,
        column_rows: Iterable[Sequence[Any]],
        indexes: Sequence[Index],
    ) -> List[Table]:
        """Group consecutive column rows by table name into Tables.

        Rows must arrive sorted by table name; groups of excluded tables
        are skipped before any Column is built.
        """
        tables = []
        for name, rows in groupby(column_rows, key=lambda row: _field_at(row, 0, COLUMN_FIELDS)):
            if not should_include(name, self.include, self.exclude):
                logger.debug("Skipping table %s", name)
                continue

            columns = tuple(self.build_column(row, indexes) for row in rows)
            tables.append(Table(
                name=name,
                description=wrap_description(
                    columns[0].table_description, self.table_description_wrap
                ),
                columns=columns,
            ))
        return tables

    def build_relations(self, relation_rows: Iterable[Mapping[str, Any]]) -> List[Relation]:
        """Convert foreign-key rows, keeping relations whose endpoints both pass."""
        relations = [relation_from_row(row) for row in relation_rows]
        return [r for r in relations if relation_included(r, self.include, self.exclude)]

    def build(
        self,
        column_rows: Iterable[Sequence[Any]],
        relation_rows: Iterable[Mapping[str, Any]],
        index_rows: Iterable[Sequence[Any]],
    ) -> Schema:
        """Assemble a Schema from the three catalog row sets.

        Raises:
            MissingFieldError: If any row lacks an expected field
        """
        indexes = self.build_indexes(index_rows)
        tables = self.build_tables(column_rows, indexes)
        relations = self.build_relations(relation_rows)

        logger.debug(
            "Mapped %d tables, %d relations (%d indexes consulted)",
            len(tables), len(relations), len(indexes),
        )
        return Schema(tables=tuple(tables), relations=tuple(relations))


def build_schema(
    column_rows: Iterable[Sequence[Any]],
    relation_rows: Iterable[Mapping[str, Any]],
    index_rows: Iterable[Sequence[Any]],
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    column_description_wrap: Optional[int] = None,
    table_description_wrap: Optional[int] = None,
) -> Schema:
    """Convenience function to map catalog rows in one call."""
    mapper = CatalogMapper(
        include=include,
        exclude=exclude,
        column_description_wrap=column_description_wrap,
        table_description_wrap=table_description_wrap,
    )
    return mapper.build(column_rows, relation_rows, index_rows)
