"""Abstract base class for catalog sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Sequence, TYPE_CHECKING

from ..schema.mapper import CatalogMapper
from ..schema.models import Schema

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class CatalogSource(ABC):
    """Abstract base class for fetching catalog rows.

    Subclasses run the database-specific catalog queries; the common
    ``load_schema`` turns their results into a Schema.
    """

    @abstractmethod
    def connect(self):
        """Establish connection to the database."""
        pass

    @abstractmethod
    def close(self):
        """Close the database connection."""
        pass

    @abstractmethod
    def fetch_columns(self) -> List[Sequence[Any]]:
        """Get column rows, positional, ordered by table and ordinal position."""
        pass

    @abstractmethod
    def fetch_relations(self) -> List[Mapping[str, Any]]:
        """Get foreign-key rows keyed by column name."""
        pass

    @abstractmethod
    def fetch_indexes(self) -> List[Sequence[Any]]:
        """Get index rows, positional."""
        pass

    def load_schema(self, settings: "Settings") -> Schema:
        """Fetch the three catalog row sets and map them onto a Schema.

        Args:
            settings: Provides the load-time filter and wrap widths

        Returns:
            Schema with excluded tables, relations and indexes removed
        """
        column_rows = self.fetch_columns()
        relation_rows = self.fetch_relations()
        index_rows = self.fetch_indexes()
        logger.debug(
            "Fetched %d column rows, %d relation rows, %d index rows",
            len(column_rows), len(relation_rows), len(index_rows),
        )

        mapper = CatalogMapper(
            include=settings.include_tables,
            exclude=settings.exclude_tables,
            column_description_wrap=settings.column_description_wrap,
            table_description_wrap=settings.table_description_wrap,
        )
        return mapper.build(column_rows, relation_rows, index_rows)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
