"""PostgreSQL catalog source."""

import logging
from typing import Any, List, Mapping, Optional, Sequence, TYPE_CHECKING

from ..errors import DatabaseConnectionError
from .base import CatalogSource

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

COLUMNS_QUERY = """
    SELECT table_name, column_name, data_type, ordinal_position, column_default,
           is_nullable, character_maximum_length,
           col_description(table_name::regclass, ordinal_position),
           obj_description(table_name::regclass)
      FROM information_schema.columns
     WHERE table_schema = %s
     ORDER BY table_name, ordinal_position
"""

RELATIONS_QUERY = """
    SELECT *
      FROM (
        SELECT ns.nspname AS schemaname,
               cl.relname AS on_table,
               attr.attname AS on_field,
               clf.relname AS to_table,
               attrf.attname AS to_field
          FROM pg_constraint con
               JOIN pg_class cl
                 ON con.conrelid = cl.oid
               JOIN pg_namespace ns
                 ON cl.relnamespace = ns.oid
               JOIN pg_class clf
                 ON con.confrelid = clf.oid
               JOIN pg_attribute attr
                 ON attr.attnum = ANY(con.conkey)
                AND attr.attrelid = con.conrelid
               JOIN pg_attribute attrf
                 ON attrf.attnum = ANY(con.confkey)
                AND attrf.attrelid = con.confrelid
      ) AS fk
     WHERE fk.schemaname = %s
"""

INDEXES_QUERY = """
    SELECT CAST(idx.indrelid::regclass AS varchar) AS table_name,
           i.relname AS index_name,
           idx.indisprimary AS primary_key,
           idx.indisunique AS unique,
           CAST(
               ARRAY(
                   SELECT pg_get_indexdef(idx.indexrelid, k + 1, true)
                     FROM generate_subscripts(idx.indkey, 1) AS k
                    ORDER BY k
               ) AS varchar
           ) AS columns
      FROM pg_index AS idx
      JOIN pg_class AS i
        ON i.oid = idx.indexrelid
      JOIN pg_am AS am
        ON i.relam = am.oid
      JOIN pg_namespace AS ns
        ON ns.oid = i.relnamespace
       AND ns.nspname = ANY(current_schemas(false))
     ORDER BY idx.indrelid
"""


class PostgresCatalog(CatalogSource):
    """Client for reading the PostgreSQL catalog."""

    def __init__(
        self,
        hostname: str = "localhost",
        username: str = "postgres",
        password: str = "postgres",
        database: str = "postgres",
        schema: str = "public",
    ):
        """Initialize the catalog source.

        Args:
            hostname: Database host
            username: Database user
            password: Database password
            database: Database name
            schema: Schema whose tables and relations are read
        """
        self.hostname = hostname
        self.username = username
        self.password = password
        self.database = database
        self.schema = schema
        self._connection = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PostgresCatalog":
        return cls(
            hostname=settings.pg_hostname,
            username=settings.pg_username,
            password=settings.pg_password,
            database=settings.pg_database,
            schema=settings.pg_schema,
        )

    def connect(self):
        """Connect to PostgreSQL.

        Raises:
            DatabaseConnectionError: If the session cannot be established
        """
        if self._connection is not None:
            return self._connection

        try:
            import psycopg2
        except ImportError:
            raise ImportError(
                "psycopg2 is required. "
                "Install it with: pip install psycopg2-binary"
            )

        try:
            self._connection = psycopg2.connect(
                host=self.hostname,
                user=self.username,
                password=self.password,
                dbname=self.database,
            )
        except psycopg2.Error as e:
            raise DatabaseConnectionError(
                f"Cannot connect to {self.database} on {self.hostname}: {e}",
                details={"host": self.hostname, "database": self.database},
            ) from e

        logger.debug("Connected to %s on %s", self.database, self.hostname)
        return self._connection

    def close(self):
        """Close the connection."""
        if self._connection:
            self._connection.close()
            self._connection = None

    def _execute_query(
        self,
        sql: str,
        params: Optional[Sequence[Any]] = None,
        by_name: bool = False,
    ) -> List:
        """Execute a catalog query and return all rows.

        Args:
            sql: SQL query to execute
            params: Query parameters
            by_name: Return rows as dictionaries keyed by column name

        Returns:
            List of result rows
        """
        conn = self.connect()
        cursor_factory = None
        if by_name:
            from psycopg2.extras import RealDictCursor
            cursor_factory = RealDictCursor

        cursor = conn.cursor(cursor_factory=cursor_factory)
        try:
            cursor.execute(sql, params)
            return cursor.fetchall()
        finally:
            cursor.close()

    def fetch_columns(self) -> List[Sequence[Any]]:
        return self._execute_query(COLUMNS_QUERY, (self.schema,))

    def fetch_relations(self) -> List[Mapping[str, Any]]:
        return self._execute_query(RELATIONS_QUERY, (self.schema,), by_name=True)

    def fetch_indexes(self) -> List[Sequence[Any]]:
        return self._execute_query(INDEXES_QUERY)
