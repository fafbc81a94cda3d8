"""Tests for catalog sources, with psycopg2 mocked out."""

from unittest.mock import MagicMock, patch

import psycopg2
import pytest
from psycopg2.extras import RealDictCursor

from erd_cli.config import Settings
from erd_cli.database import CatalogSource, PostgresCatalog
from erd_cli.database.postgres import COLUMNS_QUERY, INDEXES_QUERY, RELATIONS_QUERY
from erd_cli.errors import DatabaseConnectionError, MissingFieldError


class StaticCatalog(CatalogSource):
    """Catalog source serving fixed rows."""

    def __init__(self, columns, relations, indexes):
        self.columns = columns
        self.relations = relations
        self.indexes = indexes
        self.closed = False

    def connect(self):
        return None

    def close(self):
        self.closed = True

    def fetch_columns(self):
        return self.columns

    def fetch_relations(self):
        return self.relations

    def fetch_indexes(self):
        return self.indexes


class TestCatalogSourceLoadSchema:
    """Test the shared load_schema implementation."""

    def test_applies_settings_filter(self, column_rows, relation_rows, index_rows):
        catalog = StaticCatalog(column_rows, relation_rows, index_rows)
        settings = Settings(exclude_tables=["schema_migrations"], table_description_wrap=10)

        schema = catalog.load_schema(settings)

        assert schema.table_names() == ("orders", "products", "users")
        assert len(schema.relations) == 1
        assert schema.get_table_by_name("users").description == "Registered\nusers"

    def test_context_manager_closes(self):
        with StaticCatalog([], [], []) as catalog:
            pass

        assert catalog.closed is True

    def test_malformed_row_aborts_load(self, column_rows, index_rows):
        catalog = StaticCatalog(column_rows, [{"on_table": "orders"}], index_rows)

        with pytest.raises(MissingFieldError):
            catalog.load_schema(Settings())


class TestPostgresCatalog:
    """Test the PostgreSQL catalog source."""

    def test_from_settings(self):
        settings = Settings(pg_hostname="db.internal", pg_database="shop", pg_schema="sales")

        catalog = PostgresCatalog.from_settings(settings)

        assert catalog.hostname == "db.internal"
        assert catalog.database == "shop"
        assert catalog.schema == "sales"

    @patch("psycopg2.connect")
    def test_connect_uses_credentials(self, mock_connect):
        catalog = PostgresCatalog(hostname="db", username="erd", password="secret", database="shop")

        catalog.connect()
        catalog.connect()

        mock_connect.assert_called_once_with(host="db", user="erd", password="secret", dbname="shop")

    @patch("psycopg2.connect")
    def test_connection_failure(self, mock_connect):
        mock_connect.side_effect = psycopg2.OperationalError("connection refused")
        catalog = PostgresCatalog(hostname="db", database="shop")

        with pytest.raises(DatabaseConnectionError) as exc_info:
            catalog.connect()

        assert exc_info.value.code == "CONNECTION_ERROR"
        assert exc_info.value.details == {"host": "db", "database": "shop"}

    @patch("psycopg2.connect")
    def test_queries(self, mock_connect):
        cursor = MagicMock()
        cursor.fetchall.return_value = []
        mock_connect.return_value.cursor.return_value = cursor
        catalog = PostgresCatalog(schema="sales")

        catalog.fetch_columns()
        catalog.fetch_relations()
        catalog.fetch_indexes()

        executed = [c.args for c in cursor.execute.call_args_list]
        assert executed == [
            (COLUMNS_QUERY, ("sales",)),
            (RELATIONS_QUERY, ("sales",)),
            (INDEXES_QUERY, None),
        ]
        factories = [c.kwargs["cursor_factory"] for c in mock_connect.return_value.cursor.call_args_list]
        assert factories == [None, RealDictCursor, None]
        assert cursor.close.call_count == 3

    @patch("psycopg2.connect")
    def test_load_schema(self, mock_connect, column_rows, relation_rows, index_rows):
        cursor = MagicMock()
        cursor.fetchall.side_effect = [column_rows, relation_rows, index_rows]
        mock_connect.return_value.cursor.return_value = cursor

        with PostgresCatalog() as catalog:
            schema = catalog.load_schema(Settings(include_tables=["orders", "users"]))

        assert schema.table_names() == ("orders", "users")
        assert schema.get_table_by_name("users").primary_key_columns == ("id",)
        mock_connect.return_value.close.assert_called_once()
