"""Shared pytest fixtures for erd-cli tests."""

import pytest

from erd_cli.schema.models import Column, Relation, Schema, Table


@pytest.fixture
def column_rows():
    """Positional column rows, sorted by table then ordinal position."""
    return [
        ("orders", "id", "integer", 1, "nextval('orders_id_seq'::regclass)", "NO", None, None, "Customer orders"),
        ("orders", "user_id", "integer", 2, None, "NO", None, "Buyer", "Customer orders"),
        ("orders", "placed_at", "timestamp without time zone", 3, "now()", "YES", None, None, "Customer orders"),
        ("products", "sku", "character varying", 1, None, "NO", 32, None, None),
        ("products", "name", "text", 2, None, "YES", None, None, None),
        ("schema_migrations", "version", "character varying", 1, None, "NO", 255, None, None),
        ("users", "id", "integer", 1, None, "NO", None, "Surrogate key", "Registered users"),
        ("users", "email", "character varying", 2, None, "NO", 255, "Login address", "Registered users"),
    ]


@pytest.fixture
def relation_rows():
    """Foreign-key rows keyed by column name."""
    return [
        {"schemaname": "public", "on_table": "orders", "on_field": "user_id", "to_table": "users", "to_field": "id"},
        {"schemaname": "public", "on_table": "users", "on_field": "id", "to_table": "schema_migrations", "to_field": "version"},
    ]


@pytest.fixture
def index_rows():
    """Positional index rows with array-literal column lists."""
    return [
        ("orders", "orders_pkey", True, True, "{id}"),
        ("orders", "orders_user_id_idx", False, False, "{user_id}"),
        ("products", "products_pkey", True, True, "{sku}"),
        ("users", "users_pkey", True, True, "{id}"),
        ("users", "users_email_key", False, True, "{email}"),
        ("schema_migrations", "schema_migrations_pkey", True, True, "{version}"),
    ]


@pytest.fixture
def users_table():
    return Table(
        name="users",
        description="Registered users",
        columns=(
            Column(name="id", data_type="integer", index=1, nullable="NO", primary_key=True),
            Column(name="email", data_type="character varying", index=2, nullable="NO", max_chars=255),
        ),
    )


@pytest.fixture
def orders_table():
    return Table(
        name="orders",
        columns=(
            Column(name="id", data_type="integer", index=1, nullable="NO", primary_key=True),
            Column(name="user_id", data_type="integer", index=2, nullable="NO"),
            Column(name="placed_at", data_type="timestamp without time zone", index=3),
        ),
    )


@pytest.fixture
def sample_schema(users_table, orders_table):
    """Two tables with a foreign key from orders to users."""
    return Schema(
        tables=(users_table, orders_table),
        relations=(
            Relation(on_table="orders", on_field="user_id", to_table="users", to_field="id"),
        ),
    )
