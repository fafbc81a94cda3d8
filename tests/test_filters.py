"""Tests for the include/exclude table filter."""

from erd_cli.schema.filters import relation_included, should_include
from erd_cli.schema.models import Relation


class TestShouldInclude:
    """Test the table-level predicate."""

    def test_included_by_default(self):
        assert should_include("users") is True

    def test_include_list_must_name_table(self):
        assert should_include("users", include=["users", "orders"]) is True
        assert should_include("products", include=["users", "orders"]) is False

    def test_empty_include_list_includes_nothing(self):
        assert should_include("users", include=[]) is False

    def test_exclude_list(self):
        assert should_include("users", exclude=["users"]) is False
        assert should_include("orders", exclude=["users"]) is True

    def test_exclude_wins_over_include(self):
        assert should_include("users", include=["users"], exclude=["users"]) is False


class TestRelationIncluded:
    """Relations need both endpoints to pass."""

    def setup_method(self):
        self.relation = Relation(on_table="orders", on_field="user_id", to_table="users", to_field="id")

    def test_no_lists(self):
        assert relation_included(self.relation) is True

    def test_include_must_name_both_endpoints(self):
        assert relation_included(self.relation, include=["orders", "users"]) is True
        assert relation_included(self.relation, include=["orders"]) is False

    def test_excluding_either_endpoint_drops_relation(self):
        assert relation_included(self.relation, exclude=["users"]) is False
        assert relation_included(self.relation, exclude=["orders"]) is False

    def test_self_reference_has_no_special_case(self):
        relation = Relation(on_table="users", on_field="manager_id", to_table="users", to_field="id")
        assert relation_included(relation, include=["users"]) is True
        assert relation_included(relation, exclude=["users"]) is False
