"""Tests for category service and commands."""

import pytest
from decimal import Decimal

from cyclebudget.cli.main import cli
from cyclebudget.database.namespace import UserNamespace
from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.constants import COLORS, DEFAULT_ICON
from cyclebudget.domain.entities import BaseFrequency
from cyclebudget.domain.errors import NotFoundError, ValidationError


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_and_get(self, category_service):
        category_id = category_service.create_category(
            name="  Groceries ", base_limit="200", base_frequency="Daily", color="#fff"
        )

        category = category_service.get_category(category_id)

        assert category.name == "Groceries"
        assert category.base_limit == Decimal("200")
        assert category.base_frequency == BaseFrequency.DAILY
        assert category.color == "#fff"
        assert category.icon == DEFAULT_ICON

    def test_create_defaults(self, category_service):
        category = category_service.get_category(category_service.create_category(name="Misc"))

        assert category.base_limit == 0
        assert category.base_frequency == BaseFrequency.MONTHLY
        assert category.color == COLORS[0]

    def test_create_rejects_empty_name(self, category_service):
        with pytest.raises(ValidationError):
            category_service.create_category(name="   ")

    def test_create_rejects_negative_limit(self, category_service):
        with pytest.raises(ValidationError, match="negative"):
            category_service.create_category(name="Bad", base_limit=Decimal("-1"))

    def test_create_rejects_unknown_frequency(self, category_service):
        with pytest.raises(ValidationError, match="weekly"):
            category_service.create_category(name="Bad", base_frequency="weekly")

    def test_list_sorted_by_name(self, category_service):
        for name in ["rent", "Coffee", "Books"]:
            category_service.create_category(name=name)

        assert [c.name for c in category_service.list_categories()] == ["Books", "Coffee", "rent"]

    def test_update_only_supplied_fields(self, category_service, sample_categories):
        category_id = sample_categories["Groceries"]

        category_service.update_category(category_id, base_limit="250")

        category = category_service.get_category(category_id)
        assert category.base_limit == Decimal("250")
        assert category.name == "Groceries"
        assert category.base_frequency == BaseFrequency.MONTHLY

    def test_update_frequency(self, category_service, sample_categories):
        category_id = sample_categories["Coffee"]
        category_service.update_category(category_id, base_frequency=BaseFrequency.MONTHLY)
        assert category_service.get_category(category_id).base_frequency == BaseFrequency.MONTHLY

    def test_update_missing_category(self, category_service):
        with pytest.raises(NotFoundError):
            category_service.update_category("missing", name="X")

    def test_update_validates(self, category_service, sample_categories):
        with pytest.raises(ValidationError):
            category_service.update_category(sample_categories["Coffee"], base_limit="-3")

    def test_delete(self, category_service, sample_categories):
        category_service.delete_category(sample_categories["Coffee"])

        assert category_service.get_category(sample_categories["Coffee"]) is None
        with pytest.raises(NotFoundError):
            category_service.delete_category(sample_categories["Coffee"])

    def test_find_by_name_or_id(self, category_service, sample_categories):
        assert category_service.find_category("groceries").id == sample_categories["Groceries"]
        assert category_service.find_category(sample_categories["Coffee"]).name == "Coffee"
        assert category_service.find_category("Nope") is None

    def test_users_are_isolated(self, temp_store, category_service, sample_categories):
        other = CategoryService(temp_store, UserNamespace(app_id="test-app", user_id="bob"))
        assert other.list_categories() == []

    def test_legacy_document_loaded_in_canonical_shape(self, temp_store, namespace, category_service):
        doc_id = temp_store.add(namespace.categories, {"name": "Legacy", "budgetLimit": 75})

        category = category_service.get_category(doc_id)

        assert category.base_limit == Decimal("75")
        assert category.base_frequency == BaseFrequency.MONTHLY

    def test_zero_limit_on_legacy_document_sticks(self, temp_store, namespace, category_service):
        doc_id = temp_store.add(namespace.categories, {"name": "Legacy", "budgetLimit": 75})

        category_service.update_category(doc_id, base_limit=Decimal("0"))

        assert category_service.get_category(doc_id).base_limit == Decimal("0")
        stored = temp_store.get(namespace.categories, doc_id)
        assert "budgetLimit" not in stored
        assert stored["baseFrequency"] == "monthly"

    def test_update_keeps_other_fields_of_legacy_document(self, temp_store, namespace, category_service):
        doc_id = temp_store.add(
            namespace.categories, {"name": "Legacy", "budgetLimit": 75, "color": "#009688"}
        )

        category_service.update_category(doc_id, name="Renamed")

        category = category_service.get_category(doc_id)
        assert category.name == "Renamed"
        assert category.base_limit == Decimal("75")
        assert category.color == "#009688"


class TestCategoryCommands:
    """Tests for category CLI commands."""

    def test_create_and_list(self, cli_runner, cli_args):
        result = cli_runner.invoke(
            cli, cli_args + ["category", "create", "Groceries", "--limit", "200"]
        )
        assert result.exit_code == 0
        assert "Created category 'Groceries'" in result.output

        result = cli_runner.invoke(
            cli, cli_args + ["category", "create", "Coffee", "--limit", "5", "--frequency", "daily"]
        )
        assert result.exit_code == 0

        result = cli_runner.invoke(cli, cli_args + ["category", "list"])
        assert result.exit_code == 0
        assert "Groceries" in result.output
        assert "$ 200.00" in result.output
        assert "$ 152.19" in result.output
        assert "Daily" in result.output

    def test_list_empty(self, cli_runner, cli_args):
        result = cli_runner.invoke(cli, cli_args + ["category", "list"])
        assert result.exit_code == 0
        assert "No categories found" in result.output

    def test_create_invalid_limit(self, cli_runner, cli_args):
        result = cli_runner.invoke(
            cli, cli_args + ["category", "create", "Bad", "--limit", "-10"]
        )
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_update_by_name(self, cli_runner, cli_args, category_service, sample_categories):
        result = cli_runner.invoke(
            cli, cli_args + ["category", "update", "groceries", "--limit", "300"]
        )

        assert result.exit_code == 0
        assert "Updated category 'Groceries'" in result.output
        assert category_service.get_category(sample_categories["Groceries"]).base_limit == Decimal("300")

    def test_delete_unknown(self, cli_runner, cli_args):
        result = cli_runner.invoke(cli, cli_args + ["category", "delete", "Nope"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete(self, cli_runner, cli_args, category_service, sample_categories):
        result = cli_runner.invoke(cli, cli_args + ["category", "delete", "Coffee"])
        assert result.exit_code == 0
        assert category_service.get_category(sample_categories["Coffee"]) is None
