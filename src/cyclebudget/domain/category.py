"""Category domain service."""

from decimal import Decimal
from typing import Optional

from cyclebudget.database.base import DocumentStore
from cyclebudget.database.mappers import (
    category_from_document,
    category_to_document,
    migrate_category_document,
)
from cyclebudget.database.namespace import UserNamespace
from cyclebudget.domain.constants import COLORS, DEFAULT_ICON
from cyclebudget.domain.entities import BaseFrequency, Category
from cyclebudget.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    negative_limit,
    unsupported_frequency,
)
from cyclebudget.utils.amount_parser import coerce_amount


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, store: DocumentStore, namespace: UserNamespace):
        """Initialize category service.

        Args:
            store: Document store instance
            namespace: Collection paths of the user being served
        """
        self.store = store
        self.namespace = namespace

    def create_category(
        self,
        name: str,
        base_limit: Decimal | int | str = 0,
        base_frequency: BaseFrequency | str = BaseFrequency.MONTHLY,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> str:
        """Create a category.

        Args:
            name: Display name
            base_limit: Limit at the base frequency
            base_frequency: Frequency the limit is expressed at
            color: Display colour; defaults to the first palette colour
            icon: Display icon tag

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty, the limit is negative or
                the frequency is unknown
        """
        document = category_to_document(
            name=_validate_name(name),
            base_limit=_validate_limit(base_limit),
            base_frequency=_validate_frequency(base_frequency),
            color=color or COLORS[0],
            icon=icon or DEFAULT_ICON,
        )
        return self.store.add(self.namespace.categories, document)

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category or None if not found
        """
        doc = self.store.get(self.namespace.categories, category_id)
        if doc is None:
            return None
        return category_from_document(doc)

    def require_category(self, category_id: str) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def find_category(self, name_or_id: str) -> Optional[Category]:
        """Resolve a category by ID, then by case-insensitive name."""
        category = self.get_category(name_or_id)
        if category is not None:
            return category
        wanted = name_or_id.strip().lower()
        for candidate in self.list_categories():
            if candidate.name.lower() == wanted:
                return candidate
        return None

    def list_categories(self) -> list[Category]:
        """List categories sorted by name."""
        categories = [
            category_from_document(doc)
            for doc in self.store.list(self.namespace.categories)
        ]
        return sort_categories(categories)

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        base_limit: Decimal | int | str | None = None,
        base_frequency: BaseFrequency | str | None = None,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> None:
        """Update only the supplied fields of a category.

        The stored document is rewritten in canonical shape, so legacy
        fields such as ``budgetLimit`` do not survive an update.

        Raises:
            NotFoundError: If the category does not exist
            ValidationError: If a supplied field is invalid
        """
        doc = self.store.get(self.namespace.categories, category_id)
        if doc is None:
            raise NotFoundError(category_not_found(category_id))

        fields = {}
        if name is not None:
            fields["name"] = _validate_name(name)
        if base_limit is not None:
            fields["baseLimit"] = str(_validate_limit(base_limit))
        if base_frequency is not None:
            fields["baseFrequency"] = _validate_frequency(base_frequency).value
        if color is not None:
            fields["color"] = color
        if icon is not None:
            fields["icon"] = icon

        if fields:
            self.store.set(
                self.namespace.categories,
                category_id,
                {**migrate_category_document(doc), **fields},
            )

    def delete_category(self, category_id: str) -> None:
        """Delete a category. Its transactions are kept.

        Raises:
            NotFoundError: If the category does not exist
        """
        self.require_category(category_id)
        self.store.delete(self.namespace.categories, category_id)


def sort_categories(categories: list[Category]) -> list[Category]:
    """Order categories by name, ignoring case."""
    return sorted(categories, key=lambda cat: cat.name.lower())


def _validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Category name cannot be empty")
    return cleaned


def _validate_limit(base_limit) -> Decimal:
    limit = coerce_amount(base_limit)
    if limit < 0:
        raise ValidationError(negative_limit(limit))
    return limit


def _validate_frequency(base_frequency) -> BaseFrequency:
    if isinstance(base_frequency, BaseFrequency):
        return base_frequency
    try:
        return BaseFrequency(str(base_frequency).strip().lower())
    except ValueError:
        raise ValidationError(
            unsupported_frequency(
                str(base_frequency), [freq.value for freq in BaseFrequency]
            )
        )
