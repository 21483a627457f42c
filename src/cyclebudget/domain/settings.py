"""Settings domain service."""

from typing import Optional

from cyclebudget.database.base import DocumentStore
from cyclebudget.database.mappers import settings_from_document, settings_to_document
from cyclebudget.database.namespace import SETTINGS_DOC_ID, UserNamespace
from cyclebudget.domain.constants import ALLOWED_CYCLE_MONTHS, CURRENCIES
from cyclebudget.domain.entities import Settings
from cyclebudget.domain.errors import (
    ValidationError,
    unsupported_currency,
    unsupported_cycle_months,
)


class SettingsService:
    """Service for the per-user settings singleton."""

    def __init__(self, store: DocumentStore, namespace: UserNamespace):
        """Initialize settings service.

        Args:
            store: Document store instance
            namespace: Collection paths of the user being served
        """
        self.store = store
        self.namespace = namespace

    def get_settings(self) -> Settings:
        """Get settings, using defaults when nothing has been stored yet."""
        return settings_from_document(
            self.store.get(self.namespace.settings, SETTINGS_DOC_ID)
        )

    def update_settings(
        self,
        cycle_months: Optional[int] = None,
        currency_code: Optional[str] = None,
    ) -> Settings:
        """Merge the supplied fields into the stored settings.

        Fields left as None keep their stored values.

        Returns:
            Settings after the update

        Raises:
            ValidationError: If the cycle length or currency is not supported
        """
        if cycle_months is not None and cycle_months not in ALLOWED_CYCLE_MONTHS:
            raise ValidationError(unsupported_cycle_months(cycle_months, ALLOWED_CYCLE_MONTHS))

        if currency_code is not None:
            currency_code = currency_code.strip().upper()
            if currency_code not in CURRENCIES:
                raise ValidationError(unsupported_currency(currency_code, list(CURRENCIES)))

        updates = settings_to_document(currency_code=currency_code, cycle_months=cycle_months)
        if updates:
            self.store.set(self.namespace.settings, SETTINGS_DOC_ID, updates, merge=True)
        return self.get_settings()
