"""Fixed values shared by the budget engine and its services."""

from decimal import Decimal

from cyclebudget.domain.entities import Currency

CURRENCIES = {
    "USD": Currency(code="USD", symbol="$", name="US Dollar"),
    "EUR": Currency(code="EUR", symbol="€", name="Euro"),
    "GBP": Currency(code="GBP", symbol="£", name="Pound Sterling"),
    "INR": Currency(code="INR", symbol="₹", name="Indian Rupee"),
}
DEFAULT_CURRENCY_CODE = "USD"

ALLOWED_CYCLE_MONTHS = (1, 2, 3, 6, 12)
DEFAULT_CYCLE_MONTHS = 1

# Average month length; daily limits are not calendar-exact.
AVG_DAYS_PER_MONTH = Decimal("30.4375")

INCOME_CATEGORY_ID = "income"
UNKNOWN_EXPENSE_SOURCE = "Unknown"
UNKNOWN_INCOME_SOURCE = "Uncategorized Income"

DEFAULT_TREND_CYCLES = 5

DEFAULT_ICON = "Tag"
COLORS = (
    "#673AB7",
    "#03A9F4",
    "#009688",
    "#FF9800",
    "#F44336",
    "#E91E63",
    "#9C27B0",
    "#3F51B5",
    "#00BCD4",
    "#4CAF50",
)
