"""Frequency normalization of category limits."""

from decimal import Decimal

from cyclebudget.domain.constants import AVG_DAYS_PER_MONTH
from cyclebudget.domain.cycle import normalize_cycle_months
from cyclebudget.domain.entities import BaseFrequency
from cyclebudget.utils.amount_parser import ZERO, coerce_amount


def cycle_amount(base_limit, base_frequency, cycle_months) -> Decimal:
    """Convert a category's base limit into the amount allowed per cycle.

    Args:
        base_limit: Limit at the base frequency. Missing or malformed values
            count as 0.
        base_frequency: ``BaseFrequency`` or its code. Unknown codes are
            treated as monthly.
        cycle_months: Cycle length in months

    Returns:
        Non-negative Decimal budget for one cycle
    """
    limit = coerce_amount(base_limit)
    if limit <= 0:
        return ZERO

    months = Decimal(normalize_cycle_months(cycle_months))
    frequency = BaseFrequency.parse(base_frequency)

    if frequency == BaseFrequency.DAILY:
        return limit * months * AVG_DAYS_PER_MONTH
    if frequency == BaseFrequency.BIMONTHLY:
        return limit * (months / 2)
    return limit * months
