"""Domain layer for cyclebudget application."""

from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.settings import SettingsService
from cyclebudget.domain.transaction import TransactionService
from cyclebudget.domain.frequency import cycle_amount
from cyclebudget.domain.cycle import current_cycle_start, historical_cycles
from cyclebudget.domain.summary import summarize
from cyclebudget.domain.trend import build_trend

__all__ = [
    "CategoryService",
    "SettingsService",
    "TransactionService",
    "cycle_amount",
    "current_cycle_start",
    "historical_cycles",
    "summarize",
    "build_trend",
]
