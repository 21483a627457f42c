"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or document does not exist."""


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction by ID."""
    return f"Transaction {transaction_id} not found"


def document_not_found(collection: str, doc_id: str) -> str:
    """Return message for a missing store document."""
    return f"Document '{doc_id}' not found in '{collection}'"


def non_positive_amount(amount) -> str:
    """Return message for a transaction amount that is not above zero."""
    return f"Amount must be greater than zero, got {amount}"


def negative_limit(limit) -> str:
    """Return message for a negative category limit."""
    return f"Base limit cannot be negative, got {limit}"


def unsupported_frequency(frequency: str, allowed: list[str]) -> str:
    """Return message for an unknown base frequency code."""
    return f"Unknown base frequency '{frequency}'. Supported: {', '.join(allowed)}"


def unsupported_cycle_months(cycle_months, allowed: tuple[int, ...]) -> str:
    """Return message for a cycle length outside the allowed set."""
    allowed_str = ", ".join(str(value) for value in allowed)
    return f"Cycle length must be one of {allowed_str} months, got {cycle_months}"


def unsupported_currency(code: str, allowed: list[str]) -> str:
    """Return message for an unsupported currency code."""
    return f"Unsupported currency '{code}'. Supported: {', '.join(allowed)}"
