"""Display helpers shared by the HTML and text renderers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

MAX_TOP_HOLDERS = 5
MAX_ATTRIBUTES = 6


def truncate_address(address: str) -> str:
    """``0x1234567890abcdef1234`` -> ``0x1234...1234``."""
    return f"{address[:6]}...{address[-4:]}"


def cap(items: Sequence[T], limit: int) -> list[T]:
    return list(items[:limit])


def format_decimal(value: str | float, places: int) -> str:
    """Fixed-point display of a decimal string; unparseable input is shown as-is."""
    try:
        return f"{float(value):.{places}f}"
    except (TypeError, ValueError):
        return str(value)


def format_count(value: int) -> str:
    return f"{value:,}"


def _plain_number(value: float) -> str:
    """Shortest exact text for a number: ``45.0`` -> ``45``, no rounding."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_score(score: float) -> str:
    return f"{_plain_number(score)}/100"


def token_value(balance: str, price: float | None) -> str | None:
    """USD value of a holding, or None when no (non-zero) price is known."""
    if not price:
        return None
    try:
        return f"${float(balance) * price:.2f}"
    except (TypeError, ValueError):
        return None


def risk_score_class(score: float) -> str:
    if score < 30:
        return "bg-green-500"
    if score < 70:
        return "bg-yellow-500"
    return "bg-red-500"


def risk_score_width(score: float) -> str:
    """CSS width for the score bar, clamped to 0-100%."""
    return f"{_plain_number(max(0.0, min(100.0, float(score))))}%"


def join_factors(factors: Sequence[str]) -> str:
    return ", ".join(factors)
