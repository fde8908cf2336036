"""
Formatting helpers.
"""

from .constants import CURRENCY_SIGN


def fmt(amount: float) -> str:
    """Format currency."""
    return f"{amount:,.0f}".replace(",", ".")


def fmt_vnd(amount: float) -> str:
    """Format currency with the đồng sign, e.g. 25.000₫."""
    return f"{fmt(amount)}{CURRENCY_SIGN}"
