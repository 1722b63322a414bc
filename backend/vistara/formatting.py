"""Formatting helpers for estimate output.

Amounts are shown the way Indian clients read them: rupees with lakh /
crore digit grouping (e.g. '₹8,14,215') and, for headlines, a compact
form ('₹8.1 L', '₹1.25 Cr').
"""

from __future__ import annotations

from vistara.models.enums import AreaUnit

_LAKH = 100_000
_CRORE = 10_000_000


def group_indian(whole: int) -> str:
    """Group digits as 12,34,56,789 (last three, then pairs)."""
    digits = str(abs(whole))
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        grouped = ",".join([*pairs, tail])
    return f"-{grouped}" if whole < 0 else grouped


def format_inr(amount: float) -> str:
    """Format a rupee amount with no paise, e.g. '₹8,14,215'."""
    rounded = int(round(amount))
    if rounded < 0:
        return f"-₹{group_indian(-rounded)}"
    return f"₹{group_indian(rounded)}"


def format_compact_inr(amount: float) -> str:
    """Format a rupee amount in lakh/crore shorthand.

    - Crores (>= 1 Cr): '₹1.25 Cr'
    - Lakhs (>= 1 L): '₹8.1 L'
    - Below a lakh: full amount

    The unit is chosen after rounding, so 99.96 L reads '₹1.00 Cr'.
    """
    crores = round(amount / _CRORE, 2)
    if crores >= 1:
        return f"₹{crores:.2f} Cr"
    lakhs = round(amount / _LAKH, 1)
    if lakhs >= 1:
        return f"₹{lakhs:.1f} L"
    return format_inr(amount)


def format_per_area(amount: float, unit: AreaUnit) -> str:
    return f"{format_inr(amount)} / {unit.value}"


def format_months(months: int) -> str:
    return f"{months} month" if months == 1 else f"{months} months"
