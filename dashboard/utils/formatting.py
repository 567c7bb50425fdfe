"""
Display formatting helpers for monetary amounts.

Amounts are persisted as integer cents; these helpers turn them into the
strings shown on dashboard cards and tables.
"""

from decimal import Decimal
from typing import Optional


def format_currency(amount: Optional[int]) -> str:
    """
    Format an amount in cents as a USD display string.

    >>> format_currency(123456)
    '$1,234.56'
    >>> format_currency(-500)
    '-$5.00'
    """
    dollars = Decimal(amount or 0) / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"
