#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Any


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_datetime_iso(dt: Optional[Any]) -> Optional[str]:
    """
    Safely convert a date or datetime to ISO format string.

    Args:
        dt: Date or datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    if isinstance(dt, (datetime, date)):
        return dt.isoformat()
    return str(dt)


def round2(value: Optional[float]) -> Optional[float]:
    """Round to two decimals, passing None through."""
    if value is None:
        return None
    return round(float(value), 2)
