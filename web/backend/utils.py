#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any, List
from datetime import datetime


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_list(value: Optional[Any]) -> List[Any]:
    """Copy a JSON column value into a list; None becomes []."""
    if value is None:
        return []
    return list(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()
