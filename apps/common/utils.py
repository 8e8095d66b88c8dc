"""
Common utility functions for API requests and responses
"""
from decimal import Decimal, InvalidOperation


def to_decimal(value):
    """Convert a number or numeric string to Decimal without float noise"""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(f"Not a valid decimal: {value!r}")


def parse_positive_int(value):
    """Parse an integer primary key from a path or query value; None if malformed"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None
