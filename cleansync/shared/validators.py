"""Shared validation utilities"""

import re
from datetime import date, datetime
from typing import Optional

PIN_PATTERN = re.compile(r"^\d{4}$")


def validate_pin(pin: Optional[str]) -> str:
    """
    Validate a client login PIN.

    Args:
        pin: PIN string as typed by the client

    Returns:
        The stripped PIN

    Raises:
        ValueError: If the PIN is not exactly four digits
    """
    if pin is None:
        raise ValueError("PIN is required")

    pin = str(pin).strip()
    if not PIN_PATTERN.match(pin):
        raise ValueError("PIN must be exactly 4 digits")

    return pin


def parse_iso_date(value: Optional[str]) -> date:
    """
    Parse an ISO date or datetime string into a calendar date.

    Accepts "2026-10-20", "2026-10-20T00:00:00" and "2026-10-20T00:00:00Z".

    Raises:
        ValueError: If the value is empty or not ISO formatted
    """
    if not value:
        raise ValueError("Date is required")

    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise ValueError(f"Invalid date format: {value}. Use YYYY-MM-DD") from e


EMAIL_PATTERN = re.compile(r"^[\w.%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def validate_email(email: Optional[str]) -> Optional[str]:
    """Normalize an email address to lower case; ValueError if it does not look like one"""
    if not email:
        return email

    normalized = email.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError(f"Invalid email address: {email}")
    return normalized
