"""Conversion between SQLite's textual timestamps and ``datetime`` values."""

from __future__ import annotations

from datetime import datetime


def parse_timestamp(value: str) -> datetime:
    """Parse a stored timestamp.

    SQLite's ``CURRENT_TIMESTAMP`` produces ``YYYY-MM-DD HH:MM:SS`` while values
    written by other tools may use the ISO ``T`` separator; both are accepted.
    """

    if "T" in value:
        return datetime.fromisoformat(value)
    if " " not in value:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return datetime.fromisoformat(value.replace(" ", "T", 1))


def format_timestamp(value: datetime) -> str:
    """Serialise ``value`` in SQLite's native ``YYYY-MM-DD HH:MM:SS`` form."""

    return value.isoformat().replace("T", " ", 1)


__all__ = ["format_timestamp", "parse_timestamp"]
