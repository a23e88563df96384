"""Timestamp helpers for stored documents"""
from datetime import datetime, timezone
from typing import Optional


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """BSON dates come back naive unless the client is tz-aware; they are UTC"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
