from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any

from .BaseCast import BaseCast


class DateCast(BaseCast):
    """Cast for date attributes."""
    
    type_name = 'date'
    python_type = date
    
    def prepare(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        return super().prepare(value)


class DateTimeCast(BaseCast):
    """
    Cast for datetime attributes.
    
    Values are stored timezone-aware in UTC. Naive input is taken as UTC and
    a trailing ``UTC`` zone name (``"2024-01-01 12:00:00.0 UTC"``) is
    accepted.
    """
    
    type_name = 'datetime'
    python_type = datetime
    
    def prepare(self, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if value.upper().endswith(' UTC'):
                value = value[:-4].rstrip() + '+00:00'
            if len(value) > 10 and value[10] == ' ':
                value = f"{value[:10]}T{value[11:]}"
            return value
        
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time(), tzinfo=timezone.utc)
        
        return value
    
    def finalize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TimeCast(BaseCast):
    """Cast for time-of-day attributes."""
    
    type_name = 'time'
    python_type = time
    
    def prepare(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.timetz()
        return super().prepare(value)
