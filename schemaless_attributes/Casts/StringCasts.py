from __future__ import annotations

from typing import Any

from .BaseCast import BaseCast


class StringCast(BaseCast):
    """Cast for short string attributes."""
    
    type_name = 'string'
    python_type = str
    blank_as_none = False
    
    def prepare(self, value: Any) -> Any:
        if isinstance(value, bytes):
            return value.decode('utf-8')
        if not isinstance(value, str):
            return str(value)
        return value


class TextCast(StringCast):
    """Cast for long text attributes."""
    
    type_name = 'text'
