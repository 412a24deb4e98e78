from __future__ import annotations

from .BaseCast import BaseCast


class BooleanCast(BaseCast):
    """Cast for boolean attributes ("true", "f", "0", "off", ... are accepted)."""
    
    type_name = 'boolean'
    python_type = bool
