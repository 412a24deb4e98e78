from __future__ import annotations

from decimal import Decimal
from typing import Any

from .BaseCast import BaseCast


class IntegerCast(BaseCast):
    """Cast for integer attributes."""
    
    type_name = 'integer'
    python_type = int


class FloatCast(BaseCast):
    """Cast for float attributes."""
    
    type_name = 'float'
    python_type = float


class DecimalCast(BaseCast):
    """
    Cast for decimal attributes.
    
    Floats go through their shortest ``repr`` so ``3.14`` becomes
    ``Decimal('3.14')`` and not the binary expansion.
    """
    
    type_name = 'decimal'
    python_type = Decimal
    
    def prepare(self, value: Any) -> Any:
        if isinstance(value, float):
            return repr(value)
        return super().prepare(value)
