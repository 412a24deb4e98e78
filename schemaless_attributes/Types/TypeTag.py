from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from schemaless_attributes.Exceptions import UnsupportedType


class TypeTag(str, Enum):
    """Closed catalog of schemaless attribute types."""
    INTEGER = 'integer'
    FLOAT = 'float'
    DECIMAL = 'decimal'
    BOOLEAN = 'boolean'
    DATE = 'date'
    DATETIME = 'datetime'
    TIME = 'time'
    STRING = 'string'
    TEXT = 'text'
    
    @classmethod
    def values(cls) -> List[str]:
        return [tag.value for tag in cls]
    
    @classmethod
    def lookup(cls, value: Any) -> Optional[TypeTag]:
        """Find the tag for a tag or a (case-insensitive) tag name."""
        if isinstance(value, cls):
            return value
        
        if not isinstance(value, str):
            return None
        
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
    
    @classmethod
    def coerce(cls, value: Any) -> TypeTag:
        tag = cls.lookup(value)
        if tag is None:
            raise UnsupportedType(value)
        return tag
    
    def __str__(self) -> str:
        return self.value
