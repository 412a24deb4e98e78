from __future__ import annotations

import threading
from typing import Any, ClassVar, Dict, List, Type

from schemaless_attributes.Casts import (
    BaseCast,
    BooleanCast,
    DateCast,
    DateTimeCast,
    DecimalCast,
    FloatCast,
    IntegerCast,
    StringCast,
    TextCast,
    TimeCast,
    TypeHandler,
)

from .TypeTag import TypeTag


class TypeRegistry:
    """
    Maps type tags to their cast handlers.
    
    Handlers are built lazily on first request and cached for the lifetime of
    the registry. They are stateless, so the cache is only an optimization:
    two handlers for the same tag behave identically.
    """
    
    casts: ClassVar[Dict[TypeTag, Type[BaseCast]]] = {
        TypeTag.INTEGER: IntegerCast,
        TypeTag.FLOAT: FloatCast,
        TypeTag.DECIMAL: DecimalCast,
        TypeTag.BOOLEAN: BooleanCast,
        TypeTag.DATE: DateCast,
        TypeTag.DATETIME: DateTimeCast,
        TypeTag.TIME: TimeCast,
        TypeTag.STRING: StringCast,
        TypeTag.TEXT: TextCast,
    }
    
    def __init__(self) -> None:
        self._handlers: Dict[TypeTag, TypeHandler] = {}
        self._lock = threading.Lock()
    
    def available_types(self) -> List[str]:
        """Get the names of all supported types."""
        return TypeTag.values()
    
    def is_supported(self, type_name: Any) -> bool:
        """Check if a type tag is part of the catalog."""
        return TypeTag.lookup(type_name) is not None
    
    def handler_for(self, type_name: Any) -> TypeHandler:
        """
        Get the cast handler for a type.
        
        @param type_name: A TypeTag or its name
        @return: The cached handler for the tag
        @raises UnsupportedType: If the type is not in the catalog
        """
        tag = TypeTag.coerce(type_name)
        
        handler = self._handlers.get(tag)
        if handler is None:
            with self._lock:
                handler = self._handlers.get(tag)
                if handler is None:
                    handler = self.casts[tag]()
                    self._handlers[tag] = handler
        
        return handler
    
    def flush(self) -> None:
        """Drop cached handlers."""
        with self._lock:
            self._handlers.clear()


# Global type registry
type_registry = TypeRegistry()


def handler(type_name: Any) -> TypeHandler:
    """Get a cast handler from the global type registry."""
    return type_registry.handler_for(type_name)
