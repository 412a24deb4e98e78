from __future__ import annotations

from typing import Any, Optional, Type

from schemaless_attributes.Casts import TypeHandler
from schemaless_attributes.Types import TypeRegistry, TypeTag, type_registry

from .Sources import MapSource, SourceRule, resolve_source


class JsonAttribute:
    """
    Typed accessor over a key of a map source.
    
    Every access resolves the source again and goes through the cast handler
    of the attribute type; nothing is cached on the descriptor or the
    instance, so a read always reflects the current container.
    
    Usage:
        price = product.price          # handler.deserialize(source.get("price"))
        product.price = "19.99"        # source["price"] = handler.cast("19.99")
    """
    
    def __init__(self, name: str, type: TypeTag, source: SourceRule, types: Optional[TypeRegistry] = None) -> None:
        self.name = name
        self.type = type
        self.source_rule = source
        self.types = types or type_registry
    
    @property
    def handler(self) -> TypeHandler:
        return self.types.handler_for(self.type)
    
    def source(self, instance: Any) -> MapSource:
        """Resolve the map backing this attribute on an instance."""
        return resolve_source(instance, self.source_rule, self.name)
    
    def raw(self, instance: Any) -> Any:
        """Get the stored value without deserializing it."""
        return self.source(instance).get(self.name)
    
    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return self
        
        return self.handler.deserialize(self.raw(instance))
    
    def __set__(self, instance: Any, value: Any) -> None:
        source = self.source(instance)
        source[self.name] = self.handler.cast(value)
    
    def __delete__(self, instance: Any) -> None:
        self.source(instance).pop(self.name, None)
    
    def __repr__(self) -> str:
        return f"<JsonAttribute {self.name}: {self.type.value} on {self.source_rule.describe()}>"
