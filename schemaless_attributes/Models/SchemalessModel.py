from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import JSON, PickleType, event, inspect
from sqlalchemy.ext.mutable import MutableDict

from schemaless_attributes.Attributes import (
    FixedSource,
    SchemalessAttributes,
    SourceKind,
    inherited_definitions,
)

from .BaseModel import BaseModel

# Column types for map sources; MutableDict flags the row dirty on in-place writes
JsonDict = MutableDict.as_mutable(JSON)
PickledDict = MutableDict.as_mutable(PickleType)


class SchemalessModel(SchemalessAttributes, BaseModel):
    """
    Base model for SQLAlchemy models with schemaless attributes.
    
    Map sources are usually ``JsonDict`` or ``PickledDict`` columns. Their
    value is ``None`` until the first flush, so the constructor starts every
    fixed map source that was not passed in with an empty dict, before any
    schemaless attribute given as keyword argument is assigned. Rows loaded
    with a NULL map source get an empty dict as well, which is written back
    on the next flush.
    """
    
    __abstract__ = True
    
    def __init__(self, **kwargs: Any) -> None:
        sources: Dict[str, Any] = {}
        for name in self._map_source_names():
            value = kwargs.pop(name, None)
            sources[name] = {} if value is None else value
        
        super().__init__(**sources, **kwargs)
    
    def _fill_empty_map_sources(self, attrs: Optional[Iterable[str]] = None) -> None:
        unloaded = inspect(self).unloaded
        for name in self._map_source_names():
            if name in unloaded or (attrs is not None and name not in attrs):
                continue
            if getattr(self, name) is None:
                setattr(self, name, {})
    
    @classmethod
    def _map_source_names(cls) -> List[str]:
        names: List[str] = []
        for definition in inherited_definitions(cls):
            rule = definition.source
            if isinstance(rule, FixedSource) and rule.kind is SourceKind.MAP and rule.name not in names:
                names.append(rule.name)
        return names
    
    def schemaless_attributes_to_dict(self) -> Dict[str, Any]:
        """Get the typed value of every json attribute declared on the model."""
        return {
            definition.name: getattr(self, definition.name)
            for definition in inherited_definitions(self)
            if definition.source.kind is SourceKind.MAP
        }
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary, map sources replaced by their typed attributes."""
        result = super().to_dict()
        for name in self._map_source_names():
            result.pop(name, None)
        
        result.update(self.schemaless_attributes_to_dict())
        return result


@event.listens_for(SchemalessModel, 'load', propagate=True, restore_load_context=True)
def fill_map_sources_on_load(target: SchemalessModel, context: Any) -> None:
    """Give rows loaded with a NULL map source an empty map."""
    del context  # Unused parameter required by SQLAlchemy
    target._fill_empty_map_sources()


@event.listens_for(SchemalessModel, 'refresh', propagate=True, restore_load_context=True)
def fill_map_sources_on_refresh(target: SchemalessModel, context: Any, attrs: Optional[Iterable[str]]) -> None:
    """Give refreshed rows with a NULL map source an empty map."""
    del context
    target._fill_empty_map_sources(attrs)
