from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple, Type, Union

from schemaless_attributes.Exceptions import (
    AmbiguousAttributeName,
    InvalidAttributeDefinition,
    UnsupportedType,
)
from schemaless_attributes.Types import TypeRegistry, TypeTag, type_registry

from .Sources import SourceRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeDefinition:
    """A registered schemaless attribute."""
    
    name: str
    type: TypeTag
    source: SourceRule
    
    @property
    def kind(self) -> str:
        return self.source.kind.value


class AttributeRegistry:
    """
    Schemaless attributes declared on one owning type.
    
    Each concrete owning type gets its own registry; a subclass does not
    inherit the names registered on its base (collisions with inherited
    accessors are still caught by the member check).
    """
    
    def __init__(self, owner: Type[Any], types: Optional[TypeRegistry] = None) -> None:
        self.owner = owner
        self.types = types or type_registry
        self._definitions: List[AttributeDefinition] = []
    
    @property
    def owner_name(self) -> str:
        return self.owner.__name__
    
    def check_name_not_ambiguous(self, name: Any) -> str:
        """
        Ensure a name can be declared on the owner.
        
        @param name: Candidate attribute name
        @return: The validated name
        @raises InvalidAttributeDefinition: If the name is not an identifier
        @raises AmbiguousAttributeName: If the name or its ``set_`` variant is taken
        """
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidAttributeDefinition(
                f"Schemaless attribute name {name!r} on {self.owner_name} is not a valid identifier!",
                str(name),
                self.owner_name
            )
        
        if name in self or self.is_member(name) or self.is_member(f"set_{name}"):
            raise AmbiguousAttributeName(name, self.owner_name)
        
        return name
    
    def check_type_valid(self, name: str, type_name: Any) -> TypeTag:
        """
        Ensure the type is part of the catalog.
        
        @raises UnsupportedType: If the type registry rejects the type
        """
        if not self.types.is_supported(type_name):
            raise UnsupportedType(type_name, name, self.owner_name)
        
        return TypeTag.coerce(type_name)
    
    def is_member(self, name: str) -> bool:
        """Check if the owner or one of its bases defines a member called ``name``."""
        return any(name in vars(klass) for klass in self.owner.__mro__)
    
    def register(self, definition: AttributeDefinition) -> None:
        self._definitions.append(definition)
        logger.debug(
            f"Registered {definition.kind} attribute {self.owner_name}.{definition.name} "
            f"({definition.type.value})"
        )
    
    def registered_attributes(self) -> List[str]:
        """Get a copy of the registered attribute names, in declaration order."""
        return [definition.name for definition in self._definitions]
    
    def definitions(self) -> Tuple[AttributeDefinition, ...]:
        return tuple(self._definitions)
    
    def definition(self, name: str) -> Optional[AttributeDefinition]:
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None
    
    def __contains__(self, name: object) -> bool:
        return any(definition.name == name for definition in self._definitions)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.registered_attributes())
    
    def __len__(self) -> int:
        return len(self._definitions)
    
    def __repr__(self) -> str:
        return f"<AttributeRegistry {self.owner_name} {self.registered_attributes()!r}>"


def schemaless_registry(owner: Union[Type[Any], Any]) -> AttributeRegistry:
    """Get (or create) the attribute registry of an owning type."""
    if not isinstance(owner, type):
        owner = owner.__class__
    
    registry = vars(owner).get('__schemaless_registry__')
    if registry is None:
        registry = AttributeRegistry(owner)
        setattr(owner, '__schemaless_registry__', registry)
    
    return registry


def inherited_definitions(owner: Union[Type[Any], Any]) -> List[AttributeDefinition]:
    """Get the definitions registered on ``owner`` and its bases, base-most first."""
    if not isinstance(owner, type):
        owner = owner.__class__
    
    definitions: List[AttributeDefinition] = []
    for klass in reversed(owner.__mro__):
        registry = vars(klass).get('__schemaless_registry__')
        if registry is not None:
            definitions.extend(registry.definitions())
    
    return definitions
