from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from schemaless_attributes.Exceptions import InvalidAttributeDefinition
from schemaless_attributes.Types import TypeTag

from .AttachmentAttribute import AttachmentAttribute
from .AttributeRegistry import AttributeDefinition, AttributeRegistry, schemaless_registry
from .JsonAttribute import JsonAttribute
from .Sources import (
    DefaultSource,
    FallbackBlobSource,
    FixedSource,
    MapSource,
    Predicate,
    SourceKind,
)

logger = logging.getLogger(__name__)

JsonSourceOption = Union[str, FixedSource, DefaultSource, None]


def define_json_attribute(
    owner: Type[Any],
    name: str,
    type: Union[str, TypeTag],
    source: JsonSourceOption = None
) -> JsonAttribute:
    """
    Declare a typed attribute stored in a map source of ``owner``.
    
    @param owner: The owning type
    @param name: Attribute name, must not collide with any member of the owner
    @param type: One of the catalog type tags
    @param source: Member holding the map, or None for the owner's default source
    @return: The installed descriptor
    @raises AmbiguousAttributeName: If the name is already taken
    @raises UnsupportedType: If the type is not in the catalog
    """
    registry = schemaless_registry(owner)
    
    # Name is checked before type: a redefinition is reported even with a bad type
    registry.check_name_not_ambiguous(name)
    tag = registry.check_type_valid(name, type)
    rule = _json_source_rule(registry, name, source)
    
    descriptor = JsonAttribute(name, tag, rule, registry.types)
    registry.register(AttributeDefinition(name, tag, rule))
    setattr(owner, name, descriptor)
    
    logger.debug(f"Defined json attribute {owner.__name__}.{name} on {rule.describe()}")
    return descriptor


def define_attachment_attribute(
    owner: Type[Any],
    name: str,
    source: str,
    fallback: Optional[str] = None,
    fallback_read: Predicate = None,
    fallback_write: Predicate = None
) -> AttachmentAttribute:
    """
    Declare a text attribute stored as a blob attachment of ``owner``.
    
    @param owner: The owning type
    @param name: Attribute name
    @param source: Member exposing the blob attachment
    @param fallback: Plain member used when a fallback predicate holds
    @param fallback_read: Predicate selecting the fallback member on read
    @param fallback_write: Predicate selecting the fallback member on write
    @return: The installed descriptor
    """
    registry = schemaless_registry(owner)
    
    registry.check_name_not_ambiguous(name)
    tag = registry.check_type_valid(name, TypeTag.TEXT)
    
    if not isinstance(source, str) or not source:
        raise InvalidAttributeDefinition(
            f'Attachment attribute "{name}" on {owner.__name__} needs the name of its attachment source!',
            name,
            owner.__name__
        )
    
    if fallback is None and (fallback_read is not None or fallback_write is not None):
        raise InvalidAttributeDefinition(
            f'Attachment attribute "{name}" on {owner.__name__} has fallback predicates but no fallback source!',
            name,
            owner.__name__
        )
    
    rule = FallbackBlobSource(source, fallback, fallback_read, fallback_write)
    
    descriptor = AttachmentAttribute(name, rule, registry.types)
    registry.register(AttributeDefinition(name, tag, rule))
    setattr(owner, name, descriptor)
    
    logger.debug(f"Defined attachment attribute {owner.__name__}.{name} on {source}")
    return descriptor


def _json_source_rule(registry: AttributeRegistry, name: str, source: JsonSourceOption) -> Union[FixedSource, DefaultSource]:
    if source is None:
        return DefaultSource()
    
    if isinstance(source, str):
        source = FixedSource(source, SourceKind.MAP)
    
    if isinstance(source, FixedSource) and source.name == name:
        raise InvalidAttributeDefinition(
            f'Json attribute "{name}" on {registry.owner_name} cannot be its own source!',
            name,
            registry.owner_name
        )
    
    if isinstance(source, (FixedSource, DefaultSource)) and source.kind is SourceKind.MAP:
        return source
    
    raise InvalidAttributeDefinition(
        f'Invalid source {source!r} for json attribute "{name}" on {registry.owner_name}!',
        name,
        registry.owner_name
    )


class SchemalessAttributes:
    """
    Mixin adding json and attachment attributes to a class.
    
    Attributes can be declared in the class body:
    
        class Product(SchemalessAttributes):
            __json_attributes__ = {
                'price': {'type': 'decimal', 'source': 'attrs'},
            }
    
    or after the class statement:
    
        Product.json_attribute('released_on', type='date', source='attrs')
    """
    
    __json_attributes__: ClassVar[Dict[str, Dict[str, Any]]] = {}
    __attachment_attributes__: ClassVar[Dict[str, Dict[str, Any]]] = {}
    
    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        
        # Registries are per class, not shared with subclasses
        cls.__schemaless_registry__ = AttributeRegistry(cls)
        
        json_definitions = vars(cls).get('__json_attributes__')
        if json_definitions:
            cls.json_attributes(**json_definitions)
        
        attachment_definitions = vars(cls).get('__attachment_attributes__')
        if attachment_definitions:
            cls.attachment_attributes(**attachment_definitions)
    
    @classmethod
    def json_attribute(cls, name: str, type: Union[str, TypeTag], source: JsonSourceOption = None) -> JsonAttribute:
        """Declare a typed attribute stored in a map source."""
        return define_json_attribute(cls, name, type, source)
    
    @classmethod
    def json_attributes(cls, **definitions: Dict[str, Any]) -> List[JsonAttribute]:
        """Declare several json attributes, given as ``name={'type': ..., 'source': ...}``."""
        _check_option_dicts(cls, 'json', definitions)
        
        return [
            cls.json_attribute(name, **options)
            for name, options in definitions.items()
        ]
    
    @classmethod
    def attachment_attribute(
        cls,
        name: str,
        source: str,
        fallback: Optional[str] = None,
        fallback_read: Predicate = None,
        fallback_write: Predicate = None
    ) -> AttachmentAttribute:
        """Declare a text attribute stored as a blob attachment."""
        return define_attachment_attribute(cls, name, source, fallback, fallback_read, fallback_write)
    
    @classmethod
    def attachment_attributes(cls, **definitions: Dict[str, Any]) -> List[AttachmentAttribute]:
        """Declare several attachment attributes at once."""
        _check_option_dicts(cls, 'attachment', definitions)
        
        return [
            cls.attachment_attribute(name, **options)
            for name, options in definitions.items()
        ]
    
    @classmethod
    def registered_schemaless_attributes(cls) -> List[str]:
        """Get a copy of the attribute names declared on this class."""
        return schemaless_registry(cls).registered_attributes()
    
    def default_json_attributes_source(self) -> MapSource:
        """Map used by json attributes declared without a source."""
        raise NotImplementedError("Need to be implemented!")


def _check_option_dicts(owner: Type[Any], kind: str, definitions: Dict[str, Any]) -> None:
    for name, options in definitions.items():
        if not isinstance(options, dict):
            raise InvalidAttributeDefinition(
                f'Expected options to be a dict in {kind} attribute definition "{name}"!',
                name,
                owner.__name__
            )
