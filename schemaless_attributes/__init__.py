"""
Schemaless attributes: typed virtual attributes over untyped map and blob storage.

Modules:
- Types: catalog of type tags and the registry of their cast handlers
- Casts: cast handlers (input to stored value, stored value to typed value)
- Attributes: attribute registry, source resolution and accessors
- Storage: filesystem disks, blobs and single attachments
- Models: SQLAlchemy base models using schemaless attributes
"""

from __future__ import annotations

from .Exceptions import (
    SchemalessAttributeException,
    AmbiguousAttributeName,
    UnsupportedType,
    SourceNotImplemented,
    InvalidSourceType,
    UndefinedSource,
    InvalidAttributeDefinition,
    InvalidAttributeValue,
)
from .Types import TypeTag, TypeRegistry, type_registry, handler
from .Attributes import (
    SchemalessAttributes,
    JsonAttribute,
    AttachmentAttribute,
    AttributeRegistry,
    schemaless_registry,
    define_json_attribute,
    define_attachment_attribute,
)

__version__ = '0.1.0'

__all__ = [
    'SchemalessAttributeException',
    'AmbiguousAttributeName',
    'UnsupportedType',
    'SourceNotImplemented',
    'InvalidSourceType',
    'UndefinedSource',
    'InvalidAttributeDefinition',
    'InvalidAttributeValue',
    'TypeTag',
    'TypeRegistry',
    'type_registry',
    'handler',
    'SchemalessAttributes',
    'JsonAttribute',
    'AttachmentAttribute',
    'AttributeRegistry',
    'schemaless_registry',
    'define_json_attribute',
    'define_attachment_attribute',
]
