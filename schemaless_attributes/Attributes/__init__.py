"""
Schemaless attributes.

Typed accessors over untyped storage:

- JsonAttribute: value stored under its name in a map source
  (a dict, a SQLAlchemy JSON column, ...)
- AttachmentAttribute: text stored as a blob attachment, with optional
  per-instance fallback to a plain member

Declare them through the SchemalessAttributes mixin:

    class Product(SchemalessAttributes):
        __json_attributes__ = {
            'price': {'type': 'decimal', 'source': 'attrs'},
        }

        def __init__(self) -> None:
            self.attrs = {}

    product = Product()
    product.price = "19.99"
    product.price        # Decimal('19.99')
"""

from .AttributeRegistry import AttributeDefinition, AttributeRegistry, schemaless_registry, inherited_definitions
from .Sources import (
    DEFAULT_SOURCE_METHOD,
    BlobSource,
    DefaultSource,
    FallbackBlobSource,
    FixedSource,
    MapSource,
    SourceKind,
    resolve_source,
)
from .JsonAttribute import JsonAttribute
from .AttachmentAttribute import AttachmentAttribute
from .SchemalessAttributes import (
    SchemalessAttributes,
    define_json_attribute,
    define_attachment_attribute,
)

__all__ = [
    'AttributeDefinition',
    'AttributeRegistry',
    'schemaless_registry',
    'inherited_definitions',
    'DEFAULT_SOURCE_METHOD',
    'BlobSource',
    'DefaultSource',
    'FallbackBlobSource',
    'FixedSource',
    'MapSource',
    'SourceKind',
    'resolve_source',
    'JsonAttribute',
    'AttachmentAttribute',
    'SchemalessAttributes',
    'define_json_attribute',
    'define_attachment_attribute',
]
