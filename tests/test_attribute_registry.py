"""Tests for definition-time validation and the attribute registry."""

from __future__ import annotations

from itertools import product
from typing import Any, Dict

import pytest

from schemaless_attributes.Attributes import (
    AttachmentAttribute,
    AttributeRegistry,
    JsonAttribute,
    SchemalessAttributes,
    schemaless_registry,
)
from schemaless_attributes.Exceptions import (
    AmbiguousAttributeName,
    InvalidAttributeDefinition,
    UnsupportedType,
)


def define(owner: Any, kind: str, name: str) -> None:
    if kind == 'json':
        owner.json_attribute(name, type='string', source='json_source')
    else:
        owner.attachment_attribute(name, source='document')


class TestAmbiguousNames:
    """Test suite for name collisions."""
    
    @pytest.mark.parametrize('first,second', list(product(['json', 'attachment'], repeat=2)))
    def test_same_name_twice_is_ambiguous(self, first: str, second: str) -> None:
        class DummyClassWithAmbiguousName(SchemalessAttributes):
            pass
        
        define(DummyClassWithAmbiguousName, first, 'attribute_one')
        installed = DummyClassWithAmbiguousName.__dict__['attribute_one']
        
        with pytest.raises(
            AmbiguousAttributeName,
            match='Declaration of schemaless attribute with ambiguous name "attribute_one" '
                  'on DummyClassWithAmbiguousName!'
        ):
            define(DummyClassWithAmbiguousName, second, 'attribute_one')
        
        assert DummyClassWithAmbiguousName.__dict__['attribute_one'] is installed
        assert DummyClassWithAmbiguousName.registered_schemaless_attributes() == ['attribute_one']
    
    def test_existing_method_is_ambiguous(self) -> None:
        class DummyClassWithMethod(SchemalessAttributes):
            def summary(self) -> str:
                return 'summary'
        
        with pytest.raises(AmbiguousAttributeName):
            DummyClassWithMethod.json_attribute('summary', type='text')
        
        assert DummyClassWithMethod().summary() == 'summary'
    
    def test_existing_write_variant_is_ambiguous(self) -> None:
        class DummyClassWithSetter(SchemalessAttributes):
            def set_title(self, value: str) -> None:
                pass
        
        with pytest.raises(AmbiguousAttributeName, match='"title"'):
            DummyClassWithSetter.json_attribute('title', type='string')
    
    def test_inherited_members_are_ambiguous(self) -> None:
        class Parent(SchemalessAttributes):
            pass
        
        Parent.json_attribute('color', type='string', source='attrs')
        
        class Child(Parent):
            pass
        
        with pytest.raises(AmbiguousAttributeName, match='on Child!'):
            Child.json_attribute('color', type='string', source='attrs')
    
    def test_mixin_api_names_are_ambiguous(self) -> None:
        class DummyClassShadowingApi(SchemalessAttributes):
            pass
        
        with pytest.raises(AmbiguousAttributeName):
            DummyClassShadowingApi.json_attribute('json_attribute', type='string')
        with pytest.raises(AmbiguousAttributeName):
            DummyClassShadowingApi.json_attribute('default_json_attributes_source', type='string')
    
    @pytest.mark.parametrize('name', ['not valid', '1st', 'class', '', None])
    def test_invalid_identifiers_are_rejected(self, name: Any) -> None:
        class DummyClassWithBadName(SchemalessAttributes):
            pass
        
        with pytest.raises(InvalidAttributeDefinition, match='is not a valid identifier'):
            DummyClassWithBadName.json_attribute(name, type='string')
        
        assert DummyClassWithBadName.registered_schemaless_attributes() == []


class TestUnsupportedType:
    """Test suite for type validation."""
    
    def test_unsupported_type_is_rejected(self) -> None:
        class DummyClassJsonWithUnsupportedType(SchemalessAttributes):
            pass
        
        with pytest.raises(UnsupportedType, match='Schemaless attribute "attribute_one" has unsupported type: file'):
            DummyClassJsonWithUnsupportedType.json_attribute('attribute_one', type='file')
        
        assert 'attribute_one' not in vars(DummyClassJsonWithUnsupportedType)
        assert DummyClassJsonWithUnsupportedType.registered_schemaless_attributes() == []
    
    def test_unsupported_type_in_class_body_aborts_class_creation(self) -> None:
        with pytest.raises(UnsupportedType):
            class DummyClassDeclaredWithUnsupportedType(SchemalessAttributes):
                __json_attributes__ = {
                    'attribute_one': {'type': 'file', 'source': 'attrs'},
                }
    
    def test_name_is_checked_before_type(self) -> None:
        class DummyClassRedefiningWithBadType(SchemalessAttributes):
            pass
        
        DummyClassRedefiningWithBadType.json_attribute('attribute_one', type='string')
        
        with pytest.raises(AmbiguousAttributeName):
            DummyClassRedefiningWithBadType.json_attribute('attribute_one', type='file')


class TestRegistry:
    """Test suite for the per-type registry."""
    
    def test_attributes_are_registered_in_declaration_order(self) -> None:
        class DummyClassWithOrderedAttributes(SchemalessAttributes):
            __json_attributes__: Dict[str, Dict[str, Any]] = {
                'zeta': {'type': 'string', 'source': 'attrs'},
                'alpha': {'type': 'integer', 'source': 'attrs'},
            }
            __attachment_attributes__: Dict[str, Dict[str, Any]] = {
                'body': {'source': 'document'},
            }
        
        assert DummyClassWithOrderedAttributes.registered_schemaless_attributes() == ['zeta', 'alpha', 'body']
        assert isinstance(vars(DummyClassWithOrderedAttributes)['zeta'], JsonAttribute)
        assert isinstance(vars(DummyClassWithOrderedAttributes)['body'], AttachmentAttribute)
    
    def test_registered_attributes_cannot_be_edited_from_outside(self) -> None:
        class DummyClassUnableToEditSchemalessAttributes(SchemalessAttributes):
            pass
        
        DummyClassUnableToEditSchemalessAttributes.json_attribute('foo', type='string')
        
        registered = DummyClassUnableToEditSchemalessAttributes.registered_schemaless_attributes()
        registered.append('bar')
        registered.remove('foo')
        
        assert DummyClassUnableToEditSchemalessAttributes.registered_schemaless_attributes() == ['foo']
    
    def test_registry_is_not_shared_with_subclasses(self) -> None:
        class Base(SchemalessAttributes):
            pass
        
        Base.json_attribute('color', type='string', source='attrs')
        
        class Specialized(Base):
            pass
        
        Specialized.json_attribute('size', type='integer', source='attrs')
        
        assert Base.registered_schemaless_attributes() == ['color']
        assert Specialized.registered_schemaless_attributes() == ['size']
    
    def test_registry_for_plain_classes(self) -> None:
        class PlainOwner:
            pass
        
        registry = schemaless_registry(PlainOwner)
        
        assert isinstance(registry, AttributeRegistry)
        assert schemaless_registry(PlainOwner()) is registry
        assert len(registry) == 0
    
    def test_registry_lookup(self) -> None:
        class DummyClassWithDefinitions(SchemalessAttributes):
            pass
        
        DummyClassWithDefinitions.json_attribute('weight', type='float', source='attrs')
        registry = schemaless_registry(DummyClassWithDefinitions)
        
        assert 'weight' in registry
        assert list(registry) == ['weight']
        assert registry.definition('weight').type.value == 'float'
        assert registry.definition('weight').kind == 'map'
        assert registry.definition('height') is None
    
    def test_bulk_definition_requires_option_dicts(self) -> None:
        class DummyClassInvalidJsonOptions(SchemalessAttributes):
            pass
        
        with pytest.raises(
            InvalidAttributeDefinition,
            match='Expected options to be a dict in json attribute definition "syntax_bad"!'
        ):
            DummyClassInvalidJsonOptions.json_attributes(
                syntax_ok={'type': 'string', 'source': 'json_source'},
                syntax_bad='string',
            )
        
        assert DummyClassInvalidJsonOptions.registered_schemaless_attributes() == []
