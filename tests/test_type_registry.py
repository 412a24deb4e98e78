"""Tests for the type catalog and cast handlers."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any

import pytest

from schemaless_attributes.Casts import (
    BooleanCast,
    DateTimeCast,
    DecimalCast,
    IntegerCast,
    StringCast,
    TextCast,
    TypeHandler,
)
from schemaless_attributes.Exceptions import InvalidAttributeValue, UnsupportedType
from schemaless_attributes.Support import to_json_compatible
from schemaless_attributes.Types import TypeRegistry, TypeTag, handler, type_registry


class TestTypeTag:
    """Test suite for the type tag catalog."""
    
    def test_catalog_is_closed(self) -> None:
        assert TypeTag.values() == [
            'integer', 'float', 'decimal', 'boolean', 'date', 'datetime', 'time', 'string', 'text'
        ]
    
    def test_lookup_accepts_tags_and_names(self) -> None:
        assert TypeTag.lookup(TypeTag.DATE) is TypeTag.DATE
        assert TypeTag.lookup('date') is TypeTag.DATE
        assert TypeTag.lookup(' Decimal ') is TypeTag.DECIMAL
    
    def test_lookup_rejects_unknown_values(self) -> None:
        assert TypeTag.lookup('file') is None
        assert TypeTag.lookup(int) is None
        assert TypeTag.lookup(None) is None
    
    def test_coerce_raises_for_unknown_type(self) -> None:
        with pytest.raises(UnsupportedType, match='Type file is not supported!'):
            TypeTag.coerce('file')


class TestTypeRegistry:
    """Test suite for the handler registry."""
    
    def test_available_types(self) -> None:
        assert TypeRegistry().available_types() == TypeTag.values()
    
    @pytest.mark.parametrize('type_name', ['integer', 'float', 'decimal', 'boolean', 'date',
                                           'datetime', 'time', 'string', 'text'])
    def test_every_catalog_type_is_supported(self, type_name: str) -> None:
        registry = TypeRegistry()
        
        assert registry.is_supported(type_name)
        assert isinstance(registry.handler_for(type_name), TypeHandler)
    
    @pytest.mark.parametrize('type_name', ['file', 'json', 'array', '', None, 42])
    def test_unsupported_types(self, type_name: Any) -> None:
        registry = TypeRegistry()
        
        assert not registry.is_supported(type_name)
        with pytest.raises(UnsupportedType):
            registry.handler_for(type_name)
    
    def test_handlers_are_cached_per_tag(self) -> None:
        registry = TypeRegistry()
        
        assert registry.handler_for('integer') is registry.handler_for(TypeTag.INTEGER)
        assert registry.handler_for('integer') is not registry.handler_for('float')
    
    def test_flushed_handlers_behave_identically(self) -> None:
        registry = TypeRegistry()
        first = registry.handler_for('decimal')
        registry.flush()
        second = registry.handler_for('decimal')
        
        assert first is not second
        assert first.cast('1.50') == second.cast('1.50')
    
    def test_handler_maps_tags_to_casts(self) -> None:
        assert isinstance(handler('integer'), IntegerCast)
        assert isinstance(handler('decimal'), DecimalCast)
        assert isinstance(handler('datetime'), DateTimeCast)
        assert isinstance(handler('text'), TextCast)
        assert isinstance(type_registry.handler_for('boolean'), BooleanCast)


class TestCasts:
    """Test suite for the cast handlers."""
    
    def test_integer_cast(self) -> None:
        cast = IntegerCast()
        
        assert cast.cast('42') == 42
        assert cast.cast(' 42 ') == 42
        assert cast.cast(42.0) == 42
        assert cast.deserialize(42) == 42
    
    def test_integer_cast_rejects_garbage(self) -> None:
        with pytest.raises(InvalidAttributeValue, match="cannot be cast to integer"):
            IntegerCast().cast('forty-two')
    
    def test_float_cast(self) -> None:
        assert handler('float').cast('3.14') == 3.14
        assert handler('float').deserialize(3) == 3.0
    
    def test_decimal_cast(self) -> None:
        cast = DecimalCast()
        
        assert cast.cast('3.141592') == Decimal('3.141592')
        assert cast.cast(3.14) == Decimal('3.14')
        assert cast.cast(7) == Decimal(7)
        assert cast.deserialize('19.99') == Decimal('19.99')
    
    @pytest.mark.parametrize('value', ['false', 'f', '0', 'off', 'no', False, 0])
    def test_boolean_cast_false_values(self, value: Any) -> None:
        assert handler('boolean').cast(value) is False
    
    @pytest.mark.parametrize('value', ['true', 't', '1', 'on', 'yes', True, 1])
    def test_boolean_cast_true_values(self, value: Any) -> None:
        assert handler('boolean').cast(value) is True
    
    def test_date_cast(self) -> None:
        assert handler('date').cast('2024-01-01') == date(2024, 1, 1)
        assert handler('date').cast(datetime(2024, 1, 1, 15, 30)) == date(2024, 1, 1)
        assert handler('date').deserialize('2024-01-01') == date(2024, 1, 1)
    
    def test_datetime_cast_with_utc_suffix(self) -> None:
        value = handler('datetime').cast('2024-01-01 12:00:00.0 UTC')
        
        assert value == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert value.utcoffset() is not None
    
    def test_datetime_cast_normalizes_to_utc(self) -> None:
        value = handler('datetime').cast('2024-01-01T14:00:00+02:00')
        
        assert value == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert value.utcoffset().total_seconds() == 0
    
    def test_naive_datetime_is_taken_as_utc(self) -> None:
        value = handler('datetime').cast(datetime(2024, 1, 1, 12, 0))
        
        assert value.tzinfo is not None
        assert value == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    
    def test_time_cast(self) -> None:
        assert handler('time').cast('12:00:00.0') == time(12, 0, 0)
        assert handler('time').deserialize('08:30:00') == time(8, 30)
    
    def test_string_casts_stringify_input(self) -> None:
        assert StringCast().cast(42) == '42'
        assert StringCast().cast(b'bytes') == 'bytes'
        assert TextCast().cast('') == ''
    
    def test_none_passes_through(self) -> None:
        for type_name in TypeTag.values():
            assert handler(type_name).cast(None) is None
            assert handler(type_name).deserialize(None) is None
    
    def test_blank_input_is_missing_for_non_string_types(self) -> None:
        assert handler('integer').cast('') is None
        assert handler('date').cast('   ') is None
        assert handler('boolean').cast('') is None
        assert handler('string').cast('') == ''


class TestRoundTrip:
    """deserialize(cast(v)) yields the canonical value, also through JSON."""
    
    @pytest.mark.parametrize('type_name,value,expected', [
        ('integer', '42', 42),
        ('float', '3.14', 3.14),
        ('decimal', '19.99', Decimal('19.99')),
        ('boolean', 'false', False),
        ('date', '2024-01-01', date(2024, 1, 1)),
        ('datetime', '2024-01-01 12:00:00.0 UTC', datetime(2024, 1, 1, 12, tzinfo=timezone.utc)),
        ('time', '12:00:00', time(12, 0)),
        ('string', 'foo', 'foo'),
        ('text', 'bar\nbaz', 'bar\nbaz'),
    ])
    def test_round_trip(self, type_name: str, value: Any, expected: Any) -> None:
        type_handler = handler(type_name)
        stored = type_handler.cast(value)
        
        assert type_handler.deserialize(stored) == expected
        
        # What a JSON column hands back after a save
        reloaded = to_json_compatible({'value': stored})['value']
        assert type_handler.deserialize(reloaded) == expected
