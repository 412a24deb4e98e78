from __future__ import annotations

from typing import Any, ClassVar, Protocol, Type, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from schemaless_attributes.Exceptions import InvalidAttributeValue


@runtime_checkable
class TypeHandler(Protocol):
    """Interface for schemaless attribute type coercion."""
    
    def cast(self, value: Any) -> Any:
        """Convert loosely-typed input to the storable canonical value."""
        ...
    
    def deserialize(self, value: Any) -> Any:
        """Convert a stored value to its typed Python value."""
        ...


class BaseCast:
    """
    Base cast backed by a pydantic TypeAdapter.
    
    Lax-mode validation does the loose coercion (``"42"`` to ``42``,
    ``"false"`` to ``False``, ``"2024-01-01"`` to a ``date``), so ``cast``
    and ``deserialize`` share one validator. They only differ on input
    normalization: ``cast`` treats a blank string as a missing value because
    it is fed user input, ``deserialize`` trusts the stored form.
    """
    
    type_name: ClassVar[str] = ''
    python_type: ClassVar[Type[Any]] = object
    blank_as_none: ClassVar[bool] = True
    
    def __init__(self) -> None:
        self._adapter: TypeAdapter[Any] = TypeAdapter(self.python_type)
    
    def cast(self, value: Any) -> Any:
        """Cast input value for storage."""
        if value is None:
            return None
        
        if self.blank_as_none and isinstance(value, str) and not value.strip():
            return None
        
        return self._validate(value)
    
    def deserialize(self, value: Any) -> Any:
        """Deserialize stored value."""
        if value is None:
            return None
        
        return self._validate(value)
    
    def prepare(self, value: Any) -> Any:
        """Normalize a raw value before validation."""
        if isinstance(value, str):
            return value.strip()
        return value
    
    def finalize(self, value: Any) -> Any:
        """Normalize a validated value to its canonical form."""
        return value
    
    def _validate(self, value: Any) -> Any:
        try:
            result = self._adapter.validate_python(self.prepare(value))
        except ValidationError as e:
            raise InvalidAttributeValue(self.type_name, value) from e
        
        return self.finalize(result)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
