from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from schemaless_attributes.config.settings import settings
from schemaless_attributes.Exceptions import (
    InvalidSourceType,
    SchemalessAttributeException,
    SourceNotImplemented,
    UndefinedSource,
)

DEFAULT_SOURCE_METHOD = 'default_json_attributes_source'


class SourceKind(str, Enum):
    """Shape a source is expected to have."""
    MAP = 'map'
    BLOB = 'blob'


@runtime_checkable
class MapSource(Protocol):
    """Untyped key-value container backing json attributes."""
    
    def get(self, key: Any, default: Any = None) -> Any:
        ...
    
    def pop(self, key: Any, default: Any = None) -> Any:
        ...
    
    def __setitem__(self, key: Any, value: Any) -> None:
        ...


@runtime_checkable
class BlobSource(Protocol):
    """Single blob attachment backing attachment attributes."""
    
    def is_attached(self) -> bool:
        ...
    
    def download(self) -> bytes:
        ...
    
    def attach_new(self, data: bytes, filename: str) -> Any:
        ...
    
    def detach(self) -> None:
        ...


Predicate = Union[Callable[[Any], Any], str, None]


@dataclass(frozen=True)
class FixedSource:
    """Source held by a named member of the instance."""
    
    name: str
    kind: SourceKind = SourceKind.MAP
    
    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class DefaultSource:
    """Source returned by the owner's ``default_json_attributes_source`` override."""
    
    method: str = DEFAULT_SOURCE_METHOD
    kind: SourceKind = SourceKind.MAP
    
    def describe(self) -> str:
        return self.method


@dataclass(frozen=True)
class FallbackBlobSource:
    """
    Blob attachment that per-call predicates may redirect to a plain member.
    
    Predicates take the instance, or name an instance member holding a flag
    or a zero-argument method returning one.
    """
    
    attachment: str
    fallback: Optional[str] = None
    fallback_read: Predicate = None
    fallback_write: Predicate = None
    kind: SourceKind = SourceKind.BLOB
    
    def describe(self) -> str:
        return self.attachment
    
    @property
    def blob_source(self) -> FixedSource:
        return FixedSource(self.attachment, SourceKind.BLOB)
    
    def use_fallback_on_read(self, instance: Any) -> bool:
        return self.fallback is not None and evaluate_predicate(self.fallback_read, instance)
    
    def use_fallback_on_write(self, instance: Any) -> bool:
        return self.fallback is not None and evaluate_predicate(self.fallback_write, instance)


SourceRule = Union[FixedSource, DefaultSource, FallbackBlobSource]


def evaluate_predicate(predicate: Predicate, instance: Any) -> bool:
    """Evaluate a fallback predicate against an instance."""
    if predicate is None:
        return False
    
    if isinstance(predicate, str):
        member = getattr(instance, predicate)
        return bool(member() if callable(member) else member)
    
    return bool(predicate(instance))


def resolve_source(instance: Any, rule: SourceRule, attribute: str) -> Any:
    """
    Get the container or blob backing an attribute on an instance.
    
    @param instance: The owning instance
    @param rule: How the attribute's source is found
    @param attribute: Attribute name, for error messages
    @return: The resolved source
    @raises SourceNotImplemented: If the owner does not override the default source
    @raises InvalidSourceType: If the source is missing or has the wrong shape
    """
    if isinstance(rule, FallbackBlobSource):
        rule = rule.blob_source
    
    if isinstance(rule, DefaultSource):
        source = _resolve_default_source(instance, rule, attribute)
    else:
        try:
            source = getattr(instance, rule.name)
        except AttributeError as e:
            raise UndefinedSource(attribute, rule.name) from e
    
    if settings.SCHEMALESS_STRICT_SOURCES:
        check_source_shape(source, rule, attribute)
    
    return source


def _resolve_default_source(instance: Any, rule: DefaultSource, attribute: str) -> Any:
    owner = type(instance).__name__
    provider = getattr(instance, rule.method, None)
    if provider is None:
        raise SourceNotImplemented(attribute, owner)
    
    if not callable(provider):
        return provider
    
    try:
        return provider()
    except SchemalessAttributeException:
        raise
    except NotImplementedError as e:
        raise SourceNotImplemented(attribute, owner) from e


def check_source_shape(source: Any, rule: SourceRule, attribute: str) -> None:
    """Raise InvalidSourceType if a source lacks the capability of its kind."""
    expected = MapSource if rule.kind is SourceKind.MAP else BlobSource
    
    if not isinstance(source, expected):
        raise InvalidSourceType(attribute, rule.describe(), source, expected.__name__)
