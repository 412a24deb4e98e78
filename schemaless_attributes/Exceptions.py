from __future__ import annotations

from typing import Any, Optional


class SchemalessAttributeException(Exception):
    """Base exception for schemaless attributes"""
    
    def __init__(self, message: str, attribute: Optional[str] = None, owner: Optional[str] = None) -> None:
        self.attribute = attribute
        self.owner = owner
        super().__init__(message)


class AmbiguousAttributeName(SchemalessAttributeException):
    """Exception raised when an attribute name collides with an existing member"""
    
    def __init__(self, attribute: str, owner: str) -> None:
        super().__init__(
            f'Declaration of schemaless attribute with ambiguous name "{attribute}" on {owner}!',
            attribute,
            owner
        )


class UnsupportedType(SchemalessAttributeException):
    """Exception raised when a type tag is outside the supported catalog"""
    
    def __init__(self, type_name: Any, attribute: Optional[str] = None, owner: Optional[str] = None) -> None:
        self.type_name = type_name
        
        if attribute is None:
            message = f"Type {type_name} is not supported!"
        else:
            message = f'Schemaless attribute "{attribute}" has unsupported type: {type_name}!'
            if owner:
                message = f"{message[:-1]} on {owner}!"
        
        super().__init__(message, attribute, owner)


class SourceNotImplemented(SchemalessAttributeException, NotImplementedError):
    """Exception raised when a default-source attribute is used but the owner never overrides the source"""
    
    def __init__(self, attribute: str, owner: str) -> None:
        super().__init__(
            f'Schemaless attribute "{attribute}" on {owner} has no source: '
            f"default_json_attributes_source needs to be implemented!",
            attribute,
            owner
        )


class InvalidSourceType(SchemalessAttributeException, TypeError):
    """Exception raised when a resolved source does not provide the expected capability"""
    
    def __init__(self, attribute: str, source: str, actual: Any, expected: str) -> None:
        self.source = source
        self.expected = expected
        super().__init__(
            f'The provided source "{source}" for schemaless attribute "{attribute}" is a '
            f"{type(actual).__name__}, it was expected to be a {expected}!",
            attribute
        )


class UndefinedSource(InvalidSourceType):
    """Exception raised when a fixed source member does not exist on the instance"""

    def __init__(self, attribute: str, source: str) -> None:
        self.source = source
        self.expected = 'defined member'
        SchemalessAttributeException.__init__(
            self,
            f'The provided source "{source}" for schemaless attribute "{attribute}" is not defined!',
            attribute
        )


class InvalidAttributeDefinition(SchemalessAttributeException, ValueError):
    """Exception raised when an attribute declaration is malformed"""
    pass


class InvalidAttributeValue(SchemalessAttributeException, ValueError):
    """Exception raised when a value cannot be coerced to the attribute type"""
    
    def __init__(self, type_name: str, value: Any) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(f"Value {value!r} cannot be cast to {type_name}!")
