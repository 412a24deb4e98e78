from __future__ import annotations

from typing import Any, Optional, Type

from schemaless_attributes.config.settings import settings
from schemaless_attributes.Casts import TypeHandler
from schemaless_attributes.Types import TypeRegistry, TypeTag, type_registry

from .Sources import BlobSource, FallbackBlobSource, resolve_source


class AttachmentAttribute:
    """
    Text accessor stored as a blob attachment.
    
    When the read (or write) fallback predicate holds for the instance, the
    value goes to the fallback member instead of the blob. Predicates are
    evaluated on every access, so an instance can switch between both
    storages at any time.
    """
    
    type = TypeTag.TEXT
    
    def __init__(self, name: str, source: FallbackBlobSource, types: Optional[TypeRegistry] = None) -> None:
        self.name = name
        self.source_rule = source
        self.types = types or type_registry
    
    @property
    def handler(self) -> TypeHandler:
        return self.types.handler_for(self.type)
    
    @property
    def filename(self) -> str:
        return f"{self.name}{settings.SCHEMALESS_ATTACHMENT_EXTENSION}"
    
    def source(self, instance: Any) -> BlobSource:
        """Resolve the attachment backing this attribute on an instance."""
        return resolve_source(instance, self.source_rule, self.name)
    
    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return self
        
        if self.source_rule.use_fallback_on_read(instance):
            return getattr(instance, self.source_rule.fallback)
        
        attachment = self.source(instance)
        if not attachment.is_attached():
            return None
        
        return attachment.download().decode('utf-8')
    
    def __set__(self, instance: Any, value: Any) -> None:
        if self.source_rule.use_fallback_on_write(instance):
            setattr(instance, self.source_rule.fallback, value)
            return
        
        attachment = self.source(instance)
        text = self.handler.cast(value)
        
        if text is None:
            attachment.detach()
            return
        
        attachment.attach_new(text.encode('utf-8'), self.filename)
    
    def __delete__(self, instance: Any) -> None:
        self.source(instance).detach()
    
    def __repr__(self) -> str:
        return f"<AttachmentAttribute {self.name} on {self.source_rule.describe()}>"
