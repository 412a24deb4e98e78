from __future__ import annotations

from .TypeTag import TypeTag
from .TypeRegistry import TypeRegistry, type_registry, handler

__all__ = ['TypeTag', 'TypeRegistry', 'type_registry', 'handler']
