from __future__ import annotations

from .BaseModel import Base, BaseModel
from .SchemalessModel import SchemalessModel, JsonDict, PickledDict

__all__ = ['Base', 'BaseModel', 'SchemalessModel', 'JsonDict', 'PickledDict']
