from __future__ import annotations

from .Serialization import json_default, json_serializer, to_json_compatible

__all__ = ['json_default', 'json_serializer', 'to_json_compatible']
