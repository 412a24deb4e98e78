from __future__ import annotations

import json
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any


def json_default(value: Any) -> Any:
    """Render the canonical values of schemaless casts as JSON scalars."""
    if isinstance(value, Decimal):
        return str(value)
    
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_serializer(obj: Any, **kwargs: Any) -> str:
    """JSON serializer for map sources (suitable as SQLAlchemy ``json_serializer``)."""
    return json.dumps(obj, default=json_default, **kwargs)


def to_json_compatible(obj: Any) -> Any:
    """Get a copy of a map source with every value as a plain JSON value."""
    return json.loads(json_serializer(obj))
