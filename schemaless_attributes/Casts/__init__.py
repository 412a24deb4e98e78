from __future__ import annotations

from .BaseCast import BaseCast, TypeHandler
from .NumericCasts import IntegerCast, FloatCast, DecimalCast
from .BooleanCast import BooleanCast
from .TemporalCasts import DateCast, DateTimeCast, TimeCast
from .StringCasts import StringCast, TextCast

__all__ = [
    'BaseCast',
    'TypeHandler',
    'IntegerCast',
    'FloatCast',
    'DecimalCast',
    'BooleanCast',
    'DateCast',
    'DateTimeCast',
    'TimeCast',
    'StringCast',
    'TextCast',
]
