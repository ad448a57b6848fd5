"""Core engine: placeholder handling, object pooling and the statement accumulator."""

from sqlchain.core.parameters import PLACEHOLDER_MARKER, ParameterStyle, convert_placeholders, count_placeholders
from sqlchain.core._pool import ObjectPool
from sqlchain.core.accumulator import Accumulator, BindValues, BuiltQuery

__all__ = (
    "PLACEHOLDER_MARKER",
    "Accumulator",
    "BindValues",
    "BuiltQuery",
    "ObjectPool",
    "ParameterStyle",
    "convert_placeholders",
    "count_placeholders",
)
