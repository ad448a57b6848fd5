"""Placeholder styles and the marker-to-positional rewrite.

Statements are accumulated with ``?`` markers. Finalization rewrites each
marker, left to right, into the token of the requested positional style.
"""

from enum import Enum
from typing import Final

__all__ = (
    "PLACEHOLDER_MARKER",
    "ParameterStyle",
    "convert_placeholders",
    "count_placeholders",
)

PLACEHOLDER_MARKER: Final[str] = "?"


class ParameterStyle(str, Enum):
    """Positional parameter style enumeration with string values."""

    QMARK = "qmark"
    NUMERIC = "numeric"
    POSITIONAL_COLON = "positional_colon"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value

    def placeholder(self, ordinal: int) -> str:
        """Render the token for the ``ordinal``-th marker (1-based).

        Returns:
            The placeholder text for this style.
        """
        if self is ParameterStyle.NUMERIC:
            return f"${ordinal}"
        if self is ParameterStyle.POSITIONAL_COLON:
            return f":{ordinal}"
        if self is ParameterStyle.POSITIONAL_PYFORMAT:
            return "%s"
        return PLACEHOLDER_MARKER


def count_placeholders(sql: str) -> int:
    """Count the ``?`` markers in ``sql``."""
    return sql.count(PLACEHOLDER_MARKER)


def convert_placeholders(sql: str, target_style: ParameterStyle) -> str:
    """Rewrite every ``?`` marker in ``sql`` to ``target_style``.

    The output is assembled in a fresh buffer in a single pass over the
    source, so inserted ordinals are never scanned again and multi-digit
    ordinals (``$10``, ``$11``, ...) need no special handling.

    Args:
        sql: The SQL text with ``?`` markers.
        target_style: The positional style to convert to.

    Returns:
        SQL text with converted placeholders.
    """
    if target_style is ParameterStyle.QMARK or PLACEHOLDER_MARKER not in sql:
        return sql

    result_parts: list[str] = []
    current_pos = 0
    ordinal = 0

    while True:
        marker_pos = sql.find(PLACEHOLDER_MARKER, current_pos)
        if marker_pos == -1:
            break
        ordinal += 1
        result_parts.append(sql[current_pos:marker_pos])
        result_parts.append(target_style.placeholder(ordinal))
        current_pos = marker_pos + len(PLACEHOLDER_MARKER)

    result_parts.append(sql[current_pos:])

    return "".join(result_parts)
