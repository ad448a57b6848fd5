from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("UpdateSetClauseMixin", "UpdateTableClauseMixin")


class UpdateTableClauseMixin:
    """Mixin providing the UPDATE target table."""

    __slots__ = ()

    def update(self, table: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text("UPDATE ")
        builder.append_text(table)
        builder.append_text(" SET ")
        return builder


class UpdateSetClauseMixin:
    """Mixin providing SET assignments for UPDATE builders."""

    __slots__ = ()

    def set(self, fields: "Optional[Mapping[str, Any]]" = None, **values: Any) -> Any:
        """Add ``column = ?`` assignments.

        Assignments are written in mapping order, followed by keyword arguments.

        Args:
            fields: Mapping of column names to new values.
            **values: Further column assignments.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        assignments = {**(fields or {}), **values}
        for index, (column, value) in enumerate(assignments.items()):
            if index:
                builder.append_text(", ")
            builder.append_text(column)
            builder.append_text(" = ")
            builder.append_placeholder(value)
        return builder
