from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("InsertIntoClauseMixin", "InsertValuesMixin")

VALUES_KEYWORD = " VALUES"


class InsertIntoClauseMixin:
    """Mixin providing the INSERT INTO target and column list."""

    __slots__ = ()

    def insert_into(self, table: str, *fields: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text("INSERT INTO ")
        builder.append_text(table)
        builder.append_text(" (")
        builder.append_text(", ".join(fields))
        builder.append_text(")")
        return builder


class InsertValuesMixin:
    """Mixin providing VALUES rows for INSERT builders."""

    __slots__ = ()

    def values(self, *values: Any) -> Any:
        """Add one row of values.

        The ``VALUES`` keyword is written by the first row only; every call
        appends a parenthesized group with one marker per value.

        Args:
            *values: Values for the row, in column order.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if not builder.contains(VALUES_KEYWORD):
            builder.append_text(VALUES_KEYWORD)
        builder.append_text(" (")
        builder.append_placeholders(values)
        builder.append_text(")")
        return builder
