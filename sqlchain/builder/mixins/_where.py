from typing import TYPE_CHECKING, Any, cast

from sqlchain.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol
    from sqlchain.core.accumulator import BindValues

__all__ = ("HavingClauseMixin", "WhereClauseMixin")

WHERE_GUARD = "WHERE"
IN_WHERE_GUARD = " WHERE"


class WhereClauseMixin:
    """Mixin providing WHERE predicates for SELECT, UPDATE and DELETE builders.

    The ``WHERE`` keyword is written only by the first predicate; further
    predicates are joined with :meth:`and_` or :meth:`or_`.

    Whether a ``WHERE`` was already written is decided by searching the
    statement text, spliced sub-queries included. :meth:`where` looks for
    ``WHERE`` anywhere while :meth:`in_` looks for `` WHERE`` with its leading
    space, so a statement whose text merely starts with ``WHERE`` gets a second
    keyword from :meth:`in_` but not from :meth:`where`. Start the outer
    clause with :meth:`raw` when a spliced sub-query already has a ``WHERE``.
    """

    __slots__ = ()

    def where(self, expr: str, *values: Any) -> Any:
        """Add a predicate.

        Args:
            expr: Predicate text with one ``?`` marker per value, e.g. ``"id = ?"``.
            *values: Values bound to the markers in ``expr``, in order.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        _ensure_where(builder, WHERE_GUARD)
        builder.append_text(expr)
        builder.append_args(*values)
        return builder

    def and_(self) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" AND ")
        return builder

    def or_(self) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" OR ")
        return builder

    def in_(self, column: str, values: "BindValues") -> Any:
        """Add a ``column IN (?, ?, ...)`` predicate.

        Args:
            column: The column to filter.
            values: Values to match, one marker each.

        Raises:
            SQLBuilderError: If ``values`` is a string or bytes rather than a collection of values.

        Returns:
            The current builder instance for method chaining.
        """
        if isinstance(values, (str, bytes)):
            msg = f"IN values for {column!r} must be a collection of values, not {type(values).__name__}."
            raise SQLBuilderError(msg)
        builder = cast("BuilderProtocol", self)
        _ensure_where(builder, IN_WHERE_GUARD)
        builder.append_text(column)
        builder.append_text(" IN (")
        builder.append_placeholders(values)
        builder.append_text(")")
        return builder


class HavingClauseMixin:
    """Mixin providing the HAVING clause for grouped SELECT builders."""

    __slots__ = ()

    def having(self, expr: str, *values: Any) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" HAVING ")
        builder.append_text(expr)
        builder.append_args(*values)
        return builder


def _ensure_where(builder: "BuilderProtocol", guard: str) -> None:
    if not builder.contains(guard):
        builder.append_text(" WHERE ")
