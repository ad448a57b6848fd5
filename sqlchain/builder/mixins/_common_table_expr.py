from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol
    from sqlchain.core.accumulator import Accumulator

__all__ = ("CommonTableExpressionMixin", "SetOperationMixin")


class CommonTableExpressionMixin:
    """Mixin providing WITH clauses that embed another query."""

    __slots__ = ()

    def with_(self, name: str, query: "Accumulator") -> Any:
        """Add ``WITH name AS (...)`` around the text of ``query``.

        ``query`` is spliced: its values are bound in place and it must not be
        finalized on its own afterwards.

        Args:
            name: Name of the common table expression.
            query: The query providing the expression body.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder.append_text("WITH ")
        builder.append_text(name)
        builder.append_text(" AS (")
        builder.splice(query)
        builder.append_text(") ")
        return builder


class SetOperationMixin:
    """Mixin providing set operations that embed another query."""

    __slots__ = ()

    def union(self, other: "Accumulator") -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" UNION ")
        builder.splice(other)
        return builder
