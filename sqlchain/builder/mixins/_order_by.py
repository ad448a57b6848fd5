from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("GroupByClauseMixin", "OrderByClauseMixin")


class OrderByClauseMixin:
    """Mixin providing ORDER BY clause for SELECT builders."""

    __slots__ = ()

    def order_by(self, *exprs: str) -> Any:
        """Add ORDER BY clause.

        Args:
            *exprs: Ordering terms written verbatim, e.g. ``"name ASC"`` or ``"age NULLS FIRST"``.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder.append_text(" ORDER BY ")
        builder.append_text(", ".join(exprs))
        return builder


class GroupByClauseMixin:
    """Mixin providing GROUP BY clause for SELECT builders."""

    __slots__ = ()

    def group_by(self, *exprs: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" GROUP BY ")
        builder.append_text(", ".join(exprs))
        return builder
