from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("SelectClauseMixin",)


class SelectClauseMixin:
    """Mixin providing the SELECT column list."""

    __slots__ = ()

    def select(self, *exprs: str) -> Any:
        """Add a SELECT clause.

        Args:
            *exprs: Column names or expressions, e.g. ``"COUNT(*)"`` or ``"DISTINCT name"``.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder.append_text("SELECT ")
        builder.append_text(", ".join(exprs))
        return builder
