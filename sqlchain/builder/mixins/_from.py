from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("FromClauseMixin",)


class FromClauseMixin:
    """Mixin providing the FROM clause."""

    __slots__ = ()

    def from_(self, table: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" FROM ")
        builder.append_text(table)
        return builder
