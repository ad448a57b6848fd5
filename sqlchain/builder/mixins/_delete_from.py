from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("DeleteFromClauseMixin",)


class DeleteFromClauseMixin:
    """Mixin providing the DELETE FROM target table."""

    __slots__ = ()

    def delete_from(self, table: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text("DELETE FROM ")
        builder.append_text(table)
        return builder
