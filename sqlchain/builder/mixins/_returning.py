from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("ReturningClauseMixin",)


class ReturningClauseMixin:
    """Mixin providing RETURNING clause for INSERT, UPDATE and DELETE builders."""

    __slots__ = ()

    def returning(self, *fields: str) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" RETURNING ")
        builder.append_text(", ".join(fields))
        return builder
