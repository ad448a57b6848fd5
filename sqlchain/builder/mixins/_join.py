from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("JoinClauseMixin",)


class JoinClauseMixin:
    """Mixin providing JOIN clause methods for SELECT builders."""

    __slots__ = ()

    def join(self, table: str, on: str, join_type: str = "") -> Any:
        """Add a JOIN clause.

        Args:
            table: Table to join, optionally with an alias (``"posts p"``).
            on: Join condition, e.g. ``"users.id = posts.user_id"``.
            join_type: Keyword written before ``JOIN`` (``"LEFT"``, ``"RIGHT"``, ``"FULL"``); empty for a plain join.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder.append_text(f" {join_type} JOIN " if join_type else " JOIN ")
        builder.append_text(table)
        builder.append_text(" ON ")
        builder.append_text(on)
        return builder

    def left_join(self, table: str, on: str) -> Any:
        return self.join(table, on, join_type="LEFT")

    def right_join(self, table: str, on: str) -> Any:
        return self.join(table, on, join_type="RIGHT")

    def full_join(self, table: str, on: str) -> Any:
        return self.join(table, on, join_type="FULL")
