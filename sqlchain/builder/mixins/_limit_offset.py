from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("LimitOffsetClauseMixin",)


class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses for SELECT builders.

    Both values are bound as parameters rather than written into the text.
    """

    __slots__ = ()

    def limit(self, value: int) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" LIMIT ")
        builder.append_placeholder(value)
        return builder

    def offset(self, value: int) -> Any:
        builder = cast("BuilderProtocol", self)
        builder.append_text(" OFFSET ")
        builder.append_placeholder(value)
        return builder

    def paginate(self, page: int, page_size: int) -> Any:
        """Add OFFSET and LIMIT clauses selecting one page of results.

        Page numbers start at 1. ``page`` and ``page_size`` below 1 are clamped
        to 1, and the first page gets no OFFSET clause at all.

        Args:
            page: The 1-based page number.
            page_size: Rows per page.

        Returns:
            The current builder instance for method chaining.
        """
        page = max(page, 1)
        page_size = max(page_size, 1)
        if page > 1:
            self.offset((page - 1) * page_size)
        return self.limit(page_size)
