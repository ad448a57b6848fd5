"""The fluent query: the accumulator plus every clause helper."""

from typing import Any

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from sqlchain.builder.mixins import (
    CommonTableExpressionMixin,
    DeleteFromClauseMixin,
    FromClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    ReturningClauseMixin,
    SelectClauseMixin,
    SetOperationMixin,
    UpdateSetClauseMixin,
    UpdateTableClauseMixin,
    WhereClauseMixin,
)
from sqlchain.core.accumulator import Accumulator

__all__ = ("Query",)


@mypyc_attr(allow_interpreted_subclasses=True)
class Query(
    CommonTableExpressionMixin,
    SelectClauseMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    SetOperationMixin,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    UpdateTableClauseMixin,
    UpdateSetClauseMixin,
    DeleteFromClauseMixin,
    ReturningClauseMixin,
    Accumulator,
):
    """Chainable SQL statement.

    Every clause method appends to the statement and returns the same query::

        sql, args = factory.select("name").from_("users").where("id = ?", 1).build()

    A query is finalized exactly once, with :meth:`build`, :meth:`build_raw`
    or :meth:`to_sql`; after that the handle belongs to the pool again.
    """

    __slots__ = ()

    def raw(self, fragment: str, *values: Any) -> Self:
        """Append ``fragment`` verbatim and bind ``values`` to its markers."""
        self.append_text(fragment)
        self.append_args(*values)
        return self
