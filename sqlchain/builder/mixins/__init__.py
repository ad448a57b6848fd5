"""SQL statement builder mixins."""

from sqlchain.builder.mixins._common_table_expr import CommonTableExpressionMixin, SetOperationMixin
from sqlchain.builder.mixins._delete_from import DeleteFromClauseMixin
from sqlchain.builder.mixins._from import FromClauseMixin
from sqlchain.builder.mixins._insert_values import InsertIntoClauseMixin, InsertValuesMixin
from sqlchain.builder.mixins._join import JoinClauseMixin
from sqlchain.builder.mixins._limit_offset import LimitOffsetClauseMixin
from sqlchain.builder.mixins._order_by import GroupByClauseMixin, OrderByClauseMixin
from sqlchain.builder.mixins._returning import ReturningClauseMixin
from sqlchain.builder.mixins._select_columns import SelectClauseMixin
from sqlchain.builder.mixins._update_set import UpdateSetClauseMixin, UpdateTableClauseMixin
from sqlchain.builder.mixins._where import HavingClauseMixin, WhereClauseMixin

__all__ = (
    "CommonTableExpressionMixin",
    "DeleteFromClauseMixin",
    "FromClauseMixin",
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "InsertIntoClauseMixin",
    "InsertValuesMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "ReturningClauseMixin",
    "SelectClauseMixin",
    "SetOperationMixin",
    "UpdateSetClauseMixin",
    "UpdateTableClauseMixin",
    "WhereClauseMixin",
)
