"""Statement accumulator: the mutable buffer every clause helper writes into.

An accumulator holds the statement text and the ordered list of bound
values. The Nth ``?`` marker in the text, counted left to right, belongs to
the Nth bound value. Finalizing an accumulator hands back the result,
truncates both buffers and releases the instance to the pool it came from.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from mypy_extensions import mypyc_attr
from typing_extensions import Self, TypeAlias

from sqlchain.config import QueryConfig, get_default_config
from sqlchain.core.parameters import PLACEHOLDER_MARKER, ParameterStyle, convert_placeholders, count_placeholders
from sqlchain.exceptions import QueryStateError
from sqlchain.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from sqlchain.core._pool import ObjectPool

__all__ = ("Accumulator", "BindValues", "BuiltQuery")

logger = get_logger("core.accumulator")

BindValues: TypeAlias = Sequence[Any]
"""Any ordered collection of values to bind, iterated the same way regardless of element type."""

ACCUMULATOR_SLOTS = ("_args", "_config", "_fragments", "_pool", "_released", "_spliced")


class BuiltQuery(NamedTuple):
    """A finalized statement and its positional parameters."""

    sql: str
    parameters: list[Any]


@mypyc_attr(allow_interpreted_subclasses=True)
class Accumulator:
    """Growable statement text plus the parallel list of bound values.

    A pooled accumulator counts as finalized while it waits in its pool's
    free list. One without a pool stays finalized until ``reset`` runs.
    """

    __slots__ = ACCUMULATOR_SLOTS

    def __init__(self, config: "Optional[QueryConfig]" = None, pool: "Optional[ObjectPool[Any]]" = None) -> None:
        self._fragments: list[str] = []
        self._args: list[Any] = []
        self._config = config or get_default_config()
        self._pool = pool
        self._released = False
        self._spliced = False

    @property
    def config(self) -> QueryConfig:
        return self._config

    @property
    def sql(self) -> str:
        """Current statement text, markers left as-is. Does not finalize."""
        return "".join(self._fragments)

    @property
    def parameters(self) -> list[Any]:
        """Copy of the values bound so far. Does not finalize."""
        return list(self._args)

    def append_text(self, fragment: str) -> Self:
        self._fragments.append(fragment)
        return self

    def append_placeholder(self, value: Any) -> Self:
        """Append one ``?`` marker and bind ``value`` to it."""
        self._fragments.append(PLACEHOLDER_MARKER)
        self._args.append(value)
        return self

    def append_placeholders(self, values: BindValues, separator: str = ", ") -> Self:
        """Append one marker per value, joined by ``separator``, binding the values in order.

        Args:
            values: Values to bind.
            separator: Text written between consecutive markers.

        Returns:
            The accumulator, for chaining.
        """
        for index, value in enumerate(values):
            if index:
                self._fragments.append(separator)
            self._fragments.append(PLACEHOLDER_MARKER)
            self._args.append(value)
        return self

    def append_args(self, *values: Any) -> Self:
        """Bind values whose markers were written as part of a text fragment."""
        self._args.extend(values)
        return self

    def contains(self, fragment: str) -> bool:
        """Whether ``fragment`` already occurs in the statement text."""
        return fragment in self.sql

    def splice(self, child: "Accumulator") -> Self:
        """Append the whole of ``child`` (text and bound values) to this accumulator.

        The child is read, not finalized: it never goes back to its pool and
        may not be finalized or spliced again afterwards.

        Args:
            child: The accumulator to embed.

        Raises:
            QueryStateError: If ``child`` is this accumulator, or was already finalized or spliced.

        Returns:
            The accumulator, for chaining.
        """
        if child is self:
            msg = "Cannot splice a query into itself."
            raise QueryStateError(msg)
        child._ensure_usable("splice")
        self._fragments.extend(child._fragments)
        self._args.extend(child._args)
        child._spliced = True
        return self

    def build(self) -> BuiltQuery:
        """Finalize with every marker rewritten to the configured positional style.

        Returns:
            The rewritten statement and its parameters.
        """
        style = self._config.parameter_style
        sql, parameters = self._finalize()
        built = BuiltQuery(convert_placeholders(sql, style), parameters)
        self._log_finalized(sql, built, style)
        return built

    def build_raw(self) -> BuiltQuery:
        """Finalize with ``?`` markers left in place.

        Returns:
            The statement text verbatim and its parameters.
        """
        sql, parameters = self._finalize()
        built = BuiltQuery(sql, parameters)
        self._log_finalized(sql, built, ParameterStyle.QMARK)
        return built

    def to_sql(self) -> str:
        """Finalize and return only the statement text, markers left in place."""
        return self.build_raw().sql

    def reset(self) -> None:
        """Truncate both buffers and return the instance to its fresh state.

        Used as the pool resetter, so a recycled instance is ready to build.
        """
        self._fragments.clear()
        self._args.clear()
        self._released = False
        self._spliced = False

    def _ensure_usable(self, operation: str) -> None:
        if self._released or (self._pool is not None and self in self._pool):
            msg = f"Cannot {operation} a query that has already been finalized."
            raise QueryStateError(msg)
        if self._spliced:
            msg = f"Cannot {operation} a query that was spliced into another query."
            raise QueryStateError(msg)

    def _finalize(self) -> "tuple[str, list[Any]]":
        self._ensure_usable("finalize")
        sql = self.sql
        parameters = list(self._args)
        if self._pool is None:
            self.reset()
            self._released = True
        else:
            self._pool.release(self)
        return sql, parameters

    def _log_finalized(self, marked_sql: str, built: BuiltQuery, style: ParameterStyle) -> None:
        if not self._config.log_statements:
            return
        marker_count = count_placeholders(marked_sql)
        if marker_count != len(built.parameters):
            log_with_context(
                logger,
                logging.WARNING,
                "Placeholder count does not match bound values",
                sql=marked_sql,
                marker_count=marker_count,
                parameter_count=len(built.parameters),
            )
        log_with_context(
            logger,
            logging.DEBUG,
            "Finalized query",
            sql=built.sql,
            parameter_count=len(built.parameters),
            parameter_style=str(style),
        )

    def __str__(self) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self.sql!r}, parameters={self._args!r})"
