"""Statement-starting entry points backed by an application-owned pool."""

from typing import Any, Optional

from sqlchain.builder._query import Query
from sqlchain.config import QueryConfig, get_default_config
from sqlchain.core._pool import ObjectPool

__all__ = ("QueryFactory", "create_query_pool")


def create_query_pool(config: "Optional[QueryConfig]" = None) -> "ObjectPool[Query]":
    """Create a pool of :class:`Query` objects.

    Queries constructed by the pool remember it, so finalizing one releases
    it back to this pool.

    Args:
        config: Configuration handed to every query the pool constructs.

    Returns:
        A new, empty pool.
    """
    config = config or get_default_config()
    pool: ObjectPool[Query]

    def factory() -> Query:
        return Query(config=config, pool=pool)

    pool = ObjectPool(factory=factory, resetter=Query.reset, max_size=config.pool_max_size)
    return pool


class QueryFactory:
    """Factory for pooled queries with a fluent API.

    Create one factory at application startup and share it; the factory and
    its pool are safe to use from many threads, each query is not.

    Example:
        ```python
        from sqlchain import QueryFactory

        sql = QueryFactory()

        statement, args = (
            sql.select("name", "email")
            .from_("users")
            .where("id = ?", 1)
            .build()
        )
        # statement == "SELECT name, email FROM users WHERE id = $1"
        # args == [1]
        ```
    """

    __slots__ = ("_config", "_pool")

    def __init__(self, config: "Optional[QueryConfig]" = None, pool: "Optional[ObjectPool[Query]]" = None) -> None:
        """Initialize the query factory.

        Args:
            config: Configuration for queries built by this factory's own pool.
            pool: Pool to acquire queries from. A new pool is created when omitted.
        """
        self._config = config or get_default_config()
        self._pool = pool if pool is not None else create_query_pool(self._config)

    @property
    def config(self) -> QueryConfig:
        return self._config

    @property
    def pool(self) -> "ObjectPool[Query]":
        return self._pool

    def query(self) -> Query:
        """Acquire an empty query."""
        return self._pool.acquire()

    def select(self, *exprs: str) -> Query:
        return self.query().select(*exprs)

    def insert_into(self, table: str, *fields: str) -> Query:
        return self.query().insert_into(table, *fields)

    def update(self, table: str) -> Query:
        return self.query().update(table)

    def delete_from(self, table: str) -> Query:
        return self.query().delete_from(table)

    def with_(self, name: str, query: Query) -> Query:
        """Start a statement with a common table expression.

        Args:
            name: Name of the common table expression.
            query: Query providing the expression body; it is spliced and must not be finalized separately.

        Returns:
            A new query beginning with ``WITH name AS (...)``.
        """
        return self.query().with_(name, query)

    def raw(self, fragment: str, *values: Any) -> Query:
        return self.query().raw(fragment, *values)
