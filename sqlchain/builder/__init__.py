"""Fluent clause helpers over the statement accumulator."""

from sqlchain.builder._factory import QueryFactory, create_query_pool
from sqlchain.builder._query import Query

__all__ = ("Query", "QueryFactory", "create_query_pool")
