"""sqlchain: fluent SQL statement construction with pooled accumulators."""

from sqlchain import builder, config, core, exceptions, utils
from sqlchain.__metadata__ import __version__
from sqlchain.builder import Query, QueryFactory, create_query_pool
from sqlchain.config import QueryConfig, get_default_config
from sqlchain.core import (
    Accumulator,
    BuiltQuery,
    ObjectPool,
    ParameterStyle,
    convert_placeholders,
    count_placeholders,
)
from sqlchain.exceptions import ImproperConfigurationError, QueryStateError, SQLBuilderError, SQLChainError

__all__ = (
    "Accumulator",
    "BuiltQuery",
    "ImproperConfigurationError",
    "ObjectPool",
    "ParameterStyle",
    "Query",
    "QueryConfig",
    "QueryFactory",
    "QueryStateError",
    "SQLBuilderError",
    "SQLChainError",
    "__version__",
    "builder",
    "config",
    "convert_placeholders",
    "core",
    "count_placeholders",
    "create_query_pool",
    "exceptions",
    "get_default_config",
    "utils",
)
