"""Query construction configuration."""

from functools import lru_cache
from typing import Any, Union

from mypy_extensions import mypyc_attr

from sqlchain.core.parameters import ParameterStyle
from sqlchain.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_POOL_MAX_SIZE", "QueryConfig", "get_default_config")

DEFAULT_POOL_MAX_SIZE = 100

QUERY_CONFIG_SLOTS = ("log_statements", "parameter_style", "pool_max_size")


@mypyc_attr(allow_interpreted_subclasses=True)
class QueryConfig:
    """Settings shared by every query acquired from one factory.

    Instances are treated as immutable: use :meth:`replace` to derive a
    modified copy.
    """

    __slots__ = QUERY_CONFIG_SLOTS

    def __init__(
        self,
        parameter_style: "Union[ParameterStyle, str]" = ParameterStyle.NUMERIC,
        pool_max_size: int = DEFAULT_POOL_MAX_SIZE,
        log_statements: bool = False,
    ) -> None:
        """Initialize the configuration.

        Args:
            parameter_style: Placeholder style ``build()`` rewrites ``?`` markers into.
            pool_max_size: Maximum number of released queries kept for reuse.
            log_statements: Emit a DEBUG log record for every finalized statement.

        Raises:
            ImproperConfigurationError: If the style is unknown or the pool size is negative.
        """
        try:
            self.parameter_style = ParameterStyle(parameter_style)
        except ValueError as exc:
            msg = f"Unknown parameter style: {parameter_style!r}"
            raise ImproperConfigurationError(msg) from exc
        if pool_max_size < 0:
            msg = f"pool_max_size must be zero or positive, got {pool_max_size}"
            raise ImproperConfigurationError(msg)
        self.pool_max_size = pool_max_size
        self.log_statements = log_statements

    def replace(self, **kwargs: Any) -> "QueryConfig":
        """Return a new configuration with the given attributes changed.

        Args:
            **kwargs: Attributes to update

        Raises:
            ImproperConfigurationError: If a keyword is not a configuration field.

        Returns:
            New QueryConfig instance with updated attributes
        """
        for key in kwargs:
            if key not in QUERY_CONFIG_SLOTS:
                msg = f"{key!r} is not a field in {type(self).__name__}"
                raise ImproperConfigurationError(msg)

        current_kwargs = {slot: getattr(self, slot) for slot in QUERY_CONFIG_SLOTS}
        current_kwargs.update(kwargs)
        return type(self)(**current_kwargs)

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, slot) for slot in QUERY_CONFIG_SLOTS))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return all(getattr(self, slot) == getattr(other, slot) for slot in QUERY_CONFIG_SLOTS)

    def __repr__(self) -> str:
        field_strs = [f"{slot}={getattr(self, slot)!r}" for slot in QUERY_CONFIG_SLOTS]
        return f"{self.__class__.__name__}({', '.join(field_strs)})"


@lru_cache(maxsize=1)
def get_default_config() -> QueryConfig:
    """Get the shared default configuration."""
    return QueryConfig()
