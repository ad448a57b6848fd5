from typing import Any, Protocol

from typing_extensions import Self

from sqlchain.core.accumulator import Accumulator, BindValues

__all__ = ("BuilderProtocol",)


class BuilderProtocol(Protocol):
    """Accumulator surface the clause mixins write through."""

    def append_text(self, fragment: str) -> Self: ...

    def append_placeholder(self, value: Any) -> Self: ...

    def append_placeholders(self, values: BindValues, separator: str = ", ") -> Self: ...

    def append_args(self, *values: Any) -> Self: ...

    def contains(self, fragment: str) -> bool: ...

    def splice(self, child: Accumulator) -> Self: ...
