from dataclasses import KW_ONLY, dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """A scalar range with independently excludable endpoints.

    No ordering is enforced between `begin` and `end`; the range is a
    parameter carrier for range queries, not an arithmetic type.
    """

    begin: T
    end: T
    _: KW_ONLY
    exclude_begin: bool = False
    exclude_end: bool = False

    def __str__(self) -> str:
        """Bracket notation, e.g. `[1, 100)`."""
        left = "(" if self.exclude_begin else "["
        right = ")" if self.exclude_end else "]"
        return f"{left}{self.begin!r}, {self.end!r}{right}"
