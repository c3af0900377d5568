from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from .Types import Optional, none, some


@dataclass(frozen=True)
class Union:
    """
    Fixed-size, heterogeneous container addressed by 1-based position.

    Every parser success value is a two-entry Union: the matched value at
    position 1 and the next cursor at position 2.
    """
    values: Tuple[Any, ...]

    def get(self, index: int) -> Optional[Any]:
        """Return Some(entry) when position `index` holds an entry, else Nothing."""
        # Presence is decided by position, so falsy entries are still Some
        if 1 <= index <= len(self.values):
            return some(self.values[index - 1])
        return none()

    def unpack(self) -> Tuple[Any, ...]:
        return self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Union{self.values!r}"


def union(*values: Any) -> Union:
    """Build a Union from positional arguments."""
    return Union(tuple(values))
