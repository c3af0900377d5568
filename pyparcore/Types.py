from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

T = TypeVar('T')  # Generic type for success values
E = TypeVar('E')  # Generic type for error values


class UnwrapError(ValueError):
    """Raised when unwrapping the wrong variant of a Result or Optional."""


class Null:
    """
    The unit value. Every Null compares equal to every other Null and to
    Python's None (an absent value), and to nothing else.
    """
    _instance = None

    def __new__(cls) -> 'Null':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is None or isinstance(other, Null)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    # Equal to None, so it must hash like None
    def __hash__(self) -> int:
        return hash(None)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Null"


NULL = Null()


def null() -> Null:
    """Return the unit value."""
    return NULL


# --- Result ---

@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise UnwrapError(f"Called unwrap_err on Ok({self.value!r})")

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error description."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError(f"Called unwrap on Err({self.error!r})")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)


# --- Optional ---

@dataclass(frozen=True)
class Some(Generic[T]):
    """Present value."""
    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing:
    """Absent value. Its payload is always the unit value."""
    value: Null = field(default=NULL, init=False)

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError("Called unwrap on Nothing")

    def unwrap_or(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return "Nothing"


Optional = Union[Some[T], Nothing]


def some(value: T) -> Some[T]:
    return Some(value)


def none() -> Nothing:
    return Nothing()
