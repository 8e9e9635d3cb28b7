"""
Result type for operations that report failure without raising.

Example:
    >>> result = await mapper.resolve('/home/user/public')
    >>> if result.ok:
    ...     print(result.value)
    ... else:
    ...     print(result.error)
"""
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T
    ok: bool = field(default=True, init=False)
    
    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that caused it."""
    error: Exception
    ok: bool = field(default=False, init=False)
    
    def unwrap(self):
        """Raise the wrapped error."""
        raise self.error


Result = Union[Ok[T], Err]
