"""Optional wrapper returned by Registry.optional()."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from service_locator.ports.inbound import NotFoundError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Resolved(Generic[T]):
    """Outcome of an optional resolution.

    A present Resolved holds whatever the factory returned, including None:
    a registered factory that returns None resolves to a present outcome
    wrapping None, not to an empty one. Only a missing registration is empty.
    An empty Resolved remembers which capability was missing so that
    ``get()`` can raise a NotFoundError naming it.

    Attributes:
        value: The resolved instance (None when empty)
        present: Whether a registration was found
        capability: The capability that was looked up

    Example:
        >>> cache = registry.optional(Cache).or_else(NullCache())
    """

    value: T | None = None
    present: bool = False
    capability: Any = None

    @classmethod
    def of(cls, value: T, capability: Any = None) -> Resolved[T]:
        """Wrap a resolved instance."""
        return cls(value=value, present=True, capability=capability)

    @classmethod
    def empty(cls, capability: Any = None) -> Resolved[T]:
        """Return the empty outcome for a missing capability."""
        return cls(value=None, present=False, capability=capability)

    @property
    def is_present(self) -> bool:
        return self.present

    @property
    def is_empty(self) -> bool:
        return not self.present

    def __bool__(self) -> bool:
        return self.present

    def get(self) -> T:
        """Return the value.

        Raises:
            NotFoundError: If the outcome is empty.
        """
        if not self.present:
            raise NotFoundError(self.capability)
        return self.value  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        """Return the value, or default when empty."""
        return self.value if self.present else default  # type: ignore[return-value]

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value, or call supplier when empty."""
        return self.value if self.present else supplier()  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> Resolved[U]:
        """Apply fn to a present value; an empty outcome stays empty."""
        if not self.present:
            return Resolved.empty(self.capability)
        return Resolved.of(fn(self.value), self.capability)  # type: ignore[arg-type]
