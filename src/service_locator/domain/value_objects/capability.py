"""Capability identifiers and factories.

A capability is the key under which an implementation is registered. Keys
are abstract classes:

- a class with unimplemented abstract methods (``inspect.isabstract``),
  such as ``collections.abc.Sized`` or an ``abc.ABC`` interface
- a ``typing.Protocol`` class (but not a concrete class deriving from one)
- a marker ABC, i.e. an ``ABCMeta`` class declared directly on ``abc.ABC``
  or ``object`` with no abstract methods, such as ``numbers.Number``

Concrete types such as ``int``, an ordinary class, or a class that
implements an ABC are rejected.
"""

from __future__ import annotations

import abc
import inspect
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Capability = type
"""An abstract class naming a contract that implementations satisfy."""

Factory = Callable[[], T]
"""Zero-argument callable returning an implementation of a capability."""


def is_abstract_capability(candidate: Any) -> bool:
    """Return True if candidate is a class usable as a capability key.

    Args:
        candidate: The object offered as a capability.

    Returns:
        True for abstract ABCs, Protocols and marker ABCs, False otherwise.

    Example:
        >>> from collections.abc import Sized
        >>> is_abstract_capability(Sized)
        True
        >>> is_abstract_capability(int)
        False
    """
    if not isinstance(candidate, abc.ABCMeta):
        return False
    if inspect.isabstract(candidate):
        return True
    if getattr(candidate, "_is_protocol", False):
        return True
    return _is_marker(candidate)


def _is_marker(candidate: abc.ABCMeta) -> bool:
    # A subclass of an interface inherits or implements its methods; only a
    # class declared straight on ABC/object can be a bare marker.
    return all(base is abc.ABC or base is object for base in candidate.__bases__)
