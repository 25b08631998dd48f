"""Module-level functions acting on the process-wide registry.

These keep call sites short when an application uses a single registry:

    import service_locator as locator

    locator.register_singleton(SmtpMailer(), Mailer)
    mailer = locator.a(Mailer)
"""

from __future__ import annotations

from typing import Any, TypeVar

from service_locator.domain.value_objects import Factory, Resolved
from service_locator.infrastructure.container import get_registry

T = TypeVar("T")


def reset() -> None:
    get_registry().reset()


def register_singleton(instance: T, *capabilities: type[Any]) -> T:
    return get_registry().register_singleton(instance, *capabilities)


def register_factory(factory: Factory[T], *capabilities: type[Any]) -> Factory[T]:
    return get_registry().register_factory(factory, *capabilities)


def resolve(capability: type[T]) -> T:
    return get_registry().resolve(capability)


def a(capability: type[T]) -> T:
    return get_registry().resolve(capability)


def an(capability: type[T]) -> T:
    return get_registry().resolve(capability)


def resolve_or_none(capability: type[T]) -> T | None:
    return get_registry().resolve_or_none(capability)


def optional(capability: type[T]) -> Resolved[T]:
    return get_registry().optional(capability)


def require_all(*capabilities: type[Any]) -> None:
    get_registry().require_all(*capabilities)


def has_all(*capabilities: type[Any]) -> bool:
    return get_registry().has_all(*capabilities)
