"""Argument checks shared by the option setters.

Every check raises InvalidArgumentError and returns the checked value, so
setters can validate and bind in one expression before touching any state.
"""

from __future__ import annotations

from collections.abc import Iterable

from cumulus.core.exceptions import InvalidArgumentError


def check_not_none[T](value: T | None, message: str) -> T:
    if value is None:
        raise InvalidArgumentError(message)
    return value


def check_argument(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgumentError(message)


def check_str(value: object, name: str) -> str:
    match value:
        case None:
            raise InvalidArgumentError(f"{name} was null")
        case str():
            return value
        case _:
            raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")


def check_int(value: object, name: str) -> int:
    match value:
        case None:
            raise InvalidArgumentError(f"{name} was null")
        case bool():
            raise InvalidArgumentError(f"{name} must be an integer, got bool")
        case int():
            return value
        case _:
            raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")


def check_bool(value: object, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def check_port(port: object, name: str = "port") -> int:
    port = check_int(port, name)
    check_argument(0 < port < 65536, f"{name} must be a positive integer < 65536, got {port}")
    return port


def varargs[T](args: tuple[T | Iterable[T], ...], name: str) -> tuple[T, ...]:
    """Normalize ``f(1, 2, 3)`` and ``f([1, 2, 3])`` to the same tuple.

    A single non-string iterable argument is expanded; anything else is taken
    as the element list itself.
    """
    match args:
        case (str() | bytes(),):
            return args  # type: ignore[return-value]
        case (Iterable() as items,):
            return tuple(items)
        case (None,):
            raise InvalidArgumentError(f"{name} was null")
        case _:
            return args  # type: ignore[return-value]


def check_elements[T](items: tuple[T | None, ...], message: str) -> tuple[T, ...]:
    for item in items:
        if item is None:
            raise InvalidArgumentError(message)
    return items  # type: ignore[return-value]


def unique_strings(values: Iterable[object] | None, name: str) -> tuple[str, ...]:
    """Ordered, de-duplicated tuple of strings, like an insertion-ordered set."""
    values = check_not_none(values, f"{name} was null")
    if isinstance(values, str):
        raise InvalidArgumentError(f"{name} must be an iterable of strings, not a string")
    return tuple(dict.fromkeys(check_str(v, f"{name} element") for v in values))
