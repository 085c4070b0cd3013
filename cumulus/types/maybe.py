"""Present/absent wrapper for optional option fields.

An option that was never set is ``NOTHING``; an option that was set holds
its value in ``Some``, even when that value is ``0``, ``""`` or ``False``.
Use pattern matching to unwrap:

    match options.get_port_speed():
        case Some(value=speed):
            request["networkComponents"] = [{"maxSpeed": speed}]
        case Nothing():
            pass
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Never


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value."""

    value: T

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def or_else[D](self, default: D) -> T | D:
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value."""

    def is_present(self) -> bool:
        return False

    def get(self) -> Never:
        raise ValueError("Nothing.get() called on an absent value")

    def or_else[D](self, default: D) -> D:
        return default

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()

type Maybe[T] = Some[T] | Nothing


def maybe[T](value: T | None) -> Maybe[T]:
    """Wrap ``value``, mapping ``None`` to ``NOTHING``."""
    return NOTHING if value is None else Some(value)
