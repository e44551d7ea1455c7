"""The closed set of events a GameRuntime accepts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """Periodic timer event; advances idle production by real elapsed time."""


@dataclass(frozen=True)
class WriteCode:
    """Manual click: one line of code, sold at the current price."""


@dataclass(frozen=True)
class HireCoder:
    pass


@dataclass(frozen=True)
class Upgrade:
    index: int


@dataclass(frozen=True)
class AiHype:
    pass


Event = Tick | WriteCode | HireCoder | Upgrade | AiHype
