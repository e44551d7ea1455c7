from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from locidle.events import AiHype, Event, HireCoder, Upgrade

if TYPE_CHECKING:
    from locidle.runtime import GameRuntime


class Strategy(ABC):
    """Base class for simulation strategies."""

    def __init__(self, clicks_per_second: float = 0.0) -> None:
        self.clicks_per_second = clicks_per_second

    @abstractmethod
    def decide(self, runtime: GameRuntime) -> list[Event]:
        """Return ordered list of purchase events to send now."""
        ...

    @abstractmethod
    def describe(self) -> str: ...


class GreedyCheapest(Strategy):
    """Buy every enabled upgrade, then the cheapest affordable purchase."""

    def decide(self, runtime: GameRuntime) -> list[Event]:
        events: list[Event] = [
            Upgrade(i)
            for i, _ in runtime.visible_upgrades()
            if runtime.upgrade_enabled(i)
        ]

        s = runtime.get_state()
        if s.coder_cost <= s.ai_hype_cost:
            candidate: Event = HireCoder()
            cost = s.coder_cost
        else:
            candidate = AiHype()
            cost = s.ai_hype_cost
        if s.available_funds >= cost:
            events.append(candidate)
        return events

    def describe(self) -> str:
        return f"GreedyCheapest (cps={self.clicks_per_second:g})"


class ClickOnly(Strategy):
    """Never buys anything; only clicks."""

    def decide(self, runtime: GameRuntime) -> list[Event]:
        return []

    def describe(self) -> str:
        return f"ClickOnly (cps={self.clicks_per_second:g})"
