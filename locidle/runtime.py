from __future__ import annotations

import logging
import time
from decimal import Decimal
from typing import Callable

from locidle._types import to_decimal
from locidle.config import GameConfig
from locidle.effect import apply_effect
from locidle.events import AiHype, Event, HireCoder, Tick, Upgrade, WriteCode
from locidle.requirement import all_met
from locidle.state import GameState
from locidle.upgrade import UpgradeDef, default_catalog, validate_catalog

logger = logging.getLogger(__name__)


class ManualClock:
    """A clock that only moves when told to. Used for headless play."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds}s)")
        self.now += seconds
        return self.now

    def __call__(self) -> float:
        return self.now


class GameRuntime:
    """Authoritative game logic processor."""

    def __init__(
        self,
        config: GameConfig | None = None,
        catalog: tuple[UpgradeDef, ...] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.catalog = tuple(catalog) if catalog is not None else default_catalog()

        errors = self.config.validate() + validate_catalog(self.catalog)
        if errors:
            raise ValueError(
                "Invalid GameConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.clock = clock
        self.state = GameState(self.config, self.catalog, start_time=clock())

    # ── Event dispatch ───────────────────────────────────────────────

    def update(self, event: Event) -> bool:
        """Apply one event. Returns True if the state changed."""
        if isinstance(event, Tick):
            self.tick()
            return True
        if isinstance(event, WriteCode):
            self.write_code()
            return True
        if isinstance(event, HireCoder):
            return self.hire_coder()
        if isinstance(event, Upgrade):
            return self.buy_upgrade(event.index)
        if isinstance(event, AiHype):
            return self.ai_hype()
        raise TypeError(f"Unknown event: {event!r}")

    # ── Core loop ────────────────────────────────────────────────────

    def tick(self, now: float | None = None) -> Decimal:
        """Advance production by the real time since the previous tick.

        Returns the number of lines produced.
        """
        if now is None:
            now = self.clock()
        s = self.state

        s.delta_time = max(0.0, now - s.last_time)
        s.total_time += s.delta_time
        s.last_time = now

        self._recompute_rates()

        loc_delta = s.loc_per_sec * to_decimal(s.delta_time)
        s.locs += loc_delta
        s.available_funds += loc_delta * s.loc_price
        return loc_delta

    # ── Player actions ───────────────────────────────────────────────

    def write_code(self) -> Decimal:
        """Write one line by hand. Returns the funds earned."""
        s = self.state
        s.locs += 1
        s.available_funds += s.loc_price
        return s.loc_price

    def hire_coder(self) -> bool:
        """Attempt to hire a coder. Returns True on success."""
        s = self.state
        if s.available_funds < s.coder_cost:
            return False

        s.available_funds -= s.coder_cost
        s.coders += 1
        logger.debug("Hired coder #%s for $%s", s.coders, s.coder_cost)
        s.coder_cost *= self.config.coder_cost_growth
        return True

    def buy_upgrade(self, index: int) -> bool:
        """Attempt to apply upgrade *index*. Returns True on success."""
        if not 0 <= index < len(self.catalog):
            raise IndexError(
                f"Upgrade index {index} out of range (catalog has {len(self.catalog)})"
            )

        udef = self.catalog[index]
        ustate = self.state.upgrades[index]
        if not ustate.available:
            return False
        if not all_met(udef.requirements, self.state):
            return False

        for eff in udef.effects:
            apply_effect(self.state, eff)
        ustate.available = False
        logger.info("Upgrade purchased: %s", udef.name)
        return True

    def ai_hype(self) -> bool:
        """Attempt to buy an AI hype level. Returns True on success."""
        s = self.state
        if s.available_funds < s.ai_hype_cost:
            return False

        s.available_funds -= s.ai_hype_cost
        s.ai_hype += 1
        logger.debug("AI hype level %s for $%s", s.ai_hype, s.ai_hype_cost)
        s.ai_hype_cost *= self.config.ai_hype_cost_growth
        return True

    # ── Queries ──────────────────────────────────────────────────────

    def get_state(self) -> GameState:
        """Return live reference to game state."""
        return self.state

    def upgrade_enabled(self, index: int) -> bool:
        """Whether upgrade *index* can be bought right now."""
        return self.state.upgrades[index].available and all_met(
            self.catalog[index].requirements, self.state
        )

    def visible_upgrades(self) -> list[tuple[int, UpgradeDef]]:
        """Catalog entries not yet purchased, with their indices."""
        return [
            (i, udef)
            for i, udef in enumerate(self.catalog)
            if self.state.upgrades[i].available
        ]

    def can_hire_coder(self) -> bool:
        return self.state.available_funds >= self.state.coder_cost

    def can_buy_ai_hype(self) -> bool:
        return self.state.available_funds >= self.state.ai_hype_cost

    # ── Private helpers ──────────────────────────────────────────────

    def _recompute_rates(self) -> None:
        """Derive production rate and price from the underlying quantities."""
        s = self.state
        s.loc_per_sec_base = s.coders * s.coder_level
        s.loc_per_sec = s.loc_per_sec_base * s.loc_multiplier

        s.loc_price = (
            self.config.base_loc_price + self.config.ai_hype_price_step * s.ai_hype
        ) * s.loc_price_multiplier
