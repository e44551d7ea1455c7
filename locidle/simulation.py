from __future__ import annotations

import logging
import math
from decimal import Decimal

from locidle.config import GameConfig
from locidle.events import AiHype, Event, HireCoder, Tick, Upgrade, WriteCode
from locidle.report import PurchaseEvent, Sample, SimulationReport, build_report
from locidle.runtime import GameRuntime, ManualClock
from locidle.strategy import Strategy
from locidle.upgrade import UpgradeDef
from locidle.view import build_view

logger = logging.getLogger(__name__)

MAX_PURCHASES_PER_STEP = 10_000


class Simulation:
    """Runs a GameRuntime headlessly on a manual clock."""

    def __init__(
        self,
        strategy: Strategy,
        duration: float,
        tick_resolution: float = 1.0,
        config: GameConfig | None = None,
        catalog: tuple[UpgradeDef, ...] | None = None,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be positive, got {tick_resolution}")
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration}")

        self.strategy = strategy
        self.duration = duration
        self.tick_resolution = tick_resolution
        self.clock = ManualClock()
        self.runtime = GameRuntime(config, catalog, clock=self.clock)

        self._click_credit = 0.0
        self._samples: list[Sample] = []
        self._purchases: list[PurchaseEvent] = []
        self._upgrade_times: dict[str, float] = {}

    def run(self) -> SimulationReport:
        logger.info(
            "Simulating %.1fs with %s", self.duration, self.strategy.describe()
        )
        self._record_sample()

        steps = math.ceil(self.duration / self.tick_resolution)
        for step in range(1, steps + 1):
            target = min(step * self.tick_resolution, self.duration)
            dt = target - self.clock.now
            self.clock.now = target

            # 1. Idle production
            self.runtime.update(Tick())

            # 2. Clicks, carrying fractional clicks over to the next step
            self._click_credit += self.strategy.clicks_per_second * dt
            clicks = int(self._click_credit)
            self._click_credit -= clicks
            for _ in range(clicks):
                self.runtime.update(WriteCode())

            # 3. Purchases
            self._run_purchases()

            # 4. Record metrics
            self._record_sample()

        return build_report(
            strategy_description=self.strategy.describe(),
            total_time=self.clock.now,
            samples=self._samples,
            purchases=self._purchases,
            upgrade_times=self._upgrade_times,
            final_view=build_view(self.runtime),
        )

    def _run_purchases(self) -> None:
        for _ in range(MAX_PURCHASES_PER_STEP):
            bought = False
            for event in self.strategy.decide(self.runtime):
                action, cost = self._describe_purchase(event)
                if self.runtime.update(event):
                    bought = True
                    self._purchases.append(PurchaseEvent(self.clock.now, action, cost))
                    if isinstance(event, Upgrade):
                        self._upgrade_times[self.runtime.catalog[event.index].name] = (
                            self.clock.now
                        )
            if not bought:
                return
        logger.warning("Purchase limit reached at t=%.1fs", self.clock.now)

    def _describe_purchase(self, event: Event) -> tuple[str, Decimal]:
        s = self.runtime.get_state()
        if isinstance(event, HireCoder):
            return "hire_coder", s.coder_cost
        if isinstance(event, AiHype):
            return "ai_hype", s.ai_hype_cost
        if isinstance(event, Upgrade):
            return f"upgrade:{self.runtime.catalog[event.index].name}", Decimal(0)
        return type(event).__name__, Decimal(0)

    def _record_sample(self) -> None:
        s = self.runtime.get_state()
        self._samples.append(
            Sample(
                time=self.clock.now,
                locs=s.locs,
                available_funds=s.available_funds,
                loc_per_sec=s.loc_per_sec,
                loc_price=s.loc_price,
            )
        )
