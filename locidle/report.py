from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from locidle.view import GameView


@dataclass(frozen=True)
class Sample:
    time: float
    locs: Decimal
    available_funds: Decimal
    loc_per_sec: Decimal
    loc_price: Decimal


@dataclass(frozen=True)
class PurchaseEvent:
    time: float
    action: str
    cost: Decimal


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    strategy_description: str = ""
    total_time: float = 0.0
    final_view: GameView | None = None

    # Raw metrics
    samples: list[Sample] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)
    upgrade_times: dict[str, float] = field(default_factory=dict)

    # Derived metrics
    purchase_gaps: list[float] = field(default_factory=list)
    max_purchase_gap: float = 0.0
    mean_purchase_gap: float = 0.0
    purchases_per_minute: float = 0.0

    def series(self, attr: str) -> list[tuple[float, Decimal]]:
        """Return (time, value) series for a sampled quantity."""
        return [(s.time, getattr(s, attr)) for s in self.samples]


def build_report(
    strategy_description: str,
    total_time: float,
    samples: list[Sample],
    purchases: list[PurchaseEvent],
    upgrade_times: dict[str, float],
    final_view: GameView | None = None,
) -> SimulationReport:
    """Build a SimulationReport and its derived metrics."""
    purchase_gaps: list[float] = []
    purchase_times = sorted(p.time for p in purchases)
    if purchase_times:
        purchase_gaps.append(purchase_times[0])  # gap from t=0 to first purchase
        for i in range(1, len(purchase_times)):
            purchase_gaps.append(purchase_times[i] - purchase_times[i - 1])

    max_gap = max(purchase_gaps) if purchase_gaps else 0.0
    mean_gap = (sum(purchase_gaps) / len(purchase_gaps)) if purchase_gaps else 0.0
    ppm = (len(purchases) / total_time * 60.0) if total_time > 0 else 0.0

    return SimulationReport(
        strategy_description=strategy_description,
        total_time=total_time,
        final_view=final_view,
        samples=samples,
        purchases=purchases,
        upgrade_times=upgrade_times,
        purchase_gaps=purchase_gaps,
        max_purchase_gap=max_gap,
        mean_purchase_gap=mean_gap,
        purchases_per_minute=ppm,
    )
