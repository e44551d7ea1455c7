"""Read-only projection of the game state for display."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from locidle.runtime import GameRuntime


def format_amount(value: Decimal, places: int = 2) -> str:
    """Round *value* to *places* decimal places for display.

    Rounds half-even and does not depend on the context precision, so very
    large amounts still render.
    """
    return f"{value:.{places}f}"


@dataclass(frozen=True)
class UpgradeView:
    index: int
    name: str
    description: str
    required: str
    enabled: bool


@dataclass(frozen=True)
class GameView:
    """Display-ready snapshot of a GameRuntime."""

    locs: str
    available_funds: str
    loc_price: str
    revenue_per_sec: str
    ai_hype: str
    ai_hype_cost: str
    loc_per_sec: str
    coders: str
    coder_cost: str
    coder_level: str
    fps: float
    can_hire_coder: bool
    can_buy_ai_hype: bool
    upgrades: tuple[UpgradeView, ...]


def build_view(runtime: GameRuntime) -> GameView:
    s = runtime.get_state()
    upgrades = tuple(
        UpgradeView(
            index=i,
            name=udef.name,
            description=udef.description,
            required=udef.required,
            enabled=runtime.upgrade_enabled(i),
        )
        for i, udef in runtime.visible_upgrades()
    )
    return GameView(
        locs=format_amount(s.locs, 0),
        available_funds=format_amount(s.available_funds),
        loc_price=format_amount(s.loc_price),
        revenue_per_sec=format_amount(s.revenue_per_sec()),
        ai_hype=format_amount(s.ai_hype, 0),
        ai_hype_cost=format_amount(s.ai_hype_cost),
        loc_per_sec=format_amount(s.loc_per_sec),
        coders=format_amount(s.coders, 0),
        coder_cost=format_amount(s.coder_cost),
        coder_level=format_amount(s.coder_level, 0),
        fps=1.0 / s.delta_time if s.delta_time > 0 else 0.0,
        can_hire_coder=runtime.can_hire_coder(),
        can_buy_ai_hype=runtime.can_buy_ai_hype(),
        upgrades=upgrades,
    )
