from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from locidle.upgrade import UpgradeState

if TYPE_CHECKING:
    from locidle.config import GameConfig
    from locidle.upgrade import UpgradeDef


class GameState:
    """Mutable runtime container holding all game state."""

    def __init__(
        self,
        config: GameConfig,
        catalog: tuple[UpgradeDef, ...],
        start_time: float = 0.0,
    ) -> None:
        self.locs = Decimal(0)
        self.available_funds = Decimal(0)
        self.coders = Decimal(0)
        self.coder_level = Decimal(0)
        self.coder_cost: Decimal = config.initial_coder_cost
        self.ai_hype = Decimal(0)
        self.ai_hype_cost: Decimal = config.initial_ai_hype_cost
        self.loc_price: Decimal = config.base_loc_price
        self.loc_per_sec = Decimal(0)
        self.loc_per_sec_base = Decimal(0)
        self.loc_multiplier = Decimal(1)
        self.loc_price_multiplier = Decimal(1)
        self.upgrades: list[UpgradeState] = [UpgradeState() for _ in catalog]

        # Time cursor, in clock seconds
        self.last_time: float = start_time
        self.delta_time: float = 0.0
        self.total_time: float = 0.0

    def revenue_per_sec(self) -> Decimal:
        return self.loc_per_sec * self.loc_price

    def upgrade_available(self, index: int) -> bool:
        return self.upgrades[index].available

    def upgrades_bought(self) -> int:
        return sum(1 for u in self.upgrades if not u.available)
