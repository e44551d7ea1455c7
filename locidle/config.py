from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal

from locidle._types import Number, to_decimal

_DECIMAL_FIELDS = (
    "initial_coder_cost",
    "coder_cost_growth",
    "base_loc_price",
    "ai_hype_price_step",
    "initial_ai_hype_cost",
    "ai_hype_cost_growth",
)


@dataclass
class GameConfig:
    """Named game constants, passed into state and runtime construction."""

    name: str = "LOC Idle"
    tick_interval_ms: int = 50
    initial_coder_cost: Number = Decimal("5.0")
    coder_cost_growth: Number = Decimal("1.7")
    base_loc_price: Number = Decimal("0.50")
    ai_hype_price_step: Number = Decimal("1.0")
    initial_ai_hype_cost: Number = Decimal("100")
    ai_hype_cost_growth: Number = Decimal("2")

    def __post_init__(self) -> None:
        for name in _DECIMAL_FIELDS:
            setattr(self, name, to_decimal(getattr(self, name)))

    def validate(self) -> list[str]:
        """Check for inconsistent constants. Returns list of error messages."""
        errors: list[str] = []

        if self.tick_interval_ms <= 0:
            errors.append(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")

        for name in ("initial_coder_cost", "initial_ai_hype_cost"):
            value = getattr(self, name)
            if value <= 0:
                errors.append(f"{name} must be positive, got {value}")

        # Costs may never shrink after a purchase
        for name in ("coder_cost_growth", "ai_hype_cost_growth"):
            value = getattr(self, name)
            if value < 1:
                errors.append(f"{name} must be at least 1, got {value}")

        for name in ("base_loc_price", "ai_hype_price_step"):
            value = getattr(self, name)
            if value < 0:
                errors.append(f"{name} must not be negative, got {value}")

        return errors

    def as_dict(self) -> dict[str, str | int]:
        result: dict[str, str | int] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = str(value) if isinstance(value, Decimal) else value
        return result
