from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from locidle._types import Number, compare, to_decimal

if TYPE_CHECKING:
    from locidle.state import GameState

# GameState attributes a requirement may inspect
QUANTITY_FIELDS = frozenset({
    "locs",
    "available_funds",
    "coders",
    "coder_level",
    "ai_hype",
    "loc_per_sec",
    "loc_price",
})


@dataclass(frozen=True)
class Requirement:
    """A boolean condition on one GameState quantity, held as plain data."""

    field: str
    op: str
    threshold: Decimal

    def evaluate(self, state: GameState) -> bool:
        return compare(getattr(state, self.field), self.op, self.threshold)

    def describe(self) -> str:
        return f"{self.field} {self.op} {self.threshold}"


class Req:
    """Factory for the built-in requirement kinds."""

    @staticmethod
    def locs(op: str, threshold: Number) -> Requirement:
        return Requirement("locs", op, to_decimal(threshold))

    @staticmethod
    def funds(op: str, threshold: Number) -> Requirement:
        return Requirement("available_funds", op, to_decimal(threshold))

    @staticmethod
    def coders(op: str, threshold: Number) -> Requirement:
        return Requirement("coders", op, to_decimal(threshold))

    @staticmethod
    def coder_level(op: str, threshold: Number) -> Requirement:
        return Requirement("coder_level", op, to_decimal(threshold))

    @staticmethod
    def ai_hype(op: str, threshold: Number) -> Requirement:
        return Requirement("ai_hype", op, to_decimal(threshold))


def all_met(requirements: tuple[Requirement, ...], state: GameState) -> bool:
    return all(r.evaluate(state) for r in requirements)
