from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import TYPE_CHECKING

from locidle._types import Number, to_decimal

if TYPE_CHECKING:
    from locidle.state import GameState


class EffectType(Enum):
    CODER_LEVEL_ADD = auto()
    LOC_MULTIPLIER_MULT = auto()
    LOC_PRICE_MULTIPLIER_MULT = auto()


@dataclass(frozen=True)
class EffectDef:
    """A single change an upgrade makes to the game state."""

    type: EffectType
    value: Decimal


def apply_effect(state: GameState, effect: EffectDef) -> None:
    """Apply one effect to *state* in place."""
    if effect.type is EffectType.CODER_LEVEL_ADD:
        state.coder_level += effect.value
    elif effect.type is EffectType.LOC_MULTIPLIER_MULT:
        state.loc_multiplier *= effect.value
    elif effect.type is EffectType.LOC_PRICE_MULTIPLIER_MULT:
        state.loc_price_multiplier *= effect.value
    else:
        raise ValueError(f"Unhandled effect type: {effect.type!r}")


def describe_effect(effect: EffectDef) -> str:
    if effect.type is EffectType.CODER_LEVEL_ADD:
        return f"coder level +{effect.value}"
    if effect.type is EffectType.LOC_MULTIPLIER_MULT:
        return f"LOC/s x{effect.value}"
    return f"LOC price x{effect.value}"


class Effect:
    """Convenience constructors for the effect kinds."""

    @staticmethod
    def coder_level(amount: Number) -> EffectDef:
        return EffectDef(EffectType.CODER_LEVEL_ADD, to_decimal(amount))

    @staticmethod
    def loc_multiplier(factor: Number) -> EffectDef:
        return EffectDef(EffectType.LOC_MULTIPLIER_MULT, to_decimal(factor))

    @staticmethod
    def price_multiplier(factor: Number) -> EffectDef:
        return EffectDef(EffectType.LOC_PRICE_MULTIPLIER_MULT, to_decimal(factor))
