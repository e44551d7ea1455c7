from __future__ import annotations

from dataclasses import dataclass

from locidle._types import is_operator
from locidle.effect import Effect, EffectDef
from locidle.requirement import QUANTITY_FIELDS, Req, Requirement


@dataclass(frozen=True)
class UpgradeDef:
    """Static definition of a one-shot upgrade."""

    name: str
    description: str = ""
    required: str = ""
    requirements: tuple[Requirement, ...] = ()
    effects: tuple[EffectDef, ...] = ()


@dataclass
class UpgradeState:
    """Mutable runtime state for an upgrade. Cleared once, on purchase."""

    available: bool = True


def default_catalog() -> tuple[UpgradeDef, ...]:
    return (
        UpgradeDef(
            name="Open nano",
            description="Start writing code",
            required="10 LOCs",
            requirements=(Req.locs(">=", 10),),
            effects=(Effect.coder_level(1),),
        ),
        UpgradeDef(
            name="Drink Coffee",
            description="Each coder writes 5 more LOC/s",
            required="20 LOCs",
            requirements=(Req.locs(">=", 20),),
            effects=(Effect.coder_level(5),),
        ),
        UpgradeDef(
            name="Learn Rust",
            description="Divide LOC/s by 2 but multiply LOC price by 3",
            required="100 LOCs",
            requirements=(Req.locs(">=", 100),),
            effects=(
                Effect.coder_level(1),
                Effect.loc_multiplier("0.5"),
                Effect.price_multiplier(3),
            ),
        ),
        UpgradeDef(
            name="Switch to Vim",
            description="Multiply LOC/s by 2",
            required="1000 LOCs",
            requirements=(Req.locs(">=", 1000),),
            effects=(
                Effect.coder_level(1),
                Effect.loc_multiplier(2),
            ),
        ),
    )


def validate_catalog(catalog: tuple[UpgradeDef, ...]) -> list[str]:
    """Check a catalog for definition errors. Returns list of error messages."""
    errors: list[str] = []

    seen: set[str] = set()
    for u in catalog:
        if u.name in seen:
            errors.append(f"Duplicate upgrade name: {u.name!r}")
        seen.add(u.name)

        for req in u.requirements:
            if req.field not in QUANTITY_FIELDS:
                errors.append(
                    f"Upgrade {u.name!r} has requirement on unknown field {req.field!r}"
                )
            if not is_operator(req.op):
                errors.append(f"Upgrade {u.name!r} uses unknown operator {req.op!r}")

        for eff in u.effects:
            if eff.value < 0:
                errors.append(f"Upgrade {u.name!r} has negative effect value {eff.value}")

    return errors
