# locidle: LOC Idle, an incremental game about writing code

from locidle._types import compare, to_decimal
from locidle.config import GameConfig
from locidle.requirement import Requirement, Req
from locidle.effect import EffectType, EffectDef, Effect, apply_effect
from locidle.upgrade import UpgradeDef, UpgradeState, default_catalog
from locidle.state import GameState
from locidle.events import Event, Tick, WriteCode, HireCoder, Upgrade, AiHype
from locidle.runtime import GameRuntime, ManualClock
from locidle.view import GameView, UpgradeView, build_view, format_amount
from locidle.strategy import Strategy, GreedyCheapest, ClickOnly
from locidle.simulation import Simulation
from locidle.report import SimulationReport, build_report
from locidle.formatting import format_text_report

__all__ = [
    # Types
    "compare",
    "to_decimal",
    # Config
    "GameConfig",
    # Requirements
    "Requirement",
    "Req",
    # Effects
    "EffectType",
    "EffectDef",
    "Effect",
    "apply_effect",
    # Catalog
    "UpgradeDef",
    "UpgradeState",
    "default_catalog",
    # State
    "GameState",
    # Events
    "Event",
    "Tick",
    "WriteCode",
    "HireCoder",
    "Upgrade",
    "AiHype",
    # Runtime
    "GameRuntime",
    "ManualClock",
    # View
    "GameView",
    "UpgradeView",
    "build_view",
    "format_amount",
    # Simulation
    "Strategy",
    "GreedyCheapest",
    "ClickOnly",
    "Simulation",
    "SimulationReport",
    "build_report",
    "format_text_report",
]
