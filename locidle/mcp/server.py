"""MCP server wrapping GameRuntime for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from mcp.server.fastmcp import FastMCP

from locidle.config import GameConfig
from locidle.effect import describe_effect
from locidle.events import AiHype, HireCoder, Tick, Upgrade, WriteCode
from locidle.runtime import GameRuntime, ManualClock
from locidle.view import build_view

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per write_code() call
_MAX_CLICKS = 1000


@dataclass
class _GameHolder:
    """Holds the active config, clock and runtime."""

    config: GameConfig
    clock: ManualClock = field(default_factory=ManualClock)
    runtime: GameRuntime | None = None

    def __post_init__(self) -> None:
        if self.runtime is None:
            self.runtime = GameRuntime(self.config, clock=self.clock)


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    return {
        "name": holder.config.name,
        "config": holder.config.as_dict(),
        "upgrades": [
            {
                "index": i,
                "name": u.name,
                "description": u.description,
                "required": u.required,
                "effects": [describe_effect(e) for e in u.effects],
            }
            for i, u in enumerate(holder.runtime.catalog)
        ],
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    view = build_view(holder.runtime)
    result = asdict(view)
    result.pop("fps")
    result["upgrades_bought"] = holder.runtime.get_state().upgrades_bought()
    result["time_elapsed"] = round(holder.runtime.get_state().total_time, 2)
    return result


def _tool_write_code(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    for _ in range(count):
        holder.runtime.update(WriteCode())
    view = build_view(holder.runtime)
    return {
        "clicks": count,
        "locs": view.locs,
        "available_funds": view.available_funds,
    }


def _tool_hire_coder(holder: _GameHolder) -> dict[str, Any]:
    state = holder.runtime.get_state()
    cost = state.coder_cost
    if not holder.runtime.update(HireCoder()):
        return {"success": False, "reason": f"Cannot afford (cost {cost:.2f})"}
    view = build_view(holder.runtime)
    return {"success": True, "coders": view.coders, "next_cost": view.coder_cost}


def _tool_ai_hype(holder: _GameHolder) -> dict[str, Any]:
    state = holder.runtime.get_state()
    cost = state.ai_hype_cost
    if not holder.runtime.update(AiHype()):
        return {"success": False, "reason": f"Cannot afford (cost {cost:.2f})"}
    view = build_view(holder.runtime)
    return {"success": True, "level": view.ai_hype, "next_cost": view.ai_hype_cost}


def _tool_buy_upgrade(holder: _GameHolder, index: int) -> dict[str, Any]:
    catalog = holder.runtime.catalog
    if not 0 <= index < len(catalog):
        return {"error": f"Unknown upgrade index: {index}"}

    state = holder.runtime.get_state()
    if not state.upgrade_available(index):
        return {"success": False, "reason": "Already purchased"}
    if not holder.runtime.update(Upgrade(index)):
        return {
            "success": False,
            "reason": f"Requirements not met ({catalog[index].required})",
        }
    return {"success": True, "upgrade": catalog[index].name}


def _tool_wait(holder: _GameHolder, seconds: float) -> dict[str, Any]:
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    # Subdivide into 1-second ticks
    remaining = seconds
    while remaining > 0:
        dt = min(1.0, remaining)
        holder.clock.advance(dt)
        holder.runtime.update(Tick())
        remaining -= dt

    view = build_view(holder.runtime)
    return {
        "waited": seconds,
        "time_elapsed": round(holder.runtime.get_state().total_time, 2),
        "locs": view.locs,
        "available_funds": view.available_funds,
        "loc_per_sec": view.loc_per_sec,
        "loc_price": view.loc_price,
    }


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.clock = ManualClock()
    holder.runtime = GameRuntime(holder.config, clock=holder.clock)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(config: GameConfig | None = None) -> FastMCP:
    """Create an MCP server wrapping a GameRuntime for the given config."""
    holder = _GameHolder(config=config if config is not None else GameConfig())

    mcp = FastMCP(name=f"LOC Idle: {holder.config.name}")

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: constants and the upgrade catalog."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current game state snapshot: LOC, funds, rates, costs, upgrades, time."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def write_code(count: int = 1) -> dict[str, Any]:
        """Write N lines of code by hand (max 1000). Each sells at the current price."""
        return _tool_write_code(holder, count)

    @mcp.tool()
    def hire_coder() -> dict[str, Any]:
        """Hire one coder if affordable."""
        return _tool_hire_coder(holder)

    @mcp.tool()
    def ai_hype() -> dict[str, Any]:
        """Buy one AI hype level if affordable. Raises the price per LOC."""
        return _tool_ai_hype(holder)

    @mcp.tool()
    def buy_upgrade(index: int) -> dict[str, Any]:
        """Buy the upgrade at the given catalog index."""
        return _tool_buy_upgrade(holder, index)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400), in 1s ticks."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
