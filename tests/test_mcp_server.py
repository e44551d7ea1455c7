"""Tests for MCP server tool functions."""
from decimal import Decimal

import pytest

from locidle.config import GameConfig
from locidle.mcp.server import (
    _GameHolder,
    _tool_ai_hype,
    _tool_buy_upgrade,
    _tool_get_game_info,
    _tool_get_game_state,
    _tool_hire_coder,
    _tool_new_game,
    _tool_wait,
    _tool_write_code,
    create_server,
)


def _make_holder() -> _GameHolder:
    return _GameHolder(config=GameConfig(name="Test Game"))


# ── get_game_info ────────────────────────────────────────────────────


class TestGetGameInfo:
    def test_returns_expected_structure(self):
        result = _tool_get_game_info(_make_holder())
        assert result["name"] == "Test Game"
        assert result["config"]["initial_coder_cost"] == "5.0"
        assert len(result["upgrades"]) == 4

    def test_upgrade_entries(self):
        upgrades = _tool_get_game_info(_make_holder())["upgrades"]
        assert upgrades[0]["index"] == 0
        assert upgrades[0]["name"] == "Open nano"
        assert upgrades[0]["required"] == "10 LOCs"
        assert upgrades[2]["effects"] == ["coder level +1", "LOC/s x0.5", "LOC price x3"]


# ── get_game_state ───────────────────────────────────────────────────


class TestGetGameState:
    def test_initial(self):
        result = _tool_get_game_state(_make_holder())
        assert result["locs"] == "0"
        assert result["available_funds"] == "0.00"
        assert result["coder_cost"] == "5.00"
        assert result["time_elapsed"] == 0.0
        assert "fps" not in result
        assert len(result["upgrades"]) == 4

    def test_upgrade_entries_are_dicts(self):
        result = _tool_get_game_state(_make_holder())
        assert result["upgrades"][0]["name"] == "Open nano"
        assert result["upgrades"][0]["enabled"] is False

    def test_upgrades_bought(self):
        holder = _make_holder()
        assert _tool_get_game_state(holder)["upgrades_bought"] == 0
        _tool_write_code(holder, 10)
        _tool_buy_upgrade(holder, 0)
        result = _tool_get_game_state(holder)
        assert result["upgrades_bought"] == 1
        assert [u["index"] for u in result["upgrades"]] == [1, 2, 3]


# ── write_code ───────────────────────────────────────────────────────


class TestWriteCode:
    def test_single(self):
        result = _tool_write_code(_make_holder())
        assert result == {"clicks": 1, "locs": "1", "available_funds": "0.50"}

    def test_many(self):
        result = _tool_write_code(_make_holder(), 10)
        assert result["locs"] == "10"
        assert result["available_funds"] == "5.00"

    @pytest.mark.parametrize("count", [0, 1001])
    def test_limits(self, count):
        assert "error" in _tool_write_code(_make_holder(), count)


# ── purchases ────────────────────────────────────────────────────────


class TestPurchases:
    def test_hire_coder_cannot_afford(self):
        result = _tool_hire_coder(_make_holder())
        assert result["success"] is False
        assert "5.00" in result["reason"]

    def test_hire_coder(self):
        holder = _make_holder()
        _tool_write_code(holder, 10)
        result = _tool_hire_coder(holder)
        assert result == {"success": True, "coders": "1", "next_cost": "8.50"}

    def test_ai_hype(self):
        holder = _make_holder()
        holder.runtime.get_state().available_funds = Decimal(150)
        result = _tool_ai_hype(holder)
        assert result == {"success": True, "level": "1", "next_cost": "200.00"}
        assert _tool_ai_hype(holder)["success"] is False

    def test_buy_upgrade(self):
        holder = _make_holder()
        assert _tool_buy_upgrade(holder, 0)["success"] is False
        _tool_write_code(holder, 10)
        result = _tool_buy_upgrade(holder, 0)
        assert result == {"success": True, "upgrade": "Open nano"}
        again = _tool_buy_upgrade(holder, 0)
        assert again == {"success": False, "reason": "Already purchased"}

    def test_buy_upgrade_requirements_reason(self):
        result = _tool_buy_upgrade(_make_holder(), 3)
        assert result["success"] is False
        assert "1000 LOCs" in result["reason"]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_buy_upgrade_bad_index(self, index):
        assert "error" in _tool_buy_upgrade(_make_holder(), index)


# ── wait ─────────────────────────────────────────────────────────────


class TestWait:
    def test_idle_production(self):
        holder = _make_holder()
        _tool_write_code(holder, 10)
        _tool_buy_upgrade(holder, 0)
        _tool_hire_coder(holder)
        result = _tool_wait(holder, 10)
        assert result["waited"] == 10
        assert result["time_elapsed"] == 10.0
        assert result["loc_per_sec"] == "1.00"
        assert result["locs"] == "20"
        assert result["available_funds"] == "5.00"

    def test_fractional(self):
        holder = _make_holder()
        result = _tool_wait(holder, 2.5)
        assert result["time_elapsed"] == 2.5

    @pytest.mark.parametrize("seconds", [0, -5, 86401])
    def test_limits(self, seconds):
        assert "error" in _tool_wait(_make_holder(), seconds)


# ── new_game ─────────────────────────────────────────────────────────


def test_new_game_resets():
    holder = _make_holder()
    _tool_write_code(holder, 10)
    _tool_wait(holder, 5)
    assert _tool_new_game(holder)["success"] is True
    state = _tool_get_game_state(holder)
    assert state["locs"] == "0"
    assert state["time_elapsed"] == 0.0


def test_create_server():
    server = create_server(GameConfig(name="Test Game"))
    assert server.name == "LOC Idle: Test Game"
