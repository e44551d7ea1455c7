"""Tests for config module."""
from decimal import Decimal

from locidle.config import GameConfig


def test_defaults():
    cfg = GameConfig()
    assert cfg.name == "LOC Idle"
    assert cfg.tick_interval_ms == 50
    assert cfg.initial_coder_cost == Decimal("5.0")
    assert cfg.coder_cost_growth == Decimal("1.7")
    assert cfg.base_loc_price == Decimal("0.50")
    assert cfg.ai_hype_price_step == Decimal("1.0")
    assert cfg.initial_ai_hype_cost == 100
    assert cfg.ai_hype_cost_growth == 2
    assert cfg.validate() == []


def test_numeric_fields_coerced_to_decimal():
    cfg = GameConfig(coder_cost_growth=1.7, initial_ai_hype_cost=50, base_loc_price="0.25")
    assert isinstance(cfg.coder_cost_growth, Decimal)
    assert cfg.coder_cost_growth == Decimal("1.7")
    assert cfg.initial_ai_hype_cost == Decimal(50)
    assert cfg.base_loc_price == Decimal("0.25")


def test_validate_reports_each_problem():
    cfg = GameConfig(
        tick_interval_ms=0,
        initial_coder_cost=0,
        ai_hype_cost_growth="0.9",
        base_loc_price=-1,
    )
    errors = cfg.validate()
    assert len(errors) == 4
    assert any("tick_interval_ms" in e for e in errors)
    assert any("initial_coder_cost" in e for e in errors)
    assert any("ai_hype_cost_growth" in e for e in errors)
    assert any("base_loc_price" in e for e in errors)


def test_as_dict_serializes_decimals():
    data = GameConfig().as_dict()
    assert data["coder_cost_growth"] == "1.7"
    assert data["tick_interval_ms"] == 50
    assert data["name"] == "LOC Idle"
