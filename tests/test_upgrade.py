"""Tests for upgrade module."""
from decimal import Decimal

from locidle.effect import Effect, EffectType
from locidle.requirement import Requirement
from locidle.upgrade import UpgradeDef, default_catalog, validate_catalog


def test_default_catalog_order():
    names = [u.name for u in default_catalog()]
    assert names == ["Open nano", "Drink Coffee", "Learn Rust", "Switch to Vim"]


def test_default_catalog_thresholds():
    thresholds = [u.requirements[0].threshold for u in default_catalog()]
    assert thresholds == [10, 20, 100, 1000]
    assert all(u.requirements[0].field == "locs" for u in default_catalog())


def test_default_catalog_is_valid():
    assert validate_catalog(default_catalog()) == []


def test_learn_rust_effects():
    rust = default_catalog()[2]
    kinds = [e.type for e in rust.effects]
    assert kinds == [
        EffectType.CODER_LEVEL_ADD,
        EffectType.LOC_MULTIPLIER_MULT,
        EffectType.LOC_PRICE_MULTIPLIER_MULT,
    ]
    assert rust.effects[1].value == Decimal("0.5")


def test_catalog_is_fresh_each_call():
    assert default_catalog() == default_catalog()
    assert default_catalog() is not default_catalog()


def test_validate_duplicate_names():
    errors = validate_catalog((UpgradeDef("A"), UpgradeDef("A")))
    assert errors == ["Duplicate upgrade name: 'A'"]


def test_validate_unknown_field_and_operator():
    bad = UpgradeDef(
        "Bad",
        requirements=(Requirement("coffee", "=>", Decimal(1)),),
    )
    errors = validate_catalog((bad,))
    assert len(errors) == 2
    assert "unknown field 'coffee'" in errors[0]
    assert "unknown operator '=>'" in errors[1]


def test_validate_negative_effect():
    bad = UpgradeDef("Bad", effects=(Effect.loc_multiplier(-1),))
    assert "negative effect value" in validate_catalog((bad,))[0]
