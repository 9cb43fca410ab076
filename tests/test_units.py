# tests/test_units.py

import itertools

import pytest

from core.units import LENGTH, Unit, UnitRegistry, conversion_factor, convert

MIL = LENGTH.find_by_symbol("mil")
MM = LENGTH.find_by_symbol("mm")


def test_length_table_order_and_symbols():
    assert LENGTH.symbols() == ["mil", "mm", "m", "cm", "in", "ft", "yd", "km", "μm"]
    assert all(u.to_base > 0 for u in LENGTH)


def test_mil_to_mm():
    assert convert(1, MIL, MM) == pytest.approx(0.0254)


def test_meters_to_kilometers():
    m, km = LENGTH.find_by_symbol("m"), LENGTH.find_by_symbol("km")
    assert convert(1000, m, km) == pytest.approx(1.0)


@pytest.mark.parametrize("unit", list(LENGTH), ids=lambda u: u.symbol)
def test_identity_conversion(unit):
    assert convert(123.456, unit, unit) == pytest.approx(123.456, rel=1e-12)


def test_round_trip_every_pair():
    for a, b in itertools.permutations(LENGTH, 2):
        there = convert(7.25, a, b)
        assert convert(there, b, a) == pytest.approx(7.25, rel=1e-12), (a.symbol, b.symbol)


def test_conversion_factor_matches_convert():
    assert conversion_factor(MIL, MM) == pytest.approx(0.0254)
    assert conversion_factor(MIL, MM) == convert(1, MIL, MM)


def test_find_by_symbol_miss_returns_none():
    assert LENGTH.find_by_symbol("mm").name == "Millimeter"
    assert LENGTH.find_by_symbol("MM") is None
    assert LENGTH.find_by_symbol("furlong") is None


def test_get_falls_back_to_first_or_default(caplog):
    assert LENGTH.get("furlong").symbol == "mil"
    assert LENGTH.get("furlong", MM).symbol == "mm"
    assert "furlong" in caplog.text


def test_get_known_symbol_does_not_warn(caplog):
    assert LENGTH.get("yd").name == "Yard"
    assert caplog.text == ""


def test_shortcut_units_are_first_eight():
    shortcuts = LENGTH.shortcut_units()
    assert len(shortcuts) == 8
    assert [u.symbol for u in shortcuts] == LENGTH.symbols()[:8]
    assert "μm" not in [u.symbol for u in shortcuts]


def test_registry_rejects_duplicate_symbol():
    with pytest.raises(ValueError, match="Duplicate"):
        UnitRegistry([Unit("Meter", "m", 1.0), Unit("Metre", "m", 1.0)], base_symbol="m")


@pytest.mark.parametrize("factor", [0.0, -1.0])
def test_registry_rejects_non_positive_factor(factor):
    with pytest.raises(ValueError, match="positive"):
        UnitRegistry([Unit("Meter", "m", 1.0), Unit("Bad", "x", factor)], base_symbol="m")


def test_registry_requires_base_unit():
    with pytest.raises(ValueError, match="Base unit"):
        UnitRegistry([Unit("Foot", "ft", 0.3048)], base_symbol="m")


def test_registry_rejects_empty():
    with pytest.raises(ValueError):
        UnitRegistry([], base_symbol="m")
