"""
Unit tests for the deviation / impact calculator.
Pure functions, no mocks needed.
"""

import math
from types import SimpleNamespace

import pytest

from econova.domain.metrics import (
    ImpactFigures,
    WasteQuantities,
    aggregate_impact,
    derive_fields,
    diversion_rate,
    effective_impact,
    estimate_impact,
    observation_impact,
    paper_cardboard_kg,
    round_half_up,
    total_waste,
)


def make_observation(**fields):
    values = dict(
        organic_waste=0.0,
        inorganic_waste=0.0,
        recyclable_waste=0.0,
        poda_waste=None,
        total_waste=0.0,
        deviation=0.0,
        trees_saved=None,
        water_saved=None,
        energy_saved=None,
        raw_data=None,
    )
    values.update(fields)
    return SimpleNamespace(**values)


def test_hotel_month_total_and_diversion():
    quantities = WasteQuantities.of(6874.20, 3745.18, 569.05, 0)

    assert total_waste(quantities) == 11188.43
    assert diversion_rate(quantities) == 5.09


def test_only_recyclable_is_fully_diverted():
    assert diversion_rate(WasteQuantities.of(0, 0, 100, 0)) == 100.0


def test_all_zero_yields_zero_rate():
    assert diversion_rate(WasteQuantities.of(0, 0, 0, 0)) == 0.0
    assert total_waste(WasteQuantities()) == 0.0


def test_missing_poda_treated_as_zero():
    with_none = WasteQuantities.of(10, 10, 5, None)
    with_zero = WasteQuantities.of(10, 10, 5, 0)

    assert diversion_rate(with_none) == diversion_rate(with_zero) == 20.0


def test_poda_counts_as_diverted():
    quantities = WasteQuantities.of(40, 60, 0, 20)

    assert total_waste(quantities) == 120.0
    assert diversion_rate(quantities) == 16.67


def test_rate_stays_within_bounds():
    for quantities in [
        WasteQuantities.of(1e-9, 0, 1e9, 0),
        WasteQuantities.of(1e9, 1e9, 1e-9, 0),
        WasteQuantities.of(3, 7, 11, 13),
    ]:
        assert 0.0 <= diversion_rate(quantities) <= 100.0


@pytest.mark.parametrize(
    "quantities",
    [
        WasteQuantities(organic=-1.0),
        WasteQuantities(recyclable=math.nan),
        WasteQuantities(poda=math.inf),
    ],
)
def test_invalid_quantities_rejected(quantities):
    with pytest.raises(ValueError):
        diversion_rate(quantities)


def test_round_half_up_rounds_ties_away_from_zero():
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(0.5) == 1.0
    assert round_half_up(2.5) == 3.0
    assert round_half_up(0.125, 2) == 0.13


def test_paper_cardboard_read_from_raw_data():
    assert paper_cardboard_kg({"recyclableDetails": {"paperCardboard": 120.5}}) == 120.5
    assert paper_cardboard_kg({"recyclableDetails": {}}) == 0.0
    assert paper_cardboard_kg({"recyclableDetails": {"paperCardboard": "lots"}}) == 0.0
    assert paper_cardboard_kg(None) == 0.0


def test_estimate_impact_factors():
    # 1 t paper, 2 t poda, 3 t recyclable
    impact = estimate_impact(WasteQuantities.of(0, 0, 3000, 2000), paper_kg=1000)

    assert impact.trees_saved == 17 + 4
    assert impact.water_saved == 26000 + 10000
    assert impact.energy_saved == (3 + 1) * 500


def test_measured_values_override_estimate_per_metric():
    estimate = ImpactFigures(trees_saved=10, water_saved=20, energy_saved=30)

    impact = effective_impact(estimate, trees_saved=0.0, energy_saved=99)

    assert impact.trees_saved == 0.0
    assert impact.water_saved == 20
    assert impact.energy_saved == 99


def test_observation_impact_uses_estimate_when_not_measured():
    observation = make_observation(
        recyclable_waste=30.0, raw_data={"recyclableDetails": {"paperCardboard": 10.0}}
    )

    impact = observation_impact(observation)

    assert impact.water_saved == 260
    assert impact.energy_saved == 15


def test_derive_fields_reports_only_stale_columns():
    current = make_observation(
        organic_waste=40.0, inorganic_waste=60.0, poda_waste=20.0,
        total_waste=120.0, deviation=16.67,
    )
    legacy = make_observation(
        organic_waste=40.0, inorganic_waste=60.0, poda_waste=20.0,
        total_waste=100.0, deviation=0.0,
    )

    assert derive_fields(current) == {}
    assert derive_fields(legacy) == {"total_waste": 120.0, "deviation": 16.67}


def test_aggregate_impact_sums_measured_and_rounds_estimate_once():
    measured = make_observation(recyclable_waste=1.0, energy_saved=7.0)
    # 1 kg recyclable each -> 0.5 kW unrounded; two of them round once to 1
    estimated_a = make_observation(recyclable_waste=1.0)
    estimated_b = make_observation(recyclable_waste=1.0)

    impact = aggregate_impact([measured, estimated_a, estimated_b])

    assert impact.energy_saved == 7.0 + 1.0
