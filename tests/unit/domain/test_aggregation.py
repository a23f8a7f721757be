"""
Unit tests for the aggregation engine.
"""

from datetime import datetime
from types import SimpleNamespace

from econova.domain.aggregation import summarize
from econova.domain.entities import WindowKind
from econova.domain.reporting_window import ReportingWindow


def obs(date, organic=0.0, inorganic=0.0, recyclable=0.0, poda=None, **extra):
    values = dict(
        date=date,
        organic_waste=organic,
        inorganic_waste=inorganic,
        recyclable_waste=recyclable,
        poda_waste=poda,
        trees_saved=None,
        water_saved=None,
        energy_saved=None,
        raw_data=None,
    )
    values.update(extra)
    return SimpleNamespace(**values)


def test_empty_window_has_no_months_and_zero_totals():
    window = ReportingWindow.build(WindowKind.quarter, 2025, quarter=1)

    summary = summarize([], window)

    assert summary.months == []
    assert summary.totals.total == 0
    assert summary.totals.diversion_rate == 0
    assert summary.observation_count == 0


def test_months_without_data_are_zero_filled():
    window = ReportingWindow.build(WindowKind.quarter, 2025, quarter=1)

    summary = summarize([obs(datetime(2025, 1, 15), organic=10, recyclable=10)], window)

    assert [m.label for m in summary.months] == ["Jan 2025", "Feb 2025", "Mar 2025"]
    assert summary.months[1].totals.total == 0
    assert summary.months[1].observation_count == 0
    assert summary.months[0].totals.diversion_rate == 50.0


def test_window_rate_recomputed_from_sums_not_averaged():
    window = ReportingWindow.build(WindowKind.quarter, 2025, quarter=1)
    observations = [
        obs(datetime(2025, 1, 5), organic=90, recyclable=10),  # 10%
        obs(datetime(2025, 2, 5), organic=0, recyclable=900),  # 100%
    ]

    summary = summarize(observations, window)

    # (10 + 900) / 1000 = 91%, not the 55% average of monthly rates
    assert summary.totals.diversion_rate == 91.0


def test_monthly_totals_add_up_to_window_totals():
    window = ReportingWindow.build(WindowKind.true_year, 2025)
    observations = [
        obs(datetime(2024, 10, 3), organic=12.5, inorganic=3.2, recyclable=1.1),
        obs(datetime(2025, 2, 14), organic=7.0, poda=4.0),
        obs(datetime(2025, 9, 30, 23, 59), inorganic=1.0, recyclable=2.0),
    ]

    summary = summarize(observations, window)

    for category in ("organic", "inorganic", "recyclable", "poda"):
        monthly = sum(getattr(m.totals, category) for m in summary.months)
        assert abs(monthly - getattr(summary.totals, category)) < 1e-9
    assert sum(m.observation_count for m in summary.months) == 3


def test_category_totals_carry_no_float_noise():
    window = ReportingWindow.build(WindowKind.month, 2025, month=1)
    observations = [
        obs(datetime(2025, 1, 5), organic=0.1),
        obs(datetime(2025, 1, 6), organic=0.2),
    ]

    summary = summarize(observations, window)

    assert summary.months[0].totals.organic == 0.3
    assert summary.totals.organic == 0.3
    assert summary.totals.total == 0.3


def test_monthly_totals_sum_exactly_to_window_total():
    window = ReportingWindow.build(WindowKind.quarter, 2025, quarter=1)
    observations = [
        obs(datetime(2025, 1, 10), organic=0.005),
        obs(datetime(2025, 2, 10), organic=0.005),
    ]

    summary = summarize(observations, window)

    assert [m.totals.total for m in summary.months] == [0.01, 0.01, 0.0]
    assert summary.totals.organic == 0.02
    assert summary.totals.total == 0.02


def test_observations_outside_window_ignored():
    window = ReportingWindow.build(WindowKind.true_year, 2025)
    observations = [
        obs(datetime(2025, 9, 30, 23, 59), organic=1.0),
        obs(datetime(2025, 10, 1), organic=100.0),
    ]

    summary = summarize(observations, window)

    assert summary.observation_count == 1
    assert summary.totals.organic == 1.0
