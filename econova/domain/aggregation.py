"""
Aggregation Engine

Rolls tenant-scoped observations up into per-month and per-window totals.
Rates are always recomputed from summed quantities, never averaged.
Category totals are rounded to 2 decimals per month, and window totals are
sums of the rounded months, so the months always add up to the window.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .metrics import (
    ImpactFigures,
    WasteQuantities,
    aggregate_impact,
    diversion_rate,
    quantities_of,
    round_half_up,
)
from .reporting_window import ReportingWindow, month_label


def rounded(quantities: WasteQuantities) -> WasteQuantities:
    return WasteQuantities(
        organic=round_half_up(quantities.organic, 2),
        inorganic=round_half_up(quantities.inorganic, 2),
        recyclable=round_half_up(quantities.recyclable, 2),
        poda=round_half_up(quantities.poda, 2),
    )


@dataclass(frozen=True)
class CategoryTotals:
    organic: float = 0.0
    inorganic: float = 0.0
    recyclable: float = 0.0
    poda: float = 0.0
    total: float = 0.0
    diversion_rate: float = 0.0

    @classmethod
    def from_quantities(cls, quantities: WasteQuantities) -> "CategoryTotals":
        quantities = rounded(quantities)
        return cls(
            organic=quantities.organic,
            inorganic=quantities.inorganic,
            recyclable=quantities.recyclable,
            poda=quantities.poda,
            total=round_half_up(quantities.total, 2),
            diversion_rate=diversion_rate(quantities),
        )


@dataclass(frozen=True)
class MonthSummary:
    year: int
    month: int
    label: str
    totals: CategoryTotals
    observation_count: int = 0


@dataclass(frozen=True)
class WindowSummary:
    window: ReportingWindow
    months: List[MonthSummary] = field(default_factory=list)
    totals: CategoryTotals = field(default_factory=CategoryTotals)
    impact: ImpactFigures = field(default_factory=ImpactFigures)
    observation_count: int = 0


def summarize(observations: Iterable, window: ReportingWindow) -> WindowSummary:
    """
    Summarize observations over a window.

    Observations outside the window are ignored. When none fall inside, the
    result has no months and zeroed totals; otherwise every month of the
    window is present, zero-filled when it has no observations.
    """
    in_window = [o for o in observations if window.contains(o.date)]
    if not in_window:
        return WindowSummary(window=window)

    by_month: Dict[Tuple[int, int], List] = defaultdict(list)
    for observation in in_window:
        by_month[(observation.date.year, observation.date.month)].append(observation)

    months = []
    window_quantities = WasteQuantities()
    for year, month in window.iter_months():
        bucket = by_month.get((year, month), [])
        quantities = WasteQuantities()
        for observation in bucket:
            quantities = quantities + quantities_of(observation)
        window_quantities = window_quantities + rounded(quantities)
        months.append(
            MonthSummary(
                year=year,
                month=month,
                label=month_label(year, month),
                totals=CategoryTotals.from_quantities(quantities),
                observation_count=len(bucket),
            )
        )

    return WindowSummary(
        window=window,
        months=months,
        totals=CategoryTotals.from_quantities(window_quantities),
        impact=aggregate_impact(in_window),
        observation_count=len(in_window),
    )
