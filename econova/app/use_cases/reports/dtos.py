"""
Report Use Case DTOs

Serializable shapes of window summaries, consumed by dashboards and by
the PDF report collaborator.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from econova.app.use_cases.waste.dtos import ImpactView, ObservationView
from econova.domain.aggregation import CategoryTotals, WindowSummary


class WindowRequest(BaseModel):
    """Reporting window coordinates as received from callers"""

    kind: str
    year: int
    quarter: Optional[int] = None
    month: Optional[int] = None


class WindowView(BaseModel):
    kind: str
    year: int
    quarter: Optional[int] = None
    month: Optional[int] = None
    label: str
    start: datetime
    end: datetime


class TotalsView(BaseModel):
    organic: float
    inorganic: float
    recyclable: float
    poda: float
    total: float
    diversion_rate: float

    @classmethod
    def from_totals(cls, totals: CategoryTotals) -> "TotalsView":
        return cls(
            organic=totals.organic,
            inorganic=totals.inorganic,
            recyclable=totals.recyclable,
            poda=totals.poda,
            total=totals.total,
            diversion_rate=totals.diversion_rate,
        )


class MonthView(TotalsView):
    year: int
    month: int
    label: str
    observation_count: int


class WindowSummaryView(BaseModel):
    window: WindowView
    months: List[MonthView]
    totals: TotalsView
    impact: ImpactView
    observation_count: int

    @classmethod
    def from_summary(cls, summary: WindowSummary) -> "WindowSummaryView":
        window = summary.window
        return cls(
            window=WindowView(
                kind=window.kind.value,
                year=window.year,
                quarter=window.quarter,
                month=window.month,
                label=window.label,
                start=window.start,
                end=window.end,
            ),
            months=[
                MonthView(
                    year=month.year,
                    month=month.month,
                    label=month.label,
                    observation_count=month.observation_count,
                    **TotalsView.from_totals(month.totals).model_dump(),
                )
                for month in summary.months
            ],
            totals=TotalsView.from_totals(summary.totals),
            impact=ImpactView(
                trees_saved=summary.impact.trees_saved,
                water_saved=summary.impact.water_saved,
                energy_saved=summary.impact.energy_saved,
            ),
            observation_count=summary.observation_count,
        )


class ReportData(BaseModel):
    """
    Everything the PDF report collaborator renders.

    Observations are already tenant-scoped and carry pre-computed deviation
    and impact figures; the report layer performs no recomputation.
    """

    tenant_name: str
    period_label: str
    observations: List[ObservationView]
    summary: WindowSummaryView
