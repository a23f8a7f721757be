"""
Reporting Windows

Every window is a half-open date range [start, end). The TRUE year N runs
from 1 October N-1 up to (excluding) 1 October N; its quarters start in
October, January, April and July.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from .entities.enums import WindowKind

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MIN_YEAR = 1900
MAX_YEAR = 9998


def month_label(year: int, month: int) -> str:
    return f"{MONTH_LABELS[month - 1]} {year}"


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


@dataclass(frozen=True)
class ReportingWindow:
    kind: WindowKind
    year: int
    start: datetime
    end: datetime
    label: str
    quarter: Optional[int] = None
    month: Optional[int] = None

    @classmethod
    def build(
        cls,
        kind: WindowKind,
        year: int,
        quarter: Optional[int] = None,
        month: Optional[int] = None,
    ) -> "ReportingWindow":
        """
        Build a window from its kind and coordinates.

        Raises ValueError when a coordinate required by the kind is missing
        or out of range.
        """
        kind = WindowKind(kind)
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}")

        if kind == WindowKind.month:
            if month is None or not 1 <= month <= 12:
                raise ValueError("month window requires month between 1 and 12")
            first = (year, month)
            span = 1
            label = month_label(year, month)
        elif kind == WindowKind.quarter:
            cls._check_quarter(quarter)
            first = (year, (quarter - 1) * 3 + 1)
            span = 3
            label = f"Q{quarter} {year}"
        elif kind == WindowKind.calendar_year:
            first = (year, 1)
            span = 12
            label = f"Year {year}"
        elif kind == WindowKind.true_year:
            first = (year - 1, 10)
            span = 12
            label = f"TRUE Year Oct {year - 1} - Sep {year}"
        else:
            cls._check_quarter(quarter)
            first = _shift_month(year - 1, 10, (quarter - 1) * 3)
            span = 3
            last = _shift_month(*first, span - 1)
            label = (
                f"TRUE Year {year} Q{quarter} "
                f"({month_label(*first)} - {month_label(*last)})"
            )

        after = _shift_month(*first, span)
        return cls(
            kind=kind,
            year=year,
            start=datetime(first[0], first[1], 1),
            end=datetime(after[0], after[1], 1),
            label=label,
            quarter=quarter if kind in (WindowKind.quarter, WindowKind.true_quarter) else None,
            month=month if kind == WindowKind.month else None,
        )

    @staticmethod
    def _check_quarter(quarter: Optional[int]) -> None:
        if quarter is None or not 1 <= quarter <= 4:
            raise ValueError("quarter windows require quarter between 1 and 4")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def months(self) -> List[Tuple[int, int]]:
        return list(self.iter_months())

    def iter_months(self) -> Iterator[Tuple[int, int]]:
        year, month = self.start.year, self.start.month
        while datetime(year, month, 1) < self.end:
            yield year, month
            year, month = _shift_month(year, month, 1)
