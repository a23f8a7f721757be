"""
Econova Domain Enums

Enumeration types used across domain entities and use cases.
"""

from enum import Enum


class Feature(str, Enum):
    """Catalog of per-tenant optional modules"""

    waste = "module.waste"
    energy = "module.energy"
    water = "module.water"
    circular_economy = "module.circular_economy"

    @classmethod
    def catalog(cls) -> list["Feature"]:
        return list(cls)

    @classmethod
    def parse(cls, value: str) -> "Feature":
        """Parse a feature identifier; raises ValueError for ids outside the catalog"""
        return cls(value)


class WindowKind(str, Enum):
    """Reporting window kinds"""

    month = "month"
    quarter = "quarter"
    calendar_year = "calendar_year"
    true_year = "true_year"
    true_quarter = "true_quarter"


class RecalculationStatus(str, Enum):
    completed = "completed"
    partial_failure = "partial_failure"


class AlertType(str, Enum):
    error = "error"
    warning = "warning"
    info = "info"
