"""
Deviation / Environmental Impact Calculator

Pure derivation functions: raw waste quantities (kg) -> total waste,
landfill diversion rate and environmental-impact estimates. No I/O.

Formula history:
- Revision 1: diversion = recyclable / (organic + inorganic + recyclable)
- Revision 2: poda (pruning waste) is diverted material on par with
  recyclables and enters both numerator and denominator

Only the current revision is ever computed; records derived under an older
revision are brought forward by the recalculation job.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

FORMULA_REVISION = 2

# Impact conversion factors, per metric ton
TREES_PER_TON_PAPER = 17
TREES_PER_TON_PODA = 2
WATER_LITERS_PER_TON_PAPER = 26000
WATER_LITERS_PER_TON_PODA = 5000
ENERGY_KW_PER_TON_RECYCLABLE = 500
PODA_RECYCLABLE_EQUIVALENCE = 0.5


@dataclass(frozen=True)
class WasteQuantities:
    organic: float = 0.0
    inorganic: float = 0.0
    recyclable: float = 0.0
    poda: float = 0.0

    @classmethod
    def of(
        cls,
        organic: Optional[float] = None,
        inorganic: Optional[float] = None,
        recyclable: Optional[float] = None,
        poda: Optional[float] = None,
    ) -> "WasteQuantities":
        """Build quantities treating missing (None) categories as 0."""
        return cls(
            organic=organic or 0.0,
            inorganic=inorganic or 0.0,
            recyclable=recyclable or 0.0,
            poda=poda or 0.0,
        )

    def __add__(self, other: "WasteQuantities") -> "WasteQuantities":
        return WasteQuantities(
            organic=self.organic + other.organic,
            inorganic=self.inorganic + other.inorganic,
            recyclable=self.recyclable + other.recyclable,
            poda=self.poda + other.poda,
        )

    @property
    def landfill_bound(self) -> float:
        return self.organic + self.inorganic

    @property
    def diverted(self) -> float:
        return self.recyclable + self.poda

    @property
    def total(self) -> float:
        return self.landfill_bound + self.diverted


@dataclass(frozen=True)
class ImpactFigures:
    trees_saved: float = 0
    water_saved: float = 0
    energy_saved: float = 0


def round_half_up(value: float, digits: int = 0) -> float:
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def validate_quantities(quantities: WasteQuantities) -> None:
    """Raise ValueError for negative or non-finite quantities."""
    for name in ("organic", "inorganic", "recyclable", "poda"):
        value = getattr(quantities, name)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"{name} must be a number")
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite")
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def total_waste(quantities: WasteQuantities) -> float:
    validate_quantities(quantities)
    return round_half_up(quantities.total, 2)


def diversion_rate(quantities: WasteQuantities) -> float:
    """
    Percentage of the total diverted from landfill, rounded to 2 decimals.

    All-zero input yields 0. When organic and inorganic are both 0 but
    something was diverted, the ratio is naturally 100.
    """
    validate_quantities(quantities)
    total = quantities.total
    if total == 0:
        return 0.0
    return round_half_up(quantities.diverted / total * 100, 2)


def paper_cardboard_kg(raw_data: Optional[Mapping[str, Any]]) -> float:
    """Paper/cardboard sub-split of the recyclable fraction, 0 when absent."""
    if not raw_data:
        return 0.0
    details = raw_data.get("recyclableDetails")
    if not isinstance(details, Mapping):
        return 0.0
    value = details.get("paperCardboard")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def _unrounded_estimate(quantities: WasteQuantities, paper_kg: float) -> tuple:
    effective_recyclable = (
        quantities.recyclable + quantities.poda * PODA_RECYCLABLE_EQUIVALENCE
    )
    return (
        paper_kg / 1000 * TREES_PER_TON_PAPER
        + quantities.poda / 1000 * TREES_PER_TON_PODA,
        paper_kg / 1000 * WATER_LITERS_PER_TON_PAPER
        + quantities.poda / 1000 * WATER_LITERS_PER_TON_PODA,
        effective_recyclable / 1000 * ENERGY_KW_PER_TON_RECYCLABLE,
    )


def estimate_impact(quantities: WasteQuantities, paper_kg: float = 0.0) -> ImpactFigures:
    validate_quantities(quantities)
    if paper_kg < 0 or not math.isfinite(paper_kg):
        raise ValueError("paper_kg must be a finite, non-negative number")
    trees, water, energy = _unrounded_estimate(quantities, paper_kg)
    return ImpactFigures(
        trees_saved=round_half_up(trees),
        water_saved=round_half_up(water),
        energy_saved=round_half_up(energy),
    )


def effective_impact(
    estimate: ImpactFigures,
    trees_saved: Optional[float] = None,
    water_saved: Optional[float] = None,
    energy_saved: Optional[float] = None,
) -> ImpactFigures:
    """Measured values win over the estimate, metric by metric."""
    return ImpactFigures(
        trees_saved=estimate.trees_saved if trees_saved is None else trees_saved,
        water_saved=estimate.water_saved if water_saved is None else water_saved,
        energy_saved=estimate.energy_saved if energy_saved is None else energy_saved,
    )


def quantities_of(observation: Any) -> WasteQuantities:
    return WasteQuantities.of(
        observation.organic_waste,
        observation.inorganic_waste,
        observation.recyclable_waste,
        observation.poda_waste,
    )


def observation_impact(observation: Any) -> ImpactFigures:
    estimate = estimate_impact(
        quantities_of(observation), paper_cardboard_kg(observation.raw_data)
    )
    return effective_impact(
        estimate,
        trees_saved=observation.trees_saved,
        water_saved=observation.water_saved,
        energy_saved=observation.energy_saved,
    )


def derive_fields(observation: Any) -> dict:
    """
    Derived columns whose stored value differs from the current formula.

    An empty dict means the observation has converged.
    """
    quantities = quantities_of(observation)
    derived = {
        "total_waste": total_waste(quantities),
        "deviation": diversion_rate(quantities),
    }
    return {
        field: value
        for field, value in derived.items()
        if getattr(observation, field) != value
    }


def aggregate_impact(observations: list) -> ImpactFigures:
    """
    Impact of a set of observations.

    Per metric, measured values are summed as-is; the estimate over the
    remaining observations' quantities is added and rounded once.
    """
    measured = {"trees_saved": 0.0, "water_saved": 0.0, "energy_saved": 0.0}
    pending = {name: (WasteQuantities(), 0.0) for name in measured}
    for observation in observations:
        quantities = quantities_of(observation)
        paper = paper_cardboard_kg(observation.raw_data)
        for name in measured:
            value = getattr(observation, name)
            if value is not None:
                measured[name] += value
            else:
                summed, summed_paper = pending[name]
                pending[name] = (summed + quantities, summed_paper + paper)

    estimates = {}
    for index, name in enumerate(measured):
        quantities, paper = pending[name]
        estimates[name] = round_half_up(_unrounded_estimate(quantities, paper)[index])

    return ImpactFigures(
        trees_saved=measured["trees_saved"] + estimates["trees_saved"],
        water_saved=measured["water_saved"] + estimates["water_saved"],
        energy_saved=measured["energy_saved"] + estimates["energy_saved"],
    )
