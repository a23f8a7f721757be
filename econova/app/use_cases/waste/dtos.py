"""
Waste Record Use Case DTOs

Commands accepted by the waste record store and the read model handed to
presentation and report collaborators.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from econova.domain.metrics import observation_impact


# ============================================================================
# Command DTOs
# ============================================================================


class RecordObservationCommand(BaseModel):
    """
    Record observation command

    total_waste and deviation are accepted for compatibility with older
    clients and ignored: both are recomputed from the categories.
    """

    date: datetime
    organic_waste: Optional[float] = 0.0
    inorganic_waste: Optional[float] = 0.0
    recyclable_waste: Optional[float] = 0.0
    poda_waste: Optional[float] = None
    trees_saved: Optional[float] = None
    water_saved: Optional[float] = None
    energy_saved: Optional[float] = None
    raw_data: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    document_id: Optional[UUID] = None
    total_waste: Optional[float] = None
    deviation: Optional[float] = None


class UpdateObservationCommand(BaseModel):
    """Partial update; only fields explicitly set are applied"""

    date: Optional[datetime] = None
    organic_waste: Optional[float] = None
    inorganic_waste: Optional[float] = None
    recyclable_waste: Optional[float] = None
    poda_waste: Optional[float] = None
    trees_saved: Optional[float] = None
    water_saved: Optional[float] = None
    energy_saved: Optional[float] = None
    raw_data: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    total_waste: Optional[float] = None
    deviation: Optional[float] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ImpactView(BaseModel):
    """Effective impact: measured value when present, estimate otherwise"""

    trees_saved: float
    water_saved: float
    energy_saved: float


class ObservationView(BaseModel):
    id: str
    tenant_id: str
    document_id: Optional[str] = None
    date: datetime
    organic_waste: float
    inorganic_waste: float
    recyclable_waste: float
    poda_waste: Optional[float] = None
    total_waste: float
    deviation: float
    trees_saved: Optional[float] = None
    water_saved: Optional[float] = None
    energy_saved: Optional[float] = None
    impact: ImpactView
    raw_data: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None

    @classmethod
    def from_entity(cls, observation) -> "ObservationView":
        impact = observation_impact(observation)
        return cls(
            id=str(observation.id),
            tenant_id=str(observation.tenant_id),
            document_id=str(observation.document_id) if observation.document_id else None,
            date=observation.date,
            organic_waste=observation.organic_waste or 0.0,
            inorganic_waste=observation.inorganic_waste or 0.0,
            recyclable_waste=observation.recyclable_waste or 0.0,
            poda_waste=observation.poda_waste,
            total_waste=observation.total_waste,
            deviation=observation.deviation,
            trees_saved=observation.trees_saved,
            water_saved=observation.water_saved,
            energy_saved=observation.energy_saved,
            impact=ImpactView(
                trees_saved=impact.trees_saved,
                water_saved=impact.water_saved,
                energy_saved=impact.energy_saved,
            ),
            raw_data=observation.raw_data,
            notes=observation.notes,
        )
