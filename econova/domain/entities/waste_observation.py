"""
WasteObservation Entity

One raw waste measurement of a tenant plus its server-derived fields.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class WasteObservation(SQLModel, table=True):
    """
    WasteObservation entity - raw quantities (kg) for one date.

    Business Rules:
    - tenant_id scopes every read and write
    - total_waste and deviation are always recomputed server-side
    - poda_waste is NULL on records created before the poda category existed
      and counts as 0 everywhere downstream
    - trees_saved / water_saved / energy_saved hold measured values only;
      estimates are computed at read time
    """

    __tablename__ = "waste_observations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False)
    document_id: Optional[UUID] = Field(
        default=None, foreign_key="source_documents.id", nullable=True
    )

    date: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Raw quantities
    organic_waste: float = Field(default=0.0)
    inorganic_waste: float = Field(default=0.0)
    recyclable_waste: float = Field(default=0.0)
    poda_waste: Optional[float] = Field(default=None)

    # Derived
    total_waste: float = Field(default=0.0)
    deviation: float = Field(default=0.0)

    # Measured impact
    trees_saved: Optional[float] = Field(default=None)
    water_saved: Optional[float] = Field(default=None)
    energy_saved: Optional[float] = Field(default=None)

    raw_data: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_waste_observation_tenant_date", "tenant_id", "date"),
    )
