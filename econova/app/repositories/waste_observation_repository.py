from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import WasteObservation


class IWasteObservationRepository(ABC):
    """
    WasteObservation repository interface - application layer

    Every method is scoped by a mandatory tenant_id; there is no query form
    that can return rows of another tenant.
    """

    @abstractmethod
    async def create(self, tenant_id: UUID, observation: WasteObservation) -> WasteObservation:
        """Persist a new observation owned by tenant_id"""
        pass

    @abstractmethod
    async def get_by_id(
        self, tenant_id: UUID, observation_id: UUID
    ) -> Optional[WasteObservation]:
        """Get an observation; None when missing or owned by another tenant"""
        pass

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[WasteObservation]:
        """List observations in [start, end) ordered by (date, id) ascending"""
        pass

    @abstractmethod
    async def list_ids_by_tenant(
        self,
        tenant_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[UUID]:
        """Same ordering and range as list_by_tenant, ids only"""
        pass

    @abstractmethod
    async def update(self, tenant_id: UUID, observation: WasteObservation) -> WasteObservation:
        """Update an observation owned by tenant_id"""
        pass
