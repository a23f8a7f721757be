"""
Use Case: Record Waste Observation

Inserts one observation for a tenant. total_waste and deviation are
always recomputed from the supplied categories.
"""

import logging
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import to_naive_utc
from econova.domain.entities import WasteObservation
from econova.domain.metrics import WasteQuantities, diversion_rate, total_waste
from econova.libs.result import Error, Result, Return

from .dtos import ObservationView, RecordObservationCommand
from .validation import validate_numbers

logger = logging.getLogger(__name__)


class RecordObservationUseCase:
    """
    Business Logic:
    1. Reject negative or non-finite quantities (VALIDATION_ERROR)
    2. Verify the source document, if any, belongs to the same tenant
    3. Derive total_waste and deviation, ignoring caller-supplied values
    4. Persist and commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: RecordObservationCommand
    ) -> Result[ObservationView]:
        error = validate_numbers(command.model_dump())
        if error is not None:
            return Return.err(error)

        quantities = WasteQuantities.of(
            command.organic_waste,
            command.inorganic_waste,
            command.recyclable_waste,
            command.poda_waste,
        )

        async with self.uow:
            if command.document_id is not None:
                document = await self.uow.source_documents.get_by_id(
                    tenant_id, command.document_id
                )
                if document is None:
                    return Return.err(Error("DOCUMENT_NOT_FOUND", "Source document not found"))

            observation = WasteObservation(
                tenant_id=tenant_id,
                document_id=command.document_id,
                date=to_naive_utc(command.date),
                organic_waste=quantities.organic,
                inorganic_waste=quantities.inorganic,
                recyclable_waste=quantities.recyclable,
                poda_waste=command.poda_waste,
                total_waste=total_waste(quantities),
                deviation=diversion_rate(quantities),
                trees_saved=command.trees_saved,
                water_saved=command.water_saved,
                energy_saved=command.energy_saved,
                raw_data=command.raw_data,
                notes=command.notes,
            )
            observation = await self.uow.waste_observations.create(tenant_id, observation)
            await self.uow.commit()

            logger.info(
                f"Recorded observation {observation.id} for tenant {tenant_id}: "
                f"total={observation.total_waste} deviation={observation.deviation}"
            )
            return Return.ok(ObservationView.from_entity(observation))
