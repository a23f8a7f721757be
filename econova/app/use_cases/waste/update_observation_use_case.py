"""
Use Case: Update Waste Observation

Applies a partial update to an observation owned by the calling tenant and
re-derives total_waste and deviation.
"""

from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import to_naive_utc, utcnow
from econova.domain.metrics import diversion_rate, quantities_of, total_waste
from econova.libs.result import Error, Result, Return

from .dtos import ObservationView, UpdateObservationCommand
from .validation import validate_numbers

IGNORED_FIELDS = {"total_waste", "deviation"}
REQUIRED_FIELDS = ("date", "organic_waste", "inorganic_waste", "recyclable_waste")


class UpdateObservationUseCase:
    """
    Business Rules:
    - An id that does not exist and an id owned by another tenant are
      indistinguishable: both yield OBSERVATION_NOT_FOUND
    - Caller-supplied total_waste / deviation are ignored
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, observation_id: UUID, command: UpdateObservationCommand
    ) -> Result[ObservationView]:
        changes = {
            field: value
            for field, value in command.model_dump(exclude_unset=True).items()
            if field not in IGNORED_FIELDS
        }

        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                return Return.err(
                    Error("VALIDATION_ERROR", f"{field} cannot be null", reason=field)
                )

        error = validate_numbers(changes)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            observation = await self.uow.waste_observations.get_by_id(tenant_id, observation_id)
            if observation is None:
                return Return.err(Error("OBSERVATION_NOT_FOUND", "Waste observation not found"))

            if "date" in changes:
                changes["date"] = to_naive_utc(changes["date"])
            for field, value in changes.items():
                setattr(observation, field, value)

            quantities = quantities_of(observation)
            observation.total_waste = total_waste(quantities)
            observation.deviation = diversion_rate(quantities)
            observation.updated_at = utcnow()

            observation = await self.uow.waste_observations.update(tenant_id, observation)
            await self.uow.commit()

            return Return.ok(ObservationView.from_entity(observation))
