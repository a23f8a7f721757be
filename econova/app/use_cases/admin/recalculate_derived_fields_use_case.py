"""
Use Case: Recalculate Derived Fields

Brings stored total_waste / deviation of a tenant's observations forward to
the current formula revision. Replaces one-off data-fix scripts.
"""

import logging
from typing import Optional
from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import utcnow
from econova.domain.entities import AuditEvent, RecalculationStatus
from econova.domain.metrics import FORMULA_REVISION, derive_fields
from econova.domain.reporting_window import ReportingWindow
from econova.libs.result import Error, Result, Return

from .dtos import RecalculationResponse

logger = logging.getLogger(__name__)


class RecalculateDerivedFieldsUseCase:
    """
    Recalculate derived fields for one tenant, optionally within a window.

    Business Logic:
    1. Resolve the tenant by slug, deactivated tenants included
    2. Snapshot the ids of the tenant's observations in the window
    3. For each id, re-read the row scoped by tenant and derive its fields
    4. Skip rows whose stored values already match (idempotence)
    5. Write only total_waste / deviation, commit per row (resumable)
    6. A failing row is rolled back, logged and reported; the batch goes on
    7. Create AuditEvent with action=derived_fields_recalculated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, slug: str, window: Optional[ReportingWindow] = None
    ) -> Result[RecalculationResponse]:
        start = window.start if window else None
        end = window.end if window else None

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))
            tenant_id = tenant.id

            observation_ids = await self.uow.waste_observations.list_ids_by_tenant(
                tenant_id, start, end
            )

            updated_ids = []
            failed_ids = []
            unchanged = 0
            for observation_id in observation_ids:
                try:
                    observation = await self.uow.waste_observations.get_by_id(
                        tenant_id, observation_id
                    )
                    if observation is None:
                        continue

                    changes = derive_fields(observation)
                    if not changes:
                        unchanged += 1
                        continue

                    previous = {field: getattr(observation, field) for field in changes}
                    for field, value in changes.items():
                        setattr(observation, field, value)
                    observation.updated_at = utcnow()

                    await self.uow.waste_observations.update(tenant_id, observation)
                    await self.uow.commit()
                    updated_ids.append(str(observation_id))
                    logger.info(
                        f"Observation {observation_id} recalculated: {previous} -> {changes}"
                    )
                except Exception:
                    logger.exception(f"Failed to recalculate observation {observation_id}")
                    await self.uow.rollback()
                    failed_ids.append(str(observation_id))

            status = (
                RecalculationStatus.partial_failure
                if failed_ids
                else RecalculationStatus.completed
            )
            response = RecalculationResponse(
                status=status.value,
                formula_revision=FORMULA_REVISION,
                window=window.label if window else None,
                examined=len(observation_ids),
                updated=len(updated_ids),
                unchanged=unchanged,
                updated_ids=updated_ids,
                failed_ids=failed_ids,
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    action="derived_fields_recalculated",
                    event_metadata=response.model_dump(exclude={"updated_ids"}),
                )
            )
            await self.uow.commit()

            logger.info(
                f"Recalculation for tenant {tenant_id}: examined={response.examined} "
                f"updated={response.updated} unchanged={response.unchanged} "
                f"failed={len(failed_ids)}"
            )
            return Return.ok(response)
