"""
Use Case: Resolve / Reopen Alert
"""

import logging
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import utcnow
from econova.libs.result import Error, Result, Return

from .dtos import AlertView

logger = logging.getLogger(__name__)


class SetAlertResolvedUseCase:
    """
    Business Rules:
    - An alert of another tenant is reported as ALERT_NOT_FOUND
    - Setting the current state again is a no-op that still succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, alert_id: UUID, resolved: bool
    ) -> Result[AlertView]:
        async with self.uow:
            alert = await self.uow.alerts.get_by_id(tenant_id, alert_id)
            if alert is None:
                return Return.err(Error("ALERT_NOT_FOUND", "Alert not found"))

            if alert.resolved != resolved:
                alert.resolved = resolved
                alert.updated_at = utcnow()
                alert = await self.uow.alerts.update(alert)
                await self.uow.commit()
                logger.info(f"Alert {alert_id} {'resolved' if resolved else 'reopened'}")

            return Return.ok(AlertView.from_entity(alert))
