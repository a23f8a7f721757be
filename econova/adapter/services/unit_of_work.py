from sqlmodel.ext.asyncio.session import AsyncSession

from econova.adapter.repositories.alert_repository import AlertRepository
from econova.adapter.repositories.audit_event_repository import AuditEventRepository
from econova.adapter.repositories.feature_flag_repository import FeatureFlagRepository
from econova.adapter.repositories.source_document_repository import SourceDocumentRepository
from econova.adapter.repositories.tenant_repository import TenantRepository
from econova.adapter.repositories.tenant_setting_repository import TenantSettingRepository
from econova.adapter.repositories.waste_observation_repository import (
    WasteObservationRepository,
)
from econova.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.tenant_settings = TenantSettingRepository(self.session)
        self.feature_flags = FeatureFlagRepository(self.session)
        self.waste_observations = WasteObservationRepository(self.session)
        self.source_documents = SourceDocumentRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        self.alerts = AlertRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
