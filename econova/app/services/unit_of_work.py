from abc import ABC, abstractmethod

from econova.app.repositories.alert_repository import IAlertRepository
from econova.app.repositories.audit_event_repository import IAuditEventRepository
from econova.app.repositories.feature_flag_repository import IFeatureFlagRepository
from econova.app.repositories.source_document_repository import ISourceDocumentRepository
from econova.app.repositories.tenant_repository import ITenantRepository
from econova.app.repositories.tenant_setting_repository import ITenantSettingRepository
from econova.app.repositories.waste_observation_repository import (
    IWasteObservationRepository,
)


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    tenant_settings: ITenantSettingRepository
    feature_flags: IFeatureFlagRepository
    waste_observations: IWasteObservationRepository
    source_documents: ISourceDocumentRepository
    audit_events: IAuditEventRepository
    alerts: IAlertRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
