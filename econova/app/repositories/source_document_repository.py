from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import SourceDocument


class ISourceDocumentRepository(ABC):
    """SourceDocument repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID, document_id: UUID) -> Optional[SourceDocument]:
        """Get a document; None when missing or owned by another tenant"""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: UUID) -> List[SourceDocument]:
        """List a tenant's documents newest first"""
        pass

    @abstractmethod
    async def create(self, document: SourceDocument) -> SourceDocument:
        pass
