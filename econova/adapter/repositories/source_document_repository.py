from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.source_document_repository import ISourceDocumentRepository
from econova.domain.entities import SourceDocument


class SourceDocumentRepository(ISourceDocumentRepository):
    """SourceDocument repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenant_id: UUID, document_id: UUID) -> Optional[SourceDocument]:
        stmt = select(SourceDocument).where(
            SourceDocument.id == document_id, SourceDocument.tenant_id == tenant_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_tenant(self, tenant_id: UUID) -> List[SourceDocument]:
        stmt = (
            select(SourceDocument)
            .where(SourceDocument.tenant_id == tenant_id)
            .order_by(SourceDocument.created_at.desc(), SourceDocument.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, document: SourceDocument) -> SourceDocument:
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document
