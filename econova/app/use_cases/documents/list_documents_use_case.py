"""
Use Case: List Source Documents
"""

from typing import List
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.libs.result import Result, Return

from .dtos import DocumentView


class ListDocumentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[List[DocumentView]]:
        async with self.uow:
            documents = await self.uow.source_documents.list_by_tenant(tenant_id)
            return Return.ok([DocumentView.from_entity(d) for d in documents])
