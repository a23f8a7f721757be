"""
Use Case: Register Source Document

Records the metadata of a tenant's source file so observations can
reference it through document_id.
"""

import logging
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import Alert, AlertType, SourceDocument
from econova.libs.result import Error, Result, Return

from .dtos import DocumentView, RegisterDocumentCommand

logger = logging.getLogger(__name__)


class RegisterDocumentUseCase:
    """
    Register Source Document Use Case

    Business Logic:
    1. Reject a blank file name
    2. Create the SourceDocument row for the tenant
    3. When processing failed, mark the document processed and raise an
       error Alert linked to it
    4. Commit once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: RegisterDocumentCommand
    ) -> Result[DocumentView]:
        file_name = command.file_name.strip()
        if not file_name:
            return Return.err(Error("VALIDATION_ERROR", "file_name is required"))

        async with self.uow:
            document = await self.uow.source_documents.create(
                SourceDocument(
                    tenant_id=tenant_id,
                    file_name=file_name,
                    file_size=command.file_size,
                    processed=command.processed or command.processing_error is not None,
                    processing_error=command.processing_error,
                )
            )

            if command.processing_error is not None:
                logger.warning(
                    f"Document {file_name} of tenant {tenant_id} failed processing: "
                    f"{command.processing_error}"
                )
                await self.uow.alerts.create(
                    Alert(
                        tenant_id=tenant_id,
                        document_id=document.id,
                        type=AlertType.error.value,
                        message=(
                            f"Error processing document {file_name}: "
                            f"{command.processing_error}"
                        ),
                    )
                )

            await self.uow.commit()
            logger.info(f"Registered document {file_name} (ID: {document.id})")
            return Return.ok(DocumentView.from_entity(document))
