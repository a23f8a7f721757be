"""
Source Document API Routes

Metadata registry of a tenant's imported files. Parsing the files is done
elsewhere; observations reference a document through document_id.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from econova.api.error import ClientError, ServerError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.documents import (
    DocumentView,
    ListDocumentsUseCase,
    RegisterDocumentCommand,
    RegisterDocumentUseCase,
)
from econova.app.use_cases.tenants import TenantContext
from econova.depends import get_tenant_context, get_unit_of_work

router = APIRouter(prefix="/tenants/{slug}/documents", tags=["Documents"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[DocumentView])
async def list_documents(
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListDocumentsUseCase(uow).execute(context.tenant_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DocumentView)
async def register_document(
    command: RegisterDocumentCommand,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Document

    A processing_error marks the document processed and opens an error
    alert for the tenant.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 404 Not Found: TENANT_NOT_FOUND
    """
    result = await RegisterDocumentUseCase(uow).execute(context.tenant_id, command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
