"""Source document registry use cases."""

from .dtos import DocumentView, RegisterDocumentCommand
from .list_documents_use_case import ListDocumentsUseCase
from .register_document_use_case import RegisterDocumentUseCase

__all__ = [
    "DocumentView",
    "ListDocumentsUseCase",
    "RegisterDocumentCommand",
    "RegisterDocumentUseCase",
]
