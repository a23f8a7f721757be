"""
Source Document Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RegisterDocumentCommand(BaseModel):
    """
    Metadata of an uploaded source file.

    Parsing happens outside this service; processing_error carries its
    outcome when the file could not be imported.
    """

    file_name: str = Field(min_length=1, max_length=255)
    file_size: int = Field(default=0, ge=0)
    processed: bool = False
    processing_error: Optional[str] = None


class DocumentView(BaseModel):
    id: str
    tenant_id: str
    file_name: str
    file_size: int
    processed: bool
    processing_error: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, document) -> "DocumentView":
        return cls(
            id=str(document.id),
            tenant_id=str(document.tenant_id),
            file_name=document.file_name,
            file_size=document.file_size,
            processed=document.processed,
            processing_error=document.processing_error,
            created_at=document.created_at,
        )
