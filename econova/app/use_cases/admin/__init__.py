"""Admin use cases for batch jobs and audit retrieval."""

from .dtos import AuditEventsResponse, AuditEventView, RecalculationResponse
from .get_audit_events_use_case import GetAuditEventsUseCase
from .recalculate_derived_fields_use_case import RecalculateDerivedFieldsUseCase

__all__ = [
    "AuditEventView",
    "AuditEventsResponse",
    "GetAuditEventsUseCase",
    "RecalculateDerivedFieldsUseCase",
    "RecalculationResponse",
]
