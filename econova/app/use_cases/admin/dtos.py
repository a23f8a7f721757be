"""
Admin Use Case DTOs
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class RecalculationResponse(BaseModel):
    """
    Result of a derived-field recalculation pass.

    status is "partial_failure" when at least one row failed; the rows in
    failed_ids kept their previous values and can be retried by re-running.
    """

    status: str
    formula_revision: int
    window: Optional[str] = None
    examined: int
    updated: int
    unchanged: int
    updated_ids: List[str]
    failed_ids: List[str]


class AuditEventView(BaseModel):
    action: str
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    events: List[AuditEventView]
    next_cursor: Optional[str] = None
