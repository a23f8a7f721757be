from typing import Optional, Tuple

from econova.domain.entities import WindowKind
from econova.domain.reporting_window import ReportingWindow
from econova.libs.result import Error

from .dtos import WindowRequest


def build_window(request: WindowRequest) -> Tuple[Optional[ReportingWindow], Optional[Error]]:
    """Translate caller coordinates into a ReportingWindow or an INVALID_WINDOW error."""
    try:
        kind = WindowKind(request.kind)
    except ValueError:
        allowed = ", ".join(k.value for k in WindowKind)
        return None, Error("INVALID_WINDOW", f"Unknown window kind; expected one of {allowed}")

    try:
        window = ReportingWindow.build(kind, request.year, request.quarter, request.month)
    except ValueError as exc:
        return None, Error("INVALID_WINDOW", str(exc))
    return window, None
