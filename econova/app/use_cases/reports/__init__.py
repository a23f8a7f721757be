"""Aggregation and report use cases."""

from .dtos import ReportData, WindowRequest, WindowSummaryView
from .get_report_data_use_case import GetReportDataUseCase
from .get_window_summary_use_case import GetWindowSummaryUseCase
from .window import build_window

__all__ = [
    "GetReportDataUseCase",
    "GetWindowSummaryUseCase",
    "ReportData",
    "WindowRequest",
    "WindowSummaryView",
    "build_window",
]
