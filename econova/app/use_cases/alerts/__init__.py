"""Tenant alert use cases."""

from .dtos import AlertView, SetAlertResolvedCommand
from .list_alerts_use_case import ListAlertsUseCase
from .set_alert_resolved_use_case import SetAlertResolvedUseCase

__all__ = [
    "AlertView",
    "ListAlertsUseCase",
    "SetAlertResolvedCommand",
    "SetAlertResolvedUseCase",
]
