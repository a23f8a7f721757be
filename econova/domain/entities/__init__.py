"""
Econova Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AlertType, Feature, RecalculationStatus, WindowKind

# Export all entities
from .tenant import Tenant
from .tenant_setting import TenantSetting
from .feature_flag import FeatureFlag
from .source_document import SourceDocument
from .waste_observation import WasteObservation
from .audit_event import AuditEvent
from .alert import Alert

__all__ = [
    # Enums
    "AlertType",
    "Feature",
    "RecalculationStatus",
    "WindowKind",
    # Entities
    "Tenant",
    "TenantSetting",
    "FeatureFlag",
    "SourceDocument",
    "WasteObservation",
    "AuditEvent",
    "Alert",
]
