"""Waste record store use cases."""

from .dtos import (
    ImpactView,
    ObservationView,
    RecordObservationCommand,
    UpdateObservationCommand,
)
from .list_observations_use_case import ListObservationsUseCase
from .record_observation_use_case import RecordObservationUseCase
from .update_observation_use_case import UpdateObservationUseCase

__all__ = [
    "ImpactView",
    "ListObservationsUseCase",
    "ObservationView",
    "RecordObservationCommand",
    "RecordObservationUseCase",
    "UpdateObservationCommand",
    "UpdateObservationUseCase",
]
