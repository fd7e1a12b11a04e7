"""
Módulo de serviços - lógica de negócio.
"""

from app.services.entity_factory import EntityFactory
from app.services.fine import FineReminderService
from app.services.overdue import OverdueScanService
from app.services.reservation import ReservationExpiryService
from app.services.user import UserRegistrationService

__all__ = [
    "EntityFactory",
    "FineReminderService",
    "OverdueScanService",
    "ReservationExpiryService",
    "UserRegistrationService",
]
