"""
Schemas Pydantic da aplicação.
"""

from app.schemas.base import BaseSchema, ErrorDetail, ErrorResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.profile import ProfileUpdateRequest
from app.schemas.scan import FineReminderResult, OverdueScanResult, ReservationExpiryResult
from app.schemas.user import RegisterRequest, UserRead

__all__ = [
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "HealthResponse",
    "ProfileUpdateRequest",
    "OverdueScanResult",
    "ReservationExpiryResult",
    "FineReminderResult",
    "RegisterRequest",
    "UserRead",
]
