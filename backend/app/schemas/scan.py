"""
Schemas de resultado das varreduras periódicas (atrasos, reservas, multas).
"""

from pydantic import Field

from app.models.fine import Fine
from app.models.notification import Notification
from app.models.reservation import Reservation
from app.models.transaction import Transaction
from app.schemas.base import BaseSchema


class OverdueScanResult(BaseSchema):
    """Registros gerados pela varredura, prontos para persistir."""
    scanned_count: int
    overdue_count: int
    error_count: int = 0
    transactions: list[Transaction] = Field(
        default_factory=list,
        description="Empréstimos cujo status mudou para OVERDUE",
    )
    fines: list[Fine] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)
    message: str


class ReservationExpiryResult(BaseSchema):
    """Reservas expiradas pela varredura e filas renumeradas."""
    scanned_count: int
    expired_count: int
    error_count: int = 0
    reservations: list[Reservation] = Field(
        default_factory=list,
        description="Reservas cujo status mudou para EXPIRED",
    )
    requeued: list[Reservation] = Field(
        default_factory=list,
        description="Reservas PENDING com nova queue_position",
    )
    notifications: list[Notification] = Field(default_factory=list)
    message: str


class FineReminderResult(BaseSchema):
    """Lembretes de multas pendentes, um por usuário devedor."""
    users_count: int
    reminders_count: int
    error_count: int = 0
    notifications: list[Notification] = Field(default_factory=list)
    message: str
