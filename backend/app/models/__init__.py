"""
Registros de domínio da aplicação.

Todos são imutáveis; a persistência fica a cargo de quem os recebe.
"""

from app.models.enums import (
    FineStatus,
    NotificationType,
    ReservationStatus,
    Role,
    TransactionStatus,
)
from app.models.user import User
from app.models.book import Book
from app.models.transaction import Transaction
from app.models.fine import Fine
from app.models.reservation import Reservation
from app.models.notification import Notification

__all__ = [
    "Role",
    "TransactionStatus",
    "FineStatus",
    "ReservationStatus",
    "NotificationType",
    "User",
    "Book",
    "Transaction",
    "Fine",
    "Reservation",
    "Notification",
]
