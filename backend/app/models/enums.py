"""
Enums utilizados nos models da aplicação.
"""

import enum


class Role(str, enum.Enum):
    """Roles de usuário no sistema."""
    ADMIN = "ADMIN"
    STUDENT = "STUDENT"

    @property
    def authority(self) -> str:
        """Nome da authority no formato ROLE_<role>."""
        return f"ROLE_{self.value}"

    @property
    def display_name(self) -> str:
        return {"ADMIN": "Administrator", "STUDENT": "Student"}[self.value]


class TransactionStatus(str, enum.Enum):
    """
    Status de um empréstimo.

    Fluxo típico:
        ISSUED -> RETURNED
        ISSUED -> OVERDUE -> RETURNED
    """
    ISSUED = "ISSUED"
    RETURNED = "RETURNED"
    OVERDUE = "OVERDUE"


class FineStatus(str, enum.Enum):
    """Status de uma multa."""
    PENDING = "PENDING"    # Aguardando pagamento
    PAID = "PAID"          # Quitada
    PARTIAL = "PARTIAL"    # Parcialmente paga
    WAIVED = "WAIVED"      # Perdoada pelo admin


class ReservationStatus(str, enum.Enum):
    """
    Status de uma reserva de livro.

    Fluxo típico:
        PENDING -> READY -> FULFILLED (sucesso)
        READY -> EXPIRED (não retirou a tempo)
        PENDING/READY -> CANCELLED (cancelada pelo usuário)
    """
    PENDING = "PENDING"      # Na fila, aguardando cópia
    READY = "READY"          # Disponível para retirada
    FULFILLED = "FULFILLED"  # Convertida em empréstimo
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"


class NotificationType(str, enum.Enum):
    """Tipos de notificação enviados ao usuário."""
    BOOK_DUE_SOON = "BOOK_DUE_SOON"
    BOOK_OVERDUE = "BOOK_OVERDUE"
    RESERVATION_READY = "RESERVATION_READY"
    RESERVATION_EXPIRED = "RESERVATION_EXPIRED"
    FINE_ISSUED = "FINE_ISSUED"
    FINE_REMINDER = "FINE_REMINDER"
    BOOK_RETURNED = "BOOK_RETURNED"
    BOOK_ISSUED = "BOOK_ISSUED"
    WELCOME = "WELCOME"
    SYSTEM = "SYSTEM"
