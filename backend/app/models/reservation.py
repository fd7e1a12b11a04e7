"""
Model de reserva de livros.
"""

from datetime import date, datetime

from pydantic import Field

from app.models.base import DomainModel
from app.models.book import Book
from app.models.enums import ReservationStatus
from app.models.user import User


class Reservation(DomainModel):
    """
    Reserva de um livro indisponível.

    Fluxo de estados:
        1. PENDING: Usuário entra na fila de espera
        2. READY: Cópia separada; expiry_date = hoje + dias para retirada
        3. FULFILLED: Usuário retirou o livro
        4. EXPIRED: Não retirou a tempo
        5. CANCELLED: Usuário cancelou a reserva

    A ordenação da fila é externa; queue_position vem do chamador.

    Attributes:
        user: Usuário que reservou
        book: Livro reservado
        status: Status atual da reserva
        queue_position: Posição na fila (>= 1)
        created_at: Data/hora da criação
        expiry_date: Data limite para retirada (quando READY)
        fulfilled_date: Data da retirada
    """
    user: User
    book: Book
    status: ReservationStatus = ReservationStatus.PENDING
    queue_position: int = Field(ge=1)
    created_at: datetime
    expiry_date: date | None = None
    fulfilled_date: date | None = None

    def __repr__(self) -> str:
        return f"<Reservation {self.book.title} #{self.queue_position} - {self.status.value}>"

    @property
    def is_active(self) -> bool:
        """Retorna True se a reserva ainda aguarda na fila."""
        return self.status == ReservationStatus.PENDING

    def is_expired(self, today: date) -> bool:
        """Retorna True se READY e o prazo de retirada passou."""
        if self.status != ReservationStatus.READY:
            return False
        return self.expiry_date is not None and today > self.expiry_date

    def fulfilled(self, today: date) -> "Reservation":
        return self.model_copy(
            update={"status": ReservationStatus.FULFILLED, "fulfilled_date": today}
        )

    def cancelled(self) -> "Reservation":
        return self.model_copy(update={"status": ReservationStatus.CANCELLED})

    def expired(self) -> "Reservation":
        return self.model_copy(update={"status": ReservationStatus.EXPIRED})
