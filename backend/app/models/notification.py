"""
Model de notificação ao usuário.
"""

from datetime import datetime
from uuid import UUID

from app.models.base import DomainModel
from app.models.enums import NotificationType
from app.models.user import User


class Notification(DomainModel):
    """
    Aviso exibido ao usuário (atraso, reserva disponível, multa...).

    Attributes:
        user: Destinatário
        type: Tipo da notificação
        title: Título curto
        message: Texto gerado a partir do template do tipo
        is_read: Lida pelo usuário
        read_at: Data/hora da leitura
        reference_type: Tipo do registro relacionado (TRANSACTION, RESERVATION, FINE)
        reference_id: Id do registro relacionado
        created_at: Data/hora da criação
    """
    user: User
    type: NotificationType
    title: str
    message: str
    is_read: bool = False
    read_at: datetime | None = None
    reference_type: str | None = None
    reference_id: UUID | None = None
    created_at: datetime | None = None

    def __repr__(self) -> str:
        return f"<Notification {self.type.value} - {self.user.username}>"

    def mark_as_read(self, now: datetime) -> "Notification":
        return self.model_copy(update={"is_read": True, "read_at": now})
