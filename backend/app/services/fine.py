"""
Lembrete periódico de multas em aberto.
"""

from decimal import Decimal
from typing import Iterable

from app.core.logging import get_logger
from app.models.enums import FineStatus
from app.models.fine import Fine
from app.models.user import User
from app.schemas.scan import FineReminderResult
from app.services.entity_factory import EntityFactory

logger = get_logger(__name__)

OUTSTANDING_STATUSES = (FineStatus.PENDING, FineStatus.PARTIAL)


class FineReminderService:
    """Service que agrupa multas por usuário e gera um FINE_REMINDER para cada."""

    def __init__(self, factory: EntityFactory):
        self.factory = factory

    def remind(self, fines: Iterable[Fine]) -> FineReminderResult:
        """
        Gera lembretes a partir de um lote de multas.

        Soma remaining_amount das multas PENDING/PARTIAL de cada usuário
        (agrupadas por username); usuários com total zero não recebem aviso.

        Returns:
            FineReminderResult com uma notificação por usuário devedor
        """
        totals: dict[str, Decimal] = {}
        users: dict[str, User] = {}
        for fine in fines:
            if fine.status not in OUTSTANDING_STATUSES:
                continue
            username = fine.user.username
            users.setdefault(username, fine.user)
            totals[username] = totals.get(username, Decimal("0.00")) + fine.remaining_amount

        result = FineReminderResult(users_count=len(users), reminders_count=0, message="")
        for username, total in totals.items():
            if total <= 0:
                continue
            try:
                notification = self.factory.create_fine_reminder_notification(
                    users[username], total
                )
            except Exception as e:
                result.error_count += 1
                logger.error(f"Erro ao enviar lembrete de multa para {username}: {e}")
                continue

            result.reminders_count += 1
            result.notifications.append(notification)

        result.message = (
            f"Usuários: {result.users_count}, Lembretes: {result.reminders_count}, "
            f"Erros: {result.error_count}"
        )
        logger.info(f"Lembretes de multa enviados. {result.message}")
        return result
