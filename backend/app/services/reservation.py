"""
Varredura periódica de reservas: expiração e renumeração da fila.

Regras de negócio:
    - READY sem retirada até expiry_date: EXPIRED
    - PENDING há mais de PENDING_RESERVATION_MAX_DAYS: EXPIRED
    - Após expirar, as reservas PENDING restantes do mesmo livro são
      renumeradas (1, 2, 3...) por ordem de criação
"""

from datetime import timedelta
from typing import Iterable

from app.core.config import get_settings
from app.core.logging import get_logger
from app.models.book import Book
from app.models.enums import ReservationStatus
from app.models.reservation import Reservation
from app.schemas.scan import ReservationExpiryResult
from app.services.entity_factory import EntityFactory

logger = get_logger(__name__)


class ReservationExpiryService:
    """Service para expirar reservas não retiradas ou paradas na fila."""

    def __init__(self, factory: EntityFactory):
        self.factory = factory
        self.settings = get_settings()

    def is_expirable(self, reservation: Reservation) -> bool:
        """Retorna True se a reserva deve passar para EXPIRED hoje."""
        if reservation.status == ReservationStatus.READY:
            return reservation.is_expired(self.factory.clock.today())
        if reservation.status == ReservationStatus.PENDING:
            cutoff = self.factory.clock.now() - timedelta(
                days=self.settings.PENDING_RESERVATION_MAX_DAYS
            )
            return reservation.created_at < cutoff
        return False

    def sweep(self, reservations: Iterable[Reservation]) -> ReservationExpiryResult:
        """
        Processa um lote de reservas.

        Para cada reserva expirada gera o registro EXPIRED e o aviso
        RESERVATION_EXPIRED. Falhas numa reserva são logadas e contadas.

        Returns:
            ReservationExpiryResult com os registros gerados
        """
        result = ReservationExpiryResult(scanned_count=0, expired_count=0, message="")
        waiting: dict[Book, list[Reservation]] = {}
        affected_books: set[Book] = set()

        for reservation in reservations:
            result.scanned_count += 1
            try:
                if not self.is_expirable(reservation):
                    if reservation.status == ReservationStatus.PENDING:
                        waiting.setdefault(reservation.book, []).append(reservation)
                    continue

                expired = reservation.expired()
                notification = self.factory.create_reservation_expired_notification(expired)
            except Exception as e:
                result.error_count += 1
                logger.error(
                    f"Erro ao expirar reserva {reservation.id} "
                    f"('{reservation.book.title}'): {e}"
                )
                continue

            result.expired_count += 1
            result.reservations.append(expired)
            result.notifications.append(notification)
            affected_books.add(reservation.book)

        for book in affected_books:
            result.requeued.extend(self._requeue(waiting.get(book, [])))

        result.message = (
            f"Analisadas: {result.scanned_count}, Expiradas: {result.expired_count}, "
            f"Renumeradas: {len(result.requeued)}, Erros: {result.error_count}"
        )
        logger.info(f"Varredura de reservas concluída. {result.message}")
        return result

    def _requeue(self, pending: list[Reservation]) -> list[Reservation]:
        """Renumera a fila; retorna só as reservas cuja posição mudou."""
        changed = []
        ordered = sorted(pending, key=lambda r: (r.created_at, r.queue_position))
        for position, reservation in enumerate(ordered, start=1):
            if reservation.queue_position != position:
                changed.append(reservation.model_copy(update={"queue_position": position}))
        return changed
