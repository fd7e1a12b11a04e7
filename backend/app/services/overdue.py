"""
Varredura periódica de empréstimos: multas por atraso e lembretes.

Executada por um agendador externo. Recebe os empréstimos já carregados,
gera multas e notificações via EntityFactory e devolve tudo num
OverdueScanResult para o chamador persistir.
"""

from typing import Iterable

from app.core.config import get_settings
from app.core.logging import get_logger
from app.models.enums import TransactionStatus
from app.models.transaction import Transaction
from app.schemas.scan import OverdueScanResult
from app.services.entity_factory import EntityFactory
from app.services.fine_strategy import (
    FineCalculationStrategy,
    StandardFineStrategy,
    get_fine_strategy,
)

logger = get_logger(__name__)


class OverdueScanService:
    """Service para a varredura de atrasos."""

    def __init__(
        self,
        factory: EntityFactory,
        strategy: FineCalculationStrategy | None = None,
    ):
        self.factory = factory
        self.settings = get_settings()
        self.strategy = strategy or self._default_strategy()

    def _default_strategy(self) -> FineCalculationStrategy:
        if self.settings.FINE_STRATEGY.lower() == "standard":
            return StandardFineStrategy(self.settings.FINE_PER_DAY)
        return get_fine_strategy(self.settings.FINE_STRATEGY)

    def scan(self, transactions: Iterable[Transaction]) -> OverdueScanResult:
        """
        Processa um lote de empréstimos.

        Para cada empréstimo ativo:
            - Atrasado: status OVERDUE, multa (se a estratégia cobrar),
              aviso de atraso e aviso de multa
            - Vence em até DUE_SOON_DAYS: aviso de devolução próxima

        Falhas num empréstimo são logadas e contadas; o lote continua.

        Returns:
            OverdueScanResult com os registros gerados
        """
        today = self.factory.clock.today()
        result = OverdueScanResult(scanned_count=0, overdue_count=0, message="")

        for transaction in transactions:
            result.scanned_count += 1
            if transaction.status == TransactionStatus.RETURNED:
                continue

            try:
                if transaction.is_overdue(today):
                    self._process_overdue(transaction, result)
                elif 0 < transaction.days_until_due(today) <= self.settings.DUE_SOON_DAYS:
                    result.notifications.append(
                        self.factory.create_due_soon_notification(
                            transaction.user,
                            transaction.book,
                            transaction.due_date,
                        )
                    )
            except Exception as e:
                result.error_count += 1
                logger.error(
                    f"Erro ao processar empréstimo {transaction.id} "
                    f"('{transaction.book.title}'): {e}"
                )

        result.message = (
            f"Analisados: {result.scanned_count}, Atrasados: {result.overdue_count}, "
            f"Multas: {len(result.fines)}, Erros: {result.error_count}"
        )
        logger.info(f"Varredura de atrasos concluída. {result.message}")
        return result

    def _process_overdue(
        self,
        transaction: Transaction,
        result: OverdueScanResult,
    ) -> None:
        """Gera os registros do atraso; só altera result se nada falhar."""
        today = self.factory.clock.today()

        updated = transaction.with_overdue_status(today)
        notifications = [
            self.factory.create_overdue_notification(
                transaction.user,
                transaction.book,
                transaction.days_overdue(today),
            )
        ]
        fine = self.factory.create_strategy_fine(
            updated,
            self.strategy,
            grace_period_days=self.settings.GRACE_PERIOD_DAYS,
        )
        if fine is not None:
            notifications.append(
                self.factory.create_fine_notification(fine.user, fine.amount, fine.reason)
            )
            result.fines.append(fine)

        result.overdue_count += 1
        if updated is not transaction:
            result.transactions.append(updated)
        result.notifications.extend(notifications)
