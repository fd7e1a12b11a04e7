"""
Testes para OverdueScanService.
"""

from datetime import date
from decimal import Decimal

import pytest

from app.core.exceptions import InvalidInputError
from app.models.book import Book
from app.models.enums import FineStatus, NotificationType, TransactionStatus
from app.services.fine_strategy import ProgressiveFineStrategy, StandardFineStrategy
from app.services.overdue import OverdueScanService


class ExplodingStrategy:
    """Estratégia que sempre falha, para exercitar o tratamento de erro."""

    name = "exploding"

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        raise InvalidInputError("falha de cálculo")


class BrokenStrategy:
    """Estratégia com defeito de programação (TypeError)."""

    name = "broken"

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        return None + Decimal("1.00")


@pytest.fixture
def batch(make_transaction):
    return [
        make_transaction(due_in_days=-5, book=Book(title="Atrasado")),
        make_transaction(due_in_days=2, book=Book(title="Vence logo")),
        make_transaction(
            due_in_days=-30,
            status=TransactionStatus.RETURNED,
            book=Book(title="Devolvido"),
        ),
        make_transaction(due_in_days=10, book=Book(title="Tranquilo")),
    ]


class TestOverdueScan:

    def test_scan_batch(self, factory, batch):
        service = OverdueScanService(factory, StandardFineStrategy(Decimal("1.00")))

        result = service.scan(batch)

        assert result.scanned_count == 4
        assert result.overdue_count == 1
        assert result.error_count == 0

        assert len(result.transactions) == 1
        assert result.transactions[0].status == TransactionStatus.OVERDUE
        assert result.transactions[0].book.title == "Atrasado"

        assert len(result.fines) == 1
        fine = result.fines[0]
        assert fine.amount == Decimal("5.00")
        assert fine.status == FineStatus.PENDING

        types = [n.type for n in result.notifications]
        assert types == [
            NotificationType.BOOK_OVERDUE,
            NotificationType.FINE_ISSUED,
            NotificationType.BOOK_DUE_SOON,
        ]

    def test_returned_transactions_are_ignored(self, factory, make_transaction):
        service = OverdueScanService(factory)
        returned = make_transaction(due_in_days=-3, status=TransactionStatus.RETURNED)

        result = service.scan([returned])

        assert result.scanned_count == 1
        assert result.fines == []
        assert result.notifications == []

    def test_already_overdue_status_not_repeated(self, factory, make_transaction):
        service = OverdueScanService(factory)
        transaction = make_transaction(due_in_days=-3, status=TransactionStatus.OVERDUE)

        result = service.scan([transaction])

        assert result.transactions == []
        assert len(result.fines) == 1

    def test_uses_given_strategy(self, factory, make_transaction):
        service = OverdueScanService(factory, ProgressiveFineStrategy())

        result = service.scan([make_transaction(due_in_days=-10)])

        assert result.fines[0].amount == Decimal("6.50")
        assert "$6.50" in result.notifications[-1].message

    def test_default_strategy_from_settings(self, factory):
        service = OverdueScanService(factory)

        assert isinstance(service.strategy, StandardFineStrategy)
        assert service.strategy.fine_per_day == factory.settings.FINE_PER_DAY

    def test_error_is_counted_and_batch_continues(self, factory, make_transaction):
        service = OverdueScanService(factory, ExplodingStrategy())
        batch = [
            make_transaction(due_in_days=-2),
            make_transaction(due_in_days=1),
        ]

        result = service.scan(batch)

        assert result.error_count == 1
        assert result.scanned_count == 2
        assert result.overdue_count == 0
        assert result.transactions == []
        assert result.fines == []
        assert [n.type for n in result.notifications] == [NotificationType.BOOK_DUE_SOON]
        assert "Erros: 1" in result.message

    def test_empty_batch(self, factory):
        result = OverdueScanService(factory).scan([])

        assert result.scanned_count == 0
        assert result.message.startswith("Analisados: 0")

    def test_unexpected_error_is_counted_and_batch_continues(self, factory, make_transaction):
        service = OverdueScanService(factory, BrokenStrategy())
        batch = [
            make_transaction(due_in_days=-2),
            make_transaction(due_in_days=-4),
            make_transaction(due_in_days=2),
        ]

        result = service.scan(batch)

        assert result.scanned_count == 3
        assert result.error_count == 2
        assert result.overdue_count == 0
        assert [n.type for n in result.notifications] == [NotificationType.BOOK_DUE_SOON]
