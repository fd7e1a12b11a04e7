"""
Model de empréstimo (transação de retirada/devolução).
"""

from datetime import date
from decimal import Decimal

from pydantic import Field

from app.models.base import DomainModel
from app.models.book import Book
from app.models.enums import TransactionStatus
from app.models.user import User


class Transaction(DomainModel):
    """
    Empréstimo de um livro para um usuário.

    Regras de negócio:
        - due_date = issue_date + prazo do empréstimo
        - Nasce ISSUED; só vira RETURNED pela devolução, que grava return_date

    Attributes:
        user: Usuário que pegou o livro
        book: Livro emprestado
        issue_date: Data da retirada
        due_date: Data prevista de devolução
        return_date: Data da devolução efetiva (None se ativo)
        status: ISSUED, RETURNED ou OVERDUE
        fine_amount: Multa registrada no empréstimo
    """
    user: User
    book: Book
    issue_date: date
    due_date: date
    return_date: date | None = None
    status: TransactionStatus = TransactionStatus.ISSUED
    fine_amount: Decimal = Field(default=Decimal("0.00"), ge=0)

    def __repr__(self) -> str:
        return f"<Transaction {self.book.title} - {self.status.value}>"

    @property
    def is_active(self) -> bool:
        """Retorna True se o livro ainda não foi devolvido."""
        return self.status != TransactionStatus.RETURNED

    def is_overdue(self, today: date) -> bool:
        """Retorna True se ativo e com prazo vencido."""
        if self.status == TransactionStatus.RETURNED:
            return False
        return today > self.due_date

    def days_overdue(self, today: date) -> int:
        """Dias em atraso (0 se não atrasado ou já devolvido)."""
        if not self.is_overdue(today):
            return 0
        check_date = self.return_date or today
        return (check_date - self.due_date).days

    def days_until_due(self, today: date) -> int:
        """Dias até o vencimento (negativo se atrasado, 0 se devolvido)."""
        if self.status == TransactionStatus.RETURNED:
            return 0
        return (self.due_date - today).days

    def with_overdue_status(self, today: date) -> "Transaction":
        """Retorna cópia com status OVERDUE se ISSUED e vencido."""
        if self.status == TransactionStatus.ISSUED and self.is_overdue(today):
            return self.model_copy(update={"status": TransactionStatus.OVERDUE})
        return self
