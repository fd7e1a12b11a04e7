"""
Model de multa.
"""

from datetime import date
from decimal import Decimal

from pydantic import Field

from app.core.exceptions import InvalidInputError
from app.models.base import DomainModel, to_money
from app.models.enums import FineStatus
from app.models.transaction import Transaction
from app.models.user import User


class Fine(DomainModel):
    """
    Multa devida por um usuário.

    Multas por atraso referenciam o empréstimo; multas por dano não.

    Attributes:
        user: Usuário devedor
        transaction: Empréstimo associado (None para multa por dano)
        amount: Valor total da multa
        paid_amount: Valor já pago
        reason: Motivo legível
        status: PENDING, PAID, PARTIAL ou WAIVED
        payment_date: Data da quitação
    """
    user: User
    transaction: Transaction | None = None
    amount: Decimal = Field(ge=0)
    paid_amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    reason: str = ""
    status: FineStatus = FineStatus.PENDING
    payment_date: date | None = None

    def __repr__(self) -> str:
        return f"<Fine {self.amount} - {self.status.value}>"

    @property
    def remaining_amount(self) -> Decimal:
        return self.amount - self.paid_amount

    @property
    def is_fully_paid(self) -> bool:
        return self.paid_amount >= self.amount

    def with_payment(self, payment: Decimal, today: date) -> "Fine":
        """
        Registra um pagamento e retorna a multa atualizada.

        Raises:
            InvalidInputError: Valor do pagamento <= 0
        """
        payment = to_money(payment)
        if payment <= 0:
            raise InvalidInputError("Valor do pagamento deve ser positivo")

        paid_amount = self.paid_amount + payment
        if paid_amount >= self.amount:
            return self.model_copy(
                update={
                    "paid_amount": paid_amount,
                    "status": FineStatus.PAID,
                    "payment_date": today,
                }
            )
        return self.model_copy(
            update={"paid_amount": paid_amount, "status": FineStatus.PARTIAL}
        )

    def waived(self, today: date) -> "Fine":
        """Perdoa a multa."""
        return self.model_copy(
            update={
                "status": FineStatus.WAIVED,
                "paid_amount": self.amount,
                "payment_date": today,
            }
        )

    def paid(self, today: date) -> "Fine":
        """Marca como totalmente paga."""
        return self.model_copy(
            update={
                "status": FineStatus.PAID,
                "paid_amount": self.amount,
                "payment_date": today,
            }
        )
