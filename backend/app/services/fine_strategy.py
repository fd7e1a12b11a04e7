"""
Estratégias de cálculo de multa por atraso.

Cada estratégia recebe a data de vencimento e a data de referência e
retorna o valor devido (0.00 se não há atraso). A estratégia ativa é
escolhida por nome via FINE_STRATEGY.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Protocol

from app.core.exceptions import InvalidInputError
from app.models.base import to_money

ZERO = Decimal("0.00")


class FineCalculationStrategy(Protocol):
    """Contrato das estratégias de multa."""

    name: str

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        ...


def _days_late(due_date: date, current_date: date) -> int:
    return max(0, (current_date - due_date).days)


class StandardFineStrategy:
    """Valor fixo por dia de atraso."""

    def __init__(self, fine_per_day: Decimal = Decimal("1.00")):
        self.fine_per_day = to_money(fine_per_day)
        self.name = f"Standard Fine (${self.fine_per_day}/day)"

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        return to_money(_days_late(due_date, current_date) * self.fine_per_day)


class ProgressiveFineStrategy:
    """
    Valor diário cresce com a duração do atraso.

    Faixas:
        - Dias 1-7: 0.50/dia
        - Dias 8-14: 1.00/dia
        - Dia 15 em diante: 2.00/dia
    """

    name = "Progressive Fine (escalating rates)"

    BASE_FINE = Decimal("0.50")
    MEDIUM_FINE = Decimal("1.00")
    HIGH_FINE = Decimal("2.00")

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        days = _days_late(due_date, current_date)
        base_days = min(days, 7)
        medium_days = min(max(days - 7, 0), 7)
        high_days = max(days - 14, 0)

        total = (
            base_days * self.BASE_FINE
            + medium_days * self.MEDIUM_FINE
            + high_days * self.HIGH_FINE
        )
        return to_money(total)


class CappedFineStrategy:
    """Valor por dia com teto máximo."""

    def __init__(
        self,
        fine_per_day: Decimal = Decimal("1.50"),
        max_fine: Decimal = Decimal("25.00"),
    ):
        self.fine_per_day = to_money(fine_per_day)
        self.max_fine = to_money(max_fine)
        self.name = f"Capped Fine (${self.fine_per_day}/day, max ${self.max_fine})"

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        fine = _days_late(due_date, current_date) * self.fine_per_day
        return to_money(min(fine, self.max_fine))


class WeekendExemptFineStrategy:
    """Cobra apenas dias úteis; sábado e domingo não contam."""

    def __init__(self, fine_per_day: Decimal = Decimal("1.00")):
        self.fine_per_day = to_money(fine_per_day)
        self.name = f"Weekend-Exempt Fine (${self.fine_per_day}/weekday)"

    def calculate(self, due_date: date, current_date: date) -> Decimal:
        if due_date >= current_date:
            return ZERO

        chargeable_days = 0
        day = due_date + timedelta(days=1)
        while day <= current_date:
            if day.weekday() < 5:
                chargeable_days += 1
            day += timedelta(days=1)

        return to_money(chargeable_days * self.fine_per_day)


FINE_STRATEGIES = {
    "standard": StandardFineStrategy,
    "progressive": ProgressiveFineStrategy,
    "capped": CappedFineStrategy,
    "weekend_exempt": WeekendExemptFineStrategy,
}


def get_fine_strategy(name: str) -> FineCalculationStrategy:
    """
    Instancia a estratégia pelo nome.

    Raises:
        InvalidInputError: Nome desconhecido
    """
    try:
        strategy_class = FINE_STRATEGIES[name.lower()]
    except KeyError:
        raise InvalidInputError(
            f"Estratégia de multa desconhecida: {name}. "
            f"Opções: {', '.join(sorted(FINE_STRATEGIES))}"
        ) from None
    return strategy_class()
