"""
Classe base e helpers para os registros de domínio.
"""

from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

CENTS = Decimal("0.01")


def to_money(value: Decimal | float | int | str) -> Decimal:
    """Converte para Decimal com duas casas decimais."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class DomainModel(BaseModel):
    """
    Registro de domínio imutável.

    Transições de estado retornam uma cópia via model_copy(update=...);
    o id fica None até o registro ser persistido.
    """
    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
    )

    id: UUID | None = None
