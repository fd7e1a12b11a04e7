"""
Fonte de tempo injetável.

Services recebem um Clock em vez de chamar datetime.now() diretamente,
o que permite fixar "hoje" nos testes.
"""

from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Contrato mínimo de um relógio."""

    def now(self) -> datetime:
        ...

    def today(self) -> date:
        ...


class SystemClock:
    """Relógio real, em UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """
    Relógio parado em um instante fixo.

    Uso:
        clock = FixedClock(datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc))
        factory = EntityFactory(clock=clock)
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return self._instant.date()

    def __repr__(self) -> str:
        return f"<FixedClock {self._instant.isoformat()}>"
