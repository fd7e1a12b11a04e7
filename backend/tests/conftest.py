"""
Fixtures compartilhadas para testes.

Todas as datas partem de um relógio fixo: quarta-feira, 13/03/2024 10:00 UTC.
"""

from datetime import date, datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from app.core.clock import FixedClock
from app.main import app
from app.models.book import Book
from app.models.enums import Role, TransactionStatus
from app.models.transaction import Transaction
from app.models.user import User
from app.services.entity_factory import EntityFactory

NOW = datetime(2024, 3, 13, 10, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Clock / factory
# ==========================================

@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def factory(clock) -> EntityFactory:
    return EntityFactory(clock=clock)


# ==========================================
# Sample records
# ==========================================

@pytest.fixture
def sample_user() -> User:
    """Aluno de exemplo."""
    return User(
        username="maria",
        email="maria@example.com",
        full_name="Maria Souza",
        password="$2b$12$encodedhash",
        role=Role.STUDENT,
    )


@pytest.fixture
def sample_book() -> Book:
    """Livro de exemplo."""
    return Book(title="Dom Casmurro", author="Machado de Assis")


@pytest.fixture
def make_transaction(sample_user, sample_book):
    """Cria empréstimo com vencimento relativo a hoje."""

    def _make(
        due_in_days: int,
        status: TransactionStatus = TransactionStatus.ISSUED,
        book: Book | None = None,
    ) -> Transaction:
        due_date: date = TODAY + timedelta(days=due_in_days)
        return Transaction(
            user=sample_user,
            book=book or sample_book,
            issue_date=due_date - timedelta(days=14),
            due_date=due_date,
            status=status,
        )

    return _make


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP assíncrono para testes."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
