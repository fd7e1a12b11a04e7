"""
Testes para os templates de notificação.
"""

from datetime import date
from decimal import Decimal

import pytest

from app.models.enums import NotificationType
from app.services import notifications

TEMPLATE_DATA = {
    NotificationType.BOOK_DUE_SOON: {
        "book_title": "Dom Casmurro",
        "days_remaining": 2,
        "due_date": date(2024, 3, 15),
    },
    NotificationType.BOOK_OVERDUE: {"book_title": "Dom Casmurro", "days_overdue": 3},
    NotificationType.RESERVATION_READY: {
        "book_title": "Dom Casmurro",
        "expiration_date": date(2024, 3, 16),
    },
    NotificationType.RESERVATION_EXPIRED: {"book_title": "Dom Casmurro"},
    NotificationType.FINE_ISSUED: {"amount": Decimal("3.00"), "reason": "Atraso"},
    NotificationType.FINE_REMINDER: {"total_pending": Decimal("8.00")},
    NotificationType.BOOK_RETURNED: {"book_title": "Dom Casmurro"},
    NotificationType.BOOK_ISSUED: {
        "book_title": "Dom Casmurro",
        "author": "Machado de Assis",
        "due_date": date(2024, 3, 27),
    },
    NotificationType.WELCOME: {"full_name": "Maria Souza"},
    NotificationType.SYSTEM: {"text": "Manutenção às 22h"},
}


def test_every_type_has_data_in_this_table():
    assert set(TEMPLATE_DATA) == set(NotificationType)


@pytest.mark.parametrize("type_", list(NotificationType))
def test_every_type_renders(type_):
    """Todo tipo tem título e template."""
    title, message = notifications.render(type_, **TEMPLATE_DATA[type_])

    assert title
    assert message


def test_fine_reminder_two_decimals():
    _, message = notifications.render(
        NotificationType.FINE_REMINDER, total_pending=Decimal("8")
    )

    assert message == (
        "You have pending fines totaling $8.00. "
        "Please clear your dues to continue borrowing books."
    )


def test_long_texts_are_not_cut():
    title = "T" * 480
    description = "x" * 600

    assert notifications.damage_fine_reason(title, description) == (
        f"Damage to book: {title} - {description}"
    )
    assert title in notifications.overdue_fine_reason(title, 2)
