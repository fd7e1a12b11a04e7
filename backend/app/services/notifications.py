"""
Templates de texto das notificações e dos motivos de multa.

Funções puras: mesma entrada, mesmo texto. Datas são renderizadas em ISO
(YYYY-MM-DD) e valores com duas casas decimais.
"""

from datetime import date
from decimal import Decimal
from typing import Callable

from app.models.enums import NotificationType

NOTIFICATION_TITLES: dict[NotificationType, str] = {
    NotificationType.BOOK_DUE_SOON: "Book Due Soon",
    NotificationType.BOOK_OVERDUE: "Book Overdue",
    NotificationType.RESERVATION_READY: "Reserved Book Available",
    NotificationType.FINE_ISSUED: "Fine Issued",
    NotificationType.RESERVATION_EXPIRED: "Reservation Expired",
    NotificationType.FINE_REMINDER: "Pending Fines",
    NotificationType.BOOK_ISSUED: "Book Issued",
    NotificationType.BOOK_RETURNED: "Book Returned",
    NotificationType.WELCOME: "Welcome to the Library!",
    NotificationType.SYSTEM: "System Notice",
}


def due_soon_message(book_title: str, days_remaining: int, due_date: date) -> str:
    return (
        f"Your book '{book_title}' is due in {days_remaining} day(s) on "
        f"{due_date.isoformat()}. Please return it on time to avoid fines."
    )


def overdue_message(book_title: str, days_overdue: int) -> str:
    return (
        f"Your book '{book_title}' is {days_overdue} day(s) overdue. "
        f"Please return it immediately. Fines may apply."
    )


def reservation_ready_message(book_title: str, expiration_date: date) -> str:
    return (
        f"Good news! The book '{book_title}' you reserved is now available. "
        f"Please pick it up by {expiration_date.isoformat()} before the "
        f"reservation expires."
    )


def fine_issued_message(amount: Decimal, reason: str) -> str:
    return f"A fine of ${amount:.2f} has been issued. Reason: {reason}"


def reservation_expired_message(book_title: str) -> str:
    return (
        f"Your reservation for '{book_title}' has expired. "
        f"You can make a new reservation if the book is still available."
    )


def fine_reminder_message(total_pending: Decimal) -> str:
    return (
        f"You have pending fines totaling ${total_pending:.2f}. "
        f"Please clear your dues to continue borrowing books."
    )


def book_issued_message(book_title: str, author: str | None, due_date: date) -> str:
    by_author = f" by {author}" if author else ""
    return (
        f"You have successfully borrowed '{book_title}'{by_author}. "
        f"Please return it by {due_date.isoformat()}."
    )


def book_returned_message(book_title: str) -> str:
    return f"You have successfully returned '{book_title}'. Thank you!"


def welcome_message(full_name: str) -> str:
    return (
        f"Hello {full_name}! Welcome to our Library Management System. "
        f"You can browse our collection, borrow books, and manage your account. "
        f"Happy reading!"
    )


def system_message(text: str) -> str:
    return text


MESSAGE_TEMPLATES: dict[NotificationType, Callable[..., str]] = {
    NotificationType.BOOK_DUE_SOON: due_soon_message,
    NotificationType.BOOK_OVERDUE: overdue_message,
    NotificationType.RESERVATION_READY: reservation_ready_message,
    NotificationType.FINE_ISSUED: fine_issued_message,
    NotificationType.RESERVATION_EXPIRED: reservation_expired_message,
    NotificationType.FINE_REMINDER: fine_reminder_message,
    NotificationType.BOOK_ISSUED: book_issued_message,
    NotificationType.BOOK_RETURNED: book_returned_message,
    NotificationType.WELCOME: welcome_message,
    NotificationType.SYSTEM: system_message,
}


def render(type_: NotificationType, **data) -> tuple[str, str]:
    """
    Renderiza (título, mensagem) para um tipo de notificação.

    Todo NotificationType tem título e template; data traz os argumentos
    nomeados do template do tipo.
    """
    return NOTIFICATION_TITLES[type_], MESSAGE_TEMPLATES[type_](**data)


# Motivos de multa

def overdue_fine_reason(book_title: str, days_overdue: int) -> str:
    return f"Overdue book: {book_title} ({days_overdue} days late)"


def damage_fine_reason(book_title: str, description: str) -> str:
    return f"Damage to book: {book_title} - {description}"
