"""
Service de construção de registros de domínio.

Centraliza a criação de empréstimos, multas, reservas, notificações e
usuários com valores padrão e campos derivados (vencimento, valor da multa,
texto da notificação). Títulos e descrições longos são aceitos sem corte. Não faz I/O: os registros retornados são persistidos
por quem chama.

Regras de negócio:
    - Empréstimo nasce ISSUED com due_date = hoje + prazo
    - Multa por atraso = dias de atraso * multa diária; sem atraso, sem multa
    - Reserva nasce PENDING; ao ficar READY ganha expiry_date = hoje + prazo
    - Usuário nasce ativo, com role definida pelo método usado
"""

from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID

from app.core.clock import Clock, SystemClock
from app.core.config import get_settings
from app.core.exceptions import InvalidInputError, InvalidStateTransitionError
from app.core.logging import get_logger
from app.models.base import to_money
from app.models.book import Book
from app.models.enums import (
    FineStatus,
    NotificationType,
    ReservationStatus,
    Role,
    TransactionStatus,
)
from app.models.fine import Fine
from app.models.notification import Notification
from app.models.reservation import Reservation
from app.models.transaction import Transaction
from app.models.user import User
from app.services import notifications
from app.services.fine_strategy import FineCalculationStrategy

logger = get_logger(__name__)


class EntityFactory:
    """Factory para registros de domínio com relógio injetável."""

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self.settings = get_settings()

    # ==========================================
    # Transactions
    # ==========================================

    def create_borrow_transaction(
        self,
        user: User,
        book: Book,
        borrow_days: int | None = None,
    ) -> Transaction:
        """
        Cria um empréstimo novo.

        Args:
            user: Usuário que está pegando o livro
            book: Livro emprestado
            borrow_days: Prazo em dias (padrão: MAX_BORROW_DAYS)

        Returns:
            Transaction ISSUED com issue_date = hoje

        Raises:
            InvalidInputError: borrow_days <= 0
        """
        if borrow_days is None:
            borrow_days = self.settings.MAX_BORROW_DAYS
        _require_positive("borrow_days", borrow_days)

        today = self.clock.today()
        transaction = Transaction(
            user=user,
            book=book,
            issue_date=today,
            due_date=today + timedelta(days=borrow_days),
            status=TransactionStatus.ISSUED,
        )

        logger.debug(
            f"Empréstimo criado para {user.username}: '{book.title}' "
            f"até {transaction.due_date}"
        )
        return transaction

    def create_return_transaction(self, transaction: Transaction) -> Transaction:
        """
        Registra a devolução.

        Retorna um novo registro com return_date = hoje e status RETURNED;
        o original não é alterado.

        Raises:
            InvalidStateTransitionError: Empréstimo já devolvido
        """
        if transaction.status == TransactionStatus.RETURNED:
            raise InvalidStateTransitionError(
                "Transaction",
                transaction.status.value,
                TransactionStatus.RETURNED.value,
            )

        returned = transaction.model_copy(
            update={
                "return_date": self.clock.today(),
                "status": TransactionStatus.RETURNED,
            }
        )

        logger.debug(f"Devolução registrada: '{transaction.book.title}' ({transaction.id})")
        return returned

    # ==========================================
    # Fines
    # ==========================================

    def create_overdue_fine(
        self,
        transaction: Transaction,
        fine_per_day: Decimal | float | None = None,
    ) -> Fine | None:
        """
        Cria multa por atraso.

        Args:
            transaction: Empréstimo a avaliar
            fine_per_day: Valor por dia de atraso (padrão: FINE_PER_DAY)

        Returns:
            Fine PENDING com amount = dias * fine_per_day, ou None se o
            vencimento é hoje ou no futuro

        Raises:
            InvalidInputError: fine_per_day negativo
        """
        rate = Decimal(
            str(self.settings.FINE_PER_DAY if fine_per_day is None else fine_per_day)
        )
        if rate < 0:
            raise InvalidInputError("fine_per_day não pode ser negativo")

        days_overdue = (self.clock.today() - transaction.due_date).days
        if days_overdue <= 0:
            return None

        amount = to_money(days_overdue * rate)
        fine = Fine(
            user=transaction.user,
            transaction=transaction,
            amount=amount,
            paid_amount=Decimal("0.00"),
            reason=notifications.overdue_fine_reason(transaction.book.title, days_overdue),
            status=FineStatus.PENDING,
        )

        logger.debug(f"Multa de {amount} criada por {days_overdue} dia(s) de atraso")
        return fine

    def create_strategy_fine(
        self,
        transaction: Transaction,
        strategy: FineCalculationStrategy,
        grace_period_days: int = 0,
    ) -> Fine | None:
        """
        Cria multa por atraso usando uma estratégia de cálculo.

        O vencimento é deslocado por grace_period_days antes do cálculo.

        Returns:
            Fine PENDING, ou None se a estratégia não cobra nada
        """
        if grace_period_days < 0:
            raise InvalidInputError("grace_period_days não pode ser negativo")

        effective_due = transaction.due_date + timedelta(days=grace_period_days)
        today = self.clock.today()
        amount = strategy.calculate(effective_due, today)
        if amount <= 0:
            return None

        days_overdue = (today - effective_due).days
        fine = Fine(
            user=transaction.user,
            transaction=transaction,
            amount=to_money(amount),
            paid_amount=Decimal("0.00"),
            reason=notifications.overdue_fine_reason(transaction.book.title, days_overdue),
            status=FineStatus.PENDING,
        )

        logger.debug(f"Multa de {fine.amount} criada via {strategy.name}")
        return fine

    def create_damage_fine(
        self,
        user: User,
        book: Book,
        amount: Decimal | float,
        description: str,
    ) -> Fine:
        """
        Cria multa por dano ao livro (valor informado pelo chamador).

        Raises:
            InvalidInputError: amount negativo
        """
        amount = to_money(amount)
        if amount < 0:
            raise InvalidInputError("Valor da multa não pode ser negativo")

        fine = Fine(
            user=user,
            amount=amount,
            paid_amount=Decimal("0.00"),
            reason=notifications.damage_fine_reason(book.title, description),
            status=FineStatus.PENDING,
        )

        logger.debug(f"Multa por dano de {amount} criada para '{book.title}'")
        return fine

    # ==========================================
    # Reservations
    # ==========================================

    def create_reservation(
        self,
        user: User,
        book: Book,
        queue_position: int,
    ) -> Reservation:
        """
        Cria reserva PENDING na posição informada da fila.

        Raises:
            InvalidInputError: queue_position < 1
        """
        _require_positive("queue_position", queue_position)

        reservation = Reservation(
            user=user,
            book=book,
            status=ReservationStatus.PENDING,
            queue_position=queue_position,
            created_at=self.clock.now(),
        )

        logger.debug(
            f"Reserva criada para {user.username}: '{book.title}' "
            f"na posição {queue_position}"
        )
        return reservation

    def create_ready_reservation(
        self,
        reservation: Reservation,
        expiration_days: int | None = None,
    ) -> Reservation:
        """
        Marca a reserva como READY (livro disponível para retirada).

        Args:
            reservation: Reserva PENDING
            expiration_days: Dias para retirada (padrão: RESERVATION_EXPIRY_DAYS)

        Returns:
            Nova Reservation READY com expiry_date = hoje + expiration_days

        Raises:
            InvalidInputError: expiration_days <= 0
            InvalidStateTransitionError: Reserva não está PENDING
        """
        if expiration_days is None:
            expiration_days = self.settings.RESERVATION_EXPIRY_DAYS
        _require_positive("expiration_days", expiration_days)

        if reservation.status != ReservationStatus.PENDING:
            raise InvalidStateTransitionError(
                "Reservation",
                reservation.status.value,
                ReservationStatus.READY.value,
            )

        today = self.clock.today()
        ready = reservation.model_copy(
            update={
                "status": ReservationStatus.READY,
                "expiry_date": today + timedelta(days=expiration_days),
            }
        )

        logger.debug(f"Reserva {reservation.id} pronta, expira em {ready.expiry_date}")
        return ready

    # ==========================================
    # Notifications
    # ==========================================

    def create_notification(
        self,
        user: User,
        type_: NotificationType,
        title: str,
        message: str,
        reference_type: str | None = None,
        reference_id: UUID | None = None,
    ) -> Notification:
        """
        Cria notificação genérica, não lida, com created_at = agora.

        reference_type/reference_id apontam o registro que originou o aviso
        (TRANSACTION, RESERVATION ou FINE), quando houver.
        """
        notification = Notification(
            user=user,
            type=type_,
            title=title,
            message=message,
            is_read=False,
            reference_type=reference_type,
            reference_id=reference_id,
            created_at=self.clock.now(),
        )

        logger.debug(f"Notificação {type_.value} criada para {user.username}")
        return notification

    def create_due_soon_notification(
        self,
        user: User,
        book: Book,
        due_date: date,
    ) -> Notification:
        """Aviso de devolução próxima; dias restantes = due_date - hoje."""
        days_remaining = (due_date - self.clock.today()).days
        title, message = notifications.render(
            NotificationType.BOOK_DUE_SOON,
            book_title=book.title,
            days_remaining=days_remaining,
            due_date=due_date,
        )
        return self.create_notification(user, NotificationType.BOOK_DUE_SOON, title, message)

    def create_overdue_notification(
        self,
        user: User,
        book: Book,
        days_overdue: int,
    ) -> Notification:
        """
        Aviso de atraso. days_overdue é informado pelo chamador.

        Raises:
            InvalidInputError: days_overdue negativo
        """
        if days_overdue < 0:
            raise InvalidInputError("days_overdue não pode ser negativo")

        title, message = notifications.render(
            NotificationType.BOOK_OVERDUE,
            book_title=book.title,
            days_overdue=days_overdue,
        )
        return self.create_notification(user, NotificationType.BOOK_OVERDUE, title, message)

    def create_reservation_ready_notification(
        self,
        user: User,
        book: Book,
        expiration_date: date,
    ) -> Notification:
        title, message = notifications.render(
            NotificationType.RESERVATION_READY,
            book_title=book.title,
            expiration_date=expiration_date,
        )
        return self.create_notification(
            user, NotificationType.RESERVATION_READY, title, message
        )

    def create_fine_notification(
        self,
        user: User,
        amount: Decimal | float,
        reason: str,
    ) -> Notification:
        title, message = notifications.render(
            NotificationType.FINE_ISSUED,
            amount=to_money(amount),
            reason=reason,
        )
        return self.create_notification(user, NotificationType.FINE_ISSUED, title, message)

    def create_fine_reminder_notification(
        self,
        user: User,
        total_pending: Decimal | float,
    ) -> Notification:
        """
        Lembrete do total de multas em aberto do usuário.

        Raises:
            InvalidInputError: total_pending negativo
        """
        total_pending = to_money(total_pending)
        if total_pending < 0:
            raise InvalidInputError("total_pending não pode ser negativo")

        title, message = notifications.render(
            NotificationType.FINE_REMINDER,
            total_pending=total_pending,
        )
        return self.create_notification(user, NotificationType.FINE_REMINDER, title, message)

    def create_book_issued_notification(self, transaction: Transaction) -> Notification:
        """Confirmação do empréstimo, com a data de devolução."""
        title, message = notifications.render(
            NotificationType.BOOK_ISSUED,
            book_title=transaction.book.title,
            author=transaction.book.author,
            due_date=transaction.due_date,
        )
        return self.create_notification(
            transaction.user,
            NotificationType.BOOK_ISSUED,
            title,
            message,
            reference_type="TRANSACTION",
            reference_id=transaction.id,
        )

    def create_book_returned_notification(self, transaction: Transaction) -> Notification:
        title, message = notifications.render(
            NotificationType.BOOK_RETURNED,
            book_title=transaction.book.title,
        )
        return self.create_notification(
            transaction.user,
            NotificationType.BOOK_RETURNED,
            title,
            message,
            reference_type="TRANSACTION",
            reference_id=transaction.id,
        )

    def create_reservation_expired_notification(
        self,
        reservation: Reservation,
    ) -> Notification:
        title, message = notifications.render(
            NotificationType.RESERVATION_EXPIRED,
            book_title=reservation.book.title,
        )
        return self.create_notification(
            reservation.user,
            NotificationType.RESERVATION_EXPIRED,
            title,
            message,
            reference_type="RESERVATION",
            reference_id=reservation.id,
        )

    def create_welcome_notification(self, user: User) -> Notification:
        title, message = notifications.render(
            NotificationType.WELCOME,
            full_name=user.full_name,
        )
        return self.create_notification(user, NotificationType.WELCOME, title, message)

    def create_system_notification(self, user: User, text: str) -> Notification:
        """Aviso administrativo com texto livre."""
        title, message = notifications.render(NotificationType.SYSTEM, text=text)
        return self.create_notification(user, NotificationType.SYSTEM, title, message)

    # ==========================================
    # Users
    # ==========================================

    def create_student_user(
        self,
        username: str,
        email: str,
        full_name: str,
        encoded_password: str,
    ) -> User:
        """
        Cria usuário aluno ativo.

        A senha deve chegar já codificada; nenhum hash é aplicado aqui.
        """
        return self._create_user(username, email, full_name, encoded_password, Role.STUDENT)

    def create_admin_user(
        self,
        username: str,
        email: str,
        full_name: str,
        encoded_password: str,
    ) -> User:
        """Cria usuário administrador ativo (senha já codificada)."""
        return self._create_user(username, email, full_name, encoded_password, Role.ADMIN)

    def _create_user(
        self,
        username: str,
        email: str,
        full_name: str,
        encoded_password: str,
        role: Role,
    ) -> User:
        user = User(
            username=username,
            email=email,
            full_name=full_name,
            password=encoded_password,
            role=role,
            is_active=True,
        )

        logger.debug(f"Usuário {role.value} criado: {username}")
        return user


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise InvalidInputError(f"{name} deve ser maior que zero (recebido: {value})")
