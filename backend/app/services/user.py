"""
Service para cadastro de usuários.
"""

from app.core.exceptions import InvalidInputError
from app.core.logging import get_logger
from app.core.security import hash_password
from app.models.user import User
from app.schemas.profile import ProfileUpdateRequest
from app.schemas.user import RegisterRequest
from app.services.entity_factory import EntityFactory

logger = get_logger(__name__)


class UserRegistrationService:
    """Monta usuários a partir dos DTOs validados."""

    def __init__(self, factory: EntityFactory):
        self.factory = factory

    def register_student(self, data: RegisterRequest) -> User:
        """
        Cria aluno a partir do formulário de cadastro.

        Fluxo:
            1. Confere confirmação de senha
            2. Gera hash bcrypt da senha
            3. Delega à EntityFactory (role STUDENT, ativo)
            4. Copia telefone/endereço opcionais

        Raises:
            InvalidInputError: Senhas não conferem
        """
        if not data.password_matches:
            raise InvalidInputError("As senhas não conferem")

        user = self.factory.create_student_user(
            username=data.username,
            email=data.email,
            full_name=data.full_name,
            encoded_password=hash_password(data.password),
        )
        if data.phone or data.address:
            user = user.model_copy(update={"phone": data.phone, "address": data.address})

        logger.info(f"Aluno cadastrado: {user.username}")
        return user

    def update_profile(self, user: User, data: ProfileUpdateRequest) -> User:
        """Aplica os dados de perfil e retorna o usuário atualizado."""
        return user.model_copy(update=data.model_dump())
