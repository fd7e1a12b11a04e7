"""
Model de usuário do sistema.
"""

from pydantic import Field

from app.models.base import DomainModel
from app.models.enums import Role


class User(DomainModel):
    """
    Usuário do sistema de biblioteca (aluno ou administrador).

    Attributes:
        username: Login único
        email: Email do usuário
        full_name: Nome completo
        password: Senha já codificada pelo chamador
        role: ADMIN ou STUDENT
        is_active: Conta habilitada
        phone: Telefone (opcional)
        address: Endereço (opcional)
    """
    username: str
    email: str
    full_name: str
    password: str = Field(repr=False)
    role: Role = Role.STUDENT
    is_active: bool = True
    phone: str | None = None
    address: str | None = None

    def __repr__(self) -> str:
        return f"<User {self.username}>"

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT
