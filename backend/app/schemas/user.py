"""
Schemas Pydantic para User.
"""

from pydantic import EmailStr, Field

from app.models.enums import Role
from app.schemas.base import BaseSchema


class RegisterRequest(BaseSchema):
    """
    Schema para cadastro de aluno (sign-up).

    Validações:
        - username: 3-50 caracteres
        - email: formato válido
        - password: 6-100 caracteres, repetida em confirm_password
        - full_name: 2-100 caracteres
    """
    username: str = Field(..., min_length=3, max_length=50, examples=["maria.souza"])
    email: EmailStr = Field(..., examples=["maria@email.com"])
    password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=2, max_length=100, examples=["Maria Souza"])
    phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=255)

    @property
    def password_matches(self) -> bool:
        return self.password == self.confirm_password


class UserRead(BaseSchema):
    """
    Schema para leitura de usuário.

    Nunca expõe a senha.
    """
    username: str
    email: EmailStr
    full_name: str
    role: Role
    is_active: bool
    phone: str | None = None
    address: str | None = None
