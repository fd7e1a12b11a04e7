"""
Schemas Pydantic para atualização de perfil.
"""

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema


class ProfileUpdateRequest(BaseSchema):
    """
    Dados editáveis do perfil do usuário.

    Validações:
        - full_name: obrigatório, 2-100 caracteres
        - email: obrigatório, formato válido
        - phone: até 20 caracteres
        - address: até 500 caracteres
    """
    full_name: str = Field(..., min_length=2, max_length=100, examples=["Maria Souza"])
    email: EmailStr = Field(..., examples=["maria@email.com"])
    phone: str | None = Field(None, max_length=20, examples=["+55 11 99999-0000"])
    address: str | None = Field(None, max_length=500)
