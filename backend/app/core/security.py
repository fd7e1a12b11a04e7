"""
Utilitários de segurança: hash de senha.

A EntityFactory recebe senhas já codificadas; o hash é responsabilidade
de quem chama (ver UserRegistrationService).
"""

import logging

import bcrypt

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Gera hash bcrypt da senha.

    Args:
        password: Senha em texto plano
        rounds: Custo do bcrypt (padrão: BCRYPT_ROUNDS)

    Returns:
        Hash bcrypt da senha, pronto para EntityFactory.create_*_user
    """
    salt = bcrypt.gensalt(rounds or get_settings().BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifica se a senha corresponde ao hash.

    Args:
        plain_password: Senha em texto plano
        hashed_password: Hash bcrypt armazenado

    Returns:
        True se a senha está correta
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError as e:
        logger.debug(f"Erro na verificação de senha: {type(e).__name__}")
        return False
