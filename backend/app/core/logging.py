"""
Configuração de logging da aplicação.

Nível e formato vêm das Settings (LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT).
A EntityFactory loga cada registro criado em DEBUG; FACTORY_LOG_LEVEL
permite ligar esse rastro sem baixar o nível do resto da aplicação.
"""

import logging
import sys
from typing import Optional

from app.core.config import get_settings

FACTORY_LOGGER = "app.services.entity_factory"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configura o root logger com um handler para stdout.

    Args:
        level: Nível de logging. Se não fornecido, usa LOG_LEVEL
    """
    settings = get_settings()
    log_level = (level or settings.LOG_LEVEL).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove handlers existentes para evitar duplicação
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.FACTORY_LOG_LEVEL:
        logging.getLogger(FACTORY_LOGGER).setLevel(settings.FACTORY_LOG_LEVEL.upper())

    logging.getLogger(__name__).info(f"Logging configurado com nível: {log_level}")


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (geralmente __name__)."""
    return logging.getLogger(name)
