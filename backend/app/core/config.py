"""
Configuração centralizada da aplicação via Pydantic Settings.

Carrega variáveis de ambiente do arquivo .env e valida tipos automaticamente.
As regras de negócio da biblioteca (prazos, multas, reservas) também são
definidas aqui para que possam ser ajustadas por ambiente.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações da aplicação carregadas de variáveis de ambiente.

    Attributes:
        APP_NAME: Nome da aplicação exibido na documentação
        DEBUG: Habilita modo debug (não usar em produção)
        ENVIRONMENT: Ambiente atual (development, staging, production)
        HOST: Host para bind do servidor
        PORT: Porta para bind do servidor
        MAX_BORROW_DAYS: Prazo padrão de empréstimo em dias
        FINE_PER_DAY: Multa por dia de atraso
        GRACE_PERIOD_DAYS: Dias de tolerância antes de cobrar multa
        RESERVATION_EXPIRY_DAYS: Dias para retirar um livro reservado
        PENDING_RESERVATION_MAX_DAYS: Dias que uma reserva PENDING fica na fila
        DUE_SOON_DAYS: Antecedência (dias) do aviso de devolução próxima
        FINE_STRATEGY: Estratégia de cálculo de multa (standard, progressive,
            capped, weekend_exempt)
        BCRYPT_ROUNDS: Custo do hash bcrypt
        LOG_LEVEL: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_FORMAT: Formato das linhas de log
        LOG_DATE_FORMAT: Formato do timestamp
        FACTORY_LOG_LEVEL: Nível próprio para app.services.entity_factory
            (ex.: DEBUG para rastrear cada registro criado)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Library API"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Library rules
    MAX_BORROW_DAYS: int = 14
    FINE_PER_DAY: Decimal = Decimal("1.00")
    GRACE_PERIOD_DAYS: int = 0
    RESERVATION_EXPIRY_DAYS: int = 3
    DUE_SOON_DAYS: int = 2
    PENDING_RESERVATION_MAX_DAYS: int = 7
    FINE_STRATEGY: str = "standard"

    # Security
    BCRYPT_ROUNDS: int = 12

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    FACTORY_LOG_LEVEL: str | None = None

    @property
    def is_production(self) -> bool:
        """Verifica se está em ambiente de produção."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.

    Usa lru_cache para evitar recarregar .env em cada chamada.
    """
    return Settings()
