"""
Ponto de entrada da aplicação FastAPI.

Configura a aplicação, o ciclo de vida (startup/shutdown), o tratamento
de LibraryError e o healthcheck.
As regras de domínio ficam em app.services e não dependem do framework.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.exceptions import InvalidStateTransitionError, LibraryError
from app.core.logging import setup_logging, get_logger
from app.schemas.base import ErrorDetail, ErrorResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.services.fine_strategy import get_fine_strategy

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.

    Startup:
        - Configura logging
        - Valida a estratégia de multa configurada
    """
    setup_logging()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    strategy = get_fine_strategy(settings.FINE_STRATEGY)
    logger.info(
        f"Empréstimo: {settings.MAX_BORROW_DAYS} dias | Multa: {strategy.name} | "
        f"Reserva: {settings.RESERVATION_EXPIRY_DAYS} dias para retirada"
    )

    yield

    logger.info(f"Encerrando {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description="API para sistema de gerenciamento de biblioteca",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Verifica status da aplicação",
    description="Retorna o status atual da aplicação e informações básicas do ambiente.",
)
async def health_check() -> HealthResponse:
    """Endpoint de healthcheck para monitoramento."""
    return HealthResponse(
        status="healthy",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        fine_strategy=settings.FINE_STRATEGY,
    )


@app.exception_handler(LibraryError)
async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    """
    Converte erros de domínio em ErrorResponse.

    InvalidStateTransitionError vira 409; os demais LibraryError, 400.
    """
    if isinstance(exc, InvalidStateTransitionError):
        status_code = status.HTTP_409_CONFLICT
        body = ErrorResponse(
            error="invalid_state_transition",
            message=exc.message,
            details=[ErrorDetail(field="status", message=f"{exc.current} -> {exc.target}")],
        )
    else:
        status_code = status.HTTP_400_BAD_REQUEST
        body = ErrorResponse(error="invalid_input", message=exc.message)

    logger.warning(f"{body.error} em {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get(
    "/",
    response_model=MessageResponse,
    tags=["Health"],
    summary="Mensagem de boas-vindas",
)
async def root() -> MessageResponse:
    return MessageResponse(message=f"{settings.APP_NAME} em execução")
