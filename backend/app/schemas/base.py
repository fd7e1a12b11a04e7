"""
Schemas base reutilizáveis em toda a aplicação.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ErrorDetail(BaseModel):
    """Detalhe de um erro."""
    field: str | None = None
    message: str


class ErrorResponse(BaseModel):
    """
    Resposta de erro padrão.

    Gerada pelos exception handlers de app.main a partir de LibraryError:
        ErrorResponse(
            error="invalid_state_transition",
            message="Transaction não pode passar de RETURNED para RETURNED",
            details=[ErrorDetail(field="status", message="RETURNED")],
        )
    """
    error: str
    message: str
    details: list[ErrorDetail] | None = None


class MessageResponse(BaseModel):
    """Resposta simples com mensagem."""
    message: str
