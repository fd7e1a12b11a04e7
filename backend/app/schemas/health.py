"""
Schemas Pydantic para o endpoint de healthcheck.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Resposta do endpoint de healthcheck.

    Attributes:
        status: Status da aplicação
        app_name: Nome da aplicação
        environment: Ambiente atual (development, staging, production)
        fine_strategy: Estratégia de multa configurada
    """

    status: str
    app_name: str
    environment: str
    fine_strategy: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "app_name": "Library API",
                    "environment": "development",
                    "fine_strategy": "standard",
                }
            ]
        }
    }
