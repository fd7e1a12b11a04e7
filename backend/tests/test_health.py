"""
Testes para o endpoint de healthcheck.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.anyio
async def test_health_check_returns_200(client: AsyncClient):
    """Verifica se o endpoint /health retorna status 200."""
    response = await client.get("/health")
    assert response.status_code == 200


@pytest.mark.anyio
async def test_health_check_returns_healthy_status(client: AsyncClient):
    response = await client.get("/health")
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.anyio
async def test_health_check_returns_app_info(client: AsyncClient):
    """Verifica se o endpoint /health retorna informações da aplicação."""
    response = await client.get("/health")
    data = response.json()
    assert data["app_name"] == "Library API"
    assert "environment" in data
    assert data["fine_strategy"] == "standard"


@pytest.mark.anyio
async def test_root_returns_message(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Library API em execução"}
