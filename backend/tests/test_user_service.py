"""
Testes para UserRegistrationService.
"""

from unittest.mock import patch

import pytest

from app.core.exceptions import InvalidInputError
from app.core.security import verify_password
from app.models.enums import Role
from app.schemas.profile import ProfileUpdateRequest
from app.schemas.user import RegisterRequest
from app.services.user import UserRegistrationService


@pytest.fixture
def service(factory) -> UserRegistrationService:
    return UserRegistrationService(factory)


@pytest.fixture
def register_data() -> RegisterRequest:
    return RegisterRequest(
        username="joao",
        email="joao@example.com",
        password="Senha123",
        confirm_password="Senha123",
        full_name="João Lima",
        phone="11 5555-0000",
    )


class TestRegisterStudent:

    def test_creates_active_student_with_hashed_password(self, service, register_data):
        user = service.register_student(register_data)

        assert user.role == Role.STUDENT
        assert user.is_active is True
        assert user.password != "Senha123"
        assert verify_password("Senha123", user.password)
        assert user.phone == "11 5555-0000"

    def test_factory_receives_encoded_password(self, service, register_data):
        with patch("app.services.user.hash_password", return_value="ENCODED") as mocked:
            user = service.register_student(register_data)

        mocked.assert_called_once_with("Senha123")
        assert user.password == "ENCODED"

    def test_password_mismatch(self, service, register_data):
        data = register_data.model_copy(update={"confirm_password": "Outra123"})

        with pytest.raises(InvalidInputError) as exc_info:
            service.register_student(data)

        assert "não conferem" in exc_info.value.message


def test_update_profile(service, sample_user):
    data = ProfileUpdateRequest(
        full_name="Maria S. Souza",
        email="maria.nova@example.com",
        address="Rua das Flores, 10",
    )

    updated = service.update_profile(sample_user, data)

    assert updated.full_name == "Maria S. Souza"
    assert updated.email == "maria.nova@example.com"
    assert updated.address == "Rua das Flores, 10"
    assert updated.username == sample_user.username
    assert updated.password == sample_user.password
    assert sample_user.full_name == "Maria Souza"
