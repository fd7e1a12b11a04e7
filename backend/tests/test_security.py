"""
Testes unitários para funções de segurança.
"""

from app.core.security import hash_password, verify_password


class TestPasswordHashing:
    """Testes para hash de senha."""

    def test_hash_password_returns_hash(self):
        """Hash deve ser diferente da senha original."""
        password = "MinhaSenh@123"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2")

    def test_hash_password_different_hashes(self):
        """Mesmo password deve gerar hashes diferentes (salt)."""
        password = "MinhaSenh@123"

        assert hash_password(password) != hash_password(password)

    def test_verify_password_correct(self):
        password = "MinhaSenh@123"
        hashed = hash_password(password)

        assert verify_password(password, hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("MinhaSenh@123")

        assert verify_password("SenhaErrada123", hashed) is False

    def test_verify_password_malformed_hash(self):
        """Hash que não é bcrypt deve retornar False, sem exceção."""
        assert verify_password("MinhaSenh@123", "nao-e-um-hash") is False

    def test_hash_password_custom_rounds(self):
        """Custo informado aparece no prefixo do hash."""
        hashed = hash_password("MinhaSenh@123", rounds=4)

        assert hashed.startswith("$2b$04$")
        assert verify_password("MinhaSenh@123", hashed) is True
