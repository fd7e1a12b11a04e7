"""
Exceções de domínio da biblioteca.

Os services de construção não fazem I/O, então as falhas possíveis são
apenas violação de contrato de entrada e transição de estado inválida.
Ambas sobem direto para o chamador.
"""


class LibraryError(Exception):
    """Erro base do domínio."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(LibraryError, ValueError):
    """Argumento fora do contrato (ex.: prazo de empréstimo <= 0)."""


class InvalidStateTransitionError(LibraryError):
    """
    Transição de status não permitida.

    Attributes:
        current: Status atual do registro
        target: Status pretendido
    """

    def __init__(self, entity: str, current: str, target: str):
        super().__init__(
            f"{entity} não pode passar de {current} para {target}"
        )
        self.entity = entity
        self.current = current
        self.target = target
