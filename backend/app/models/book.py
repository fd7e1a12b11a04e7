"""
Model de livro (dados de referência fornecidos pelo chamador).
"""

from app.models.base import DomainModel


class Book(DomainModel):
    """
    Título do acervo.

    Attributes:
        title: Título do livro
        author: Nome do autor (opcional)
        isbn: ISBN (opcional)
    """
    title: str
    author: str | None = None
    isbn: str | None = None

    def __repr__(self) -> str:
        return f"<Book {self.title}>"
