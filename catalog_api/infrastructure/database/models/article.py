"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.infrastructure.database.base import Base, BigIntId


class ArticleModel(Base):
    """ORM model: maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"
