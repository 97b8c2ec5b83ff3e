from .article_repository import SQLAlchemyArticleRepository
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyProductRepository",
]
