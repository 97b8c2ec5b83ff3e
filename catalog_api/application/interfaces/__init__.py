from .article_repository import ArticleRepository
from .product_repository import ProductRepository

__all__ = [
    "ArticleRepository",
    "ProductRepository",
]
