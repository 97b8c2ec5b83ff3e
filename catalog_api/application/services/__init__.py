from .article_service import ArticleService
from .product_service import ProductService

__all__ = [
    "ArticleService",
    "ProductService",
]
