from .article import ArticleModel
from .product import ProductModel

__all__ = [
    "ArticleModel",
    "ProductModel",
]
