from .article import Article
from .product import Product
from .violation import Violation

__all__ = [
    "Article",
    "Product",
    "Violation",
]
