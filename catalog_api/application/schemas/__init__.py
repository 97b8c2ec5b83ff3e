from .article import ArticleCreate, ArticleUpdate, ArticleResponse
from .product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
