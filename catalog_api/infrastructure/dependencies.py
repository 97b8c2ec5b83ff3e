"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.services import ArticleService, ProductService
from catalog_api.infrastructure.database.session import get_db_session
from catalog_api.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyProductRepository,
)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_product_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService instance with its repository wired up."""
    repository = SQLAlchemyProductRepository(session)
    yield ProductService(repository)
