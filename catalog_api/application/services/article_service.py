"""Application service (use case) for Article operations."""

import logging

from catalog_api.application.interfaces import ArticleRepository
from catalog_api.application.schemas import ArticleCreate, ArticleUpdate
from catalog_api.application.validation import ensure_valid
from catalog_api.domain.entities import Article
from catalog_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(title=data.title, content=data.content)
        ensure_valid(article)
        created = await self._repository.create(article)
        logger.info("Created article %s", created.id)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        article.replace(title=data.title, content=data.content)
        ensure_valid(article)
        return await self._repository.update(article)

    async def delete_article(self, article_id: int) -> None:
        if not await self._repository.delete(article_id):
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %s", article_id)
