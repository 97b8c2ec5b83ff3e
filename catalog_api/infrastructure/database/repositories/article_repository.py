"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.interfaces import ArticleRepository
from catalog_api.domain.entities import Article
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.database.base import is_storable_id
from catalog_api.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        if not is_storable_id(article_id):
            return None
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        model.title = article.title
        model.content = article.content
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        if not is_storable_id(article_id):
            return False
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
