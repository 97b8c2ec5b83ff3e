"""Unit tests for the ArticleService."""

import pytest

from catalog_api.application.schemas import ArticleCreate, ArticleUpdate
from catalog_api.application.services import ArticleService
from catalog_api.domain.entities import Article
from catalog_api.domain.exceptions import EntityNotFoundError, EntityValidationError
from catalog_api.application.interfaces import ArticleRepository


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        article = self._articles.get(article_id)
        return Article(**vars(article)) if article else None

    async def get_all(self) -> list[Article]:
        return [self._articles[k] for k in sorted(self._articles)]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise EntityNotFoundError("Article", article.id)
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(title="Test Article", content="Some content")
    article = await service.create_article(data)
    assert article.id is not None
    assert article.title == "Test Article"


@pytest.mark.asyncio
async def test_create_article_rejects_blank_title(service: ArticleService):
    with pytest.raises(EntityValidationError) as exc_info:
        await service.create_article(ArticleCreate(title="   ", content="body"))
    assert [v.field for v in exc_info.value.violations] == ["title"]
    assert await service.list_articles() == []


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_list_articles(service: ArticleService):
    await service.create_article(ArticleCreate(title="A1", content="C1"))
    await service.create_article(ArticleCreate(title="A2", content="C2"))
    articles = await service.list_articles()
    assert [a.title for a in articles] == ["A1", "A2"]


@pytest.mark.asyncio
async def test_update_article_overwrites_both_fields(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Old", content="Old content"))
    updated = await service.update_article(
        created.id, ArticleUpdate(title="New", content="New content")
    )
    assert updated.id == created.id
    assert updated.title == "New"
    assert updated.content == "New content"


@pytest.mark.asyncio
async def test_update_article_invalid_leaves_stored_article(
    service: ArticleService, repository: FakeArticleRepository
):
    created = await service.create_article(ArticleCreate(title="Keep", content="Me"))
    with pytest.raises(EntityValidationError):
        await service.update_article(created.id, ArticleUpdate(title="", content="x"))
    stored = await repository.get_by_id(created.id)
    assert stored.title == "Keep"


@pytest.mark.asyncio
async def test_update_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(title="T", content="C"))


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Delete Me", content="..."))
    await service.delete_article(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(7)


@pytest.mark.asyncio
async def test_create_article_allows_blank_content(service: ArticleService):
    article = await service.create_article(ArticleCreate(title="Title only", content=""))
    assert article.content == ""
