"""Article CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from catalog_api.application.services import ArticleService
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.dependencies import get_article_service

logger = logging.getLogger(__name__)

ARTICLE_NOT_FOUND = "Article non trouvé"

router = APIRouter(prefix="/articles", tags=["Articles"])


def _not_found(e: EntityNotFoundError) -> HTTPException:
    logger.info("%s", e)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace the title and content of an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise _not_found(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
