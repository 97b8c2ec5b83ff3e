"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., max_length=255, examples=["Getting Started"])
    content: str = Field(..., examples=["This is the body of the article."])


class ArticleUpdate(ArticleCreate):
    """Schema for replacing an existing article: both fields required."""


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str

    model_config = {"from_attributes": True}
