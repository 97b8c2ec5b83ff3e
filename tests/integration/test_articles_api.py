"""HTTP-level tests for the /articles endpoints."""

import pytest
from httpx import AsyncClient

NOT_FOUND = {"error": "Article non trouvé"}


async def _create(client: AsyncClient, title: str = "Hello", content: str = "World") -> dict:
    response = await client.post("/articles", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_list_articles_empty(client: AsyncClient):
    response = await client.get("/articles")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_and_get_article(client: AsyncClient):
    created = await _create(client)
    assert set(created) == {"id", "title", "content"}
    assert created["title"] == "Hello"

    response = await client.get(f"/articles/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_list_articles_in_creation_order(client: AsyncClient):
    first = await _create(client, title="First")
    second = await _create(client, title="Second")

    response = await client.get("/articles")
    assert response.json() == [first, second]


@pytest.mark.asyncio
async def test_create_article_missing_field_is_rejected(client: AsyncClient):
    response = await client.post("/articles", json={"title": "No content"})
    assert response.status_code == 400
    assert "content" in response.json()["error"]


@pytest.mark.asyncio
async def test_create_article_blank_title_is_rejected(client: AsyncClient):
    response = await client.post("/articles", json={"title": " ", "content": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "title: This value should not be blank."}


@pytest.mark.asyncio
async def test_create_article_invalid_json(client: AsyncClient):
    response = await client.post(
        "/articles",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON"}


@pytest.mark.asyncio
async def test_update_article(client: AsyncClient):
    created = await _create(client)
    response = await client.put(
        f"/articles/{created['id']}", json={"title": "New", "content": "Body"}
    )
    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "title": "New", "content": "Body"}

    fetched = await client.get(f"/articles/{created['id']}")
    assert fetched.json() == response.json()


@pytest.mark.asyncio
async def test_delete_article_then_get_is_404(client: AsyncClient):
    created = await _create(client)

    response = await client.delete(f"/articles/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    response = await client.get(f"/articles/{created['id']}")
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("GET", {}),
        ("PUT", {"json": {"title": "T", "content": "C"}}),
        ("DELETE", {}),
    ],
)
async def test_unknown_article_is_404(client: AsyncClient, method: str, kwargs: dict):
    response = await client.request(method, "/articles/12345", **kwargs)
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
async def test_id_beyond_integer_range_is_404(client: AsyncClient, method: str):
    kwargs = {"json": {"title": "T", "content": "C"}} if method == "PUT" else {}
    response = await client.request(method, "/articles/99999999999999999999", **kwargs)
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


@pytest.mark.asyncio
async def test_create_article_with_empty_content(client: AsyncClient):
    response = await client.post("/articles", json={"title": "T", "content": ""})
    assert response.status_code == 201
    assert response.json()["content"] == ""
