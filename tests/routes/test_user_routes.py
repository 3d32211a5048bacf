# tests/routes/test_user_routes.py
"""Tests for the /users endpoints."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_user(client: AsyncClient) -> None:
    response = await client.post("/users", params={"userName": "alice"})

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["userName"] == "alice"
    assert data["blogs"] == []
    assert response.headers["location"] == "http://test/users/alice"
    assert data["_links"]["blogs"]["href"] == "http://test/blogs/user/alice"
    assert data["_links"]["users"]["href"] == "http://test/users"


@pytest.mark.asyncio
async def test_create_duplicate_user_returns_400(client: AsyncClient, alice: dict) -> None:
    response = await client.post("/users", params={"userName": "alice"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == "Error: User name already exists"


@pytest.mark.asyncio
async def test_get_user_lists_blog_titles(client: AsyncClient, alice: dict) -> None:
    await client.post("/blogs", params={"userName": "alice", "blogTitle": "Travel"})

    response = await client.get("/users/alice")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["blogs"] == ["Travel"]


@pytest.mark.asyncio
async def test_get_unknown_user_returns_404(client: AsyncClient) -> None:
    response = await client.get("/users/ghost")

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_list_users(client: AsyncClient, alice: dict, bob: dict) -> None:
    response = await client.get("/users")

    assert response.status_code == status.HTTP_200_OK
    assert [user["userName"] for user in response.json()] == ["alice", "bob"]


@pytest.mark.asyncio
@pytest.mark.parametrize("user_name", ["a/b", "q?x", "two words", "tag#1", "50%"])
async def test_create_user_rejects_names_unusable_in_links(
    client: AsyncClient,
    user_name: str,
) -> None:
    response = await client.post("/users", params={"userName": user_name})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Invalid request: query.userName")
    assert (await client.get("/users")).json() == []


@pytest.mark.asyncio
async def test_user_links_resolve(client: AsyncClient) -> None:
    created = (await client.post("/users", params={"userName": "alice.smith_1"})).json()

    for rel in ("self", "blogs"):
        response = await client.get(created["_links"][rel]["href"])
        assert response.status_code == status.HTTP_200_OK
