# tests/routes/test_posts.py
"""Tests for the /api/posts list, read and write endpoints."""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

import pytest
from httpx import AsyncClient

PostFactory = Callable[..., dict[str, Any]]


async def post_count(client: AsyncClient) -> int:
    response = await client.get("/api/posts")
    assert response.status_code == 200
    return response.json()["pagination"]["totalPosts"]


class TestListPosts:
    """Tests for GET /api/posts."""

    @pytest.mark.asyncio
    async def test_empty_collection(self, client: AsyncClient) -> None:
        response = await client.get("/api/posts")

        assert response.status_code == 200
        assert response.json() == {
            "posts": [],
            "pagination": {
                "currentPage": 1,
                "totalPages": 0,
                "totalPosts": 0,
                "hasNext": False,
                "hasPrev": False,
            },
        }

    @pytest.mark.asyncio
    async def test_first_page_defaults(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts")
        data = response.json()

        assert len(data["posts"]) == 12
        assert data["posts"][0]["writeDate"] == "2025-09-14"
        assert data["pagination"] == {
            "currentPage": 1,
            "totalPages": 2,
            "totalPosts": 14,
            "hasNext": True,
            "hasPrev": False,
        }

    @pytest.mark.asyncio
    async def test_second_page_of_fourteen(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts", params={"page": 2, "limit": 12})
        data = response.json()

        assert response.status_code == 200
        assert [p["writeDate"] for p in data["posts"]] == ["2025-09-02", "2025-09-01"]
        assert data["pagination"] == {
            "currentPage": 2,
            "totalPages": 2,
            "totalPosts": 14,
            "hasNext": False,
            "hasPrev": True,
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [1, 2, 3, 4])
    async def test_skip_and_current_page(
        self,
        client: AsyncClient,
        september_posts: list[dict],
        page: int,
    ) -> None:
        limit = 4
        response = await client.get("/api/posts", params={"page": page, "limit": limit})
        data = response.json()

        skip = (page - 1) * limit
        expected = [f"2025-09-{day:02d}" for day in range(14 - skip, max(14 - skip - limit, 0), -1)]
        assert [p["writeDate"] for p in data["posts"]] == expected
        assert data["pagination"]["currentPage"] == page
        assert data["pagination"]["hasPrev"] is (page > 1)
        assert data["pagination"]["hasNext"] is (skip + len(data["posts"]) < 14)

    @pytest.mark.asyncio
    async def test_malformed_pagination_falls_back_to_defaults(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts", params={"page": "abc", "limit": "lots"})
        data = response.json()

        assert response.status_code == 200
        assert len(data["posts"]) == 12
        assert data["pagination"]["currentPage"] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", ["0", "-2"])
    async def test_non_positive_page_is_first_page(
        self,
        client: AsyncClient,
        september_posts: list[dict],
        page: str,
    ) -> None:
        data = (await client.get("/api/posts", params={"page": page})).json()

        assert data["pagination"]["currentPage"] == 1
        assert data["pagination"]["hasPrev"] is False
        assert data["posts"][0]["writeDate"] == "2025-09-14"

    @pytest.mark.asyncio
    async def test_oversized_page_is_an_empty_page(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts", params={"page": "9" * 20})
        data = response.json()

        assert response.status_code == 200
        assert data["posts"] == []
        assert data["pagination"]["currentPage"] == (2**63 - 1) // 12 + 1
        assert data["pagination"]["hasNext"] is False
        assert data["pagination"]["hasPrev"] is True

    @pytest.mark.asyncio
    async def test_oversized_limit_returns_everything(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts", params={"limit": "1" + "0" * 25})
        data = response.json()

        assert response.status_code == 200
        assert len(data["posts"]) == 14
        assert data["pagination"]["totalPages"] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", ["0", "-5"])
    async def test_non_positive_limit_returns_empty_page(
        self,
        client: AsyncClient,
        september_posts: list[dict],
        limit: str,
    ) -> None:
        response = await client.get("/api/posts", params={"limit": limit})
        data = response.json()

        assert response.status_code == 200
        assert data["posts"] == []
        assert data["pagination"]["totalPages"] == 0
        assert data["pagination"]["totalPosts"] == 14
        assert data["pagination"]["hasNext"] is True

    @pytest.mark.asyncio
    async def test_category_filter(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        data = (await client.get("/api/posts", params={"category": "ai"})).json()

        assert data["pagination"]["totalPosts"] == 7
        assert {p["category"] for p in data["posts"]} == {"ai"}

    @pytest.mark.asyncio
    async def test_category_all_is_no_filter(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        unfiltered = (await client.get("/api/posts", params={"limit": 20})).json()
        all_posts = (await client.get("/api/posts", params={"category": "all", "limit": 20})).json()

        assert all_posts == unfiltered

    @pytest.mark.asyncio
    async def test_category_and_search_compose(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        both = (await client.get("/api/posts", params={"category": "ai", "q": "tag-03"})).json()
        mismatch = (await client.get("/api/posts", params={"category": "cloud", "q": "tag-03"})).json()

        assert [p["title"] for p in both["posts"]] == ["Post 03"]
        assert mismatch["posts"] == []


class TestFeaturedPosts:
    """Tests for GET /api/posts/featured."""

    @pytest.mark.asyncio
    async def test_top_three_newest_featured(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts/featured")
        data = response.json()

        assert response.status_code == 200
        assert [p["writeDate"] for p in data] == ["2025-09-12", "2025-09-09", "2025-09-06"]
        assert all(p["featured"] for p in data)

    @pytest.mark.asyncio
    async def test_no_featured_posts(self, client: AsyncClient) -> None:
        response = await client.get("/api/posts/featured")

        assert response.status_code == 200
        assert response.json() == []


class TestPostsByCategory:
    """Tests for GET /api/posts/category/{category}."""

    @pytest.mark.asyncio
    async def test_paginated_category(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.get("/api/posts/category/cloud", params={"page": 2, "limit": 5})
        data = response.json()

        assert response.status_code == 200
        assert data["category"] == "cloud"
        assert [p["writeDate"] for p in data["posts"]] == ["2025-09-04", "2025-09-02"]
        assert data["pagination"] == {
            "currentPage": 2,
            "totalPages": 2,
            "totalPosts": 7,
            "hasNext": False,
            "hasPrev": True,
        }

    @pytest.mark.asyncio
    async def test_unknown_category(self, client: AsyncClient, september_posts: list[dict]) -> None:
        data = (await client.get("/api/posts/category/quantum")).json()

        assert data["posts"] == []
        assert data["pagination"]["totalPosts"] == 0


class TestGetPost:
    """Tests for GET /api/posts/{id}."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, client: AsyncClient, make_post: PostFactory) -> None:
        created = (await client.post("/api/posts", json=make_post())).json()

        response = await client.get(f"/api/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [str(uuid4()), "64f1c2e9a1b2c3d4e5f60718"])
    async def test_not_found(self, client: AsyncClient, post_id: str) -> None:
        response = await client.get(f"/api/posts/{post_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "Blog post not found"}


class TestCreatePost:
    """Tests for POST /api/posts."""

    @pytest.mark.asyncio
    async def test_create(self, client: AsyncClient, make_post: PostFactory) -> None:
        payload = make_post(featured=True)

        response = await client.post("/api/posts", json=payload)
        data = response.json()

        assert response.status_code == 201
        assert {k: data[k] for k in payload} == payload
        assert data["id"]
        assert data["createdAt"].endswith("Z")
        assert data["updatedAt"] == data["createdAt"]
        assert "tagsIndex" not in data
        assert "tags_index" not in data

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "writeDate", "imageUrl"])
    async def test_missing_required_field_persists_nothing(
        self,
        client: AsyncClient,
        make_post: PostFactory,
        field: str,
    ) -> None:
        payload = make_post()
        del payload[field]

        response = await client.post("/api/posts", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["field"] == field
        assert await post_count(client) == 0

    @pytest.mark.asyncio
    async def test_malformed_json(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/posts",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"
        assert await post_count(client) == 0

    @pytest.mark.asyncio
    async def test_missing_body(self, client: AsyncClient) -> None:
        response = await client.post("/api/posts")

        assert response.status_code == 400
        assert "message" in response.json()


class TestUpdatePost:
    """Tests for PUT /api/posts/{id}."""

    @pytest.mark.asyncio
    async def test_partial_update(self, client: AsyncClient, make_post: PostFactory) -> None:
        created = (await client.post("/api/posts", json=make_post())).json()

        response = await client.put(
            f"/api/posts/{created['id']}",
            json={"title": "Renamed", "tags": []},
        )
        data = response.json()

        assert response.status_code == 200
        assert data["title"] == "Renamed"
        assert data["tags"] == []
        assert data["author"] == created["author"]
        assert data["id"] == created["id"]
        assert data["createdAt"] == created["createdAt"]
        assert data["updatedAt"] >= created["updatedAt"]

    @pytest.mark.asyncio
    async def test_update_not_found(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/posts/{uuid4()}", json={"title": "x"})

        assert response.status_code == 404
        assert response.json() == {"message": "Blog post not found"}

    @pytest.mark.asyncio
    async def test_update_with_empty_field(
        self,
        client: AsyncClient,
        make_post: PostFactory,
    ) -> None:
        created = (await client.post("/api/posts", json=make_post())).json()

        response = await client.put(f"/api/posts/{created['id']}", json={"author": ""})

        assert response.status_code == 400
        unchanged = (await client.get(f"/api/posts/{created['id']}")).json()
        assert unchanged["author"] == created["author"]


class TestDeletePost:
    """Tests for DELETE /api/posts/{id}."""

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, make_post: PostFactory) -> None:
        created = (await client.post("/api/posts", json=make_post())).json()

        response = await client.delete(f"/api/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Blog post deleted successfully"}
        assert (await client.get(f"/api/posts/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_nonexistent_leaves_collection_unchanged(
        self,
        client: AsyncClient,
        september_posts: list[dict],
    ) -> None:
        response = await client.delete(f"/api/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Blog post not found"}
        assert await post_count(client) == 14
