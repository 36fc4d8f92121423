"""Tests for upvoting and the /api/votes endpoints."""

from collections.abc import Callable

from fastapi import status
from httpx import AsyncClient

from tech_news.models import Post, User


async def test_two_users_upvote(
    make_client: Callable[[], AsyncClient],
    test_post: Post,
    test_user_data: dict,
    other_user: User,
    other_user_data: dict,
    login,
) -> None:
    async with make_client() as alice, make_client() as bob:
        await login(alice, test_user_data)
        await login(bob, other_user_data)

        r = await alice.put("/api/posts/upvote", json={"post_id": test_post.id})
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["vote_count"] == 1

        r = await bob.put("/api/posts/upvote", json={"post_id": test_post.id})
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["id"] == test_post.id
        assert r.json()["vote_count"] == 2

        for _ in range(2):
            assert (await alice.get(f"/api/posts/{test_post.id}")).json()["vote_count"] == 2
            listed = (await alice.get("/api/posts")).json()
            assert listed[0]["vote_count"] == 2


async def test_repeat_upvote_is_rejected(auth_client: AsyncClient, test_post: Post) -> None:
    assert (await auth_client.put("/api/posts/upvote", json={"post_id": test_post.id})).status_code == 200

    r = await auth_client.put("/api/posts/upvote", json={"post_id": test_post.id})
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json() == {"message": "You have already upvoted this post"}
    assert (await auth_client.get(f"/api/posts/{test_post.id}")).json()["vote_count"] == 1


async def test_upvote_requires_login(client: AsyncClient, test_post: Post) -> None:
    r = await client.put("/api/posts/upvote", json={"post_id": test_post.id})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert (await client.get("/api/votes")).json() == []


async def test_upvote_missing_post(auth_client: AsyncClient) -> None:
    r = await auth_client.put("/api/posts/upvote", json={"post_id": 999})
    assert r.status_code == status.HTTP_409_CONFLICT


async def test_upvote_needs_post_id(auth_client: AsyncClient) -> None:
    r = await auth_client.put("/api/posts/upvote", json={})
    assert r.status_code == status.HTTP_400_BAD_REQUEST


async def test_list_get_and_delete_votes(
    auth_client: AsyncClient, test_post: Post, test_user: User
) -> None:
    await auth_client.put("/api/posts/upvote", json={"post_id": test_post.id})

    votes = (await auth_client.get("/api/votes")).json()
    assert len(votes) == 1
    vote = votes[0]
    assert vote["user_id"] == test_user.id
    assert vote["post_id"] == test_post.id

    r = await auth_client.get(f"/api/votes/{vote['id']}")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == vote

    r = await auth_client.delete(f"/api/votes/{vote['id']}")
    assert r.json() == {"affected_rows": 1}
    assert (await auth_client.get(f"/api/posts/{test_post.id}")).json()["vote_count"] == 0

    assert (await auth_client.get(f"/api/votes/{vote['id']}")).status_code == status.HTTP_404_NOT_FOUND
    assert (await auth_client.delete(f"/api/votes/{vote['id']}")).status_code == status.HTTP_404_NOT_FOUND
