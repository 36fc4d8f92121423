"""Tests for the /api/users endpoints, login and logout."""

from fastapi import status
from httpx import AsyncClient

from tech_news.core.settings import settings
from tech_news.models import User


async def test_signup_logs_the_new_user_in(client: AsyncClient) -> None:
    r = await client.post(
        "/api/users",
        json={"username": "a", "email": "a@x.com", "password": "pass1"},
    )
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["username"] == "a"
    assert body["email"] == "a@x.com"
    assert "password" not in body
    assert settings.session_cookie_name in client.cookies

    r = await client.post("/api/posts", json={"title": "T", "post_url": "https://example.com"})
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["user_id"] == body["id"]


async def test_login_scenario(client: AsyncClient) -> None:
    r = await client.post(
        "/api/users",
        json={"username": "a", "email": "a@x.com", "password": "pass1"},
    )
    assert r.status_code == status.HTTP_200_OK
    client.cookies.clear()

    r = await client.post("/api/users/login", json={"email": "a@x.com", "password": "wrong"})
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json() == {"message": "Incorrect email or password"}
    assert settings.session_cookie_name not in client.cookies

    r = await client.post("/api/users/login", json={"email": "a@x.com", "password": "pass1"})
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["user"]["email"] == "a@x.com"
    assert r.json()["message"] == "You are now logged in!"
    assert settings.session_cookie_name in client.cookies


async def test_login_with_mixed_case_email(client: AsyncClient) -> None:
    r = await client.post(
        "/api/users",
        json={"username": "carol", "email": "Carol@Example.COM", "password": "pass1"},
    )
    assert r.status_code == status.HTTP_200_OK
    client.cookies.clear()

    r = await client.post("/api/users/login", json={"email": "Carol@Example.COM", "password": "pass1"})
    assert r.status_code == status.HTTP_200_OK, r.text
    assert r.json()["user"]["username"] == "carol"

    r = await client.post("/api/users/login", json={"email": "carol@example.com", "password": "pass1"})
    assert r.status_code == status.HTTP_200_OK


async def test_unknown_email_gets_the_same_error(client: AsyncClient, test_user: User) -> None:
    r = await client.post("/api/users/login", json={"email": "nobody@x.com", "password": "pass1"})
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json() == {"message": "Incorrect email or password"}


async def test_signup_validation(client: AsyncClient, test_user: User) -> None:
    r = await client.post("/api/users", json={"username": "x", "email": "not-an-email", "password": "pass1"})
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json()["message"] == "Invalid request data"
    assert r.json()["errors"]

    r = await client.post("/api/users", json={"username": "x", "email": "x@x.com", "password": "abc"})
    assert r.status_code == status.HTTP_400_BAD_REQUEST

    r = await client.post(
        "/api/users",
        json={"username": "x", "email": test_user.email, "password": "pass1"},
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json() == {"message": "Email address is already registered"}


async def test_list_and_get_users_hide_passwords(
    client: AsyncClient, test_user: User, other_user: User
) -> None:
    r = await client.get("/api/users")
    assert r.status_code == status.HTTP_200_OK
    users = r.json()
    assert [u["id"] for u in users] == [test_user.id, other_user.id]
    assert all("password" not in u for u in users)

    r = await client.get(f"/api/users/{test_user.id}")
    assert r.status_code == status.HTTP_200_OK
    detail = r.json()
    assert "password" not in detail
    assert detail["posts"] == [] and detail["comments"] == [] and detail["voted_posts"] == []


async def test_user_detail_includes_activity(auth_client: AsyncClient, test_user: User) -> None:
    r = await auth_client.post("/api/posts", json={"title": "T", "post_url": "https://example.com"})
    post_id = r.json()["id"]
    await auth_client.post("/api/comments", json={"comment_text": "first!", "post_id": post_id})
    await auth_client.put("/api/posts/upvote", json={"post_id": post_id})

    detail = (await auth_client.get(f"/api/users/{test_user.id}")).json()
    assert [p["id"] for p in detail["posts"]] == [post_id]
    assert detail["comments"][0]["comment_text"] == "first!"
    assert detail["comments"][0]["post"]["title"] == "T"
    assert detail["voted_posts"] == [{"id": post_id, "title": "T"}]


async def test_get_missing_user(client: AsyncClient) -> None:
    r = await client.get("/api/users/999")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert r.json() == {"message": "No user found with this id"}


async def test_update_user(client: AsyncClient, test_user: User, login) -> None:
    r = await client.put(f"/api/users/{test_user.id}", json={"password": "changed"})
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"affected_rows": 1}

    await login(client, {"email": test_user.email, "password": "changed"})

    r = await client.put("/api/users/999", json={"username": "ghost"})
    assert r.status_code == status.HTTP_404_NOT_FOUND


async def test_password_limit_counts_bytes(client: AsyncClient, test_user: User) -> None:
    # 40 characters, 80 bytes in UTF-8
    long_password = "\u00e9" * 40

    r = await client.post(
        "/api/users",
        json={"username": "x", "email": "x@x.com", "password": long_password},
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.json()["message"] == "Invalid request data"

    r = await client.put(f"/api/users/{test_user.id}", json={"password": long_password})
    assert r.status_code == status.HTTP_400_BAD_REQUEST

    r = await client.post(
        "/api/users",
        json={"username": "y", "email": "y@x.com", "password": "\u00e9" * 36},
    )
    assert r.status_code == status.HTTP_200_OK


async def test_password_change_then_login(client: AsyncClient, test_user: User, test_user_data: dict, login) -> None:
    await login(client, test_user_data)
    r = await client.put(f"/api/users/{test_user.id}", json={"password": "changed"})
    assert r.status_code == status.HTTP_200_OK

    r = await client.post(
        "/api/users/login",
        json={"email": test_user_data["email"], "password": test_user_data["password"]},
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    await login(client, {"email": test_user_data["email"], "password": "changed"})


async def test_delete_user(client: AsyncClient, test_user: User) -> None:
    r = await client.delete(f"/api/users/{test_user.id}")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"affected_rows": 1}

    r = await client.delete(f"/api/users/{test_user.id}")
    assert r.status_code == status.HTTP_404_NOT_FOUND


async def test_logout(auth_client: AsyncClient) -> None:
    r = await auth_client.post("/api/users/logout")
    assert r.status_code == status.HTTP_204_NO_CONTENT
    assert settings.session_cookie_name not in auth_client.cookies

    r = await auth_client.post("/api/posts", json={"title": "T", "post_url": "https://example.com"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


async def test_logout_without_session(client: AsyncClient) -> None:
    r = await client.post("/api/users/logout")
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
