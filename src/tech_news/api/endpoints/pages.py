# src/tech_news/api/endpoints/pages.py
"""Server-rendered HTML pages backed by the same services as the JSON API."""

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from tech_news.services import post_service
from tech_news.templating import templates

from ..dependencies import ContextDep, SessionDep

router = APIRouter(tags=["pages"], include_in_schema=False)


def _login_redirect() -> RedirectResponse:
    return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)


@router.get("/", response_class=HTMLResponse)
async def homepage(request: Request, db: SessionDep, context: ContextDep) -> Response:
    """Front page: every post, newest first."""
    posts = await post_service.list_posts(db)
    return templates.TemplateResponse(
        request,
        "homepage.html",
        {"posts": posts, "logged_in": context.logged_in},
    )


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, context: ContextDep) -> Response:
    """Login and sign-up forms; logged-in visitors go back to the front page."""
    if context.logged_in:
        return RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    return templates.TemplateResponse(request, "login.html", {"logged_in": False})


@router.get("/post/{post_id}", response_class=HTMLResponse)
async def single_post(
    post_id: int,
    request: Request,
    db: SessionDep,
    context: ContextDep,
) -> Response:
    """One post with its comments; the vote and comment forms need a session."""
    post = await post_service.get_post(db, post_id)
    return templates.TemplateResponse(
        request,
        "single-post.html",
        {"post": post, "logged_in": context.logged_in},
    )


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request, db: SessionDep, context: ContextDep) -> Response:
    """The caller's own posts and the new-post form."""
    if not context.logged_in:
        return _login_redirect()
    posts = await post_service.list_posts(db, user_id=context.user_id)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"posts": posts, "logged_in": True},
    )


@router.get("/dashboard/edit/{post_id}", response_class=HTMLResponse)
async def edit_post(
    post_id: int,
    request: Request,
    db: SessionDep,
    context: ContextDep,
) -> Response:
    """Edit-title and delete form for a single post."""
    if not context.logged_in:
        return _login_redirect()
    post = await post_service.get_post(db, post_id)
    return templates.TemplateResponse(
        request,
        "edit-post.html",
        {"post": post, "logged_in": True},
    )
