import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from mdblog import dependencies as deps
from mdblog.repos.posts_repo import PostsRepo
from mdblog.services.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

router = APIRouter()

RENDER_ERROR_MESSAGE = "Template rendering error"
NOT_FOUND_MESSAGE = "Post not found"


@router.get("/", response_class=HTMLResponse)
def index(
    repo: PostsRepo = Depends(deps.get_posts_repo),
    renderer: TemplateRenderer = Depends(deps.get_template_renderer),
):
    """List every post, newest first."""
    posts = repo.list()
    return _render(renderer, "index", {"posts": posts})


@router.get("/blog/{post_title}", response_class=HTMLResponse)
def single_post(
    post_title: str,
    repo: PostsRepo = Depends(deps.get_posts_repo),
    renderer: TemplateRenderer = Depends(deps.get_template_renderer),
):
    """Show the first post whose slug matches."""
    post = repo.get(post_title)
    if post is None:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return _render(renderer, "single", {"post": post})


def _render(
    renderer: TemplateRenderer, name: str, context: Dict[str, Any]
) -> Response:
    try:
        return HTMLResponse(renderer.render(name, context))
    except Exception as e:
        logger.error(f"Failed to render {name} template: {e}")
        return PlainTextResponse(RENDER_ERROR_MESSAGE, status_code=500)
