from fastapi import Request

from mdblog.repos.posts_repo import PostsRepo
from mdblog.services.template_renderer import TemplateRenderer
from mdblog.settings import settings


def get_posts_repo() -> PostsRepo:
    return PostsRepo(
        settings.content_path, sort_by_display_date=settings.SORT_BY_DISPLAY_DATE
    )


def get_template_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.template_renderer
