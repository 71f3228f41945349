import datetime
import textwrap
from pathlib import Path

import pytest

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

FIXED_NOW = datetime.datetime(2025, 3, 4, 12, 0, tzinfo=datetime.timezone.utc)


def fixed_now() -> datetime.datetime:
    return FIXED_NOW


def write_post(directory: Path, filename: str, text: str) -> Path:
    """Write a dedented post file into ``directory``."""
    path = directory / filename
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "content"
    directory.mkdir()
    return directory


class FakeRenderer:
    """
    Template renderer stand-in recording what each template was given.
    """

    def __init__(self):
        self.calls = []

    def render(self, name: str, context: dict) -> str:
        self.calls.append((name, context))
        if name == "index":
            titles = ",".join(post.title for post in context["posts"])
            return f"<index>{titles}</index>"
        return f"<single>{context['post'].title}</single>"


class BoomRenderer:
    def render(self, name: str, context: dict) -> str:
        raise RuntimeError(f"cannot render {name}")


class FakePostsRepo:
    """
    Minimal repo stand-in used in router tests.
    """

    def __init__(self, posts=None):
        self.posts = list(posts or [])
        self.list_calls = 0

    def list(self):
        self.list_calls += 1
        return list(self.posts)

    def get(self, slug: str):
        return next((p for p in self.list() if p.slug == slug), None)
