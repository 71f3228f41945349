import datetime
import logging
from pathlib import Path
from typing import Callable, List, Optional

from mdblog.schemas.blog import Absent, Post
from mdblog.services.metadata_parser import parse_metadata
from mdblog.services.post_assembler import build_post, local_now

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class PostsRepo:
    """
    Posts read straight from a flat content directory.

    Nothing is cached: every call rescans and reparses the directory.
    """

    def __init__(
        self,
        content_dir: Path,
        sort_by_display_date: bool = False,
        now: Callable[[], datetime.datetime] = local_now,
    ):
        self.content_dir = Path(content_dir)
        self.sort_by_display_date = sort_by_display_date
        self.now = now

    def list(self) -> List[Post]:
        posts = []
        for path in self._candidate_files():
            post = self._load_post(path)
            if post:
                posts.append(post)

        if self.sort_by_display_date:
            posts.sort(key=lambda p: p.date, reverse=True)
        else:
            posts.sort(key=lambda p: p.published, reverse=True)
        return posts

    def get(self, slug: str) -> Optional[Post]:
        """First post in list() order whose slug matches."""
        return next((post for post in self.list() if post.slug == slug), None)

    def _candidate_files(self) -> List[Path]:
        try:
            entries = sorted(self.content_dir.iterdir())
        except OSError as e:
            logger.warning(f"Cannot read content directory {self.content_dir}: {e}")
            return []
        return [p for p in entries if p.suffix == POST_SUFFIX and p.is_file()]

    def _load_post(self, path: Path) -> Optional[Post]:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable file {path.name}: {e}")
            return None

        parsed = parse_metadata(text)
        if isinstance(parsed, Absent):
            logger.debug(f"Skipping {path.name}: no metadata block")
            return None

        try:
            modified = path.stat().st_mtime
        except OSError:
            modified = None

        return build_post(parsed, path.name, modified=modified, now=self.now)
