import datetime
import logging
import re
from typing import Callable, Optional

from mdblog.schemas.blog import Found, Metadata, Post
from mdblog.services.markdown_renderer import render
from mdblog.services.metadata_parser import parse_metadata

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def local_now() -> datetime.datetime:
    return datetime.datetime.now().astimezone()


def assemble_post(
    text: str,
    filename: str,
    modified: Optional[float] = None,
    now: Callable[[], datetime.datetime] = local_now,
) -> Post:
    """
    Build a Post from a file's full text.

    ``modified`` is the file's last-modified POSIX timestamp, used when the
    header has no usable date. When that is missing too, ``now`` supplies the
    date.
    """
    parsed = parse_metadata(text)
    if not isinstance(parsed, Found):
        parsed = Found(metadata=Metadata(), body="")
    return build_post(parsed, filename, modified=modified, now=now)


def build_post(
    parsed: Found,
    filename: str,
    modified: Optional[float] = None,
    now: Callable[[], datetime.datetime] = local_now,
) -> Post:
    """Build a Post from an already parsed header and body."""
    metadata, body = parsed.metadata, parsed.body
    published = resolve_date(metadata.date, modified, now)

    return Post(
        title=metadata.title,
        content=render(body),
        summary=metadata.summary,
        date=format_date(published),
        tags=metadata.tags,
        filename=filename,
        slug=derive_slug(metadata.title),
        published=published,
    )


def derive_slug(title: str) -> str:
    """Lowercase the title and swap spaces for hyphens; nothing else."""
    return title.lower().replace(" ", "-")


def resolve_date(
    raw: str,
    modified: Optional[float] = None,
    now: Callable[[], datetime.datetime] = local_now,
) -> datetime.datetime:
    try:
        # Header dates are taken as local midnight
        if DATE_PATTERN.fullmatch(raw):
            return datetime.datetime.strptime(raw, DATE_FORMAT).astimezone()
    except (TypeError, ValueError):
        pass

    if modified is not None:
        try:
            return datetime.datetime.fromtimestamp(modified).astimezone()
        except (OverflowError, OSError, ValueError) as e:
            logger.debug(f"Unusable modification time {modified!r}: {e}")

    return now()


def format_date(value: datetime.datetime) -> str:
    """Format as e.g. ``January 2, 2006``."""
    return f"{value:%B} {value.day}, {value.year}"
