from typing import Iterable, Optional

import markdown

from mdblog.settings import settings


def render(markdown_text: str, extensions: Optional[Iterable[str]] = None) -> str:
    """Convert a Markdown body to an HTML fragment."""
    if extensions is None:
        extensions = settings.MARKDOWN_EXTENSIONS
    return markdown.markdown(markdown_text, extensions=list(extensions))
