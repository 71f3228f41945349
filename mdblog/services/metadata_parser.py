import re
from typing import Dict, List

from frontmatter.default_handlers import BaseHandler

from mdblog.schemas.blog import Absent, Found, Metadata, ParseResult

DELIMITER = "---"
RECOGNIZED_KEYS = ("title", "date", "tags", "summary")


class HeaderHandler(BaseHandler):
    """
    Frontmatter handler for the blog's plain ``key: value`` header.

    The header is whatever sits between the first two ``---`` markers in the
    file, wherever they appear. Values are not YAML: tags are a comma
    separated list and quote characters are stripped rather than parsed.
    """

    FM_BOUNDARY = re.compile(re.escape(DELIMITER))
    START_DELIMITER = DELIMITER
    END_DELIMITER = DELIMITER

    def detect(self, text: str) -> bool:
        return len(self.FM_BOUNDARY.split(text, 2)) == 3

    def load(self, fm: str) -> Dict[str, object]:
        fields: Dict[str, object] = {}
        for line in fm.splitlines():
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.strip()
            value = value.strip()
            if key == "tags":
                fields[key] = _split_tags(value)
            elif key == "date":
                fields[key] = value
            elif key in RECOGNIZED_KEYS:
                fields[key] = _strip_quotes(value)
        return fields


handler = HeaderHandler()


def parse_metadata(text: str) -> ParseResult:
    """
    Split raw file text into its metadata block and Markdown body.

    The body is kept exactly as written after the second marker; leading
    indentation is significant to Markdown.
    """
    if not handler.detect(text):
        return Absent()

    fm, body = handler.split(text)
    return Found(metadata=Metadata(**handler.load(fm)), body=body)


def _strip_quotes(value: str) -> str:
    return value.replace('"', "")


def _split_tags(value: str) -> List[str]:
    return [_strip_quotes(tag.strip()) for tag in value.split(",")]
