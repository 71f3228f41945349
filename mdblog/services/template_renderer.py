import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATE_FILES = {
    "index": "index.html",
    "single": "single.html",
}


class TemplateRenderer:
    """
    Named Jinja2 templates, loaded once and shared read-only by all requests.
    """

    def __init__(self, templates: Mapping[str, Template]):
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def load(cls, templates_dir: Path) -> "TemplateRenderer":
        """Compile every template up front; a missing or broken one raises."""
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(),
        )
        templates = {
            name: env.get_template(filename)
            for name, filename in TEMPLATE_FILES.items()
        }
        logger.info(f"Loaded templates {sorted(templates)} from {templates_dir}")
        return cls(templates)

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        return self._templates[name].render(dict(context))
