"""
Jinja2 rendering for wrapper templates.

Templates hold JavaScript, so nothing is escaped, and block tags sit on
lines of their own without leaving blank lines behind.
"""

from typing import Any, Dict, Iterable, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    DictLoader,
    TemplateNotFound,
)


class TemplateError(Exception):
    """Raised when a wrapper template can't be loaded or rendered."""

    pass


class TemplateEngine:
    """Loads wrapper templates from a directory, or from memory."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Create the engine.

        Args:
            template_dir: Directory holding ``*.j2`` files; templates are
                kept in memory when it is missing
        """
        self.template_dir = template_dir
        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["join_names"] = join_names
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        """Render template source given inline."""
        try:
            return self._env.from_string(source).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """Register an in-memory template, replacing a file loader if needed."""
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content


def join_names(items: Iterable[Any], attribute: str = "name") -> str:
    """Join the ``attribute`` of each item into a JavaScript argument list."""
    return ", ".join(str(getattr(item, attribute)) for item in items)


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
