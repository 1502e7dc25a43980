"""Jinja2 rendering for exported project files.

Templates live in ``site_builder/templates/`` next to this module: project
boilerplate under ``project/`` and one JSX fragment per section kind under
``sections/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render one template file.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"project/app/layout.tsx.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered text.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))


__all__ = ["TemplateRenderer"]
