from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

from .models.schema import WebsiteSchema, resolve_home_page
from .registry import SectionRegistry
from .renderers import RenderCoverage, SectionRenderer
from .slugs import package_slug
from .template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

FileSet = dict[str, str]

FALLBACK_PACKAGE_NAME = "generated-site"
HOME_EMPTY_MESSAGE = "Aucun contenu pour le moment."
PAGE_NOT_FOUND_MESSAGE = "Page introuvable."

# (output path, template) for files that only depend on the site name.
BOILERPLATE_FILES: Sequence[tuple[str, str]] = (
    ("tsconfig.json", "project/tsconfig.json.j2"),
    ("next-env.d.ts", "project/next-env.d.ts.j2"),
    ("next.config.mjs", "project/next.config.mjs.j2"),
    ("tailwind.config.ts", "project/tailwind.config.ts.j2"),
    ("postcss.config.mjs", "project/postcss.config.mjs.j2"),
    ("app/globals.css", "project/app/globals.css.j2"),
    ("app/layout.tsx", "project/app/layout.tsx.j2"),
)

PACKAGE_SCRIPTS: Mapping[str, str] = {
    "dev": "next dev",
    "build": "next build",
    "start": "next start",
    "lint": "next lint",
}

PACKAGE_DEPENDENCIES: Mapping[str, str] = {
    "next": "latest",
    "react": "latest",
    "react-dom": "latest",
}

PACKAGE_DEV_DEPENDENCIES: Mapping[str, str] = {
    "typescript": "latest",
    "@types/react": "latest",
    "@types/node": "latest",
    "tailwindcss": "latest",
    "autoprefixer": "latest",
    "postcss": "latest",
    "eslint": "latest",
    "eslint-config-next": "latest",
}


class ProjectCodeGenerator:
    """Turns a website schema into the source files of a Next.js project."""

    def __init__(
        self,
        *,
        registry: SectionRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._registry = registry or SectionRegistry()
        self._renderer = renderer or TemplateRenderer()
        self._home_sections = SectionRenderer(
            coverage=RenderCoverage.full, registry=self._registry, renderer=self._renderer
        )
        self._slug_sections = SectionRenderer(
            coverage=RenderCoverage.degraded, registry=self._registry, renderer=self._renderer
        )

    def generate(self, schema: WebsiteSchema) -> FileSet:
        site_name = schema.website.name
        context = {"site_name": site_name}

        files: FileSet = {"package.json": self._build_package_json(site_name)}
        for path, template in BOILERPLATE_FILES:
            files[path] = self._renderer.render(template, context)
        files["app/page.tsx"] = self._renderer.render(
            "project/app/page.tsx.j2",
            {"dispatcher": self._home_sections.dispatcher(), "empty_message": HOME_EMPTY_MESSAGE},
        )
        files["app/[slug]/page.tsx"] = self._renderer.render(
            "project/app/slug_page.tsx.j2",
            {"dispatcher": self._slug_sections.dispatcher(), "not_found_message": PAGE_NOT_FOUND_MESSAGE},
        )
        files["lib/websiteSchema.ts"] = self._renderer.render(
            "project/lib/websiteSchema.ts.j2",
            {"schema_source": self.serialize_schema(schema)},
        )

        home = resolve_home_page(schema)
        logger.info(
            "Generated project files",
            extra={
                "website": site_name,
                "files_count": len(files),
                "pages_count": len(schema.website.pages),
                "home_page": home.slug if home else None,
            },
        )
        return files

    def serialize_schema(self, schema: WebsiteSchema) -> str:
        return json.dumps(schema.to_json_dict(), ensure_ascii=False, indent=2)

    def _build_package_json(self, site_name: str) -> str:
        package: dict[str, Any] = {
            "name": package_slug(site_name.strip() or FALLBACK_PACKAGE_NAME),
            "version": "0.1.0",
            "private": True,
            "scripts": dict(PACKAGE_SCRIPTS),
            "dependencies": dict(PACKAGE_DEPENDENCIES),
            "devDependencies": dict(PACKAGE_DEV_DEPENDENCIES),
        }
        return json.dumps(package, indent=2)


__all__ = ["FileSet", "ProjectCodeGenerator"]
