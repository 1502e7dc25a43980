from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from .dictionaries import (
    DEFAULT_COLORS,
    DEFAULT_PAGE_PRESETS,
    DEFAULT_PAGE_SLUGS,
    DEFAULT_PAGE_TITLES,
    DEFAULT_SCHEMA_HERO_SUBHEADLINE,
    FALLBACK_PAGE_PRESET,
)
from .models.brief import ProjectBrief
from .models.schema import Page, Section, SectionType, Website, WebsiteColors, WebsiteSchema
from .registry import SectionRegistry

logger = logging.getLogger(__name__)


def _format_props(value: Any, *, project_name: str) -> Any:
    if isinstance(value, str):
        return value.replace("{project_name}", project_name)
    if isinstance(value, list):
        return [_format_props(item, project_name=project_name) for item in value]
    if isinstance(value, dict):
        return {key: _format_props(item, project_name=project_name) for key, item in value.items()}
    return value


class SchemaSynthesizer:
    def __init__(
        self,
        *,
        registry: SectionRegistry | None = None,
        page_presets: Mapping[str, Sequence[SectionType]] = DEFAULT_PAGE_PRESETS,
        page_titles: Mapping[str, str] = DEFAULT_PAGE_TITLES,
        default_slugs: Sequence[str] = DEFAULT_PAGE_SLUGS,
        colors: Mapping[str, str] = DEFAULT_COLORS,
    ) -> None:
        self._registry = registry or SectionRegistry()
        self._page_presets = page_presets
        self._page_titles = page_titles
        self._default_slugs = tuple(default_slugs)
        self._colors = dict(colors)

    def synthesize(self, brief: ProjectBrief) -> WebsiteSchema:
        slugs = self._resolve_slugs(brief.pages_wanted)
        pages = [self._build_page(slug, brief.project_name) for slug in slugs]
        colors = WebsiteColors(
            primary=brief.primary_color if brief.primary_color is not None else self._colors["primary"],
            secondary=brief.secondary_color if brief.secondary_color is not None else self._colors["secondary"],
        )
        logger.info(
            "Synthesized schema from brief",
            extra={
                "project_name": brief.project_name,
                "business_type": brief.business_type,
                "pages": slugs,
            },
        )
        return WebsiteSchema(website=Website(name=brief.project_name, colors=colors, pages=pages))

    def default_schema(self, project_name: str) -> WebsiteSchema:
        """Single home page with one hero, used when a project has no schema yet."""
        hero = self._build_section(SectionType.hero, project_name, taken=())
        hero.props["subheadline"] = DEFAULT_SCHEMA_HERO_SUBHEADLINE
        page = Page(slug="home", title=self._page_titles.get("home", "home"), sections=[hero])
        colors = WebsiteColors(primary=self._colors["primary"], secondary=self._colors["secondary"])
        return WebsiteSchema(website=Website(name=project_name, colors=colors, pages=[page]))

    def _resolve_slugs(self, pages_wanted: Sequence[str]) -> list[str]:
        requested = list(pages_wanted) if pages_wanted else list(self._default_slugs)
        slugs: list[str] = []
        for slug in requested:
            lowered = slug.lower()
            if lowered not in slugs:
                slugs.append(lowered)
        return slugs

    def _build_page(self, slug: str, project_name: str) -> Page:
        preset = self._page_presets.get(slug, FALLBACK_PAGE_PRESET)
        sections: list[Section] = []
        for kind in preset:
            taken = {section.id for section in sections}
            sections.append(self._build_section(kind, project_name, taken=taken))
        return Page(slug=slug, title=self._page_titles.get(slug, slug), sections=sections)

    def _build_section(self, kind: SectionType, project_name: str, *, taken) -> Section:
        definition = self._registry.definition(kind)
        props = _format_props(dict(definition.synthesis_props), project_name=project_name)
        return self._registry.create_section(kind, props=props, taken=taken)


__all__ = ["SchemaSynthesizer"]
