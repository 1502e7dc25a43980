from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from .dictionaries import EnrichmentRule, ListRule
from .models.schema import Page, Section, WebsiteSchema
from .registry import SectionRegistry

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _append_clause(base: str, clause: str) -> str:
    return f"{base} {clause}".strip()


class ContentEnricher:
    """Fills placeholder props with richer default copy, section by section.

    Existing non-empty values win over defaults, except for the hero
    ``headline``/``subheadline`` which always receive an appended clause, so
    enriching twice grows those two fields again.
    """

    def __init__(self, *, registry: SectionRegistry | None = None) -> None:
        self._registry = registry or SectionRegistry()

    def enrich(self, schema: WebsiteSchema) -> WebsiteSchema:
        website_name = schema.website.name
        pages = [self._enrich_page(page, website_name) for page in schema.website.pages]
        website = schema.website.model_copy(update={"pages": pages})
        logger.debug(
            "Enriched schema content",
            extra={
                "website": website_name,
                "pages_count": len(pages),
                "sections_count": sum(len(page.sections) for page in pages),
            },
        )
        return schema.model_copy(update={"website": website})

    def _enrich_page(self, page: Page, website_name: str) -> Page:
        sections = [self.enrich_section(section, website_name=website_name) for section in page.sections]
        return page.model_copy(update={"sections": sections})

    def enrich_section(self, section: Section, *, website_name: str) -> Section:
        definition = self._registry.lookup(section.type)
        if definition is None:
            return section.model_copy(deep=True)
        props = self._apply_rule(definition.enrichment, section.props or {}, website_name)
        return section.model_copy(update={"props": props})

    def _apply_rule(
        self,
        rule: EnrichmentRule,
        props: Mapping[str, Any],
        website_name: str,
    ) -> dict[str, Any]:
        enriched = copy.deepcopy(dict(props))
        for key, default in rule.text_defaults.items():
            value = enriched.get(key)
            if _is_blank(value):
                value = default.format(website_name=website_name)
            clause = rule.appended_clauses.get(key)
            if clause is not None:
                value = _append_clause(str(value), clause)
            enriched[key] = value
        if rule.list_rule is not None:
            enriched[rule.list_rule.key] = self._fill_list(rule.list_rule, enriched.get(rule.list_rule.key))
        return enriched

    def _fill_list(self, rule: ListRule, current: Any) -> list[Any]:
        if not isinstance(current, list) or not current:
            return copy.deepcopy(list(rule.fallback))
        if rule.fill_key is None:
            return current
        items: list[Any] = []
        for index, item in enumerate(current):
            if isinstance(item, dict) and _is_blank(item.get(rule.fill_key)):
                item = {**item, rule.fill_key: rule.phrase_for(index)}
            items.append(item)
        return items


def enrich_schema(schema: WebsiteSchema) -> WebsiteSchema:
    return ContentEnricher().enrich(schema)


__all__ = ["ContentEnricher", "enrich_schema"]
