"""Schema mutations performed by the visual editor.

Each function returns a new schema and leaves its input untouched. Pages and
sections are only ever appended; a section disappears only through
:func:`remove_section`.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .errors import (
    DuplicatePageError,
    InvalidPageTitleError,
    PageNotFoundError,
    SectionNotFoundError,
    UnknownSectionTypeError,
)
from .models.schema import Page, Section, WebsiteSchema, coerce_section_type, find_page
from .registry import SectionRegistry
from .slugs import slugify


def _replace_page(
    schema: WebsiteSchema,
    slug: str,
    change: Callable[[Page], Page],
) -> WebsiteSchema:
    if find_page(schema, slug) is None:
        raise PageNotFoundError(slug)
    pages = [change(page) if page.slug == slug else page for page in schema.website.pages]
    website = schema.website.model_copy(update={"pages": pages})
    return schema.model_copy(update={"website": website})


def _find_section(page: Page, section_id: str) -> Section:
    for section in page.sections:
        if section.id == section_id:
            return section
    raise SectionNotFoundError(section_id)


def add_page(schema: WebsiteSchema, title: str) -> WebsiteSchema:
    slug = slugify(title)
    if not slug:
        raise InvalidPageTitleError(f"Cannot derive a page slug from title: {title!r}")
    if find_page(schema, slug) is not None:
        raise DuplicatePageError(slug)
    pages = [*schema.website.pages, Page(slug=slug, title=title, sections=[])]
    website = schema.website.model_copy(update={"pages": pages})
    return schema.model_copy(update={"website": website})


def add_section(
    schema: WebsiteSchema,
    page_slug: str,
    section_type: str,
    *,
    registry: SectionRegistry | None = None,
) -> tuple[WebsiteSchema, Section]:
    kind = coerce_section_type(section_type)
    if kind is None:
        raise UnknownSectionTypeError(str(section_type))
    page = find_page(schema, page_slug)
    if page is None:
        raise PageNotFoundError(page_slug)
    section = (registry or SectionRegistry()).create_section(
        kind, taken={existing.id for existing in page.sections}
    )
    updated = _replace_page(
        schema,
        page_slug,
        lambda current: current.model_copy(update={"sections": [*current.sections, section]}),
    )
    return updated, section


def remove_section(schema: WebsiteSchema, page_slug: str, section_id: str) -> WebsiteSchema:
    page = find_page(schema, page_slug)
    if page is None:
        raise PageNotFoundError(page_slug)
    _find_section(page, section_id)
    return _replace_page(
        schema,
        page_slug,
        lambda current: current.model_copy(
            update={"sections": [s for s in current.sections if s.id != section_id]}
        ),
    )


def update_section_props(
    schema: WebsiteSchema,
    page_slug: str,
    section_id: str,
    partial_props: Mapping[str, Any],
) -> WebsiteSchema:
    page = find_page(schema, page_slug)
    if page is None:
        raise PageNotFoundError(page_slug)
    _find_section(page, section_id)

    def change(current: Page) -> Page:
        sections = [
            s.model_copy(update={"props": {**s.props, **partial_props}}) if s.id == section_id else s
            for s in current.sections
        ]
        return current.model_copy(update={"sections": sections})

    return _replace_page(schema, page_slug, change)


__all__ = ["add_page", "add_section", "remove_section", "update_section_props"]
