import pytest

from site_builder.editor import add_page, add_section, remove_section, update_section_props
from site_builder.errors import (
    DuplicatePageError,
    InvalidPageTitleError,
    PageNotFoundError,
    SectionNotFoundError,
    UnknownSectionTypeError,
)


def test_add_page_slugifies_title(sample_schema):
    updated = add_page(sample_schema, "Nos Offres 2024")

    page = updated.website.pages[-1]
    assert (page.slug, page.title, page.sections) == ("nos-offres-2024", "Nos Offres 2024", [])
    assert len(sample_schema.website.pages) == 2


def test_add_page_rejects_duplicates_and_empty_slugs(sample_schema):
    with pytest.raises(DuplicatePageError):
        add_page(sample_schema, "Home")
    with pytest.raises(InvalidPageTitleError):
        add_page(sample_schema, "!!!")


def test_add_section_appends_default_props(sample_schema):
    updated, section = add_section(sample_schema, "about", "pricing")

    sections = updated.website.pages[1].sections
    assert sections[-1] == section
    assert section.type == "pricing"
    assert section.props["plans"][0]["name"] == "Starter"
    assert section.id not in {"sec-features-cccccc"}
    assert len(sample_schema.website.pages[1].sections) == 1


def test_add_section_errors(sample_schema):
    with pytest.raises(UnknownSectionTypeError):
        add_section(sample_schema, "home", "carousel")
    with pytest.raises(PageNotFoundError):
        add_section(sample_schema, "blog", "hero")


def test_remove_section(sample_schema):
    updated = remove_section(sample_schema, "home", "sec-cta-bbbbbb")

    assert [s.id for s in updated.website.pages[0].sections] == ["sec-hero-aaaaaa"]
    assert [s.id for s in sample_schema.website.pages[0].sections] == ["sec-hero-aaaaaa", "sec-cta-bbbbbb"]
    with pytest.raises(SectionNotFoundError):
        remove_section(sample_schema, "home", "sec-missing")


def test_update_section_props_merges_shallowly(sample_schema):
    updated = update_section_props(
        sample_schema,
        "home",
        "sec-hero-aaaaaa",
        {"subheadline": "Nouveau", "headline": "Salut"},
    )

    props = updated.website.pages[0].sections[0].props
    assert props == {"headline": "Salut", "subheadline": "Nouveau"}
    assert sample_schema.website.pages[0].sections[0].props == {"headline": "Bonjour"}
    with pytest.raises(PageNotFoundError):
        update_section_props(sample_schema, "blog", "sec-hero-aaaaaa", {})
