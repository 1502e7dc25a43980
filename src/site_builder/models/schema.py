from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PRIMARY_COLOR = "#3b82f6"
DEFAULT_SECONDARY_COLOR = "#0f172a"


class SectionType(str, Enum):
    hero = "hero"
    features = "features"
    services = "services"
    testimonials = "testimonials"
    pricing = "pricing"
    faq = "faq"
    cta = "cta"
    contact = "contact"
    gallery = "gallery"


def coerce_section_type(value: str | SectionType | None) -> SectionType | None:
    """Return the known kind for ``value`` or ``None`` for anything else."""
    if isinstance(value, SectionType):
        return value
    try:
        return SectionType(value)
    except ValueError:
        return None


class Section(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    # Plain string: stored schemas may carry kinds outside SectionType.
    type: str
    props: dict[str, Any] = Field(default_factory=dict)

    @field_validator("props", mode="before")
    @classmethod
    def _null_props_as_empty(cls, value: Any) -> Any:
        # Hand-edited schemas may store "props": null.
        return {} if value is None else value


class Page(BaseModel):
    model_config = ConfigDict(extra="allow")

    slug: str
    title: str
    sections: list[Section] = Field(default_factory=list)


class WebsiteColors(BaseModel):
    model_config = ConfigDict(extra="allow")

    primary: str = DEFAULT_PRIMARY_COLOR
    secondary: str = DEFAULT_SECONDARY_COLOR


class Website(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    colors: WebsiteColors = Field(default_factory=WebsiteColors)
    pages: list[Page] = Field(default_factory=list)


class WebsiteSchema(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "website": {
                    "name": "Acme",
                    "colors": {"primary": "#3b82f6", "secondary": "#0f172a"},
                    "pages": [
                        {
                            "slug": "home",
                            "title": "Accueil",
                            "sections": [
                                {
                                    "id": "sec-hero-1a2b3c",
                                    "type": "hero",
                                    "props": {"headline": "Bienvenue sur Acme"},
                                }
                            ],
                        }
                    ],
                }
            }
        },
    )

    website: Website

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def find_page(schema: WebsiteSchema, slug: str) -> Page | None:
    for page in schema.website.pages:
        if page.slug == slug:
            return page
    return None


def resolve_home_page(schema: WebsiteSchema) -> Page | None:
    """The page the generated site renders at ``/``: ``home`` or the first page."""
    pages = schema.website.pages
    return find_page(schema, "home") or (pages[0] if pages else None)


__all__ = [
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_SECONDARY_COLOR",
    "Page",
    "Section",
    "SectionType",
    "Website",
    "WebsiteColors",
    "WebsiteSchema",
    "coerce_section_type",
    "find_page",
    "resolve_home_page",
]
