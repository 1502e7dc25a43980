from __future__ import annotations

import pytest

from site_builder.models.brief import ProjectBrief
from site_builder.models.schema import Page, Section, Website, WebsiteSchema
from site_builder.registry import SectionRegistry


@pytest.fixture
def registry() -> SectionRegistry:
    return SectionRegistry()


@pytest.fixture
def brief() -> ProjectBrief:
    return ProjectBrief.model_validate(
        {
            "projectName": "Studio Lumen",
            "businessType": "Agence photo",
            "targetAudience": "Marques locales",
            "tone": "premium",
            "styleKeywords": ["lumineux", "épuré"],
        }
    )


@pytest.fixture
def sample_schema() -> WebsiteSchema:
    return WebsiteSchema(
        website=Website(
            name="Acme",
            pages=[
                Page(
                    slug="home",
                    title="Accueil",
                    sections=[
                        Section(id="sec-hero-aaaaaa", type="hero", props={"headline": "Bonjour"}),
                        Section(id="sec-cta-bbbbbb", type="cta", props={}),
                    ],
                ),
                Page(
                    slug="about",
                    title="À propos",
                    sections=[Section(id="sec-features-cccccc", type="features", props={})],
                ),
            ],
        )
    )
