from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict

from .schema import SectionType


class _Props(BaseModel):
    # Props bags are open: unknown keys survive, every known key is optional.
    model_config = ConfigDict(extra="allow")

    def to_props(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FeatureItem(_Props):
    title: str | None = None
    description: str | None = None


class ServiceItem(_Props):
    name: str | None = None
    description: str | None = None


class TestimonialItem(_Props):
    name: str | None = None
    quote: str | None = None
    role: str | None = None


class PricingPlan(_Props):
    name: str | None = None
    price: str | None = None
    features: Sequence[str] | None = None
    highlight: bool | None = None


class FaqItem(_Props):
    question: str | None = None
    answer: str | None = None


class GalleryImage(_Props):
    src: str | None = None
    alt: str | None = None


class HeroProps(_Props):
    headline: str | None = None
    subheadline: str | None = None
    ctaPrimary: str | None = None
    ctaSecondary: str | None = None
    image: str | None = None


class FeaturesProps(_Props):
    title: str | None = None
    items: Sequence[FeatureItem] | None = None


class ServicesProps(_Props):
    title: str | None = None
    items: Sequence[ServiceItem] | None = None


class TestimonialsProps(_Props):
    title: str | None = None
    items: Sequence[TestimonialItem] | None = None


class PricingProps(_Props):
    title: str | None = None
    plans: Sequence[PricingPlan] | None = None


class FaqProps(_Props):
    title: str | None = None
    items: Sequence[FaqItem] | None = None


class CtaProps(_Props):
    title: str | None = None
    text: str | None = None
    buttonLabel: str | None = None


class ContactProps(_Props):
    title: str | None = None
    description: str | None = None


class GalleryProps(_Props):
    title: str | None = None
    images: Sequence[GalleryImage] | None = None


PROPS_MODELS: dict[SectionType, type[_Props]] = {
    SectionType.hero: HeroProps,
    SectionType.features: FeaturesProps,
    SectionType.services: ServicesProps,
    SectionType.testimonials: TestimonialsProps,
    SectionType.pricing: PricingProps,
    SectionType.faq: FaqProps,
    SectionType.cta: CtaProps,
    SectionType.contact: ContactProps,
    SectionType.gallery: GalleryProps,
}


def props_model_for(kind: SectionType) -> type[_Props]:
    return PROPS_MODELS[kind]


__all__ = [
    "ContactProps",
    "CtaProps",
    "FaqItem",
    "FaqProps",
    "FeatureItem",
    "FeaturesProps",
    "GalleryImage",
    "GalleryProps",
    "HeroProps",
    "PROPS_MODELS",
    "PricingPlan",
    "PricingProps",
    "ServiceItem",
    "ServicesProps",
    "TestimonialItem",
    "TestimonialsProps",
    "props_model_for",
]
