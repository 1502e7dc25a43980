from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .models.props import (
    ContactProps,
    CtaProps,
    FaqItem,
    FaqProps,
    FeatureItem,
    FeaturesProps,
    GalleryImage,
    GalleryProps,
    HeroProps,
    PricingPlan,
    PricingProps,
    ServiceItem,
    ServicesProps,
    TestimonialItem,
    TestimonialsProps,
)
from .models.schema import DEFAULT_PRIMARY_COLOR, DEFAULT_SECONDARY_COLOR, SectionType


@dataclass(frozen=True)
class ListRule:
    key: str
    fallback: Sequence[Mapping[str, Any]]
    fill_key: str | None = None
    # One phrase fills every item; two phrases split first item / the rest.
    fill_phrases: Sequence[str] = ()

    def phrase_for(self, index: int) -> str:
        if index == 0 or len(self.fill_phrases) == 1:
            return self.fill_phrases[0]
        return self.fill_phrases[1]


@dataclass(frozen=True)
class EnrichmentRule:
    text_defaults: Mapping[str, str]
    appended_clauses: Mapping[str, str] = field(default_factory=dict)
    list_rule: ListRule | None = None


@dataclass(frozen=True)
class SectionDefinition:
    kind: SectionType
    label: str
    default_props: Mapping[str, Any]
    synthesis_props: Mapping[str, Any]
    enrichment: EnrichmentRule
    fragment: str


def _items(model, *entries: dict[str, Any]) -> list[dict[str, Any]]:
    return [model(**entry).to_props() for entry in entries]


DEFAULT_SECTIONS: Mapping[SectionType, SectionDefinition] = {
    SectionType.hero: SectionDefinition(
        kind=SectionType.hero,
        label="Hero",
        default_props=HeroProps(
            headline="Titre principal",
            subheadline="Sous-titre de présentation",
            ctaPrimary="Call to action",
            ctaSecondary="En savoir plus",
            image="/images/hero.jpg",
        ).to_props(),
        synthesis_props=HeroProps(
            headline="Bienvenue sur {project_name}",
            subheadline="Une brève phrase pour expliquer ce que propose ce site.",
            ctaPrimary="Commencer",
            ctaSecondary="En savoir plus",
            image="/images/hero.jpg",
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={
                "headline": "Bienvenue sur {website_name}",
                "subheadline": "Découvrez notre univers et ce que nous pouvons faire pour vous.",
                "ctaPrimary": "Demander un devis",
                "ctaSecondary": "Voir nos services",
            },
            appended_clauses={
                "headline": "— une solution claire et moderne pour ton projet.",
                "subheadline": "Nous t’aidons à gagner en crédibilité, en visibilité et en conversions.",
            },
        ),
        fragment="sections/hero.tsx.j2",
    ),
    SectionType.features: SectionDefinition(
        kind=SectionType.features,
        label="Features",
        default_props=FeaturesProps(
            title="Nos points forts",
            items=[
                FeatureItem(title="Feature 1", description="Une explication rapide de ce point fort."),
                FeatureItem(title="Feature 2", description="Un second élément de valeur."),
            ],
        ).to_props(),
        synthesis_props=FeaturesProps(
            title="Nos points forts",
            items=[
                FeatureItem(title="Point fort 1", description="Un avantage clé mis en avant."),
                FeatureItem(title="Point fort 2", description="Un deuxième élément de valeur."),
            ],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "Pourquoi nous choisir ?"},
            list_rule=ListRule(
                key="items",
                fallback=_items(
                    FeatureItem,
                    {
                        "title": "Accompagnement personnalisé",
                        "description": "Un suivi humain, transparent et orienté résultats.",
                    },
                    {
                        "title": "Technologies modernes",
                        "description": "Une stack technique fiable, performante et maintenable.",
                    },
                ),
                fill_key="description",
                fill_phrases=(
                    "Un avantage concret pour ton activité.",
                    "Un véritable levier de croissance.",
                ),
            ),
        ),
        fragment="sections/features.tsx.j2",
    ),
    SectionType.services: SectionDefinition(
        kind=SectionType.services,
        label="Services",
        default_props=ServicesProps(
            title="Nos services",
            items=[ServiceItem(name="Service 1", description="Description courte du service.")],
        ).to_props(),
        synthesis_props=ServicesProps(
            title="Nos services",
            items=[
                ServiceItem(
                    name="Service principal",
                    description="Description courte et claire du service.",
                )
            ],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "Nos services"},
            list_rule=ListRule(
                key="items",
                fallback=_items(
                    ServiceItem,
                    {
                        "name": "Création de site web",
                        "description": "Un site moderne, responsive et optimisé pour la conversion.",
                    },
                ),
                fill_key="description",
                fill_phrases=("Un service pensé pour répondre à un besoin précis de tes clients.",),
            ),
        ),
        fragment="sections/services.tsx.j2",
    ),
    SectionType.testimonials: SectionDefinition(
        kind=SectionType.testimonials,
        label="Testimonials",
        default_props=TestimonialsProps(
            title="Ils nous font confiance",
            items=[TestimonialItem(name="Client 1", quote="Un témoignage client.", role="Fonction")],
        ).to_props(),
        synthesis_props=TestimonialsProps(
            title="Ils nous font confiance",
            items=[
                TestimonialItem(
                    name="Client satisfait",
                    quote="Un retour positif qui rassure le visiteur.",
                    role="Fonction du client",
                )
            ],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "Ils nous font confiance"},
            list_rule=ListRule(
                key="items",
                fallback=_items(
                    TestimonialItem,
                    {
                        "name": "Client satisfait",
                        "quote": "Un accompagnement sérieux et efficace, du début à la fin.",
                        "role": "Entrepreneur",
                    },
                ),
                fill_key="quote",
                fill_phrases=("Un accompagnement sérieux et efficace, du début à la fin.",),
            ),
        ),
        fragment="sections/testimonials.tsx.j2",
    ),
    SectionType.pricing: SectionDefinition(
        kind=SectionType.pricing,
        label="Pricing",
        default_props=PricingProps(
            title="Nos offres",
            plans=[
                PricingPlan(name="Starter", price="49€", features=["Feature A", "Feature B"], highlight=True)
            ],
        ).to_props(),
        synthesis_props=PricingProps(
            title="Nos offres",
            plans=[
                PricingPlan(
                    name="Starter",
                    price="49€",
                    features=["Fonctionnalité A", "Fonctionnalité B"],
                    highlight=True,
                )
            ],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "Nos offres"},
            list_rule=ListRule(
                key="plans",
                fallback=_items(
                    PricingPlan,
                    {
                        "name": "Starter",
                        "price": "49€",
                        "features": ["Présence en ligne professionnelle", "Design responsive"],
                        "highlight": True,
                    },
                ),
            ),
        ),
        fragment="sections/pricing.tsx.j2",
    ),
    SectionType.faq: SectionDefinition(
        kind=SectionType.faq,
        label="FAQ",
        default_props=FaqProps(
            title="FAQ",
            items=[FaqItem(question="Question fréquente ?", answer="Réponse pertinente.")],
        ).to_props(),
        synthesis_props=FaqProps(
            title="FAQ",
            items=[FaqItem(question="Question fréquente ?", answer="Une réponse claire et rassurante.")],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "FAQ"},
            list_rule=ListRule(
                key="items",
                fallback=_items(
                    FaqItem,
                    {
                        "question": "Comment se déroule un projet ?",
                        "answer": (
                            "On commence par un échange pour bien comprendre tes besoins, "
                            "puis on passe en conception, développement et lancement."
                        ),
                    },
                ),
                fill_key="answer",
                fill_phrases=("Une réponse claire arrive très bientôt : contacte-nous en attendant.",),
            ),
        ),
        fragment="sections/faq.tsx.j2",
    ),
    SectionType.cta: SectionDefinition(
        kind=SectionType.cta,
        label="CTA",
        default_props=CtaProps(
            title="Prêt à commencer ?",
            text="Contacte-nous pour lancer ton projet.",
            buttonLabel="Nous contacter",
        ).to_props(),
        synthesis_props=CtaProps(
            title="Prêt à commencer ?",
            text="Contacte-nous pour discuter de ton projet.",
            buttonLabel="Nous contacter",
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={
                "title": "Prêt à passer à la suite ?",
                "text": "Parle-nous de ton projet et on construit ensemble la meilleure solution.",
                "buttonLabel": "Planifier un appel",
            },
        ),
        fragment="sections/cta.tsx.j2",
    ),
    SectionType.contact: SectionDefinition(
        kind=SectionType.contact,
        label="Contact",
        default_props=ContactProps(
            title="Contact",
            description="Laisse-nous un message, on revient vers toi.",
        ).to_props(),
        synthesis_props=ContactProps(
            title="Contact",
            description="Laisse-nous un message, on te répond rapidement.",
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={
                "title": "Contact",
                "description": "Remplis le formulaire ci-dessous, on revient vers toi très vite.",
            },
        ),
        fragment="sections/contact.tsx.j2",
    ),
    SectionType.gallery: SectionDefinition(
        kind=SectionType.gallery,
        label="Galerie",
        default_props=GalleryProps(
            title="Galerie",
            images=[
                GalleryImage(src="/images/sample-1.jpg", alt="Image 1"),
                GalleryImage(src="/images/sample-2.jpg", alt="Image 2"),
            ],
        ).to_props(),
        synthesis_props=GalleryProps(
            title="Galerie",
            images=[
                GalleryImage(src="/images/sample-1.jpg", alt="Réalisation 1"),
                GalleryImage(src="/images/sample-2.jpg", alt="Réalisation 2"),
            ],
        ).to_props(),
        enrichment=EnrichmentRule(
            text_defaults={"title": "Nos réalisations"},
            list_rule=ListRule(
                key="images",
                fallback=_items(
                    GalleryImage,
                    {"src": "/images/sample-1.jpg", "alt": "Exemple de projet réalisé"},
                    {"src": "/images/sample-2.jpg", "alt": "Autre exemple de réalisation"},
                ),
                fill_key="alt",
                fill_phrases=("Image de projet",),
            ),
        ),
        fragment="sections/gallery.tsx.j2",
    ),
}


DEFAULT_PAGE_PRESETS: Mapping[str, Sequence[SectionType]] = {
    "home": (SectionType.hero, SectionType.features, SectionType.services, SectionType.cta),
    "services": (SectionType.services, SectionType.pricing, SectionType.faq),
    "about": (SectionType.hero, SectionType.features),
    "contact": (SectionType.contact, SectionType.faq),
    "portfolio": (SectionType.gallery, SectionType.testimonials, SectionType.cta),
}

FALLBACK_PAGE_PRESET: Sequence[SectionType] = (SectionType.hero,)

DEFAULT_PAGE_SLUGS: Sequence[str] = ("home", "services", "about", "contact")

DEFAULT_PAGE_TITLES: Mapping[str, str] = {
    "home": "Accueil",
    "services": "Services",
    "about": "À propos",
    "contact": "Contact",
    "portfolio": "Portfolio",
}

DEFAULT_COLORS: Mapping[str, str] = {
    "primary": DEFAULT_PRIMARY_COLOR,
    "secondary": DEFAULT_SECONDARY_COLOR,
}

DEFAULT_SCHEMA_HERO_SUBHEADLINE = (
    "Ce site a été généré via SaaS Builder. Personnalise le contenu et la structure "
    "depuis le visual builder."
)


__all__ = [
    "DEFAULT_COLORS",
    "DEFAULT_PAGE_PRESETS",
    "DEFAULT_PAGE_SLUGS",
    "DEFAULT_PAGE_TITLES",
    "DEFAULT_SCHEMA_HERO_SUBHEADLINE",
    "DEFAULT_SECTIONS",
    "EnrichmentRule",
    "FALLBACK_PAGE_PRESET",
    "ListRule",
    "SectionDefinition",
]
