from __future__ import annotations

import json

from .models.brief import ProjectBrief
from .models.schema import SectionType, WebsiteSchema

_SECTION_TYPES = ", ".join(f'"{kind.value}"' for kind in SectionType)

_SCHEMA_SHAPE = """{
  "website": {
    "name": "Nom du site",
    "colors": {
      "primary": "#3b82f6",
      "secondary": "#0f172a"
    },
    "pages": [
      {
        "slug": "home",
        "title": "Accueil",
        "sections": [
          {
            "id": "sec-hero-1",
            "type": "hero",
            "props": {}
          }
        ]
      }
    ]
  }
}"""

_SECTION_RULES = (
    "- hero.props : headline (6 à 12 mots), subheadline (1 à 2 phrases), ctaPrimary et ctaSecondary (2 à 4 mots).",
    "- features.props : title orienté bénéfice, items (3 à 6) avec title et description.",
    "- services.props : title, items (3 à 6) avec name et description (résultat + approche).",
    "- testimonials.props : title, items (2 à 4) avec quote, name et role réalistes.",
    "- pricing.props : title, plans (2 à 4) avec price (\"Sur devis\" si inconnu) et features (4 à 7).",
    "- faq.props : title, items (4 à 7) avec question et answer rassurante.",
    "- cta.props : title (4 à 8 mots), text (1 à 2 phrases), buttonLabel.",
    "- contact.props : title, description (délais de réponse sans promesse stricte).",
    "- gallery.props : title, images avec un alt descriptif.",
)


def build_schema_generation_prompt(brief: ProjectBrief) -> str:
    lines: list[str | None] = [
        "Tu es un expert UX/UI et architecture produit spécialisé en sites premium (Next.js).",
        "Ton rôle : proposer un sitemap + architecture UX sous forme de JSON strict (structure uniquement, aucun code).",
        "",
        "Contexte du projet :",
        f"- Nom du projet : {brief.project_name}",
        f"- Type de business : {brief.business_type}",
        f"- Cible principale : {brief.target_audience}" if brief.target_audience else None,
        f"- Objectif principal : {brief.main_goal}" if brief.main_goal else None,
        f"- Ton / ambiance : {brief.tone}" if brief.tone else None,
        f"- Mots clés de style : {', '.join(brief.style_keywords)}" if brief.style_keywords else None,
        f"- Pages souhaitées : {', '.join(brief.pages_wanted)}" if brief.pages_wanted else None,
        f"- Couleur primaire suggérée : {brief.primary_color}" if brief.primary_color else None,
        f"- Couleur secondaire suggérée : {brief.secondary_color}" if brief.secondary_color else None,
        "",
        "IMPORTANT :",
        "- Ne retourne que du JSON valide, pas de texte avant ou après.",
        "- Respecte absolument ce schema :",
        "",
        _SCHEMA_SHAPE,
        "",
        "Règles :",
        '- "slug" en kebab-case (home, about-us, services).',
        '- "title" en français, lisible.',
        f'- "type" ∈ [{_SECTION_TYPES}].',
        '- "props" = placeholders minimalistes (pas les textes finaux).',
        "",
        'Retourne directement un JSON strictement compatible avec "WebsiteSchema".',
    ]
    # Empty strings are kept as blank lines; only absent fields are dropped.
    return "\n".join(line for line in lines if line is not None)


def build_content_generation_prompt(schema: WebsiteSchema) -> str:
    site_name = schema.website.name or "(non précisé)"
    slugs = [page.slug for page in schema.website.pages if page.slug]
    lines = [
        "Tu es un directeur de création (copywriting + UX) spécialisé en sites web premium B2B/B2C.",
        'Tu écris en FRANÇAIS, ton clair, moderne, "premium" et orienté conversion, sans buzzwords creux.',
        "Objectif : transformer un WebsiteSchema avec placeholders en un WebsiteSchema FINAL avec textes riches et crédibles.",
        "",
        "CONTRAINTES NON NÉGOCIABLES :",
        "1) Tu dois retourner UNIQUEMENT du JSON valide (pas de markdown, pas d'explications).",
        "2) Le JSON doit respecter EXACTEMENT la même structure que l'entrée :",
        '   - ne modifie pas les "id", "type", ni "slug",',
        "   - n'ajoute pas de nouvelles pages/sections, ne supprime rien.",
        '3) Tu peux UNIQUEMENT modifier les valeurs dans "props", en gardant les clés existantes prioritaires.',
        "4) Pas de chiffres précis inventés, pas de promesses illégales, pas de claims médicaux/juridiques.",
        "",
        "CONTEXTE :",
        f"- Nom du site : {site_name}",
        f"- Pages existantes (slugs) : {', '.join(slugs) if slugs else '(non précisé)'}",
        "",
        "RÈGLES PAR TYPE DE SECTION :",
        *_SECTION_RULES,
        "",
        "CONTRAT DE SORTIE :",
        "- Retourne le WebsiteSchema enrichi.",
        "- Ne change rien hors props.",
        "",
        "SCHEMA À ENRICHIR :",
        json.dumps(schema.to_json_dict(), ensure_ascii=False, indent=2),
    ]
    return "\n".join(lines)


__all__ = ["build_content_generation_prompt", "build_schema_generation_prompt"]
