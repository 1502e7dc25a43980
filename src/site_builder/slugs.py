from __future__ import annotations

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_NON_PACKAGE_CHAR = re.compile(r"[^a-z0-9-]")


def slugify(value: str) -> str:
    """Project and page slugs: ``"Nos Offres 2024"`` -> ``"nos-offres-2024"``."""
    return _NON_ALNUM_RUN.sub("-", value.lower().strip()).strip("-")


def package_slug(value: str) -> str:
    """Per-character replacement used for package names and archive names.

    Unlike :func:`slugify`, runs are not collapsed: ``"Acme & Co"`` becomes
    ``"acme---co"``.
    """
    return _NON_PACKAGE_CHAR.sub("-", value.lower())


__all__ = ["package_slug", "slugify"]
