from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .models.schema import SectionType, coerce_section_type
from .registry import SectionRegistry
from .template_renderer import TemplateRenderer

GENERIC_FRAGMENT = "sections/generic.tsx.j2"
DISPATCHER_TEMPLATE = "dispatcher.tsx.j2"

# Kinds the secondary pages render with a dedicated fragment; everything else
# there goes through the generic "type + props dump" fragment.
DEGRADED_FRAGMENTS: Mapping[SectionType, str] = {
    SectionType.hero: "sections/hero_compact.tsx.j2",
}


class RenderCoverage(str, Enum):
    full = "FULL"
    degraded = "DEGRADED"


@dataclass(frozen=True)
class DispatchBranch:
    kind: str
    body: str


class SectionRenderer:
    """Builds the ``renderSection`` function embedded in generated pages.

    ``RenderCoverage.full`` renders each of the nine kinds with its own
    fragment; ``RenderCoverage.degraded`` (used for ``app/[slug]/page.tsx``)
    only knows the compact hero.
    """

    def __init__(
        self,
        *,
        coverage: RenderCoverage,
        registry: SectionRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.coverage = coverage
        self._registry = registry or SectionRegistry()
        self._renderer = renderer or TemplateRenderer()

    def fragment_template(self, section_type: str) -> str:
        kind = coerce_section_type(section_type)
        if kind is None:
            return GENERIC_FRAGMENT
        if self.coverage is RenderCoverage.degraded:
            return DEGRADED_FRAGMENTS.get(kind, GENERIC_FRAGMENT)
        return self._registry.definition(kind).fragment

    def fragment_for(self, section_type: str) -> str:
        return self._renderer.render(self.fragment_template(section_type)).rstrip("\n")

    def branches(self) -> list[DispatchBranch]:
        branches: list[DispatchBranch] = []
        for kind in self._registry.kinds():
            if self.fragment_template(kind.value) == GENERIC_FRAGMENT:
                continue
            branches.append(DispatchBranch(kind=kind.value, body=self.fragment_for(kind.value)))
        return branches

    def dispatcher(self) -> str:
        fallback = self._renderer.render(GENERIC_FRAGMENT).rstrip("\n")
        source = self._renderer.render(
            DISPATCHER_TEMPLATE,
            {"branches": self.branches(), "fallback": fallback},
        )
        return source.rstrip("\n")


__all__ = [
    "DEGRADED_FRAGMENTS",
    "DispatchBranch",
    "GENERIC_FRAGMENT",
    "RenderCoverage",
    "SectionRenderer",
]
