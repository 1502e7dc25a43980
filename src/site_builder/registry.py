from __future__ import annotations

import copy
import uuid
from typing import Any, Collection, Mapping

from .dictionaries import DEFAULT_SECTIONS, SectionDefinition
from .models.schema import Section, SectionType, coerce_section_type


class SectionRegistry:
    """Section kinds and everything attached to them.

    Every kind in ``SectionType`` must have a definition; the enricher, the
    synthesizer and the code generator all dispatch through this object.
    """

    def __init__(self, sections: Mapping[SectionType, SectionDefinition] = DEFAULT_SECTIONS) -> None:
        missing = [kind.value for kind in SectionType if kind not in sections]
        if missing:
            raise ValueError(f"Section definitions missing for: {', '.join(missing)}")
        self._sections = dict(sections)

    def kinds(self) -> tuple[SectionType, ...]:
        return tuple(SectionType)

    def definition(self, kind: SectionType) -> SectionDefinition:
        return self._sections[kind]

    def lookup(self, section_type: str) -> SectionDefinition | None:
        kind = coerce_section_type(section_type)
        if kind is None:
            return None
        return self._sections[kind]

    def default_props(self, kind: SectionType) -> dict[str, Any]:
        return copy.deepcopy(dict(self._sections[kind].default_props))

    def create_section(
        self,
        kind: SectionType,
        *,
        props: Mapping[str, Any] | None = None,
        taken: Collection[str] = (),
    ) -> Section:
        section_id = self._generate_id(kind)
        while section_id in taken:
            section_id = self._generate_id(kind)
        payload = copy.deepcopy(dict(props)) if props is not None else self.default_props(kind)
        return Section(id=section_id, type=kind.value, props=payload)

    def _generate_id(self, kind: SectionType) -> str:
        return f"sec-{kind.value}-{uuid.uuid4().hex[:6]}"


__all__ = ["SectionRegistry"]
