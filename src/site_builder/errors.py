from __future__ import annotations


class SiteBuilderError(Exception):
    """Base class for errors raised by the editor and the project stores."""


class ProjectNotFoundError(SiteBuilderError):
    def __init__(self, project_id: str) -> None:
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


class PageNotFoundError(SiteBuilderError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Page not found: {slug}")
        self.slug = slug


class SectionNotFoundError(SiteBuilderError):
    def __init__(self, section_id: str) -> None:
        super().__init__(f"Section not found: {section_id}")
        self.section_id = section_id


class DuplicatePageError(SiteBuilderError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"A page with slug '{slug}' already exists")
        self.slug = slug


class InvalidPageTitleError(SiteBuilderError):
    pass


class UnknownSectionTypeError(SiteBuilderError):
    def __init__(self, section_type: str) -> None:
        super().__init__(f"Unknown section type: {section_type}")
        self.section_type = section_type


__all__ = [
    "DuplicatePageError",
    "InvalidPageTitleError",
    "PageNotFoundError",
    "ProjectNotFoundError",
    "SectionNotFoundError",
    "SiteBuilderError",
    "UnknownSectionTypeError",
]
