from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass
from typing import Mapping

from .models.schema import WebsiteSchema
from .slugs import package_slug

FALLBACK_ARCHIVE_BASENAME = "site-generated"
ARCHIVE_EXTENSION = ".zip"
ARCHIVE_MEDIA_TYPE = "application/zip"


@dataclass(frozen=True)
class ProjectArchive:
    filename: str
    content: bytes
    media_type: str = ARCHIVE_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


def archive_filename(website_name: str) -> str:
    basename = website_name.strip() or FALLBACK_ARCHIVE_BASENAME
    return package_slug(basename) + ARCHIVE_EXTENSION


def build_archive(files: Mapping[str, str]) -> bytes:
    """Zip the file set in memory; nothing is returned unless every file was written."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for path, content in files.items():
            archive.writestr(path, content)
    return buffer.getvalue()


def package_project(schema: WebsiteSchema, files: Mapping[str, str]) -> ProjectArchive:
    return ProjectArchive(
        filename=archive_filename(schema.website.name),
        content=build_archive(files),
    )


__all__ = [
    "ARCHIVE_MEDIA_TYPE",
    "FALLBACK_ARCHIVE_BASENAME",
    "ProjectArchive",
    "archive_filename",
    "build_archive",
    "package_project",
]
