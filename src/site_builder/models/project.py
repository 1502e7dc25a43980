from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, Field

DEMO_OWNER = "demo@local.test"


class ProjectSchemaRecord(BaseModel):
    content: Mapping[str, Any] | None = None
    version: int = 1
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class ProjectRecord(BaseModel):
    id: str
    name: str
    slug: str
    status: str = "draft"
    brief: Mapping[str, Any] | None = None
    owner: str = DEMO_OWNER
    site_schema: ProjectSchemaRecord | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def summary(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "status": self.status,
            "createdAt": self.created_at.isoformat(),
        }


__all__ = ["DEMO_OWNER", "ProjectRecord", "ProjectSchemaRecord"]
