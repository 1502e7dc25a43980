from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field


class ProjectBrief(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "projectName": "Acme",
                "businessType": "Agence web",
                "targetAudience": "PME locales",
                "mainGoal": "Générer des demandes de devis",
                "tone": "premium",
                "styleKeywords": ["sobre", "moderne"],
                "pagesWanted": ["home", "services", "contact"],
                "primaryColor": "#3b82f6",
                "secondaryColor": "#0f172a",
            }
        },
    )

    project_name: str = Field(alias="projectName")
    business_type: str | None = Field(default=None, alias="businessType")
    target_audience: str | None = Field(default=None, alias="targetAudience")
    main_goal: str | None = Field(default=None, alias="mainGoal")
    tone: str | None = None
    style_keywords: Sequence[str] = Field(default_factory=list, alias="styleKeywords")
    pages_wanted: Sequence[str] = Field(default_factory=list, alias="pagesWanted")
    primary_color: str | None = Field(default=None, alias="primaryColor")
    secondary_color: str | None = Field(default=None, alias="secondaryColor")


__all__ = ["ProjectBrief"]
