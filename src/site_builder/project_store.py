from __future__ import annotations

import copy
import threading
import uuid
from datetime import datetime
from typing import Any, Dict, Mapping, Protocol

from .errors import ProjectNotFoundError
from .models.project import ProjectRecord, ProjectSchemaRecord
from .slugs import slugify


class ProjectRepository(Protocol):
    def create_project(self, *, name: str, brief: Mapping[str, Any] | None) -> ProjectRecord:
        ...

    def get_project(self, project_id: str) -> ProjectRecord | None:
        ...

    def list_projects(self) -> list[ProjectRecord]:
        ...

    def save_schema(self, project_id: str, content: Mapping[str, Any] | None) -> ProjectRecord:
        ...

    def ping(self) -> bool:
        ...


class ProjectStore:
    """In-memory project records for dev and tests."""

    def __init__(self) -> None:
        self._projects: Dict[str, ProjectRecord] = {}
        self._lock = threading.Lock()

    def create_project(self, *, name: str, brief: Mapping[str, Any] | None = None) -> ProjectRecord:
        with self._lock:
            project_id = self._generate_id()
            project = ProjectRecord(
                id=project_id,
                name=name,
                slug=slugify(name),
                brief=copy.deepcopy(dict(brief)) if brief is not None else None,
            )
            self._projects[project_id] = project
            return project.model_copy(deep=True)

    def get_project(self, project_id: str) -> ProjectRecord | None:
        with self._lock:
            project = self._projects.get(project_id)
            return project.model_copy(deep=True) if project else None

    def list_projects(self) -> list[ProjectRecord]:
        with self._lock:
            projects = sorted(self._projects.values(), key=lambda p: p.created_at, reverse=True)
            return [project.model_copy(deep=True) for project in projects]

    def save_schema(self, project_id: str, content: Mapping[str, Any] | None) -> ProjectRecord:
        with self._lock:
            project = self._projects.get(project_id)
            if project is None:
                raise ProjectNotFoundError(project_id)
            now = datetime.utcnow()
            stored = copy.deepcopy(dict(content)) if content is not None else None
            if project.site_schema is None:
                project.site_schema = ProjectSchemaRecord(content=stored, version=1, updated_at=now)
            else:
                project.site_schema = ProjectSchemaRecord(
                    content=stored,
                    version=project.site_schema.version + 1,
                    updated_at=now,
                )
            project.updated_at = now
            return project.model_copy(deep=True)

    def ping(self) -> bool:
        return True

    def _generate_id(self) -> str:
        ts = datetime.utcnow().strftime("%Y%m%d%H%M%S")
        suffix = uuid.uuid4().hex[:6]
        return f"prj_{ts}_{suffix}"


__all__ = ["ProjectRepository", "ProjectStore"]
