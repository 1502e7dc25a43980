from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from .errors import ProjectNotFoundError
from .models.project import ProjectRecord, ProjectSchemaRecord
from .slugs import slugify

logger = logging.getLogger(__name__)


class FirestoreProjectStore:
    """Firestore-backed project records for production use."""

    COLLECTION_NAME = "projects"

    def __init__(self, project_id: str | None = None, *, collection: str | None = None) -> None:
        self._db = firestore.Client(project=project_id)
        self._collection = self._db.collection(collection or self.COLLECTION_NAME)

    def create_project(self, *, name: str, brief: Mapping[str, Any] | None = None) -> ProjectRecord:
        """Create a project document with an auto-generated id."""
        doc_ref = self._collection.document()
        now = datetime.utcnow()
        project = ProjectRecord(
            id=doc_ref.id,
            name=name,
            slug=slugify(name),
            brief=dict(brief) if brief is not None else None,
            created_at=now,
            updated_at=now,
        )
        doc_ref.set(self._to_firestore_dict(project))

        logger.info("Created project", extra={"project_id": project.id, "slug": project.slug})

        return project

    def get_project(self, project_id: str) -> ProjectRecord | None:
        doc = self._collection.document(project_id).get()
        if not doc.exists:
            return None
        return self._from_firestore_dict(doc.id, doc.to_dict())

    def list_projects(self, *, limit: int = 100) -> list[ProjectRecord]:
        query = self._collection.order_by("created_at", direction=firestore.Query.DESCENDING).limit(limit)
        return [self._from_firestore_dict(doc.id, doc.to_dict()) for doc in query.stream()]

    def save_schema(self, project_id: str, content: Mapping[str, Any] | None) -> ProjectRecord:
        """Store the schema, creating version 1 or incrementing the version counter."""
        doc_ref = self._collection.document(project_id)
        doc = doc_ref.get()
        if not doc.exists:
            raise ProjectNotFoundError(project_id)

        now = datetime.utcnow()
        stored = dict(content) if content is not None else None
        if doc.to_dict().get("site_schema") is None:
            update_data: dict = {
                "site_schema": {"content": stored, "version": 1, "updated_at": now},
                "updated_at": now,
            }
        else:
            update_data = {
                "site_schema.content": stored,
                "site_schema.version": firestore.Increment(1),
                "site_schema.updated_at": now,
                "updated_at": now,
            }
        doc_ref.update(update_data)

        updated_doc = doc_ref.get()
        project = self._from_firestore_dict(updated_doc.id, updated_doc.to_dict())

        logger.info(
            "Saved project schema",
            extra={
                "project_id": project_id,
                "version": project.site_schema.version if project.site_schema else None,
            },
        )

        return project

    def ping(self) -> bool:
        try:
            list(self._collection.limit(1).stream())
        except google_exceptions.GoogleAPICallError:
            logger.warning("Firestore health check failed", exc_info=True)
            return False
        return True

    def _to_firestore_dict(self, project: ProjectRecord) -> dict:
        return {
            "name": project.name,
            "slug": project.slug,
            "status": project.status,
            "brief": project.brief,
            "owner": project.owner,
            "site_schema": project.site_schema.model_dump() if project.site_schema else None,
            "created_at": project.created_at,
            "updated_at": project.updated_at,
        }

    def _from_firestore_dict(self, project_id: str, data: dict) -> ProjectRecord:
        site_schema = None
        if data.get("site_schema"):
            site_schema = ProjectSchemaRecord.model_validate(data["site_schema"])

        return ProjectRecord(
            id=project_id,
            name=data["name"],
            slug=data.get("slug", ""),
            status=data.get("status", "draft"),
            brief=data.get("brief"),
            owner=data.get("owner", ProjectRecord.model_fields["owner"].default),
            site_schema=site_schema,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


__all__ = ["FirestoreProjectStore"]
