from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, ValidationError

from .archive import package_project
from .code_generator import ProjectCodeGenerator
from .editor import add_page, add_section, remove_section, update_section_props
from .enricher import ContentEnricher
from .errors import (
    DuplicatePageError,
    InvalidPageTitleError,
    PageNotFoundError,
    ProjectNotFoundError,
    SectionNotFoundError,
    SiteBuilderError,
    UnknownSectionTypeError,
)
from .logging_config import set_trace_id
from .models.brief import ProjectBrief
from .models.project import ProjectRecord
from .models.schema import WebsiteSchema
from .project_store import ProjectRepository
from .prompts import build_content_generation_prompt, build_schema_generation_prompt
from .registry import SectionRegistry
from .synthesizer import SchemaSynthesizer

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[SiteBuilderError], int] = {
    ProjectNotFoundError: 404,
    PageNotFoundError: 404,
    SectionNotFoundError: 404,
    DuplicatePageError: 409,
    InvalidPageTitleError: 400,
    UnknownSectionTypeError: 400,
}


class CreateProjectRequest(BaseModel):
    name: str = Field(min_length=1)
    brief: dict[str, Any] | None = None


class GenerateSchemaRequest(BaseModel):
    brief: ProjectBrief


class SchemaBody(BaseModel):
    website_schema: WebsiteSchema = Field(alias="schema")


class CreatePageRequest(BaseModel):
    title: str = Field(min_length=1)


class CreateSectionRequest(BaseModel):
    type: str = Field(min_length=1)


class PatchPropsRequest(BaseModel):
    props: dict[str, Any]


def _describe_errors(errors: list[dict[str, Any]]) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in errors
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON and missing fields are client errors: 400, not 422.
    return JSONResponse({"detail": _describe_errors(exc.errors())}, status_code=400)


async def site_builder_error_handler(request: Request, exc: SiteBuilderError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 400)
    return JSONResponse({"detail": str(exc)}, status_code=status_code)


def create_app(
    *,
    store: ProjectRepository,
    registry: SectionRegistry | None = None,
) -> FastAPI:
    registry = registry or SectionRegistry()
    synthesizer = SchemaSynthesizer(registry=registry)
    enricher = ContentEnricher(registry=registry)
    code_generator = ProjectCodeGenerator(registry=registry)

    app = FastAPI(title="Site Builder API", version="0.1.0")
    app.state.store = store
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SiteBuilderError, site_builder_error_handler)

    @app.middleware("http")
    async def assign_trace_id(request: Request, call_next):
        trace_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        set_trace_id(trace_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = trace_id
        return response

    def load_project(project_id: str) -> ProjectRecord:
        project = store.get_project(project_id)
        if project is None:
            raise HTTPException(status_code=404, detail="Project not found")
        return project

    def load_schema(project_id: str) -> WebsiteSchema:
        project = load_project(project_id)
        if project.site_schema is None or project.site_schema.content is None:
            raise HTTPException(status_code=404, detail="Schema not found for this project")
        try:
            return WebsiteSchema.model_validate(project.site_schema.content)
        except ValidationError as exc:
            logger.error(
                "Stored schema is invalid",
                extra={"project_id": project_id, "errors": exc.error_count()},
            )
            raise HTTPException(status_code=500, detail="Stored schema is invalid")

    def save(project_id: str, schema: WebsiteSchema) -> dict[str, Any]:
        project = store.save_schema(project_id, schema.to_json_dict())
        return {"schema": project.site_schema.content, "version": project.site_schema.version}

    @app.get("/health")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.get("/api/health/db")
    async def database_healthcheck() -> JSONResponse:
        if store.ping():
            return JSONResponse({"ok": True})
        return JSONResponse({"ok": False}, status_code=500)

    @app.get("/api/section-types")
    async def list_section_types() -> dict[str, Any]:
        return {
            "sectionTypes": [
                {"type": kind.value, "label": registry.definition(kind).label}
                for kind in registry.kinds()
            ]
        }

    @app.get("/api/projects")
    async def list_projects() -> dict[str, Any]:
        return {"projects": [project.summary() for project in store.list_projects()]}

    @app.post("/api/projects", status_code=201)
    async def create_project(body: CreateProjectRequest) -> dict[str, Any]:
        project = store.create_project(name=body.name, brief=body.brief)
        logger.info("Project created", extra={"project_id": project.id, "slug": project.slug})
        return {"project": project.summary()}

    @app.get("/api/projects/{project_id}/schema")
    async def get_schema(project_id: str) -> dict[str, Any]:
        project = load_project(project_id)
        if project.site_schema is None:
            schema = synthesizer.default_schema(project.name)
            project = store.save_schema(project_id, schema.to_json_dict())
            logger.info("Created default schema", extra={"project_id": project_id})
        return {"schema": project.site_schema.content, "version": project.site_schema.version}

    @app.put("/api/projects/{project_id}/schema")
    async def put_schema(project_id: str, body: SchemaBody) -> dict[str, Any]:
        load_project(project_id)
        return save(project_id, body.website_schema)

    @app.post("/api/generate/schema")
    async def generate_schema(body: GenerateSchemaRequest) -> dict[str, Any]:
        brief = body.brief
        if not brief.project_name or not brief.business_type:
            raise HTTPException(status_code=400, detail="projectName and businessType are required")

        schema = synthesizer.synthesize(brief)
        return {
            "ok": True,
            "schema": schema.to_json_dict(),
            "debug": {"step": "STEP1_SCHEMA", "prompt": build_schema_generation_prompt(brief)},
        }

    @app.post("/api/generate/content")
    async def generate_content(body: SchemaBody) -> dict[str, Any]:
        schema = body.website_schema
        enriched = enricher.enrich(schema)
        return {
            "ok": True,
            "schema": enriched.to_json_dict(),
            "debug": {"step": "STEP2_CONTENT", "prompt": build_content_generation_prompt(schema)},
        }

    @app.post("/api/projects/{project_id}/generate/code")
    async def generate_code(project_id: str) -> Response:
        project = store.get_project(project_id)
        if project is None or project.site_schema is None:
            raise HTTPException(status_code=404, detail="Schema not found for this project")
        if project.site_schema.content is None:
            raise HTTPException(status_code=400, detail="No schema stored for this project")

        try:
            schema = WebsiteSchema.model_validate(project.site_schema.content)
            files = code_generator.generate(schema)
            archive = await asyncio.to_thread(package_project, schema, files)
        except Exception as exc:
            logger.error(
                "Failed to generate project code",
                exc_info=True,
                extra={"project_id": project_id, "error": str(exc)},
            )
            raise HTTPException(status_code=500, detail="Server error while generating code")

        logger.info(
            "Project archive ready",
            extra={"project_id": project_id, "filename": archive.filename, "size": len(archive.content)},
        )
        return Response(
            content=archive.content,
            media_type=archive.media_type,
            headers={"Content-Disposition": archive.content_disposition},
        )

    @app.post("/api/projects/{project_id}/pages", status_code=201)
    async def create_page(project_id: str, body: CreatePageRequest) -> dict[str, Any]:
        schema = load_schema(project_id)
        return save(project_id, add_page(schema, body.title))

    @app.post("/api/projects/{project_id}/pages/{slug}/sections", status_code=201)
    async def create_section(project_id: str, slug: str, body: CreateSectionRequest) -> dict[str, Any]:
        schema = load_schema(project_id)
        updated, section = add_section(schema, slug, body.type, registry=registry)
        return {**save(project_id, updated), "section": section.model_dump(mode="json")}

    @app.delete("/api/projects/{project_id}/pages/{slug}/sections/{section_id}")
    async def delete_section(project_id: str, slug: str, section_id: str) -> dict[str, Any]:
        schema = load_schema(project_id)
        return save(project_id, remove_section(schema, slug, section_id))

    @app.patch("/api/projects/{project_id}/pages/{slug}/sections/{section_id}/props")
    async def patch_section_props(
        project_id: str, slug: str, section_id: str, body: PatchPropsRequest
    ) -> dict[str, Any]:
        schema = load_schema(project_id)
        return save(project_id, update_section_props(schema, slug, section_id, body.props))

    return app


__all__ = [
    "CreatePageRequest",
    "CreateProjectRequest",
    "CreateSectionRequest",
    "ERROR_STATUS",
    "GenerateSchemaRequest",
    "PatchPropsRequest",
    "SchemaBody",
    "create_app",
]
