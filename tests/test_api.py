import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from site_builder.api import create_app
from site_builder.project_store import ProjectStore


@pytest.fixture
def store() -> ProjectStore:
    return ProjectStore()


@pytest.fixture
def client(store) -> TestClient:
    return TestClient(create_app(store=store))


def create_project(client: TestClient, name: str = "Acme Studio") -> str:
    response = client.post("/api/projects", json={"name": name})
    assert response.status_code == 201
    return response.json()["project"]["id"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/api/health/db").json() == {"ok": True}


def test_db_health_failure(store):
    store.ping = lambda: False
    client = TestClient(create_app(store=store))

    response = client.get("/api/health/db")

    assert response.status_code == 500
    assert response.json() == {"ok": False}


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "trace-123"})

    assert response.headers["X-Request-ID"] == "trace-123"


def test_create_and_list_projects(client):
    project_id = create_project(client)

    projects = client.get("/api/projects").json()["projects"]

    assert [p["id"] for p in projects] == [project_id]
    assert projects[0]["slug"] == "acme-studio"
    assert projects[0]["status"] == "draft"


def test_create_project_requires_name(client):
    assert client.post("/api/projects", json={}).status_code == 400
    assert client.post("/api/projects", content=b"{not json", headers={"Content-Type": "application/json"}).status_code == 400
    assert client.post("/api/projects", json={"name": ""}).status_code == 400
    assert client.post("/api/projects", json={"name": 42}).status_code == 400


def test_get_schema_creates_default(client):
    project_id = create_project(client)

    first = client.get(f"/api/projects/{project_id}/schema").json()
    second = client.get(f"/api/projects/{project_id}/schema").json()

    assert first["version"] == 1
    assert second["version"] == 1
    pages = first["schema"]["website"]["pages"]
    assert [page["slug"] for page in pages] == ["home"]
    assert pages[0]["sections"][0]["type"] == "hero"


def test_schema_unknown_project(client, sample_schema):
    assert client.get("/api/projects/missing/schema").status_code == 404
    response = client.put("/api/projects/missing/schema", json={"schema": sample_schema.to_json_dict()})
    assert response.status_code == 404


def test_put_schema_bumps_version(client, sample_schema):
    project_id = create_project(client)
    client.get(f"/api/projects/{project_id}/schema")

    response = client.put(f"/api/projects/{project_id}/schema", json={"schema": sample_schema.to_json_dict()})

    assert response.status_code == 200
    assert response.json()["version"] == 2
    assert response.json()["schema"]["website"]["name"] == "Acme"
    assert client.put(f"/api/projects/{project_id}/schema", json={}).status_code == 400


def test_generate_schema(client):
    response = client.post(
        "/api/generate/schema",
        json={"brief": {"projectName": "Studio Lumen", "businessType": "Photo", "pagesWanted": ["home", "blog"]}},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["ok"] is True
    assert [page["slug"] for page in body["schema"]["website"]["pages"]] == ["home", "blog"]
    assert body["debug"]["step"] == "STEP1_SCHEMA"
    assert "Studio Lumen" in body["debug"]["prompt"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"brief": "texte"},
        {"brief": {"projectName": "Acme"}},
        {"brief": {"businessType": "Agence"}},
    ],
)
def test_generate_schema_rejects_bad_briefs(client, payload):
    assert client.post("/api/generate/schema", json=payload).status_code == 400


def test_generate_content(client, sample_schema):
    response = client.post("/api/generate/content", json={"schema": sample_schema.to_json_dict()})

    body = response.json()
    assert response.status_code == 200
    assert body["debug"]["step"] == "STEP2_CONTENT"
    hero = body["schema"]["website"]["pages"][0]["sections"][0]
    assert hero["props"]["headline"].startswith("Bonjour ")
    assert client.post("/api/generate/content", json={}).status_code == 400
    assert client.post("/api/generate/content", json={"schema": {"website": 3}}).status_code == 400


def test_generate_code_returns_zip(client, sample_schema):
    project_id = create_project(client)
    client.put(f"/api/projects/{project_id}/schema", json={"schema": sample_schema.to_json_dict()})

    response = client.post(f"/api/projects/{project_id}/generate/code")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert response.headers["content-disposition"] == 'attachment; filename="acme.zip"'
    with zipfile.ZipFile(io.BytesIO(response.content)) as bundle:
        assert "app/[slug]/page.tsx" in bundle.namelist()
        assert "lib/websiteSchema.ts" in bundle.namelist()


def test_generate_code_without_schema(client, store):
    project_id = create_project(client)

    assert client.post(f"/api/projects/{project_id}/generate/code").status_code == 404
    assert client.post("/api/projects/missing/generate/code").status_code == 404

    store.save_schema(project_id, None)
    assert client.post(f"/api/projects/{project_id}/generate/code").status_code == 400


def test_generate_code_failure_is_500(client, store):
    project_id = create_project(client)
    store.save_schema(project_id, {"website": "not an object"})

    response = client.post(f"/api/projects/{project_id}/generate/code")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")


def test_editor_flow(client):
    project_id = create_project(client)
    client.get(f"/api/projects/{project_id}/schema")

    page = client.post(f"/api/projects/{project_id}/pages", json={"title": "Nos Offres"})
    assert page.status_code == 201
    assert page.json()["version"] == 2
    assert client.post(f"/api/projects/{project_id}/pages", json={"title": "nos offres"}).status_code == 409

    added = client.post(f"/api/projects/{project_id}/pages/nos-offres/sections", json={"type": "pricing"})
    assert added.status_code == 201
    section_id = added.json()["section"]["id"]
    assert client.post(
        f"/api/projects/{project_id}/pages/nos-offres/sections", json={"type": "carousel"}
    ).status_code == 400

    patched = client.patch(
        f"/api/projects/{project_id}/pages/nos-offres/sections/{section_id}/props",
        json={"props": {"title": "Tarifs"}},
    )
    assert patched.status_code == 200
    section = patched.json()["schema"]["website"]["pages"][1]["sections"][0]
    assert section["props"]["title"] == "Tarifs"
    assert section["props"]["plans"]

    removed = client.delete(f"/api/projects/{project_id}/pages/nos-offres/sections/{section_id}")
    assert removed.status_code == 200
    assert removed.json()["schema"]["website"]["pages"][1]["sections"] == []
    assert removed.json()["version"] == 5

    assert client.delete(f"/api/projects/{project_id}/pages/nos-offres/sections/{section_id}").status_code == 404
    assert client.delete(f"/api/projects/{project_id}/pages/blog/sections/{section_id}").status_code == 404


def null_props_schema() -> dict:
    return {
        "website": {
            "name": "Acme",
            "pages": [
                {
                    "slug": "home",
                    "title": "Accueil",
                    "sections": [
                        {"id": "sec-hero-1", "type": "hero", "props": None},
                        {"id": "sec-x-1", "type": "carousel", "props": None},
                    ],
                }
            ],
        }
    }


def test_generate_content_accepts_null_props(client):
    response = client.post("/api/generate/content", json={"schema": null_props_schema()})

    assert response.status_code == 200
    sections = response.json()["schema"]["website"]["pages"][0]["sections"]
    assert sections[0]["props"]["ctaPrimary"] == "Demander un devis"
    assert sections[1]["props"] == {}


def test_generate_code_accepts_null_props(client, store):
    project_id = create_project(client)
    store.save_schema(project_id, null_props_schema())

    response = client.post(f"/api/projects/{project_id}/generate/code")

    assert response.status_code == 200
    with zipfile.ZipFile(io.BytesIO(response.content)) as bundle:
        assert '"props": {}' in bundle.read("lib/websiteSchema.ts").decode("utf-8")


def test_validation_errors_are_400_with_detail(client):
    response = client.post("/api/generate/schema", json={"brief": {"businessType": "Agence"}})

    assert response.status_code == 400
    assert "projectName" in response.json()["detail"]


def test_editor_reports_invalid_stored_schema(client, store):
    project_id = create_project(client)
    store.save_schema(project_id, {"website": []})

    response = client.post(f"/api/projects/{project_id}/pages", json={"title": "Blog"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Stored schema is invalid"}


def test_editor_requires_body_fields(client):
    project_id = create_project(client)
    client.get(f"/api/projects/{project_id}/schema")

    assert client.post(f"/api/projects/{project_id}/pages", json={}).status_code == 400
    assert client.post(f"/api/projects/{project_id}/pages/home/sections", json={"type": ""}).status_code == 400
    section_id = client.get(f"/api/projects/{project_id}/schema").json()["schema"]["website"]["pages"][0]["sections"][0]["id"]
    assert client.patch(
        f"/api/projects/{project_id}/pages/home/sections/{section_id}/props", json={"props": "texte"}
    ).status_code == 400


def test_section_types_palette(client):
    palette = client.get("/api/section-types").json()["sectionTypes"]

    assert [entry["type"] for entry in palette] == [
        "hero", "features", "services", "testimonials", "pricing", "faq", "cta", "contact", "gallery",
    ]
    assert {"type": "gallery", "label": "Galerie"} in palette
