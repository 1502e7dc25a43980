from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions as google_exceptions

from site_builder.errors import ProjectNotFoundError
from site_builder.firestore_project_store import FirestoreProjectStore

NOW = datetime(2024, 5, 1, 12, 0, 0)


def make_snapshot(doc_id: str, data: dict | None) -> MagicMock:
    snapshot = MagicMock()
    snapshot.id = doc_id
    snapshot.exists = data is not None
    snapshot.to_dict.return_value = data
    return snapshot


def project_data(**overrides) -> dict:
    data = {
        "name": "Acme",
        "slug": "acme",
        "status": "draft",
        "brief": None,
        "owner": "demo@local.test",
        "site_schema": None,
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(overrides)
    return data


@pytest.fixture
def firestore_module():
    with patch("site_builder.firestore_project_store.firestore") as module:
        yield module


@pytest.fixture
def collection(firestore_module):
    return firestore_module.Client.return_value.collection.return_value


def test_uses_configured_collection(firestore_module):
    FirestoreProjectStore(project_id="demo", collection="sites")

    firestore_module.Client.assert_called_once_with(project="demo")
    firestore_module.Client.return_value.collection.assert_called_once_with("sites")


def test_create_project_uses_auto_id(collection):
    doc_ref = collection.document.return_value
    doc_ref.id = "auto123"

    project = FirestoreProjectStore().create_project(name="Mon Site", brief={"projectName": "Mon Site"})

    assert project.id == "auto123"
    assert project.slug == "mon-site"
    stored = doc_ref.set.call_args.args[0]
    assert stored["name"] == "Mon Site"
    assert stored["site_schema"] is None
    assert stored["brief"] == {"projectName": "Mon Site"}


def test_get_project_missing(collection):
    collection.document.return_value.get.return_value = make_snapshot("nope", None)

    assert FirestoreProjectStore().get_project("nope") is None


def test_first_schema_save_creates_version_one(collection):
    content = {"website": {"name": "Acme", "pages": []}}
    doc_ref = collection.document.return_value
    doc_ref.get.side_effect = [
        make_snapshot("p1", project_data()),
        make_snapshot("p1", project_data(site_schema={"content": content, "version": 1, "updated_at": NOW})),
    ]

    project = FirestoreProjectStore().save_schema("p1", content)

    update = doc_ref.update.call_args.args[0]
    assert update["site_schema"]["version"] == 1
    assert update["site_schema"]["content"] == content
    assert project.site_schema.version == 1


def test_later_schema_save_increments_version(firestore_module, collection):
    content = {"website": {"name": "Acme", "pages": []}}
    existing = {"content": content, "version": 3, "updated_at": NOW}
    doc_ref = collection.document.return_value
    doc_ref.get.side_effect = [
        make_snapshot("p1", project_data(site_schema=existing)),
        make_snapshot("p1", project_data(site_schema={**existing, "version": 4})),
    ]

    project = FirestoreProjectStore().save_schema("p1", content)

    firestore_module.Increment.assert_called_once_with(1)
    update = doc_ref.update.call_args.args[0]
    assert update["site_schema.version"] is firestore_module.Increment.return_value
    assert update["site_schema.content"] == content
    assert project.site_schema.version == 4


def test_save_schema_unknown_project(collection):
    collection.document.return_value.get.return_value = make_snapshot("missing", None)

    with pytest.raises(ProjectNotFoundError):
        FirestoreProjectStore().save_schema("missing", {})


def test_ping_reports_failures(collection):
    store = FirestoreProjectStore()
    collection.limit.return_value.stream.return_value = iter([])
    assert store.ping() is True

    collection.limit.return_value.stream.side_effect = google_exceptions.ServiceUnavailable("down")
    assert store.ping() is False
