import io
import zipfile

from site_builder.archive import archive_filename, build_archive, package_project
from site_builder.code_generator import ProjectCodeGenerator


def test_archive_filename():
    assert archive_filename("Acme Studio") == "acme-studio.zip"
    assert archive_filename("") == "site-generated.zip"


def test_archive_contains_every_file(sample_schema):
    files = ProjectCodeGenerator().generate(sample_schema)

    archive = package_project(sample_schema, files)

    assert archive.filename == "acme.zip"
    assert archive.media_type == "application/zip"
    assert archive.content_disposition == 'attachment; filename="acme.zip"'
    with zipfile.ZipFile(io.BytesIO(archive.content)) as bundle:
        assert set(bundle.namelist()) == set(files)
        assert bundle.read("app/[slug]/page.tsx").decode("utf-8") == files["app/[slug]/page.tsx"]


def test_build_archive_keeps_utf8_content():
    content = build_archive({"README.md": "Réalisations"})

    with zipfile.ZipFile(io.BytesIO(content)) as bundle:
        assert bundle.read("README.md").decode("utf-8") == "Réalisations"
