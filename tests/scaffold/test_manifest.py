"""Tests for PackageManifest and merge_manifest: package.json is merged, not replaced."""

import json

import pytest

from expresskit.errors import FileSystemError, ManifestParseError
from expresskit.scaffold.manifest import OWNED_SCRIPTS, PackageManifest, merge_manifest


def _write_manifest(project_root, data):
    (project_root / "package.json").write_text(json.dumps(data, indent=2))


def _read_manifest(project_root):
    return json.loads((project_root / "package.json").read_text())


@pytest.mark.unit
class TestFreshManifest:

    def test_creates_default_manifest(self, tmp_path):
        project_root = tmp_path / "myapp"
        project_root.mkdir()

        merge_manifest(str(project_root))

        assert _read_manifest(project_root) == {
            "name": "myapp",
            "version": "1.0.0",
            "main": "server.js",
            "type": "module",
            "scripts": OWNED_SCRIPTS,
        }

    def test_is_indented_with_trailing_newline(self, tmp_path):
        merge_manifest(str(tmp_path))

        text = (tmp_path / "package.json").read_text()
        assert text.startswith('{\n  "name"')
        assert text.endswith("}\n")

    def test_owned_scripts(self):
        assert OWNED_SCRIPTS == {
            "start": "node src/server.js",
            "dev": "node --watch src/server.js",
        }


@pytest.mark.unit
class TestMergeExistingManifest:

    def test_preserves_unknown_fields_and_scripts(self, tmp_path):
        _write_manifest(tmp_path, {"license": "MIT", "scripts": {"test": "jest"}})

        merge_manifest(str(tmp_path))

        data = _read_manifest(tmp_path)
        assert data["license"] == "MIT"
        assert data["scripts"]["test"] == "jest"
        assert data["scripts"]["start"] == OWNED_SCRIPTS["start"]
        assert data["scripts"]["dev"] == OWNED_SCRIPTS["dev"]

    def test_overwrites_owned_scripts(self, tmp_path):
        _write_manifest(tmp_path, {"scripts": {"start": "old", "dev": "old"}})

        merge_manifest(str(tmp_path))

        assert _read_manifest(tmp_path)["scripts"] == OWNED_SCRIPTS

    def test_preserves_dependencies(self, tmp_path):
        _write_manifest(tmp_path, {"name": "svc", "dependencies": {"express": "^4.19.2"}})

        merge_manifest(str(tmp_path))

        assert _read_manifest(tmp_path)["dependencies"] == {"express": "^4.19.2"}

    def test_does_not_add_default_fields(self, tmp_path):
        _write_manifest(tmp_path, {"name": "svc"})

        merge_manifest(str(tmp_path))

        assert list(_read_manifest(tmp_path)) == ["name", "scripts"]

    def test_keeps_field_order(self, tmp_path):
        _write_manifest(tmp_path, {"version": "2.0.0", "scripts": {}, "name": "svc"})

        merge_manifest(str(tmp_path))

        assert list(_read_manifest(tmp_path)) == ["version", "scripts", "name"]

    def test_replaces_non_object_scripts(self, tmp_path):
        _write_manifest(tmp_path, {"name": "svc", "scripts": "broken"})

        merge_manifest(str(tmp_path))

        assert _read_manifest(tmp_path)["scripts"] == OWNED_SCRIPTS


@pytest.mark.unit
class TestUnreadableManifest:

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "package.json").write_text("{ not json")

        merge_manifest(str(tmp_path))

        assert _read_manifest(tmp_path)["version"] == "1.0.0"

    def test_non_object_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "package.json").write_text("[1, 2]")

        merge_manifest(str(tmp_path))

        assert _read_manifest(tmp_path)["scripts"] == OWNED_SCRIPTS

    def test_read_raises_parse_error_for_missing_file(self, tmp_path):
        with pytest.raises(ManifestParseError):
            PackageManifest.read(str(tmp_path))

    def test_write_failure_raises_file_system_error(self, tmp_path):
        (tmp_path / "package.json").mkdir()

        with pytest.raises(FileSystemError):
            merge_manifest(str(tmp_path))
