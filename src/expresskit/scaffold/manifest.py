"""PackageManifest: read-merge-write of the project's package.json."""

import json
import os

import click

from expresskit.errors import FileSystemError, ManifestParseError

MANIFEST_FILE = "package.json"

OWNED_SCRIPTS = {
    "start": "node src/server.js",
    "dev": "node --watch src/server.js",
}


def default_manifest(project_root: str) -> dict:
    """Return the manifest used when no readable package.json exists."""
    return {
        "name": os.path.basename(os.path.normpath(project_root)),
        "version": "1.0.0",
        "main": "server.js",
        "type": "module",
        "scripts": {},
    }


class PackageManifest:
    """Owns load/merge/save of package.json, preserving fields it does not own."""

    def __init__(self, manifest_file: str, data: dict):
        self._manifest_file = manifest_file
        self._data = data

    @classmethod
    def read(cls, project_root: str) -> "PackageManifest":
        """Load an existing package.json.

        Raises:
            ManifestParseError: If the file is missing, unreadable, or does
                not hold a JSON object.
        """
        manifest_file = os.path.join(project_root, MANIFEST_FILE)
        try:
            with open(manifest_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ManifestParseError(f"{manifest_file}: {e}") from e
        if not isinstance(data, dict):
            raise ManifestParseError(f"{manifest_file}: expected a JSON object")
        return cls(manifest_file, data)

    @classmethod
    def load(cls, project_root: str) -> "PackageManifest":
        """Load package.json, falling back to defaults when it cannot be parsed."""
        try:
            return cls.read(project_root)
        except ManifestParseError:
            manifest_file = os.path.join(project_root, MANIFEST_FILE)
            return cls(manifest_file, default_manifest(project_root))

    @property
    def data(self) -> dict:
        return self._data

    @property
    def scripts(self) -> dict:
        return self._data.get("scripts", {})

    def apply_scripts(self, scripts: dict) -> None:
        """Overwrite the given script entries, leaving other scripts in place."""
        existing = self._data.get("scripts")
        if not isinstance(existing, dict):
            existing = {}
            self._data["scripts"] = existing
        existing.update(scripts)

    def save(self) -> None:
        """Persist the manifest to disk."""
        try:
            with open(self._manifest_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise FileSystemError(self._manifest_file, e) from e


def merge_manifest(project_root: str) -> PackageManifest:
    """Create or patch package.json with the start/dev scripts."""
    manifest = PackageManifest.load(project_root)
    manifest.apply_scripts(OWNED_SCRIPTS)
    manifest.save()
    click.echo(f"📄 {os.path.join(project_root, MANIFEST_FILE)}")
    return manifest
