"""Pytest configuration and fixtures."""

import json

import pytest


class FakePackager:
    """Records package manager calls instead of running npm or yarn."""

    def __init__(self, versions=None, name="npm"):
        self.name = name
        self.versions = versions or {}
        self.calls = []

    def query_versions(self, package_name):
        self.calls.append(("query", package_name))
        return self.versions.get(package_name)

    def install_packages(self, specs, dev=False):
        self.calls.append(("install", list(specs), dev))

    def uninstall_package(self, package_name):
        self.calls.append(("uninstall", package_name))

    def remove_installed_files(self, package_name):
        self.calls.append(("remove", package_name))

    def calls_of(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def make_packager():
    """Factory for fake package managers."""
    return FakePackager


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "dependencies": {
    "@quasar/extras": "^1.16.4",
    "quasar": "^2.12.0",
    "vue": "^3.3.0"
  },
  "devDependencies": {
    "@quasar/app-vite": "1.4.3",
    "eslint": "^8.10.0",
    "eslint-plugin-quasar": "^1.1.0"
  }
}
"""


@pytest.fixture
def quasar_project(tmp_path, sample_package_json):
    """Create a Quasar project with installed node_modules."""
    (tmp_path / "quasar.config.js").write_text("module.exports = {}")
    (tmp_path / "package.json").write_text(sample_package_json)

    installed = {
        "@quasar/extras": "1.16.4",
        "quasar": "2.12.0",
        "@quasar/app-vite": "1.4.3",
    }
    for name, version in installed.items():
        pkg_dir = tmp_path / "node_modules" / name
        pkg_dir.mkdir(parents=True)
        (pkg_dir / "package.json").write_text(json.dumps({"name": name, "version": version}))

    return tmp_path
