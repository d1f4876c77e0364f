"""Tests for project and package manager detection."""

import pytest

from quasarup.detect import find_app_dir, identify_packager
from quasarup.errors import NotInProject


class TestFindAppDir:
    """Test locating the project root."""

    def test_finds_current_directory(self, tmp_path):
        (tmp_path / "quasar.config.js").write_text("")

        assert find_app_dir(tmp_path) == tmp_path.resolve()

    def test_finds_ancestor(self, tmp_path):
        (tmp_path / "quasar.config.ts").write_text("")
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)

        assert find_app_dir(nested) == tmp_path.resolve()

    def test_legacy_config_name(self, tmp_path):
        (tmp_path / "quasar.conf.js").write_text("")

        assert find_app_dir(tmp_path) == tmp_path.resolve()

    def test_not_in_project(self, tmp_path):
        with pytest.raises(NotInProject):
            find_app_dir(tmp_path)


class TestIdentifyPackager:
    """Test package manager detection from lockfiles."""

    def test_yarn_lockfile(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")

        assert identify_packager(tmp_path) == "yarn"

    def test_npm_lockfile(self, tmp_path):
        (tmp_path / "package-lock.json").write_text("{}")

        assert identify_packager(tmp_path) == "npm"

    def test_no_lockfile_defaults_to_npm(self, tmp_path):
        assert identify_packager(tmp_path) == "npm"
