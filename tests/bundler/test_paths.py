"""
Tests for bundler.paths

Covers path keys, URL detection, physical path resolution, directory
enumeration and output/override path rules.
"""

import os

import pytest

from bundler.paths import (
    PathSet,
    enumerate_scripts,
    get_absolute_directory,
    get_output_path,
    get_override_path,
    get_require_relative_path,
    is_url,
    path_key,
    resolve_physical_path,
)


class TestPathKey:
    def test_case_insensitive(self):
        assert path_key("/Site/Scripts/App.js") == path_key("/site/scripts/app.js")

    def test_normalizes_segments(self):
        assert path_key("/site/Scripts/../Scripts/./a.js") == path_key("/site/Scripts/a.js")


class TestIsUrl:
    @pytest.mark.parametrize("value", [
        "https://cdn.example.com/jquery.js",
        "//cdn.example.com/jquery.js",
        "app/main?v=2",
    ])
    def test_url_shapes(self, value):
        assert is_url(value)

    @pytest.mark.parametrize("value", ["app/main", "lib/jquery-2.1.4", "./util"])
    def test_module_ids(self, value):
        assert not is_url(value)


class TestPathSet:
    def test_add_reports_new_entries(self):
        paths = PathSet()
        assert paths.add("/site/A.js") is True
        assert paths.add("/SITE/a.js") is False
        assert len(paths) == 1

    def test_keeps_first_spelling_in_order(self):
        paths = PathSet(["/site/B.js", "/site/a.js", "/site/b.js"])
        assert list(paths) == ["/site/B.js", "/site/a.js"]

    def test_contains_is_case_insensitive(self):
        paths = PathSet(["/site/Scripts/App.js"])
        assert "/site/scripts/app.js" in paths
        assert None not in paths


class TestResolvePhysicalPath:
    def test_appends_extension(self, project):
        expected = project.script("app/main")
        assert resolve_physical_path("app/main", str(project.scripts)) == expected

    def test_keeps_existing_extension(self, project):
        expected = project.script("app/main")
        assert resolve_physical_path("app/main.js", str(project.scripts)) == expected

    def test_falls_back_to_project_root(self, project):
        expected = project.file("Content/widget.js", "var w;")
        assert resolve_physical_path("Content/widget", str(project.scripts)) is None
        assert resolve_physical_path("Content/widget", str(project.scripts), str(project.root)) == expected

    def test_missing_file(self, project):
        assert resolve_physical_path("nope", str(project.scripts), str(project.root)) is None

    def test_url_never_resolves(self, project):
        assert resolve_physical_path("//cdn.example.com/x", str(project.scripts)) is None


class TestEnumerateScripts:
    def test_recursive_and_sorted(self, project):
        project.script("Controllers/Root/b")
        project.script("Controllers/Root/a")
        project.script("Controllers/Root/nested/c")
        project.file("Scripts/Controllers/Root/readme.txt", "notes")
        project.file("Scripts/Controllers/Root/UPPER.JS", "var u;")

        scripts = enumerate_scripts(str(project.scripts / "Controllers" / "Root"))
        names = [os.path.relpath(s, project.scripts / "Controllers" / "Root") for s in scripts]

        assert names == ["UPPER.JS", "a.js", "b.js", os.path.join("nested", "c.js")]

    def test_missing_directory(self, project, caplog):
        assert enumerate_scripts(str(project.scripts / "absent")) == []
        assert "Directory not found" in caplog.text


class TestRelativePaths:
    def test_require_relative_path(self):
        entry = os.path.join(os.sep, "site", "Scripts")
        script = os.path.join(entry, "app", "main.js")
        assert get_require_relative_path(entry, script) == "app/main"

    def test_absolute_directory(self):
        entry = os.path.join(os.sep, "site", "Scripts")
        assert get_absolute_directory(entry, "/Controllers/Root") == os.path.join(entry, "Controllers", "Root")


class TestOutputPaths:
    root = os.path.join(os.sep, "site")

    def test_default_output(self):
        assert get_output_path(self.root, None, "main-app") == os.path.join(
            self.root, "Scripts", "bundles", "main-app.js"
        )

    def test_directory_output(self):
        assert get_output_path(self.root, "Scripts/out/", "main-app") == os.path.join(
            self.root, "Scripts", "out", "main-app.js"
        )

    def test_file_output(self):
        assert get_output_path(self.root, "dist/app.js", "main-app") == os.path.join(
            self.root, "dist", "app.js"
        )

    def test_override_path(self):
        config = os.path.join(self.root, "RequireJS.json")
        assert get_override_path(config) == os.path.join(self.root, "RequireJS.override.json")
