"""
Tests for bundler.loader

Covers config discovery, document validation, item classification and
merging of multiple documents.
"""

import pytest

from bundler.errors import ConfigurationError
from bundler.loader import RequireConfigLoader, find_configs, load_configuration
from bundler.models import DirectoryRef, FileRef, UrlRef


MAIN_CONFIG = {
    "paths": {"jquery": "lib/jquery-2.1.4"},
    "shim": {"legacy": {"exports": "Legacy"}},
    "autoBundles": {
        "main-app": {
            "outputPath": "Scripts/bundles/",
            "compressionType": "uglify",
            "include": [
                {"file": "app/main"},
                {"directory": "Controllers/Root"},
                {"file": "//cdn.example.com/analytics.js"},
            ],
            "exclude": [{"file": "jquery"}],
        }
    },
}


class TestFindConfigs:
    def test_found_in_project_root(self, project):
        path = project.config(MAIN_CONFIG)
        assert find_configs(str(project.root)) == [path]

    def test_missing(self, project):
        with pytest.raises(ConfigurationError, match="none were found"):
            find_configs(str(project.root))


class TestRequireConfigLoader:
    def test_load_single_document(self, project):
        path = project.config(MAIN_CONFIG)
        configuration = RequireConfigLoader().load([path])

        assert configuration.paths == {"jquery": "lib/jquery-2.1.4"}
        assert configuration.file_paths == [path]
        assert len(configuration.auto_bundles) == 1

        spec = configuration.auto_bundles[0]
        assert spec.id == "main-app"
        assert spec.output_path == "Scripts/bundles/"
        assert spec.compression_type == "uglify"
        assert spec.config_path == path
        assert spec.includes == (
            FileRef("app/main"),
            DirectoryRef("Controllers/Root"),
            UrlRef("//cdn.example.com/analytics.js"),
        )
        assert spec.excludes == (FileRef("jquery"),)

    def test_defaults(self, project):
        path = project.config({"autoBundles": {"b": {"include": [{"file": "a"}]}}})
        spec = RequireConfigLoader().load([path]).auto_bundles[0]
        assert spec.compression_type == "none"
        assert spec.output_path is None
        assert spec.excludes == ()

    def test_merges_documents(self, project, caplog):
        first = project.config({
            "paths": {"jquery": "lib/jquery-1", "knockout": "lib/ko"},
            "autoBundles": {
                "shared": {"include": [{"file": "a"}]},
                "first": {"include": [{"file": "b"}]},
            },
        }, name="first.json")
        second = project.config({
            "paths": {"jquery": "lib/jquery-2"},
            "autoBundles": {"shared": {"include": [{"file": "c"}]}},
        }, name="second.json")

        configuration = load_configuration([first, second])

        assert configuration.paths == {"jquery": "lib/jquery-2", "knockout": "lib/ko"}
        specs = {spec.id: spec for spec in configuration.auto_bundles}
        assert [spec.id for spec in configuration.auto_bundles] == ["shared", "first"]
        assert specs["shared"].includes == (FileRef("c"),)
        assert specs["shared"].config_path == second
        assert "replaces the declaration" in caplog.text

    def test_yaml_document(self, project):
        path = project.root / "RequireJS.yaml"
        path.write_text(
            "paths:\n"
            "  jquery: lib/jquery\n"
            "autoBundles:\n"
            "  app:\n"
            "    include:\n"
            "      - file: app/main\n",
            encoding="utf-8",
        )
        configuration = RequireConfigLoader().load([str(path)])
        assert configuration.paths == {"jquery": "lib/jquery"}
        assert configuration.auto_bundles[0].includes == (FileRef("app/main"),)

    def test_item_with_file_and_directory(self, project):
        path = project.config({
            "autoBundles": {"bad": {"include": [{"file": "a", "directory": "b"}]}}
        })
        with pytest.raises(ConfigurationError, match="exactly one"):
            RequireConfigLoader().load([path])

    def test_empty_item(self, project):
        path = project.config({"autoBundles": {"bad": {"include": [{}]}}})
        with pytest.raises(ConfigurationError):
            RequireConfigLoader().load([path])

    def test_malformed_json(self, project):
        path = project.root / "RequireJS.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            RequireConfigLoader().load([str(path)])

    def test_top_level_must_be_object(self, project):
        path = project.root / "RequireJS.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="top level"):
            RequireConfigLoader().load([str(path)])

    def test_missing_file(self, project):
        with pytest.raises(ConfigurationError, match="not found"):
            RequireConfigLoader().load([str(project.root / "absent.json")])

    def test_no_paths(self):
        with pytest.raises(ConfigurationError):
            RequireConfigLoader().load([])
