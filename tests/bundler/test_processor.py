"""
Tests for bundler.processor

End-to-end runs of AutoBundleProcessor against projects on disk.
"""

import json
import os

import pytest

from bundler import AutoBundleProcessor
from bundler.config.schema import BundlerSettings
from bundler.errors import ConfigurationError, ProjectNotFoundError


@pytest.fixture
def app_project(project):
    """main -> (util, jquery), util -> jquery; jquery excluded through its alias."""
    project.script("lib/jquery-2.1.4", body="return $;")
    project.script("app/util", ["jquery"])
    project.script("app/main", ["app/util", "jquery"])
    project.config({
        "paths": {"jquery": "lib/jquery-2.1.4"},
        "autoBundles": {
            "main-app": {
                "include": [{"file": "app/main"}],
                "exclude": [{"file": "jquery"}],
            }
        },
    })
    return project


class TestParseConfigs:
    def test_bundle_excludes_aliased_library(self, app_project):
        bundles = AutoBundleProcessor(str(app_project.root)).parse_configs()

        assert len(bundles) == 1
        bundle = bundles[0]
        assert bundle.file_names == [app_project.path("app/util"), app_project.path("app/main")]
        assert bundle.diagnostics.is_clean

        output = app_project.scripts / "bundles" / "main-app.js"
        assert bundle.output == str(output)
        text = output.read_text(encoding="utf-8")
        assert text.index("define('app/util'") < text.index("define('app/main'")
        assert "return $;" not in text

    def test_writes_override_document(self, app_project):
        AutoBundleProcessor(str(app_project.root)).parse_configs()

        override = json.loads((app_project.root / "RequireJS.override.json").read_text(encoding="utf-8"))
        assert override == {
            "overrides": {
                "main-app": {
                    "bundledScripts": ["app/util", "app/main"],
                    "paths": {
                        "app/util": "bundles/main-app",
                        "app/main": "bundles/main-app",
                    },
                }
            }
        }

    def test_dry_run_writes_nothing(self, app_project):
        bundles = AutoBundleProcessor(str(app_project.root)).parse_configs(write=False)

        assert len(bundles[0].files) == 2
        assert not (app_project.scripts / "bundles").exists()
        assert not (app_project.root / "RequireJS.override.json").exists()

    def test_package_path_receives_output(self, app_project, tmp_path):
        package = tmp_path / "dist"
        bundles = AutoBundleProcessor(str(app_project.root), package_path=str(package)).parse_configs()

        assert bundles[0].output == str(package / "Scripts" / "bundles" / "main-app.js")
        assert os.path.isfile(bundles[0].output)

    def test_directory_include(self, project):
        project.script("Controllers/Root/home")
        project.script("Controllers/Root/about")
        project.script("Controllers/Root/admin/users")
        project.file("Scripts/Controllers/Root/notes.txt", "not a script")
        project.config({
            "autoBundles": {
                "controllers": {
                    "outputPath": "Scripts/out/",
                    "include": [{"directory": "Controllers/Root"}],
                    "exclude": [{"file": "Controllers/Root/admin/users"}],
                }
            }
        })

        bundle = AutoBundleProcessor(str(project.root)).parse_configs()[0]

        assert bundle.file_names == [
            project.path("Controllers/Root/about"),
            project.path("Controllers/Root/home"),
        ]
        assert bundle.output == str(project.scripts / "out" / "controllers.js")

    def test_directory_exclude(self, project):
        project.script("app/main", ["vendor/a"])
        project.script("vendor/a", ["vendor/b"])
        project.script("vendor/b")
        project.config({
            "autoBundles": {
                "app": {
                    "include": [{"file": "app/main"}],
                    "exclude": [{"directory": "vendor"}],
                }
            }
        })

        bundle = AutoBundleProcessor(str(project.root)).parse_configs(write=False)[0]
        assert bundle.file_names == [project.path("app/main")]

    def test_url_include_is_skipped(self, project):
        project.script("app/main")
        project.config({
            "autoBundles": {
                "app": {"include": [{"file": "https://cdn.example.com/x.js"}, {"file": "app/main"}]}
            }
        })
        bundle = AutoBundleProcessor(str(project.root)).parse_configs(write=False)[0]
        assert bundle.file_names == [project.path("app/main")]

    def test_unresolved_include_is_recorded(self, project, caplog):
        project.script("app/main")
        project.config({
            "autoBundles": {"app": {"include": [{"file": "app/gone"}, {"file": "app/main"}]}}
        })

        bundle = AutoBundleProcessor(str(project.root)).parse_configs(write=False)[0]

        assert bundle.file_names == [project.path("app/main")]
        assert [u.identifier for u in bundle.diagnostics.unresolved] == ["app/gone"]
        assert "Could not resolve path for app/gone" in caplog.text

    def test_cycle_is_reported(self, project):
        project.script("app/a", ["app/b"])
        project.script("app/b", ["app/a"])
        project.config({"autoBundles": {"cyc": {"include": [{"file": "app/a"}]}}})

        bundle = AutoBundleProcessor(str(project.root)).parse_configs(write=False)[0]

        assert bundle.file_names == [project.path("app/a"), project.path("app/b")]
        assert len(bundle.diagnostics.cycle_breaks) == 1

    def test_entry_point_override(self, project):
        project.file("Scripts/app/main.js", "define([], function () {});")
        project.config({"autoBundles": {"app": {"include": [{"file": "app/main"}]}}})

        processor = AutoBundleProcessor(str(project.root), entry_point_override="Scripts/app")
        bundle = processor.parse_configs()[0]

        assert processor.entry_point == str(project.scripts / "app")
        assert "define('main', " in bundle.files[0].file_content

    def test_explicit_config_files(self, project):
        project.script("app/main")
        path = project.config({"autoBundles": {"app": {"include": [{"file": "app/main"}]}}}, name="other.json")

        bundles = AutoBundleProcessor(str(project.root), file_paths=[path]).parse_configs()

        assert bundles[0].containing_config == path
        assert (project.root / "other.override.json").exists()

    def test_settings_directories(self, project):
        project.file("js/app/main.js", "define([], function () {});")
        project.config({"autoBundles": {"app": {"include": [{"file": "app/main"}]}}})
        settings = BundlerSettings(script_directory="js", bundle_directory="built")

        bundle = AutoBundleProcessor(str(project.root), settings=settings).parse_configs()[0]

        assert bundle.output == str(project.root / "js" / "built" / "app.js")


class TestErrors:
    def test_empty_bundle(self, app_project):
        app_project.config({
            "paths": {"jquery": "lib/jquery-2.1.4"},
            "autoBundles": {
                "empty": {
                    "include": [{"file": "jquery"}],
                    "exclude": [{"file": "jquery"}],
                }
            },
        })

        with pytest.raises(ConfigurationError) as exc_info:
            AutoBundleProcessor(str(app_project.root)).parse_configs()

        error = exc_info.value
        assert error.bundle_id == "empty"
        assert str(error) == (
            'Error for autoBundle empty: Provided list of includes: "jquery" '
            'without excludes: "jquery" results in empty autoBundle.'
        )

    def test_missing_project(self, tmp_path):
        with pytest.raises(ProjectNotFoundError):
            AutoBundleProcessor(str(tmp_path / "absent")).parse_configs()

    def test_missing_config(self, project):
        project.script("app/main")
        with pytest.raises(ConfigurationError, match="none were found"):
            AutoBundleProcessor(str(project.root)).parse_configs()

    def test_failed_bundle_writes_nothing(self, app_project):
        app_project.config({
            "paths": {"jquery": "lib/jquery-2.1.4"},
            "autoBundles": {
                "main-app": {"include": [{"file": "app/main"}], "exclude": [{"file": "jquery"}]},
                "broken": {"include": [{"file": "app/gone"}]},
            },
        })

        with pytest.raises(ConfigurationError):
            AutoBundleProcessor(str(app_project.root)).parse_configs()

        assert not (app_project.scripts / "bundles").exists()
