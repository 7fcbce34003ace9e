"""
Unit tests for environment variable definitions.
"""

from bundler.config.environment import EnvironmentVariables
from bundler.config.schema import BundlerSettings
from dataclasses import fields


class TestEnvironmentVariables:
    """Test suite for EnvironmentVariables."""
    
    def test_all_variables_are_prefixed(self):
        for name in EnvironmentVariables.get_all_variables():
            assert name.startswith("AMD_BUNDLER_")
    
    def test_variables_map_to_settings_fields(self):
        setting_names = {f.name for f in fields(BundlerSettings)}
        for key in EnvironmentVariables.SETTINGS_KEYS.values():
            assert key in setting_names
    
    def test_every_variable_is_documented(self):
        docs = EnvironmentVariables.get_variable_documentation()
        assert set(docs) == set(EnvironmentVariables.get_all_variables())
    
    def test_current_values(self, monkeypatch):
        monkeypatch.setenv("AMD_BUNDLER_LOG_LEVEL", "debug")
        monkeypatch.setenv("UNRELATED_VARIABLE", "x")
        
        assert EnvironmentVariables.get_current_values() == {"AMD_BUNDLER_LOG_LEVEL": "debug"}
