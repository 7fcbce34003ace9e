"""
RequireJS config loader.

Loads one or more RequireJS config documents (JSON, or YAML for ``.yml`` /
``.yaml`` files), validates them and merges them into a single
Configuration:
- ``paths`` aliases are merged, later documents override earlier ones
- auto-bundles are collected in load order; a bundle id declared again in a
  later document replaces the earlier declaration
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml
from pydantic import ValidationError

from bundler.errors import ConfigurationError
from bundler.models import BundleSpec, Configuration
from bundler.paths import CONFIG_FILE_NAME
from bundler.schemas.require_config import RequireConfigDocument

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


def find_configs(project_path: str, config_file_name: str = CONFIG_FILE_NAME) -> List[str]:
    """Config documents in the project root.
    
    Raises:
        ConfigurationError: If no config document exists
    """
    candidate = os.path.join(project_path, config_file_name)
    if os.path.isfile(candidate):
        return [candidate]
    raise ConfigurationError(
        "No Require config files were provided and none were found in the project directory."
    )


class RequireConfigLoader:
    """Loads and merges RequireJS config documents."""
    
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
    
    def load(self, paths: Sequence[str]) -> Configuration:
        """Load and merge the given documents.
        
        Args:
            paths: Config document paths, in precedence order (last wins)
            
        Returns:
            Merged Configuration
            
        Raises:
            ConfigurationError: If a document is missing, malformed or invalid
        """
        if not paths:
            raise ConfigurationError("No Require config files were provided.")
        
        configuration = Configuration()
        bundles: Dict[str, BundleSpec] = {}
        
        for path in paths:
            document = self.load_document(path)
            configuration.paths.update(document.paths)
            configuration.file_paths.append(str(path))
            
            for bundle_id, bundle_document in document.auto_bundles.items():
                if bundle_id in bundles:
                    logger.warning(
                        f"autoBundle '{bundle_id}' from {path} replaces the declaration in "
                        f"{bundles[bundle_id].config_path}"
                    )
                bundles[bundle_id] = bundle_document.to_spec(bundle_id, str(path))
        
        configuration.auto_bundles = list(bundles.values())
        logger.debug(
            f"Loaded {len(configuration.file_paths)} config(s) with "
            f"{len(configuration.auto_bundles)} autoBundle(s) and {len(configuration.paths)} path alias(es)"
        )
        return configuration
    
    def load_document(self, path: str) -> RequireConfigDocument:
        """Parse and validate a single document."""
        data = self._read(Path(path))
        try:
            return RequireConfigDocument.model_validate(data)
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Invalid RequireJS config {path}: {e}", config_path=str(path))
    
    def _read(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding=self.encoding) as f:
                if path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}", config_path=str(path))
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse configuration file {path}: {e}", config_path=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read configuration file {path}: {e}", config_path=str(path))
        
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain an object at the top level",
                config_path=str(path),
            )
        return data


def load_configuration(paths: Sequence[str], encoding: str = "utf-8") -> Configuration:
    """Convenience wrapper around RequireConfigLoader.load."""
    return RequireConfigLoader(encoding=encoding).load(paths)
