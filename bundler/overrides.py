"""
Override Composer

Builds the override documents that redirect the runtime loader from each
bundled script to the bundle containing it. Bundles are grouped by the
config document that declared them; one override document is produced per
config and written next to it (``RequireJS.json`` ->
``RequireJS.override.json``).
"""

import json
import logging
from typing import Dict, List

from bundler.models import Bundle
from bundler.paths import get_override_path, get_require_relative_path
from bundler.schemas.override import BundleOverride, OverrideDocument, RewriteRule
from bundler.writer import atomic_write_text

logger = logging.getLogger(__name__)


class OverrideComposer:
    """Composes override documents.
    
    Args:
        entry_point: Directory module ids are relative to
    """
    
    def __init__(self, entry_point: str):
        self.entry_point = entry_point
    
    def compose(self, bundles: List[Bundle]) -> Dict[str, OverrideDocument]:
        """One override document per containing config, in first-seen order."""
        groups: Dict[str, List[Bundle]] = {}
        for bundle in bundles:
            groups.setdefault(bundle.containing_config, []).append(bundle)
        
        return {
            config_path: self.compose_document(config_path, group)
            for config_path, group in groups.items()
        }
    
    def compose_document(self, config_path: str, bundles: List[Bundle]) -> OverrideDocument:
        document = OverrideDocument(config_path=config_path)
        owners: Dict[str, str] = {}
        
        for bundle in bundles:
            logger.debug(f" - Composing scripts for bundle {bundle.bundle_id}")
            target = get_require_relative_path(self.entry_point, bundle.output)
            scripts = [get_require_relative_path(self.entry_point, f.file_name) for f in bundle.files]
            
            rules = []
            for script in scripts:
                if script in owners and owners[script] != bundle.bundle_id:
                    logger.warning(
                        f"{script} is bundled in both {owners[script]} and {bundle.bundle_id} "
                        f"from {config_path}"
                    )
                owners[script] = bundle.bundle_id
                rules.append(RewriteRule(original=script, target=target))
                logger.debug(f"    - {script} -> {target}")
            
            document.overrides.append(BundleOverride(
                bundle_id=bundle.bundle_id,
                bundled_scripts=scripts,
                paths=rules,
            ))
        
        return document


class OverrideWriter:
    """Serializes override documents as JSON."""
    
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
    
    def write(self, path: str, document: OverrideDocument) -> None:
        text = json.dumps(document.to_require_config(), indent=2)
        atomic_write_text(path, text + "\n", encoding=self.encoding)
    
    def write_all(self, documents: Dict[str, OverrideDocument]) -> List[str]:
        """Write each document next to its config and return the written paths."""
        written = []
        for config_path, document in documents.items():
            path = get_override_path(config_path)
            logger.info(f"Writing Require.JS override config to {path}")
            self.write(path, document)
            written.append(path)
        return written
