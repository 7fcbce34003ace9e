"""
Override Document Schema

An override document tells the runtime loader to fetch every bundled script
from its bundle instead. One document is written per source config.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class RewriteRule(BaseModel):
    """Redirect of one original module id to a bundle module id."""
    original: str = Field(..., description="Module id of the bundled script")
    target: str = Field(..., description="Module id of the bundle output")


class BundleOverride(BaseModel):
    """The scripts folded into one bundle and their rewrite rules."""
    bundle_id: str
    bundled_scripts: List[str] = Field(default_factory=list)
    paths: List[RewriteRule] = Field(default_factory=list)


class OverrideDocument(BaseModel):
    """Override document for one source config.
    
    Attributes:
        config_path: Source config the bundles were declared in
        overrides: One entry per bundle, in bundle order
    """
    config_path: str
    overrides: List[BundleOverride] = Field(default_factory=list)
    
    def rewrite_map(self) -> Dict[str, str]:
        """Every original module id mapped to its bundle module id."""
        return {rule.original: rule.target for o in self.overrides for rule in o.paths}
    
    def to_require_config(self) -> dict:
        """Serialize in the shape the runtime loader reads."""
        return {
            "overrides": {
                o.bundle_id: {
                    "bundledScripts": list(o.bundled_scripts),
                    "paths": {rule.original: rule.target for rule in o.paths},
                }
                for o in self.overrides
            }
        }
