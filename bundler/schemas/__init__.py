"""
Document Schemas

Pydantic models for the RequireJS config documents the bundler reads and the
override documents it writes.
"""

from bundler.schemas.require_config import (
    AutoBundleDocument,
    AutoBundleItemDocument,
    RequireConfigDocument,
)
from bundler.schemas.override import (
    BundleOverride,
    OverrideDocument,
    RewriteRule,
)

__all__ = [
    "AutoBundleDocument",
    "AutoBundleItemDocument",
    "BundleOverride",
    "OverrideDocument",
    "RequireConfigDocument",
    "RewriteRule",
]
