"""
AMD Auto-Bundler

Resolves, orders and packages RequireJS (AMD) modules into deployable bundles
and writes override configs that point the runtime loader at the bundles.
"""

__version__ = "1.0.0"

from bundler.errors import (
    BundlerError,
    ConfigurationError,
    ProjectNotFoundError,
)
from bundler.models import Bundle, BundleSpec, FileSpec, ResolvedFile
from bundler.processor import AutoBundleProcessor

__all__ = [
    "AutoBundleProcessor",
    "Bundle",
    "BundleSpec",
    "BundlerError",
    "ConfigurationError",
    "FileSpec",
    "ProjectNotFoundError",
    "ResolvedFile",
]
