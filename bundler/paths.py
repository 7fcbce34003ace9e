"""
Path helpers for the bundler.

File system paths are compared case-insensitively throughout: every map or
set keyed by a physical path uses ``path_key``. Logical module ids use
forward slashes and carry no ``.js`` extension.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT_DIRECTORY = "Scripts"
DEFAULT_BUNDLE_DIRECTORY = "bundles"
CONFIG_FILE_NAME = "RequireJS.json"
SCRIPT_EXTENSION = ".js"
OVERRIDE_SUFFIX = ".override"


def path_key(path) -> str:
    """Canonical case-insensitive key for a physical path."""
    return os.path.normpath(str(path)).lower()


def is_url(value: str) -> bool:
    """Whether a logical path is URL-shaped and must not be resolved."""
    return "?" in value or "://" in value or value.startswith("//")


def has_script_extension(path: str) -> bool:
    return os.path.splitext(path)[1].lower() == SCRIPT_EXTENSION


class PathSet:
    """Case-insensitive set of physical paths.
    
    Iteration yields the first spelling seen for each path, in insertion order.
    """
    
    def __init__(self, paths: Optional[Iterable[str]] = None):
        self._paths = {}
        for path in paths or ():
            self.add(path)
    
    def add(self, path: str) -> bool:
        """Add a path. Returns False if it was already present."""
        key = path_key(path)
        if key in self._paths:
            return False
        self._paths[key] = str(path)
        return True
    
    def __contains__(self, path) -> bool:
        return path is not None and path_key(path) in self._paths
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._paths.values())
    
    def __len__(self) -> int:
        return len(self._paths)
    
    def __repr__(self) -> str:
        return f"PathSet({list(self._paths.values())!r})"


def resolve_physical_path(
    logical_path: str,
    base_url: str,
    fallback_root: Optional[str] = None,
) -> Optional[str]:
    """Resolve a logical module path to an existing script file.
    
    The ``.js`` extension is appended when missing. The path is looked up
    under ``base_url`` first, then under ``fallback_root`` (the project
    directory) for scripts mapped outside the base url.
    
    Args:
        logical_path: Module id or relative script path
        base_url: Directory module ids are relative to
        fallback_root: Optional second lookup root
        
    Returns:
        Absolute physical path, or None when the file does not exist
    """
    if not logical_path or is_url(logical_path):
        return None
    
    file_name = logical_path if has_script_extension(logical_path) else logical_path + SCRIPT_EXTENSION
    file_name = file_name.lstrip("/\\")
    
    roots = [base_url]
    if fallback_root:
        roots.append(fallback_root)
    
    for root in roots:
        candidate = os.path.join(root, file_name)
        if os.path.isfile(candidate):
            return os.path.normpath(os.path.abspath(candidate))
    
    return None


def get_absolute_directory(entry_point: str, relative_directory: str) -> str:
    """Directory of a DirectoryRef, relative to the entry point."""
    relative_directory = relative_directory.replace("\\", "/").lstrip("/")
    return os.path.normpath(os.path.join(entry_point, relative_directory))


def enumerate_scripts(directory: str) -> List[str]:
    """Every ``.js`` file under ``directory``, recursively, sorted.
    
    Returns an empty list (with a warning) when the directory is missing.
    """
    if not os.path.isdir(directory):
        logger.warning(f"Directory not found: {directory}")
        return []
    
    scripts = []
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            if has_script_extension(name):
                scripts.append(os.path.normpath(os.path.join(root, name)))
    return scripts


def get_relative_path(file_path: str, folder: str) -> str:
    """Path of ``file_path`` relative to ``folder`` with forward slashes."""
    return os.path.relpath(file_path, folder).replace(os.sep, "/")


def get_require_relative_path(entry_point: str, file_path: str) -> str:
    """Module id the runtime loader uses for ``file_path``.
    
    Example:
        >>> get_require_relative_path("/site/Scripts", "/site/Scripts/app/main.js")
        'app/main'
    """
    relative = get_relative_path(file_path, entry_point)
    if has_script_extension(relative):
        relative = relative[: -len(SCRIPT_EXTENSION)]
    return relative


def get_override_path(config_path: str) -> str:
    """Override document path for a config, e.g. ``RequireJS.override.json``."""
    base, ext = os.path.splitext(config_path)
    return base + OVERRIDE_SUFFIX + ext


def get_output_path(
    output_root: str,
    output_path: Optional[str],
    bundle_id: str,
    script_directory: str = DEFAULT_SCRIPT_DIRECTORY,
    bundle_directory: str = DEFAULT_BUNDLE_DIRECTORY,
) -> str:
    """Physical output path of a bundle.
    
    - no configured path: ``<root>/<Scripts>/<bundles>/<id>.js``
    - configured path without ``.js``: a directory, ``<root>/<path>/<id>.js``
    - otherwise: ``<root>/<path>``
    """
    file_name = bundle_id + SCRIPT_EXTENSION
    if not output_path:
        return os.path.normpath(os.path.join(output_root, script_directory, bundle_directory, file_name))
    
    output_path = output_path.replace("\\", "/").lstrip("/")
    if not has_script_extension(output_path):
        output_path = os.path.join(output_path, file_name)
    return os.path.normpath(os.path.join(output_root, output_path))
