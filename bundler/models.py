"""
Core data models for the bundler.

Include and exclude rules are modelled as an explicit sum type
(FileRef / DirectoryRef / UrlRef) so matching logic never has to sniff
path syntax. Graph nodes and bundle artifacts are plain dataclasses.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from bundler.diagnostics import Diagnostics
from bundler.paths import is_url, path_key


@dataclass(frozen=True)
class FileRef:
    """A single logical module path, e.g. ``app/main`` or ``jquery``."""
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class DirectoryRef:
    """A directory whose ``.js`` files are all selected, recursively."""
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class UrlRef:
    """A URL-shaped reference; never resolved to a physical file."""
    url: str

    def __str__(self) -> str:
        return self.url


BundleItem = Union[FileRef, DirectoryRef, UrlRef]


def classify_item(file: Optional[str] = None, directory: Optional[str] = None) -> BundleItem:
    """Turn a raw ``{"file": ...}`` or ``{"directory": ...}`` entry into a BundleItem.
    
    Args:
        file: Logical file path or URL
        directory: Directory path relative to the entry point
        
    Returns:
        The matching BundleItem variant
        
    Raises:
        ValueError: If neither or both values are given
    """
    if bool(file) == bool(directory):
        raise ValueError("Bundle item must define exactly one of 'file' or 'directory'")
    if file:
        return UrlRef(file) if is_url(file) else FileRef(file)
    return DirectoryRef(directory)


@dataclass(frozen=True)
class BundleSpec:
    """An auto-bundle as declared in a RequireJS config document.
    
    Attributes:
        id: Bundle id, also the default output file name
        includes: Include rules in declaration order
        excludes: Exclude rules
        compression_type: Opaque compression hint carried onto each FileSpec
        output_path: Configured output file or directory (optional)
        config_path: Config document that declared the bundle
    """
    id: str
    includes: Tuple[BundleItem, ...] = ()
    excludes: Tuple[BundleItem, ...] = ()
    compression_type: str = "none"
    output_path: Optional[str] = None
    config_path: str = ""

    def raw_includes(self) -> List[str]:
        return [str(item) for item in self.includes]

    def raw_excludes(self) -> List[str]:
        return [str(item) for item in self.excludes]


@dataclass
class ResolvedFile:
    """A discovered script and its direct dependencies (graph node).
    
    Attributes:
        physical_path: Absolute path to the script
        content: Script text after rewriting
        dependencies: Physical paths of direct dependencies, deduplicated
    """
    physical_path: str
    content: str = ""
    dependencies: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return path_key(self.physical_path)


@dataclass
class FileSpec:
    """A file placed into a bundle, in emission order."""
    file_name: str
    file_content: str = ""
    compression_type: str = "none"


@dataclass
class Bundle:
    """A packaged bundle artifact.
    
    Attributes:
        bundle_id: Id of the auto-bundle
        files: Files in concatenation order
        output: Physical output path of the bundle file
        containing_config: Config document the bundle was declared in
        diagnostics: Non-fatal findings from building the bundle
    """
    bundle_id: str
    files: List[FileSpec] = field(default_factory=list)
    output: str = ""
    containing_config: str = ""
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def file_names(self) -> List[str]:
        return [f.file_name for f in self.files]

    def render(self, separator: str = "\n") -> str:
        """Concatenate the file contents in bundle order."""
        return separator.join(f.file_content for f in self.files)


@dataclass
class Configuration:
    """Merged RequireJS configuration used for one run.
    
    Attributes:
        paths: Module path aliases (``paths`` section), later documents win
        auto_bundles: Every auto-bundle from every document, in load order
        file_paths: Config documents that were loaded
    """
    paths: Dict[str, str] = field(default_factory=dict)
    auto_bundles: List[BundleSpec] = field(default_factory=list)
    file_paths: List[str] = field(default_factory=list)
