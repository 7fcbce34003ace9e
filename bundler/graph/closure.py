"""
Closure Builder

Breadth-first discovery of every script reachable from a bundle's includes.
Excluded scripts are filtered when dequeued, so a script reachable only
through an excluded one never enters the closure. Each physical path is
queued at most once (case-insensitive), which keeps diamonds and cycles to a
single visit per script.
"""

import logging
import os
from collections import deque
from typing import Deque, Iterable, List, Optional

from bundler.diagnostics import Diagnostics
from bundler.errors import BundlerError, ConfigurationError
from bundler.models import Configuration, ResolvedFile
from bundler.paths import PathSet, get_relative_path, resolve_physical_path
from bundler.scripts import ScriptProcessor

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Turns a script path into a graph node.
    
    Reads the script, scans and rewrites it with ScriptProcessor, and resolves
    each declared id to a physical path:
    - ``./`` and ``../`` ids relative to the referencing script's directory
    - all other ids relative to ``base_url``, then ``fallback_root``
    
    Ids that do not resolve are dropped and recorded as UnresolvedPath.
    """
    
    def __init__(
        self,
        configuration: Optional[Configuration],
        entry_point: str,
        base_url: str,
        fallback_root: Optional[str] = None,
        encoding: str = "utf-8",
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.configuration = configuration
        self.entry_point = entry_point
        self.base_url = base_url
        self.fallback_root = fallback_root
        self.encoding = encoding
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    
    def resolve(self, physical_path: str) -> ResolvedFile:
        script_text = self._read(physical_path)
        relative_path = get_relative_path(physical_path, self.entry_point)
        
        processor = ScriptProcessor(relative_path, script_text, self.configuration)
        processor.process()
        
        dependencies = PathSet()
        for dependency in processor.dependencies:
            resolved = self.resolve_dependency(dependency, physical_path)
            if resolved is None:
                entry = self.diagnostics.record_unresolved(dependency, physical_path)
                logger.warning(entry.describe())
                continue
            dependencies.add(resolved)
        
        return ResolvedFile(
            physical_path=physical_path,
            content=processor.processed_string,
            dependencies=list(dependencies),
        )
    
    def resolve_dependency(self, dependency: str, referencing_file: str) -> Optional[str]:
        if dependency.startswith("./") or dependency.startswith("../"):
            return resolve_physical_path(dependency, os.path.dirname(referencing_file))
        return resolve_physical_path(dependency, self.base_url, self.fallback_root)
    
    def _read(self, physical_path: str) -> str:
        try:
            with open(physical_path, "r", encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise BundlerError(f"Could not read script {physical_path}: {e}")


class ClosureBuilder:
    """Computes the dependency closure of a set of include paths.
    
    Example:
        >>> builder = ClosureBuilder(resolver)
        >>> nodes = builder.build(["/site/Scripts/app/main.js"], PathSet())
        >>> [n.physical_path for n in nodes]
        ['/site/Scripts/app/main.js', '/site/Scripts/app/util.js']
    """
    
    def __init__(self, resolver: DependencyResolver):
        self.resolver = resolver
    
    def build(self, include_paths: Iterable[str], exclude_paths: Iterable[str]) -> List[ResolvedFile]:
        """Discover every non-excluded script reachable from the includes.
        
        Args:
            include_paths: Resolved include paths (closure seeds)
            exclude_paths: Resolved exclude paths
            
        Returns:
            One ResolvedFile per unique physical path, in discovery order
            
        Raises:
            ConfigurationError: If no include path is usable
        """
        excluded = exclude_paths if isinstance(exclude_paths, PathSet) else PathSet(exclude_paths)
        seeds = [path for path in include_paths if path and path not in excluded]
        if not seeds:
            raise ConfigurationError("Include paths resolve to no usable files")
        
        processed: List[ResolvedFile] = []
        seen = PathSet()
        pending: Deque[str] = deque()
        self._enqueue(seeds, pending, seen)
        
        while pending:
            path = pending.popleft()
            if path in excluded:
                logger.debug(f"    - EXCLUDING {path}")
                continue
            
            node = self.resolver.resolve(path)
            processed.append(node)
            self._enqueue(node.dependencies, pending, seen)
        
        return processed
    
    @staticmethod
    def _enqueue(paths: Iterable[str], pending: Deque[str], seen: PathSet) -> None:
        for path in paths:
            if seen.add(path):
                pending.append(path)
