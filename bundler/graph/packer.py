"""
Topological Packer

Orders a closure so every script follows its dependencies. Each pass emits
all remaining scripts whose dependencies are already emitted or excluded, in
their current relative order. When a pass finds none (a dependency cycle),
every remaining script is emitted at once. That forced flush keeps packing
deterministic and terminating, but precedence between the flushed scripts is
not guaranteed, so each flush is logged and recorded as a CycleBreak.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from bundler.diagnostics import CycleBreak, Diagnostics
from bundler.models import FileSpec, ResolvedFile
from bundler.paths import PathSet

logger = logging.getLogger(__name__)


class TopologicalPacker:
    """Layered dependency ordering with cycle tolerance."""
    
    def __init__(self, compression_type: str = "none", diagnostics: Optional[Diagnostics] = None):
        self.compression_type = compression_type
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.passes = 0
    
    def order(self, nodes: Sequence[ResolvedFile], exclude_paths: Iterable[str]) -> List[FileSpec]:
        """Linearize the closure.
        
        Args:
            nodes: Closure nodes, in discovery order
            exclude_paths: Excluded paths; dependencies on them count as satisfied
            
        Returns:
            FileSpecs in emission order
        """
        excluded = exclude_paths if isinstance(exclude_paths, PathSet) else PathSet(exclude_paths)
        remaining = list(nodes)
        emitted = PathSet()
        ordered: List[FileSpec] = []
        self.passes = 0
        
        while remaining:
            self.passes += 1
            ready = [
                node for node in remaining
                if all(dep in emitted or dep in excluded for dep in node.dependencies)
            ]
            
            if not ready:
                ready = list(remaining)
                self._record_forced_flush(ready, emitted, excluded)
            
            for node in ready:
                ordered.append(FileSpec(
                    file_name=node.physical_path,
                    file_content=node.content,
                    compression_type=self.compression_type,
                ))
                emitted.add(node.physical_path)
            
            ready_keys = {node.key for node in ready}
            remaining = [node for node in remaining if node.key not in ready_keys]
        
        return ordered
    
    def _record_forced_flush(self, forced: List[ResolvedFile], emitted: PathSet, excluded: PathSet) -> None:
        unsatisfied = {
            node.physical_path: [
                dep for dep in node.dependencies
                if dep not in emitted and dep not in excluded
            ]
            for node in forced
        }
        cycle_break = CycleBreak(
            pass_number=self.passes,
            forced_files=[node.physical_path for node in forced],
            unsatisfied=unsatisfied,
        )
        self.diagnostics.record_cycle_break(cycle_break)
        logger.warning(cycle_break.describe())
        for path, pending in unsatisfied.items():
            logger.debug(f"    - {path} waits on {', '.join(pending)}")
