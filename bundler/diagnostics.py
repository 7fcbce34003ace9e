"""
Bundle Diagnostics

Defines the non-fatal findings recorded while a bundle is built:
- UnresolvedPath: a dependency id that did not resolve to a file. The edge is
  dropped, so the bundle may be incomplete at runtime.
- CycleBreak: the packer had to force-flush its remaining files because none
  of them had all dependencies satisfied. Precedence between the flushed
  files is not guaranteed.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class UnresolvedPath:
    """A dependency identifier that could not be resolved to a physical file.

    Attributes:
        identifier: The id as declared (after alias expansion)
        referenced_by: Physical path of the file declaring it, None for includes
    """
    identifier: str
    referenced_by: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {"identifier": self.identifier}
        if self.referenced_by:
            d["referenced_by"] = self.referenced_by
        return d

    def describe(self) -> str:
        if self.referenced_by:
            return f"Could not resolve '{self.identifier}' referenced by {self.referenced_by}"
        return f"Could not resolve '{self.identifier}'"


@dataclass
class CycleBreak:
    """One forced flush of the topological packer.

    Attributes:
        pass_number: 1-based packing pass in which the flush happened
        forced_files: Files emitted by the flush, in emission order
        unsatisfied: Per forced file, the dependencies that were still pending
    """
    pass_number: int
    forced_files: List[str] = field(default_factory=list)
    unsatisfied: Dict[str, List[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "pass_number": self.pass_number,
            "forced_files": list(self.forced_files),
            "unsatisfied": {k: list(v) for k, v in self.unsatisfied.items()},
        }

    def describe(self) -> str:
        return (
            f"Forced flush of {len(self.forced_files)} file(s) in pass {self.pass_number}: "
            + ", ".join(self.forced_files)
        )


@dataclass
class Diagnostics:
    """Collected findings for a single bundle build."""
    unresolved: List[UnresolvedPath] = field(default_factory=list)
    cycle_breaks: List[CycleBreak] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.unresolved and not self.cycle_breaks

    def record_unresolved(self, identifier: str, referenced_by: Optional[str] = None) -> UnresolvedPath:
        entry = UnresolvedPath(identifier=identifier, referenced_by=referenced_by)
        self.unresolved.append(entry)
        return entry

    def record_cycle_break(self, cycle_break: CycleBreak) -> None:
        self.cycle_breaks.append(cycle_break)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "unresolved": [u.to_dict() for u in self.unresolved],
            "cycle_breaks": [c.to_dict() for c in self.cycle_breaks],
            "summary": {
                "unresolved": len(self.unresolved),
                "cycle_breaks": len(self.cycle_breaks),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize diagnostics to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self) -> List[str]:
        """Format findings as console lines."""
        lines = []
        for entry in self.unresolved:
            lines.append(f"  ⚠ {entry.describe()}")
        for entry in self.cycle_breaks:
            lines.append(f"  ⚠ {entry.describe()}")
        return lines
