"""
Test helpers for building script projects and synthetic module graphs.
"""

import json
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from bundler.models import ResolvedFile
from bundler.paths import path_key


class ProjectBuilder:
    """Writes a RequireJS project layout under ``root``."""
    
    def __init__(self, root: Path):
        self.root = root
        self.scripts = root / "Scripts"
        self.scripts.mkdir(parents=True, exist_ok=True)
    
    def script(self, module_id: str, deps: Iterable[str] = (), body: str = "return {};") -> str:
        """Write an anonymous AMD module and return its physical path."""
        deps = list(deps)
        dep_list = ", ".join(f"'{d}'" for d in deps)
        text = f"define([{dep_list}], function () {{ {body} }});\n"
        return self.file(f"Scripts/{module_id}.js", text)
    
    def file(self, relative: str, text: str) -> str:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return os.path.normpath(str(path))
    
    def config(self, data: dict, name: str = "RequireJS.json") -> str:
        path = self.root / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return str(path)
    
    def path(self, module_id: str) -> str:
        return os.path.normpath(str(self.scripts / f"{module_id}.js"))


class GraphResolver:
    """Resolver double serving a synthetic graph of ``path -> [dependency paths]``."""
    
    def __init__(self, graph: Dict[str, List[str]]):
        self.graph = {path_key(k): list(v) for k, v in graph.items()}
        self.calls: List[str] = []
    
    def resolve(self, physical_path: str) -> ResolvedFile:
        self.calls.append(physical_path)
        return ResolvedFile(
            physical_path=physical_path,
            content=f"// {physical_path}",
            dependencies=list(self.graph.get(path_key(physical_path), [])),
        )


def node(path: str, deps: Optional[Iterable[str]] = None) -> ResolvedFile:
    return ResolvedFile(physical_path=path, content=f"// {path}", dependencies=list(deps or []))
