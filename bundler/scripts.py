"""
AMD script scanning and rewriting.

Extracts the dependency ids a script declares through ``define``/``require``
calls and names anonymous ``define`` calls so the script can live inside a
concatenated bundle. This is a lexical scan, not a JavaScript parser: calls
are matched on a masked copy of the script where comments and string bodies
are blanked, and string values are read back from the original text at the
same offsets.
"""

import logging
import posixpath
import re
from typing import List, Optional

from bundler.models import Configuration
from bundler.paths import SCRIPT_EXTENSION, is_url

logger = logging.getLogger(__name__)

# Free calls only: not obj.define(...), not my_define(...)
CALL_PREFIX = r"(?<![.\w$])"

# define('name', ['a', 'b'], ...) / define(['a'], ...) / require(['a'], ...)
DEPENDENCY_ARRAY_RE = re.compile(
    CALL_PREFIX
    + r"(?P<call>define|require|requirejs)\s*\(\s*"
    r"(?:(?P<q>[\"'])(?P<name>[^\"']*)(?P=q)\s*,\s*)?"
    r"\[(?P<deps>[^\]]*)\]"
)

# var dep = require('dep');
COMMONJS_REQUIRE_RE = re.compile(CALL_PREFIX + r"require\s*\(\s*([\"'])([^\"']*)\1\s*\)")

STRING_LITERAL_RE = re.compile(r"([\"'])([^\"']*)\1")

DEFINE_CALL_RE = re.compile(CALL_PREFIX + r"define\s*\(")

# Ids the loader provides itself
SPECIAL_DEPENDENCIES = frozenset({"require", "exports", "module"})


def mask_source(content: str) -> str:
    """Blank comments and string bodies, keeping offsets and line breaks intact.
    
    Quote characters stay in place so string boundaries remain visible;
    everything between them becomes spaces.
    
    Example:
        >>> mask_source("f('a(b'); // c")
        "f('   ');     "
    """
    out = list(content)
    i = 0
    length = len(content)
    quote = None
    
    while i < length:
        ch = content[i]
        if quote:
            if ch == "\\" and i + 1 < length:
                out[i] = " "
                if content[i + 1] != "\n":
                    out[i + 1] = " "
                i += 2
                continue
            if ch == quote or (ch == "\n" and quote != "`"):
                quote = None
            elif ch != "\n":
                out[i] = " "
            i += 1
            continue
        
        if ch in "\"'`":
            quote = ch
            i += 1
        elif content.startswith("//", i):
            end = content.find("\n", i)
            end = length if end == -1 else end
            for j in range(i, end):
                out[j] = " "
            i = end
        elif content.startswith("/*", i):
            end = content.find("*/", i + 2)
            end = length if end == -1 else end + 2
            for j in range(i, end):
                if out[j] != "\n":
                    out[j] = " "
            i = end
        else:
            i += 1
    
    return "".join(out)


def _is_bundleable(dependency: str) -> bool:
    if not dependency or dependency in SPECIAL_DEPENDENCIES:
        return False
    # loader plugin resources (text!, css!) and remote scripts are not files
    return "!" not in dependency and not is_url(dependency)


def extract_dependencies(content: str) -> List[str]:
    """Dependency ids declared by a script, in first-seen order, deduplicated.
    
    Covers dependency arrays of ``define``/``require``/``requirejs`` calls and
    the CommonJS sugar form ``require('id')``. Member calls such as
    ``registry.define(...)`` are not AMD calls. Built-in ids (``require``,
    ``exports``, ``module``), plugin resources and URLs are skipped.
    """
    masked = mask_source(content)
    found = []
    
    for match in DEPENDENCY_ARRAY_RE.finditer(masked):
        start, end = match.span("deps")
        for literal in STRING_LITERAL_RE.finditer(content[start:end]):
            found.append((match.start(), literal.group(2).strip()))
    
    for match in COMMONJS_REQUIRE_RE.finditer(masked):
        start, end = match.span(2)
        found.append((match.start(), content[start:end].strip()))
    
    dependencies = []
    seen = set()
    for _, dependency in sorted(found, key=lambda item: item[0]):
        if _is_bundleable(dependency) and dependency not in seen:
            seen.add(dependency)
            dependencies.append(dependency)
    return dependencies


def rewrite_content(content: str, module_id: str) -> str:
    """Give the first anonymous ``define`` call an explicit module id.
    
    Anonymous modules cannot be concatenated: the loader names them after the
    script that was requested. Scripts that already name their module, or
    define none, are returned unchanged.
    """
    masked = mask_source(content)
    for match in DEFINE_CALL_RE.finditer(masked):
        rest = masked[match.end():].lstrip()
        if rest[:1] in ("'", '"'):
            return content
        insert_at = match.end()
        return content[:insert_at] + f"'{module_id}', " + content[insert_at:]
    return content


def expand_paths(raw: str, configuration: Optional[Configuration]) -> str:
    """Rewrite a module id through the configuration's ``paths`` aliases.
    
    The longest alias that equals the id or prefixes it on a ``/`` boundary
    wins, as in RequireJS itself.
    
    Example:
        ``paths: {"lib": "vendor/lib"}`` turns ``lib/jquery`` into ``vendor/lib/jquery``.
    """
    if not raw or configuration is None or not configuration.paths:
        return raw
    
    best = None
    for alias in configuration.paths:
        if raw == alias or raw.startswith(alias.rstrip("/") + "/"):
            if best is None or len(alias) > len(best):
                best = alias
    
    if best is None:
        return raw
    
    expanded = configuration.paths[best] + raw[len(best):]
    logger.debug(f"Expanded '{raw}' -> '{expanded}'")
    return expanded


def module_id_for(relative_path: str) -> str:
    """Module id for an entry-point relative script path."""
    module_id = relative_path.replace("\\", "/")
    if module_id.lower().endswith(SCRIPT_EXTENSION):
        module_id = module_id[: -len(SCRIPT_EXTENSION)]
    return posixpath.normpath(module_id)


class ScriptProcessor:
    """Scans and rewrites one script.
    
    After ``process()``:
    - ``dependencies`` holds the declared ids, alias-expanded
    - ``processed_string`` holds the rewritten script text
    
    Example:
        >>> processor = ScriptProcessor("app/main.js", "define(['lib/a'], function (a) {});", config)
        >>> processor.process()
        >>> processor.processed_string
        "define('app/main', ['lib/a'], function (a) {});"
    """
    
    def __init__(self, relative_path: str, script_text: str, configuration: Optional[Configuration] = None):
        self.relative_path = relative_path
        self.script_text = script_text
        self.configuration = configuration
        self.dependencies: List[str] = []
        self.processed_string = script_text
    
    @property
    def module_id(self) -> str:
        return module_id_for(self.relative_path)
    
    def process(self) -> None:
        declared = extract_dependencies(self.script_text)
        self.dependencies = [
            dep if dep.startswith(".") else expand_paths(dep, self.configuration)
            for dep in declared
        ]
        self.processed_string = rewrite_content(self.script_text, self.module_id)
