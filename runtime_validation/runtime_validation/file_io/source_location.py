from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional


SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    data_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[SourceMap], data_path: Optional[str]) -> SourceLocation:
    """Find the line/column of a validation error path in a document source map.

    Unexpected-property and missing-key paths may be absent from the map; the
    closest recorded ancestor is used instead.
    """
    if not source_map or data_path is None:
        return SourceLocation(data_path=data_path)

    probe = data_path
    while True:
        entry = source_map.get(probe)
        if entry:
            return SourceLocation(
                data_path=data_path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not probe:
            return SourceLocation(data_path=data_path)
        probe = _parent_path(probe)


def _parent_path(path: str) -> str:
    if path.endswith("]"):
        return path[: path.rfind("[")]
    dot = path.rfind(".")
    bracket = path.rfind("]")
    if dot > bracket:
        return path[:dot]
    return path[: bracket + 1] if bracket >= 0 else ""


def _infer_workspace_root(path: Path) -> Optional[Path]:
    """Infer a reasonable root to make reported paths relative."""

    env_root = os.environ.get("RUNTIME_VALIDATION_SOURCE_ROOT")
    if env_root:
        return Path(env_root)

    try:
        cwd = Path.cwd()
    except OSError:
        return None
    return cwd if path.is_absolute() else None


def _format_file_path(path: Path) -> str:
    root = _infer_workspace_root(path)
    if not root:
        return str(path)

    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.data_path:
        parts.append(f"path={loc.data_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
