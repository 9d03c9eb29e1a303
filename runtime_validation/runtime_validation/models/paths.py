"""Error path notation: ``""`` for the root, ``a.b`` for keys, ``a[2]`` for indices."""

from typing import Any, Iterable


def join_key(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"


def format_path(tokens: Iterable[Any]) -> str:
    """Build a path from key/index tokens, e.g. ``("a", 0, "b") -> "a[0].b"``."""
    path = ""
    for token in tokens:
        if isinstance(token, int) and not isinstance(token, bool):
            path = join_index(path, token)
        else:
            path = join_key(path, token)
    return path
