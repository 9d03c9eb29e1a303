# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""YAML/JSON document loader with source maps and caching support."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from ..exceptions import DocumentLoadError
from ..models.paths import join_index, join_key
from .source_location import SourceMap

logger = logging.getLogger(__name__)


class _JsonLikeLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates and timestamps as plain strings."""


_JsonLikeLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DocumentLoader:
    """Loads schema and data documents.

    JSON is read through the YAML loader as well, so both formats get the same
    source map. Empty documents load as ``None`` (JSON ``null``).
    """

    def __init__(self, cache_enabled: bool = False):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to keep loaded documents keyed by path.
        """
        self.cache_enabled = cache_enabled
        self._cache: Dict[Path, Any] = {}
        self._source_cache: Dict[Path, SourceMap] = {}

    @classmethod
    def build_source_map(cls, content: str) -> SourceMap:
        """Build a mapping from validation error paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=_JsonLikeLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by the data load itself.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, join_key(path, key))
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_index(path, idx))

        _walk(root, "")
        return source_map

    def load_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a document file and return (data, source_map).

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache and path in self._source_cache:
            logger.debug("Loading document (with source) from cache: %s", path)
            return self._cache[path], self._source_cache[path]

        try:
            logger.debug("Loading document file (with source): %s", path)
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

        data, source_map = self.load_from_string_with_source(content, origin=str(path))

        if self.cache_enabled:
            self._cache[path] = data
            self._source_cache[path] = source_map

        return data, source_map

    def load(self, file_path: Union[str, Path]) -> Any:
        """Load a document file.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        data, _ = self.load_with_source(file_path)
        return data

    def load_from_string_with_source(self, content: str, origin: str = "<string>") -> Tuple[Any, SourceMap]:
        """Load a document from string content and return (data, source_map)."""
        try:
            data = yaml.load(content, Loader=_JsonLikeLoader)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse document {origin}: {exc}") from exc
        return data, self.build_source_map(content)

    def load_from_string(self, content: str) -> Any:
        data, _ = self.load_from_string_with_source(content)
        return data

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        self._source_cache.clear()
        logger.debug("Document cache cleared")
