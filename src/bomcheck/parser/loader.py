"""YAML/JSON document loader with position tracking for error reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.constructor import RoundTripConstructor
from ruamel.yaml.events import NodeEvent

from bomcheck.models.errors import SourceSpan
from bomcheck.parser.document import DocumentParseError

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 20


class _TimestampAsStringConstructor(RoundTripConstructor):
    """Keeps YAML timestamps as their literal text; timestamp rules check the format."""


_TimestampAsStringConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", _TimestampAsStringConstructor.construct_yaml_str
)


class DocumentSafetyError(Exception):
    """Raised when document input violates safety constraints.

    Distinct from parse errors: oversized documents, anchors/aliases or
    excessive node counts.
    """


@dataclass
class SourceMap:
    """Maps document paths (``metadata.tools[1].kind``) to source positions."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    def lookup(self, path: str) -> SourceSpan | None:
        """Position of *path*, falling back to the closest enclosing path."""
        while path:
            span = self._positions.get(path)
            if span is not None:
                return span
            cut = max(path.rfind("."), path.rfind("["))
            path = path[:cut] if cut > 0 else ""
        return None

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class DocumentLoader:
    """Loads SBOM documents written in YAML or JSON.

    Uses ruamel.yaml, which preserves line/column info on every parsed node
    and reads JSON as a YAML subset.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.preserve_quotes = True
        self._yaml.Constructor = _TimestampAsStringConstructor
        self._events = YAML()

    # -- safety checks -------------------------------------------------------

    def _check_safety(self, content: str) -> None:
        """Reject oversized content and YAML anchors/aliases."""
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise DocumentSafetyError(
                f"Document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        # Checked on parser events, not raw text.
        for event in self._events.parse(content):
            if isinstance(event, NodeEvent) and event.anchor:
                raise DocumentSafetyError(
                    "YAML anchors/aliases are not supported in SBOM documents "
                    f"(line {event.start_mark.line + 1})"
                )

    @staticmethod
    def _check_node_count(
        data: Any, limit: int = _MAX_NODE_COUNT, max_depth: int = _MAX_DEPTH
    ) -> None:
        """Post-parse check: reject documents with too many or too deeply nested nodes."""
        count = 0
        stack: list[tuple[Any, int]] = [(data, 0)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > limit:
                raise DocumentSafetyError(f"Document exceeds maximum node count ({limit:,})")
            if depth > max_depth:
                raise DocumentSafetyError(f"Document exceeds maximum nesting depth ({max_depth})")
            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> tuple[dict[str, Any], SourceMap]:
        """Load a document file and return parsed dict + source position map."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(
        self, content: str, filename: str = "<string>"
    ) -> tuple[dict[str, Any], SourceMap]:
        """Load a document from a string."""
        self._check_safety(content)
        data = self._yaml.load(content)
        if data is None:
            return {}, SourceMap()
        if not isinstance(data, dict):
            root = "sequence" if isinstance(data, list) else type(data).__name__
            raise DocumentParseError(
                f"Document root must be a mapping, got {root}",
                [f"<root>: expected a mapping, got {root}"],
            )
        self._check_node_count(data)
        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        return self._to_plain_value(data), source_map

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    key_positions = data.lc.key(key)
                    if key_positions:
                        line, col = key_positions
                        source_map.add(
                            key_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    # Fall back to the map's own position
                    try:
                        lc = data.lc
                        source_map.add(
                            key_path,
                            SourceSpan(file=filename, line=lc.line + 1, column=lc.col + 1),
                        )
                    except (AttributeError, TypeError):
                        pass
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}[{i}]"
                try:
                    item_pos = data.lc.item(i)
                    if item_pos:
                        line, col = item_pos
                        source_map.add(
                            item_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        return data
