"""Document loading with line fidelity for bomcheck."""

from bomcheck.parser.document import DocumentParseError, parse_document
from bomcheck.parser.loader import DocumentLoader, DocumentSafetyError, SourceMap

__all__ = [
    "DocumentLoader",
    "DocumentParseError",
    "DocumentSafetyError",
    "SourceMap",
    "parse_document",
]
