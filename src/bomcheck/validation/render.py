"""Human- and machine-readable renderings of an error tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from bomcheck.validation.errors import (
    EnumError,
    FieldErrors,
    ListErrors,
    StructErrors,
    ValidationErrors,
)

_INDENT = "  "


def format_errors(errors: ValidationErrors, depth: int = 0) -> str:
    """Render the tree as indented text, one name or message per line.

    ``metadata -> tools -> [1] -> kind`` renders as::

        metadata:
          tools:
            [1]:
              kind: tool kind must be specified
    """
    return "\n".join(_format_lines(errors, depth))


def _format_lines(errors: ValidationErrors, depth: int) -> Iterator[str]:
    pad = _INDENT * depth
    for name, kind in errors.items():
        match kind:
            case FieldErrors(errors=field_errors):
                if len(field_errors) == 1:
                    yield f"{pad}{name}: {field_errors[0].message}"
                else:
                    yield f"{pad}{name}:"
                    for error in field_errors:
                        yield f"{pad}{_INDENT}- {error.message}"
            case EnumError(error=error):
                yield f"{pad}{name}: {error.message}"
            case StructErrors(errors=nested):
                yield f"{pad}{name}:"
                yield from _format_lines(nested, depth + 1)
            case ListErrors(errors=elements):
                yield f"{pad}{name}:"
                for index, nested in elements.items():
                    yield f"{pad}{_INDENT}[{index}]:"
                    yield from _format_lines(nested, depth + 2)


def errors_to_dict(errors: ValidationErrors) -> dict[str, Any]:
    """Convert the tree to a JSON-ready dict tagged by kind.

    List indices become string keys so the result survives ``json.dumps``.
    """
    out: dict[str, Any] = {}
    for name, kind in errors.items():
        match kind:
            case FieldErrors(errors=field_errors):
                out[name] = {"kind": "field", "errors": [e.message for e in field_errors]}
            case EnumError(error=error):
                out[name] = {"kind": "enum", "error": error.message}
            case StructErrors(errors=nested):
                out[name] = {"kind": "struct", "errors": errors_to_dict(nested)}
            case ListErrors(errors=elements):
                out[name] = {
                    "kind": "list",
                    "errors": {str(i): errors_to_dict(e) for i, e in elements.items()},
                }
    return out


def iter_error_paths(
    errors: ValidationErrors, prefix: str = ""
) -> Iterator[tuple[str, str, str]]:
    """Yield ``(path, kind, message)`` for every leaf error, in tree order.

    Paths use dots for nesting and brackets for list positions, e.g.
    ``metadata.tools[1].kind``.
    """
    for name, kind in errors.items():
        path = f"{prefix}.{name}" if prefix else name
        match kind:
            case FieldErrors(errors=field_errors):
                for error in field_errors:
                    yield path, "field", error.message
            case EnumError(error=error):
                yield path, "enum", error.message
            case StructErrors(errors=nested):
                yield from iter_error_paths(nested, path)
            case ListErrors(errors=elements):
                for index, nested in elements.items():
                    yield from iter_error_paths(nested, f"{path}[{index}]")
