"""Shared test fixtures for bomcheck."""

from __future__ import annotations

import pytest

from bomcheck.models import Bom, Metadata, OrganizationalContact, Tool, ToolKind
from bomcheck.parser import DocumentLoader


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture
def valid_bom() -> Bom:
    """A document that passes under 1.4 and 1.5."""
    return Bom(
        serial_number="abcd",
        metadata=Metadata(
            timestamp="2024-02-04T10:00:00+00:00",
            tools=[
                Tool(vendor="Acme", name="scanner", version="1.0", kind=ToolKind.APPLICATION),
                Tool(vendor="Acme", name="libscan", kind=ToolKind.LIBRARY),
            ],
            authors=[
                OrganizationalContact(name="lisa", email="lisa@example.com", phone="555-1234"),
            ],
        ),
    )


@pytest.fixture
def bom_with_unknown_tool() -> Bom:
    """Identifier of length 4, second tool has the disallowed kind."""
    return Bom(
        serial_number="abcd",
        metadata=Metadata(
            timestamp="2024-02-04T10:00:00+00:00",
            tools=[
                Tool(vendor="Acme", name="scanner", kind=ToolKind.APPLICATION),
                Tool(vendor="Acme", name="mystery", kind=ToolKind.UNKNOWN),
            ],
        ),
    )


SAMPLE_BOM_YAML = """\
serialNumber: urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79
metadata:
  timestamp: 2024-02-04T10:00:00Z
  tools:
    - vendor: Acme
      name: scanner
      kind: application
    - vendor: Acme
      name: mystery
      kind: unknown
  authors:
    - name: lisa
      email: lisa@example.com
      phone: "555-1234"
    - name: bart
      email: bart-at-example
      phone: "012345678"
"""

SAMPLE_BOM_JSON = """\
{
  "serialNumber": "urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79",
  "metadata": {
    "timestamp": "2024-02-04T10:00:00+00:00",
    "tools": [{"vendor": "Acme", "name": "scanner", "kind": "library"}]
  }
}
"""
