"""SBOM document nodes: root, metadata block, tools and authors.

Each node validates itself against a ``SpecVersion`` and reports errors under
the field names used in the document (``serialNumber``, ``metadata`` ...).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bomcheck import rules
from bomcheck.models.enums import ToolKind
from bomcheck.validation import SpecVersion, ValidationContext, ValidationResult


class OrganizationalContact(BaseModel):
    """A person credited as an author of the SBOM."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:  # type: ignore[override]
        return (
            ValidationContext(version)
            .add_field("name", self.name, rules.validate_not_blank)
            .add_field("email", self.email, rules.validate_email)
            .add_field("phone", self.phone, rules.validate_phone)
            .into_result()
        )


class Tool(BaseModel):
    """A tool used to produce the SBOM."""

    vendor: str | None = None
    name: str | None = None
    version: str | None = None
    kind: ToolKind | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:  # type: ignore[override]
        kind_rule = (
            rules.validate_tool_kind
            if version >= SpecVersion.V1_5
            else rules.validate_tool_kind_pre_1_5
        )
        return (
            ValidationContext(version)
            .add_field("vendor", self.vendor, rules.validate_not_blank)
            .add_field("name", self.name, rules.validate_not_blank)
            .add_enum("kind", self.kind, kind_rule)
            .into_result()
        )


class Metadata(BaseModel):
    """The SBOM metadata block."""

    timestamp: str | None = None
    tools: list[Tool] | None = None
    authors: list[OrganizationalContact] | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:  # type: ignore[override]
        # 1.3 documents carry plain calendar dates; later revisions use ISO-8601.
        timestamp_rule = (
            rules.validate_slash_date
            if version is SpecVersion.V1_3
            else rules.validate_iso_datetime
        )
        return (
            ValidationContext(version)
            .add_field("timestamp", self.timestamp, timestamp_rule)
            .add_list("tools", self.tools)
            .add_list("authors", self.authors)
            .into_result()
        )


class Bom(BaseModel):
    """Root of an SBOM document."""

    serial_number: str | None = Field(None, alias="serialNumber")
    metadata: Metadata | None = None

    model_config = {"populate_by_name": True}

    def validate(self, version: SpecVersion) -> ValidationResult:  # type: ignore[override]
        return (
            ValidationContext(version)
            .add_field("serialNumber", self.serial_number, rules.validate_serial_number)
            .add_struct("metadata", self.metadata)
            .into_result()
        )
