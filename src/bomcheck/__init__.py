"""bomcheck: error-accumulating validation for SBOM documents."""

__version__ = "0.1.0"
