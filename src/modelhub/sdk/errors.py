"""SDK error types."""

from __future__ import annotations


class CatalogValidationError(Exception):
    """Raised when a catalog YAML file fails parsing or validation."""
