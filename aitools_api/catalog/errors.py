"""
Error types raised by the catalogue query functions.

Each error knows its HTTP status and renders itself as a JSON body with a
machine-readable ``error`` message plus any extra detail passed as
keyword arguments (``hint``, ``usage``, ``requested`` ...). The mapping to
an HTTP response is done once, in ``aitools_api.main``.
"""

from typing import Any, Dict


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        body.update(self.details)
        return body


class NotFound(CatalogError):
    """Unknown slug, or a comparison that resolved fewer than two tools."""

    status_code = 404


class BadRequest(CatalogError):
    """A required query parameter is missing or too short."""

    status_code = 400


class DatasetError(RuntimeError):
    """The tools dataset could not be loaded at startup."""
