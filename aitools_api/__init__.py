"""Read-only REST API over a static catalogue of AI tools."""

__version__ = "1.0.0"
