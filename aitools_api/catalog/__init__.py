"""
Catalog package for the AI tools API.

This package contains the schemas, the read-only in-memory store and the
route definitions that expose the tools catalogue: listing with filters
and pagination, lookup by slug, free-text search, category counts,
side-by-side comparison and aggregate statistics.
"""

from .router import router as catalog_router  # noqa: F401
