"""
HTTP surface for the book catalogue.

This package holds the request/response schemas and the routes that
let a front-end list, search, add and remove records, clear the
catalogue, and submit text commands. The routes never own state: they
reach the application's single store through FastAPI dependencies.
"""

from .router import router as catalog_router  # noqa: F401
