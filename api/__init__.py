"""
Unified API for the design pattern demos.

This package provides a single FastAPI application that exposes:
- Demo endpoints for every pattern
- Direct access to both notification factories
- A singleton variant report
"""

from api.main import app

__all__ = ["app"]
