"""API endpoints package."""

from academic_records.api.router import API_PREFIX, create_api_router

__all__ = ["API_PREFIX", "create_api_router"]
