"""HTTP clients package."""

from .jamments_client import JammentsClient, clean_slug

__all__ = ["JammentsClient", "clean_slug"]
