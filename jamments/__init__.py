"""Async client for the Jamments comment API."""

from .clients import JammentsClient, clean_slug
from .config import ClientConfig, Settings, settings
from .exceptions import (
    ConfigurationError,
    DanglingReferenceError,
    FetchError,
    FetchStatusError,
    FetchTransportError,
    HttpStatusError,
    JammentsError,
    SubmitError,
    SubmitStatusError,
    SubmitTransportError,
    TransportError,
)
from .models import Comment, CommentTree
from .services import CommentTreeBuilder
from .utils import configure_logging, escape_html, render_markdown

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "Comment",
    "CommentTree",
    "CommentTreeBuilder",
    "ConfigurationError",
    "DanglingReferenceError",
    "FetchError",
    "FetchStatusError",
    "FetchTransportError",
    "HttpStatusError",
    "JammentsClient",
    "JammentsError",
    "Settings",
    "SubmitError",
    "SubmitStatusError",
    "SubmitTransportError",
    "TransportError",
    "clean_slug",
    "configure_logging",
    "escape_html",
    "render_markdown",
    "settings",
]
