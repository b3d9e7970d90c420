"""Utilities package."""

from .logging import configure_logging
from .text import MARKDOWN_RULES, escape_html, render_markdown

__all__ = ["MARKDOWN_RULES", "configure_logging", "escape_html", "render_markdown"]
