"""Data models package."""

from .comment import Comment, CommentTree

__all__ = ["Comment", "CommentTree"]
