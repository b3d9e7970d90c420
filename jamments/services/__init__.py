"""Services package."""

from .comment_tree import CommentTreeBuilder, comment_tree_builder

__all__ = ["CommentTreeBuilder", "comment_tree_builder"]
