"""Assembly of flat comment records into a chronological reply forest."""

import logging
from collections.abc import Iterable

from ..config import settings
from ..exceptions import DanglingReferenceError
from ..models import Comment, CommentTree

logger = logging.getLogger(__name__)


class CommentTreeBuilder:
    """
    Builds comment forests from the flat lists served by the cached files.

    Comments whose parent is missing from the input are promoted to the root
    forest with a warning, unless the builder is strict, in which case a
    DanglingReferenceError is raised.
    """

    def __init__(self, strict: bool | None = None):
        """Initialize the builder, None follows settings.strict_parent_references."""
        self._strict = strict

    @property
    def strict(self) -> bool:
        if self._strict is None:
            return settings.strict_parent_references
        return self._strict

    def _find_unreachable(
        self, roots: list[Comment], index: dict[str, Comment]
    ) -> list[str]:
        """
        List the ids of indexed comments that no root leads to.

        Comments whose parent chain loops back on itself, and their replies,
        end up here.

        Args:
            roots: Root comments of the forest
            index: Every comment by id

        Returns:
            Unreachable comment ids, in index order
        """
        reachable: set[str] = set()
        pending = list(roots)
        while pending:
            comment = pending.pop()
            if comment.id in reachable:
                continue
            reachable.add(comment.id)
            pending.extend(comment.children)

        return [comment_id for comment_id in index if comment_id not in reachable]

    def _sort_comments(self, comments: Iterable[Comment]) -> list[Comment]:
        """
        Sort comments chronologically.

        sorted() is stable, so comments submitted at the same instant keep
        their input order.

        Args:
            comments: Comments to sort

        Returns:
            New list sorted by submission date ascending
        """
        return sorted(comments, key=lambda x: x.submitted_at)

    def build(self, comments: Iterable[Comment]) -> CommentTree:
        """
        Nest replies inside their parents and index every comment by id.

        Args:
            comments: Flat, unordered comments

        Returns:
            CommentTree whose roots and children lists are sorted chronologically

        Raises:
            DanglingReferenceError: If strict and a parent id is unknown
        """
        sorted_comments = self._sort_comments(comments)

        index: dict[str, Comment] = {}
        for comment in sorted_comments:
            comment.children = []
            index[comment.id] = comment

        roots = []
        for comment in sorted_comments:
            if comment.parent_id is None:
                roots.append(comment)
                continue

            parent = index.get(comment.parent_id)
            if parent is None:
                if self.strict:
                    raise DanglingReferenceError(comment.id, comment.parent_id)
                logger.warning(
                    f"Comment {comment.id} references unknown parent {comment.parent_id}, promoting it to root"
                )
                roots.append(comment)
                continue

            # Children arrive in chronological order since the whole list is sorted
            parent.children.append(comment)

        unreachable = self._find_unreachable(roots, index)
        if unreachable:
            logger.warning(
                f"Comments {', '.join(unreachable)} have circular parent references and are not reachable from any root"
            )

        logger.debug(f"Built comment tree: {len(roots)} roots, {len(index)} comments")
        return CommentTree(roots=roots, index=index)


# Global builder instance
comment_tree_builder = CommentTreeBuilder()
