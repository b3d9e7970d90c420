"""HTTP client for interacting with the Jamments API."""

import logging
import re
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import ClientConfig, settings
from ..exceptions import (
    ConfigurationError,
    FetchStatusError,
    FetchTransportError,
    SubmitStatusError,
    SubmitTransportError,
)
from ..models import Comment
from ..services import CommentTreeBuilder, comment_tree_builder

logger = logging.getLogger(__name__)

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}

_EDGE_SLASHES = re.compile(r"^/|/\Z")
_WHITESPACE = re.compile(r"\s+")

# Default for the timeout argument, None already means "no timeout"
USE_SETTINGS_TIMEOUT: Any = object()


def clean_slug(slug: str) -> str:
    """
    Turn an article path into the name of its cached comments file.

    Args:
        slug: Article path, e.g. "/My-Post/Sub/"

    Returns:
        Filesystem-safe name, e.g. "my-post_sub"
    """
    slug = _EDGE_SLASHES.sub("", slug.lower())
    slug = slug.replace("/", "_").strip()
    return _WHITESPACE.sub("_", slug)


class JammentsClient:
    """
    Async HTTP client for the Jamments API.

    Every request is a single attempt: failures are raised to the caller and
    never retried. The client keeps the index of the comments returned by the
    last get_comments call; concurrent get_comments calls on one instance are
    not linearizable, the last one to complete owns the index.
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = USE_SETTINGS_TIMEOUT,
        strict: bool | None = None,
        **options: Any,
    ):
        """
        Initialize the Jamments client.

        Args:
            config: ClientConfig, or a mapping with "endpoint" and
                "cachedFilesURI" (or "cached_files_uri")
            transport: Optional httpx transport used for every request
            timeout: Request timeout in seconds, None disables it; defaults
                to settings.timeout
            strict: Raise on comments with an unknown parent instead of
                promoting them to root; defaults to
                settings.strict_parent_references
            **options: Config fields, when config is not given

        Raises:
            ConfigurationError: If endpoint or cachedFilesURI is missing or blank
        """
        if config is None:
            config = options
        elif options:
            raise ConfigurationError(
                "Pass the configuration either as config or as keyword arguments"
            )

        if not isinstance(config, ClientConfig):
            try:
                config = ClientConfig.model_validate(dict(config))
            except (TypeError, ValueError, ValidationError) as e:
                raise ConfigurationError(
                    f"Both endpoint and cachedFilesURI must be defined: {str(e)}"
                ) from e

        self.config = config
        self.endpoint = config.endpoint
        self.cached_files_uri = config.cached_files_uri
        self.timeout = settings.timeout if timeout is USE_SETTINGS_TIMEOUT else timeout
        self._transport = transport
        self._tree_builder = (
            comment_tree_builder if strict is None else CommentTreeBuilder(strict=strict)
        )

        # Comments of the last get_comments call, by id
        self._comments_index: dict[str, Comment] = {}

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "JammentsClient":
        """Create a client from the JAMMENTS_* settings."""
        return cls(
            {
                "endpoint": settings.endpoint,
                "cached_files_uri": settings.cached_files_uri,
            },
            **kwargs,
        )

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _get_json(self, url: str) -> Any:
        """
        Fetch a cached JSON file.

        Args:
            url: Absolute URL of the file

        Returns:
            Parsed JSON document

        Raises:
            FetchStatusError: If the API answers with a non-2xx status
            FetchTransportError: If the request fails at the network level
            ValueError: If the body is not valid JSON
        """
        logger.debug(f"GET {url}")

        try:
            async with self._http_client() as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Request error for {url}: {str(e)}")
            raise FetchTransportError(f"Request failed: {str(e)}") from e

        if not response.is_success:
            logger.error(f"HTTP error {response.status_code} for {url}")
            raise FetchStatusError(response.status_code, str(response.status_code))

        return response.json()

    async def _send_form(
        self, method: str, url: str, fields: tuple[tuple[str, str], ...]
    ) -> None:
        """
        Send a form-encoded mutating request.

        Args:
            method: HTTP method
            url: Absolute URL
            fields: Form fields, in body order

        Raises:
            SubmitStatusError: If the API answers with a non-2xx status, with
                the response body as message
            SubmitTransportError: If the request fails at the network level
        """
        logger.debug(f"{method} {url}")

        try:
            async with self._http_client() as client:
                response = await client.request(
                    method, url, data=dict(fields), headers=FORM_HEADERS
                )
        except httpx.RequestError as e:
            logger.error(f"Request error for {method} {url}: {str(e)}")
            raise SubmitTransportError(f"Request failed: {str(e)}") from e

        if not response.is_success:
            logger.error(
                f"HTTP error {response.status_code} for {method} {url}: {response.text}"
            )
            raise SubmitStatusError(response.status_code, response.text)

    async def get_site_infos(self) -> Any:
        """
        Get global site info (number of comments per article, admin data).

        Returns:
            Parsed content of site.json
        """
        return await self._get_json(
            f"{self.endpoint}/{self.cached_files_uri}/site.json"
        )

    async def get_comments(self, slug: str) -> list[Comment]:
        """
        Get the comments of an article as a chronological forest.

        Replies are nested in their parent's children list, sorted
        chronologically too. The client's comment index is replaced by the
        fetched comments.

        Args:
            slug: Article path

        Returns:
            Root comments sorted chronologically

        Raises:
            ValueError: If slug is empty
            FetchError: If the cached file cannot be fetched
            DanglingReferenceError: If the client is strict and a parent is missing
        """
        file_name = clean_slug(slug)
        if not file_name:
            raise ValueError("slug must be a non-empty string")

        data = await self._get_json(
            f"{self.endpoint}/{self.cached_files_uri}/{file_name}.json"
        )
        comments = [Comment.model_validate(item) for item in data]

        tree = self._tree_builder.build(comments)
        self._comments_index = tree.index

        logger.info(f"Fetched {len(comments)} comments for {slug}")
        return tree.roots

    def get_comment_by_id(self, comment_id: str | int) -> Comment | None:
        """
        Get a comment fetched by the last get_comments call.

        Args:
            comment_id: Comment identifier

        Returns:
            Comment or None if not found
        """
        return self._comments_index.get(str(comment_id))

    async def post_comment(
        self,
        slug: str,
        comment: str,
        name: str,
        email: str,
        parent_id: str | int | None = None,
    ) -> None:
        """
        Post a new comment.

        Args:
            slug: Article path
            comment: Comment content
            name: Author name
            email: Author email
            parent_id: Comment replied to, None for a root comment
        """
        await self._send_form(
            "POST",
            f"{self.endpoint}/comment/",
            (
                ("slug", slug),
                ("comment", comment),
                ("name", name),
                ("email", email),
                ("parent_id", "" if parent_id is None else str(parent_id)),
            ),
        )

    async def update_comment(
        self, comment_id: str | int, secret: str, comment: str
    ) -> None:
        """
        Update a comment.

        Args:
            comment_id: Comment identifier
            secret: Author secret of the comment
            comment: New content
        """
        await self._send_form(
            "PATCH",
            f"{self.endpoint}/comment/{comment_id}",
            (("comment", comment), ("user_secret", secret)),
        )

    async def delete_comment(self, comment_id: str | int, secret: str) -> None:
        """
        Delete a comment.

        Args:
            comment_id: Comment identifier
            secret: Author secret of the comment
        """
        await self._send_form(
            "DELETE",
            f"{self.endpoint}/comment/{comment_id}",
            (("user_secret", secret),),
        )

    async def validate_comment(self, comment_id: str | int, secret: str) -> None:
        """
        Validate a comment with the secret sent to its author.

        Args:
            comment_id: Comment identifier
            secret: Author secret of the comment
        """
        await self._send_form(
            "POST",
            f"{self.endpoint}/comment/validate/{comment_id}/",
            (("user_secret", secret),),
        )

    async def update_new_comments_subscription(
        self,
        article_id: str | int,
        user_id: str | int,
        secret: str,
        subscribe: bool,
    ) -> None:
        """
        Update user notification preferences for an article.

        Args:
            article_id: Article identifier
            user_id: User identifier
            secret: User secret
            subscribe: Whether to be notified of new comments
        """
        await self._send_form(
            "PATCH",
            f"{self.endpoint}/notification/article/{article_id}/",
            (
                ("subscribe", "true" if subscribe else "false"),
                ("user_id", str(user_id)),
                ("user_secret", secret),
            ),
        )
