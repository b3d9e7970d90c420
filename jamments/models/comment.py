"""Data models for comments and comment trees."""

from datetime import datetime, timezone
from typing import Any

from dateutil.parser import parse as parse_date
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Comment(BaseModel):
    """Comment record as served by the Jamments cached files."""

    id: str = Field(..., description="Unique identifier of the comment")
    parent_id: str | None = Field(
        None, description="Identifier of the parent comment, None for root comments"
    )
    submitted_at: datetime = Field(..., description="When the comment was submitted")
    comment: str | None = Field(None, description="Content of the comment")
    name: str | None = Field(None, description="Author name")
    email: str | None = Field(None, description="Author email")
    children: list["Comment"] = Field(
        default_factory=list, description="Replies, sorted chronologically"
    )

    # Cached files may carry more fields than the ones modelled here
    model_config = ConfigDict(extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("parent_id", mode="before")
    @classmethod
    def _coerce_parent_id(cls, value: Any) -> Any:
        # null, "" and 0 all mean "no parent"
        if not value:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("submitted_at", mode="before")
    @classmethod
    def _parse_submitted_at(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return parse_date(value)
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Invalid date format: {str(e)}")
        return value

    @field_validator("submitted_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Mixing naive and aware datetimes would break chronological sorting
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class CommentTree(BaseModel):
    """Result of assembling flat comments into a forest."""

    roots: list[Comment] = Field(
        ..., description="Root comments sorted chronologically, replies nested"
    )
    index: dict[str, Comment] = Field(
        ..., description="Every assembled comment keyed by its identifier"
    )
