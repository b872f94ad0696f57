"""Pydantic v2 models for one page of the photo feed.

All models use frozen config (immutable): a record is never mutated after
it has been decoded, and a newer fetch of the same page produces a new
:class:`PageRecord` that replaces the old one in its stream.

The wire document uses underscore-separated keys::

    {
      "current_page": 1, "total_pages": 5, "total_items": 100,
      "feature": "popular",
      "photos": [
        {"name": "...", "user": {"username": "...", "fullname": "...", ...},
         "created_at": "...", "description": "...",
         "times_viewed": 10, "votes_count": 4, "positive_votes_count": 4,
         "comments_count": 1,
         "images": [{"format": "jpeg", "size": 2, "url": "...", "https_url": "..."}]}
      ]
    }

Field names on the models follow the domain (``title``, ``author``,
``variants``) and carry the wire key as an alias.  ``current_page`` is
one-based on the wire and becomes the zero-based ``page_index``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ImageVariant(BaseModel):
    """One encoded rendition of a photo."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    format: str = Field(description="Encoding format, e.g. 'jpeg'.")
    size: int = Field(description="Pixel size class as defined by the API.")
    url: str
    https_url: str = ""


class ImageAuthor(BaseModel):
    """The photographer who uploaded the photo."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str = Field(description="Account handle.")
    fullname: str = Field(default="", description="Display name.")
    userpic_url: str = ""
    cover_url: str | None = None


class ImageRecord(BaseModel):
    """Metadata for one photo on a page.

    Has no identity beyond its position in the owning :class:`PageRecord`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(alias="name")
    author: ImageAuthor = Field(alias="user")
    created_at: datetime
    description: str = ""
    times_viewed: int = 0
    votes_count: int = 0
    positive_votes_count: int = 0
    comments_count: int = 0
    variants: list[ImageVariant] = Field(default_factory=list, alias="images")

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        # The API sends null for photos without a description.
        return "" if value is None else value

    def best_variant(self) -> ImageVariant | None:
        """Return the variant with the largest size class, if any."""
        if not self.variants:
            return None
        return max(self.variants, key=lambda v: v.size)


class PageRecord(BaseModel):
    """One page of feed results."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page_index: int = Field(ge=0, description="Zero-based page index.")
    total_pages: int = Field(default=1, ge=1)
    total_items: int = Field(default=0, ge=0)
    feature: str = ""
    items: list[ImageRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _index_within_total(self) -> PageRecord:
        if self.page_index >= self.total_pages:
            raise ValueError(
                f"page_index {self.page_index} is outside total_pages {self.total_pages}"
            )
        return self

    @classmethod
    def default(cls, feature: str = "") -> PageRecord:
        """Placeholder record published before the first fetch completes."""
        return cls(page_index=0, total_pages=1, total_items=0, feature=feature, items=[])

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> PageRecord:
        """Build a record from a decoded ``/photos`` response document.

        Raises
        ------
        pydantic.ValidationError
            If the document is missing fields or violates the model's
            constraints.
        ValueError
            If *payload* is not a mapping.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        current_page = payload.get("current_page")
        return cls.model_validate(
            {
                "page_index": current_page - 1 if isinstance(current_page, int) else current_page,
                "total_pages": payload.get("total_pages"),
                "total_items": payload.get("total_items"),
                "feature": payload.get("feature") or "",
                "items": payload.get("photos") or [],
            }
        )
