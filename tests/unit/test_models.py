"""Unit tests for page and diagnostic models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from photopager.models.diagnostics import DiagnosticEvent, DiagnosticKind
from photopager.models.page import ImageRecord, PageRecord
from tests.conftest import make_page_payload, make_photo


class TestPageRecord:
    def test_from_api_maps_wire_fields(self) -> None:
        record = PageRecord.from_api(make_page_payload(current_page=3, total_pages=7, total_items=140))

        assert record.page_index == 2
        assert record.total_pages == 7
        assert record.total_items == 140
        assert record.feature == "popular"
        assert [item.title for item in record.items] == ["Blue hour over the harbour", "Second"]

    def test_items_keep_api_order(self) -> None:
        photos = [make_photo(name=f"p{i}") for i in range(5)]

        record = PageRecord.from_api(make_page_payload(photos=photos))

        assert [item.title for item in record.items] == ["p0", "p1", "p2", "p3", "p4"]

    def test_empty_page_allowed(self) -> None:
        record = PageRecord.from_api(make_page_payload(photos=[], total_items=0))

        assert record.items == []

    def test_default_placeholder(self) -> None:
        record = PageRecord.default("popular")

        assert record.page_index == 0
        assert record.total_pages == 1
        assert record.total_items == 0
        assert record.items == []
        assert record.feature == "popular"

    def test_index_must_be_within_total(self) -> None:
        with pytest.raises(ValidationError):
            PageRecord.from_api(make_page_payload(current_page=6, total_pages=5))

    def test_zero_total_pages_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PageRecord(page_index=0, total_pages=0)

    def test_missing_current_page_rejected(self) -> None:
        payload = make_page_payload()
        del payload["current_page"]

        with pytest.raises(ValidationError):
            PageRecord.from_api(payload)

    def test_non_object_payload_rejected(self) -> None:
        with pytest.raises(ValueError):
            PageRecord.from_api([])  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        record = PageRecord.default()

        with pytest.raises(ValidationError):
            record.total_pages = 9  # type: ignore[misc]


class TestImageRecord:
    def test_wire_aliases(self) -> None:
        image = ImageRecord.model_validate(make_photo())

        assert image.title == "Blue hour over the harbour"
        assert image.author.username == "lmoreau"
        assert image.author.cover_url is None
        assert image.times_viewed == 6990
        assert image.positive_votes_count == 431
        assert image.comments_count == 12
        assert isinstance(image.created_at, datetime)
        assert [v.size for v in image.variants] == [2, 21]

    def test_null_description_becomes_empty(self) -> None:
        image = ImageRecord.model_validate(make_photo(description=None))

        assert image.description == ""

    def test_best_variant_is_largest(self) -> None:
        image = ImageRecord.model_validate(make_photo())

        best = image.best_variant()

        assert best is not None
        assert best.size == 21

    def test_best_variant_none_without_images(self) -> None:
        image = ImageRecord.model_validate(make_photo(images=[]))

        assert image.best_variant() is None


class TestDiagnosticEvent:
    def test_defaults(self) -> None:
        event = DiagnosticEvent(kind=DiagnosticKind.EMPTY_BODY, feature="popular", page_index=2)

        assert event.detail == ""
        assert event.provider_name is None
        assert event.occurred_at.tzinfo is not None

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DiagnosticEvent(kind=DiagnosticKind.EMPTY_BODY, feature="popular", page_index=-1)
