"""Unit tests for the browse CLI (photopager.cli.browse)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from photopager.cli.browse import (
    _build_parser,
    _format_json,
    _format_page,
    _run,
    _walk_pages,
    main,
)
from photopager.models.page import PageRecord
from photopager.services.pagination_controller import PaginationController
from photopager.utils.errors import EmptyBodyError, FeedStatusError
from tests.conftest import FakeFeedClient, make_page_payload, make_photo, make_record


# ======================================================================
# Formatting
# ======================================================================


class TestFormatPage:
    def test_header_and_counters(self) -> None:
        record = PageRecord.from_api(
            make_page_payload(total_items=12500, photos=[make_photo()])
        )

        text = _format_page("Popular Images Page 1", record)

        lines = text.splitlines()
        assert lines[0] == "Popular Images Page 1 (of 5, 12.5k photos)"
        assert set(lines[1]) == {"-"}
        assert "Blue hour over the harbour by Lea Moreau" in lines[2]
        assert "views 6.99k" in lines[2]
        assert "likes 431" in lines[2]
        assert "comments 12" in lines[2]
        assert lines[3].strip() == "https://cdn.example.com/p/1/21.jpg"

    def test_falls_back_to_username(self) -> None:
        photo = make_photo(user={"username": "lmoreau", "fullname": ""})
        record = PageRecord.from_api(make_page_payload(photos=[photo]))

        assert "by lmoreau" in _format_page("t", record)

    def test_empty_page(self) -> None:
        text = _format_page("Popular Images Page 1", PageRecord.default("popular"))

        assert "(no photos)" in text


class TestFormatJson:
    def test_dumps_records(self) -> None:
        data = json.loads(_format_json([make_record(0), make_record(1)]))

        assert [page["page_index"] for page in data] == [0, 1]
        assert data[0]["items"][0]["title"] == "Blue hour over the harbour"


# ======================================================================
# Argument parsing and entry point
# ======================================================================


class TestParser:
    def test_defaults(self) -> None:
        args = _build_parser().parse_args([])

        assert args.feature is None
        assert args.pages == 3
        assert args.key_file is None
        assert args.json_output is False
        assert args.quiet is False

    def test_short_flags(self) -> None:
        args = _build_parser().parse_args(["-f", "upcoming", "-n", "5", "--json"])

        assert args.feature == "upcoming"
        assert args.pages == 5
        assert args.json_output is True

    def test_rejects_zero_pages(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--pages", "0"])

        assert exc_info.value.code == 2


class TestRun:
    @pytest.mark.asyncio
    async def test_missing_key_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = await _run(None, 1, str(tmp_path / "missing.key"), False)

        assert exit_code == 1
        assert "no API consumer key" in capsys.readouterr().err


# ======================================================================
# Page walk
# ======================================================================


class TestWalkPages:
    @pytest.mark.asyncio
    async def test_walks_requested_number_of_pages(
        self, controller: PaginationController, feed: FakeFeedClient
    ) -> None:
        visited = await _walk_pages(controller, 3)

        assert [title for title, _, _ in visited] == [
            "Popular Images Page 1",
            "Popular Images Page 2",
            "Popular Images Page 3",
        ]
        assert [record.page_index for _, record, _ in visited] == [0, 1, 2]
        assert all(loaded for _, _, loaded in visited)

    @pytest.mark.asyncio
    async def test_stops_at_last_page(self, controller: PaginationController, feed: FakeFeedClient) -> None:
        feed.total_pages = 2

        visited = await _walk_pages(controller, 5)

        assert len(visited) == 2

    @pytest.mark.asyncio
    async def test_empty_feed_page_counts_as_loaded(
        self, controller: PaginationController, feed: FakeFeedClient
    ) -> None:
        empty = PageRecord.from_api(make_page_payload(total_pages=1, total_items=0, photos=[]))
        feed.queued[1] = [(None, empty)]
        feed.failures[2] = EmptyBodyError()

        visited = await _walk_pages(controller, 3)

        assert visited == [("Popular Images Page 1", empty, True)]

    @pytest.mark.asyncio
    async def test_failed_page_is_not_loaded(
        self, controller: PaginationController, feed: FakeFeedClient
    ) -> None:
        feed.failures[2] = FeedStatusError(503)

        visited = await _walk_pages(controller, 3)

        assert [loaded for _, _, loaded in visited] == [True, False, True]
        assert visited[1][1] == PageRecord.default("popular")
