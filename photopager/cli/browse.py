# =============================================================================
# photopager/cli/browse.py: Browse a photo feed page by page
# =============================================================================
#
# Drives the PaginationController the same way a swiping gallery UI would:
# first_page() (which also prefetches page 2), then page_after() for each
# following page, so cache hits and prefetches behave exactly as they do
# behind a UI.  Waits for in-flight fetches between steps and prints what
# each page stream holds.
#
# Typical usage:
#   python -m photopager.cli.browse                        # 3 pages of "popular"
#   python -m photopager.cli.browse --feature upcoming -n 5
#   python -m photopager.cli.browse --json > pages.json
#
# Log lines go to stderr; page listings go to stdout.
# =============================================================================

"""Command-line page browser for the photo feed.

Usage::

    python -m photopager.cli.browse [--feature F] [--pages N] [--key-file P] [--json]

Exits 0 when at least one page was loaded, 1 when the consumer key is
missing or no page could be fetched.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from photopager.config.settings import Settings
from photopager.models.page import PageRecord
from photopager.providers.diagnostics.sinks import MemoryDiagnosticSink, StructlogDiagnosticSink
from photopager.services.pagination_controller import PaginationController
from photopager.utils.logging import configure_logging
from photopager.utils.number_format import short_form


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_page(title: str, record: PageRecord) -> str:
    """Render one page as a titled list of photos with short-form counters."""
    lines = [f"{title} (of {record.total_pages}, {short_form(record.total_items)} photos)"]
    lines.append("-" * len(lines[0]))

    if not record.items:
        lines.append("  (no photos)")

    for position, image in enumerate(record.items, start=1):
        author = image.author.fullname or image.author.username
        lines.append(
            f"  {position:>2}. {image.title or '(untitled)'} by {author}"
            f"  | views {short_form(image.times_viewed)}"
            f"  | likes {short_form(image.positive_votes_count)}"
            f"  | comments {short_form(image.comments_count)}"
        )
        best = image.best_variant()
        if best is not None:
            lines.append(f"      {best.https_url or best.url}")
    return "\n".join(lines)


def _format_json(records: list[PageRecord]) -> str:
    return json.dumps([r.model_dump(mode="json") for r in records], indent=2)


# ---------------------------------------------------------------------------
# Main async logic
# ---------------------------------------------------------------------------


async def _walk_pages(
    controller: PaginationController,
    pages: int,
) -> list[tuple[str, PageRecord, bool]]:
    """Step through up to *pages* pages the way a swiping view would.

    Returns ``(title, record, loaded)`` per visited page.  A page counts as
    loaded when its cache entry was revalidated by a successful fetch, so a
    genuinely empty page is loaded while a failed one is not.
    """
    visited: list[tuple[str, PageRecord, bool]] = []

    stream = controller.first_page()
    index = 0
    while stream is not None:
        await controller.wait_for_pending()
        loaded = controller.page_cache.try_get_valid(index) is stream
        visited.append((controller.page_title(index), stream.value, loaded))
        if len(visited) >= pages:
            break
        stream = controller.page_after(index)
        index += 1

    return visited


async def _run(
    feature: str | None,
    pages: int,
    key_file: str | None,
    json_output: bool,
) -> int:
    from photopager.main import build_all

    app_settings = Settings()
    if key_file:
        app_settings = app_settings.model_copy(update={"feed_api_key_file": key_file})

    sink = MemoryDiagnosticSink(forward_to=StructlogDiagnosticSink())
    components = build_all(app_settings, diagnostics=sink, feature=feature)
    controller = components["controller"]

    try:
        if not components["feed_client"].is_available():
            print(
                f"Error: no API consumer key found in {app_settings.feed_api_key_file}",
                file=sys.stderr,
            )
            return 1

        visited = await _walk_pages(controller, pages)
    finally:
        await components["http_client"].aclose()

    loaded = [record for _, record, ok in visited if ok]

    if json_output:
        print(_format_json(loaded))
    else:
        print(
            "\n\n".join(
                _format_page(title, record) if ok else f"{title}: not loaded"
                for title, record, ok in visited
            )
        )

    failures = sink.count_by_kind()
    if failures:
        summary = ", ".join(f"{kind.value}={count}" for kind, count in failures.items())
        print(f"Abandoned fetches: {summary}", file=sys.stderr)

    return 0 if loaded else 1


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m photopager.cli.browse",
        description="Page through a photo feed using the caching, prefetching controller.",
    )
    parser.add_argument(
        "--feature", "-f",
        type=str,
        default=None,
        help="Feed category (default: FEED_DEFAULT_FEATURE, normally 'popular').",
    )
    parser.add_argument(
        "--pages", "-n",
        type=int,
        default=3,
        help="How many pages to walk through (default: 3).",
    )
    parser.add_argument(
        "--key-file",
        type=str,
        default=None,
        help="Path to the single-line consumer key file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print loaded pages as JSON instead of text.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the browse tool."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.pages < 1:
        parser.error("--pages must be at least 1")

    quiet = args.quiet or args.json_output
    configure_logging(
        log_level="WARNING" if quiet else Settings().log_level,
        stream=sys.stderr,
    )

    exit_code = asyncio.run(_run(args.feature, args.pages, args.key_file, args.json_output))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
