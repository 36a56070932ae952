"""Unit tests for heading slugs and the heading accumulator.

These tests pin the anchor-id rules (tag stripping, lower-casing, collapsing
non-word runs, trimming hyphens) and the ordering guarantees of
``HeadingCollector``, including the reproducible duplicate-id behaviour for
headings that share the same text.
"""

from __future__ import annotations

import re

import pytest

from kb_pages.headings import HeadingCollector, HeadingRecord, slugify, strip_tags


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Setup ✅", "setup"),
        ("Rollout ⏳", "rollout"),
        ("<code>api</code> &amp; <em>worker</em>", "api-amp-worker"),
        ("  Phase 2: Payments (beta)  ", "phase-2-payments-beta"),
        ("snake_case_name", "snake_case_name"),
        ("--Already--hyphenated--", "already-hyphenated"),
        ("Café Menu", "caf-menu"),
        ("✅", ""),
    ],
)
def test_slugify_examples(text: str, expected: str) -> None:
    assert slugify(text) == expected


@pytest.mark.parametrize(
    "text",
    ["Setup ✅", "  a -- b  ", "Überblick & Ziele", "<b>x</b>!!", "", "___"],
)
def test_slug_shape(text: str) -> None:
    """Slugs hold only lowercase word characters and inner hyphens."""
    slug = slugify(text)
    assert slug == slugify(text)
    assert re.fullmatch(r"(?:[a-z0-9_]+(?:-[a-z0-9_]+)*)?", slug)


def test_strip_tags_removes_all_markup() -> None:
    assert strip_tags("<a href='#x'>Link</a> and <strong>bold</strong>") == (
        "Link and bold"
    )


def test_collector_keeps_document_order() -> None:
    collector = HeadingCollector()
    collector.add(1, "Guide")
    collector.add(3, "<em>Deep</em> dive")
    collector.add(2, "Setup ✅")

    assert [record.depth for record in collector] == [1, 3, 2]
    assert collector[1] == HeadingRecord(depth=3, text="Deep dive", id="deep-dive")
    assert collector[-1].id == "setup"
    assert len(collector) == 3


def test_duplicate_headings_share_an_id() -> None:
    """Identical heading text yields identical ids; nothing is deduplicated."""
    collector = HeadingCollector()
    first = collector.add(2, "Notes")
    second = collector.add(2, "Notes")

    assert len(collector) == 2
    assert first.id == second.id == "notes"


def test_collector_slices_are_read_only_copies() -> None:
    collector = HeadingCollector()
    collector.add(1, "A")
    collector.add(2, "B")
    assert collector[:1] == (HeadingRecord(1, "A", "a"),)
