"""Unit tests for the knowledge-base render rules.

The rules are exercised directly, without the markdown engine, so each
contract (heading ids and badges, table alignment, code escaping, callout
classification) is checked in isolation.
"""

from __future__ import annotations

import pytest

from kb_pages.generator.models import TableCell
from kb_pages.generator.rules import (
    CalloutRenderRules,
    classify_callout,
    escape_code,
    strip_callout_markers,
)
from kb_pages.headings import HeadingCollector, HeadingRecord


@pytest.fixture
def headings() -> HeadingCollector:
    return HeadingCollector()


@pytest.fixture
def rules(headings: HeadingCollector) -> CalloutRenderRules:
    return CalloutRenderRules(headings)


def test_heading_with_completed_marker(
    rules: CalloutRenderRules, headings: HeadingCollector
) -> None:
    html = rules.heading("Setup ✅", 2)
    assert html == (
        '<h2 id="setup">Setup ✅ '
        '<span class="badge badge-completed">Completed</span></h2>'
    )
    assert list(headings) == [HeadingRecord(depth=2, text="Setup ✅", id="setup")]


def test_heading_with_pending_marker(rules: CalloutRenderRules) -> None:
    html = rules.heading("Rollout ⏳", 2)
    assert 'id="rollout"' in html
    assert '<span class="badge badge-pending">Pending</span>' in html


def test_plain_heading_keeps_markup_and_has_no_badge(
    rules: CalloutRenderRules, headings: HeadingCollector
) -> None:
    html = rules.heading("Use <code>make</code>", 3)
    assert html == '<h3 id="use-make">Use <code>make</code> </h3>'
    assert "badge" not in html
    assert headings[0].text == "Use make"


def test_heading_records_every_call_in_order(
    rules: CalloutRenderRules, headings: HeadingCollector
) -> None:
    rules.heading("Same", 1)
    rules.heading("Other", 4)
    rules.heading("Same", 1)
    assert [(h.depth, h.id) for h in headings] == [(1, "same"), (4, "other"), (1, "same")]


def test_table_preserves_order_and_alignment(rules: CalloutRenderRules) -> None:
    header = [TableCell("Name", "left"), TableCell("Count", "right"), TableCell("Note")]
    rows = [
        [TableCell("api", "left"), TableCell("3", "right"), TableCell("<em>ok</em>")],
        [TableCell("web", "left"), TableCell("1", "right"), TableCell("")],
    ]
    assert rules.table(header, rows) == (
        "<table><thead><tr>"
        '<th style="text-align:left">Name</th>'
        '<th style="text-align:right">Count</th>'
        "<th>Note</th>"
        "</tr></thead><tbody>"
        '<tr><td style="text-align:left">api</td>'
        '<td style="text-align:right">3</td><td><em>ok</em></td></tr>'
        '<tr><td style="text-align:left">web</td>'
        '<td style="text-align:right">1</td><td></td></tr>'
        "</tbody></table>"
    )


def test_table_without_rows_still_has_tbody(rules: CalloutRenderRules) -> None:
    assert rules.table([TableCell("Only")], []) == (
        "<table><thead><tr><th>Only</th></tr></thead><tbody></tbody></table>"
    )


def test_code_escaping_is_exact(rules: CalloutRenderRules) -> None:
    assert rules.code("a & b < c > d", None) == (
        '<pre><code class="lang-text">a &amp; b &lt; c &gt; d</code></pre>'
    )
    assert rules.code("x", "python") == '<pre><code class="lang-python">x</code></pre>'


def test_escape_code_does_not_double_escape() -> None:
    assert escape_code("&lt;") == "&amp;lt;"
    assert escape_code('"quotes" stay') == '"quotes" stay'


def test_warning_blockquote_is_important(rules: CalloutRenderRules) -> None:
    html = rules.blockquote("[!WARNING] Disk almost full")
    assert html == '<div class="callout callout-important">Disk almost full</div>'


def test_tip_blockquote_is_note_and_token_removed(rules: CalloutRenderRules) -> None:
    html = rules.blockquote("[!TIP] Cache the build")
    assert html == '<div class="callout callout-note">Cache the build</div>'


def test_plain_blockquote_is_note(rules: CalloutRenderRules) -> None:
    assert rules.blockquote("<p>Quote</p>") == (
        '<div class="callout callout-note"><p>Quote</p></div>'
    )


def test_all_markers_stripped_even_when_not_classifying() -> None:
    content = "[!NOTE] one [!TIP]two [!IMPORTANT]\nthree [!WARNING] four"
    assert classify_callout(content) == "important"
    assert strip_callout_markers(content) == "one two three four"


def test_classification_uses_pre_strip_content() -> None:
    assert classify_callout("[!IMPORTANT] x") == "important"
    assert classify_callout("[!NOTE] x") == "note"
    assert classify_callout("IMPORTANT without brackets") == "note"
