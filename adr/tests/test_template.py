import datetime as dt

import pytest

from adr.src.errors import MalformedEntryError
from adr.src.models import STATUS_SUPERSEDED, AdrEntry
from adr.src.records.template import parse_markdown, render_markdown, splice_status


@pytest.fixture(name="entry")
def fixture_entry():
    return AdrEntry(
        number=7,
        title="Use message queue",
        date=dt.date(2024, 3, 9),
        status="Accepted",
        context="Services poll each other.\n\nPolling is slow.",
        decision="We will use a queue.",
        consequences="- One more moving part\n- Lower latency",
    )


def test_filename_pads_number_and_hyphenates_title(entry):
    assert entry.filename == "0007-Use-message-queue.md"
    assert entry.superseded_filename == "0007-Use-message-queue-(superceded).md"


def test_new_entry_defaults_to_placeholders():
    entry = AdrEntry(title="Something")
    assert entry.number == 0
    assert entry.status == "Proposed"
    assert entry.context == "Context here..."
    assert entry.decision == "We will ..."
    assert entry.consequences == "Consequences of decision..."


def test_render_layout(entry):
    text = render_markdown(entry)
    assert text.startswith("# 7. Use message queue\n\nDate: 09/03/2024\n\n## Status\n\nAccepted\n\n## Context\n")
    positions = [text.index(h) for h in ("## Status", "## Context", "## Decision", "## Consequences")]
    assert positions == sorted(positions)


def test_render_then_parse_reproduces_entry(entry):
    parsed = parse_markdown(render_markdown(entry))
    assert parsed.model_dump() == entry.model_dump()


def test_bodies_with_edge_newlines_round_trip(entry):
    entry.context = "\nStarts on a blank line."
    entry.decision = "Ends with a blank line.\n"
    entry.consequences = "\n\nPadded both ways\n\n"
    parsed = parse_markdown(render_markdown(entry))
    assert parsed.context == entry.context
    assert parsed.decision == entry.decision
    assert parsed.consequences == entry.consequences


def test_parse_accepts_crlf(entry):
    parsed = parse_markdown(render_markdown(entry).replace("\n", "\r\n"))
    assert parsed.title == entry.title
    assert parsed.consequences == entry.consequences


def test_parse_reads_superseded_status(entry):
    entry.superseded_by = "0009-Use-streams.md"
    parsed = parse_markdown(render_markdown(entry))
    assert parsed.superseded_by == "0009-Use-streams.md"
    assert parsed.status == STATUS_SUPERSEDED


def test_parse_missing_section_raises():
    with pytest.raises(MalformedEntryError):
        parse_markdown("# 1. Title\n\n## Status\n\nAccepted\n\n## Decision\n\nx\n")


def test_splice_status_replaces_only_status_body(entry):
    spliced = splice_status(render_markdown(entry), "Superceded by 0008-Other.md")
    assert "## Status\n\nSuperceded by 0008-Other.md\n\n## Context" in spliced
    assert "Accepted" not in spliced
    assert "We will use a queue." in spliced


def test_splice_status_without_markers_raises():
    with pytest.raises(MalformedEntryError):
        splice_status("# 1. Title\n\nno sections here\n", "Superceded by x.md")
