"""Unit tests for entry normalization."""

from datetime import UTC, datetime

import pytest

from atom_feed.domain.entities.records import Content, Generator, TextConstruct
from atom_feed.domain.exceptions import (
    InvalidContentError,
    MissingRequiredFieldError,
)
from atom_feed.domain.services.entry_normalizer import normalize_entry


class TestNormalizeEntry:
    def test_minimal_entry(self, entry_data, fixed_clock):
        entry = normalize_entry(entry_data, clock=fixed_clock)

        assert entry.id == "urn:entry:1"
        assert entry.title == TextConstruct(value="Hello")
        assert entry.content == Content(value="Hi")
        assert entry.updated == "2024-01-02T03:04:05.678Z"
        assert entry.published is None
        assert entry.source is None
        assert entry.summary is None
        assert entry.rights is None
        assert entry.links == ()

    def test_published_has_no_default(self, entry_data, ticking_clock):
        entry = normalize_entry(entry_data, clock=ticking_clock)

        assert entry.published is None
        assert ticking_clock.calls == 1

    def test_published_and_updated_are_canonicalized(self, entry_data):
        entry_data["published"] = datetime(2024, 1, 1, tzinfo=UTC)
        entry_data["updated"] = "2024-01-05T08:00:00Z"

        entry = normalize_entry(entry_data)

        assert entry.published == "2024-01-01T00:00:00.000Z"
        assert entry.updated == "2024-01-05T08:00:00.000Z"

    def test_summary_and_rights(self, entry_data):
        entry_data["summary"] = {"type": "text", "value": "Short"}
        entry_data["rights"] = ""

        entry = normalize_entry(entry_data)

        assert entry.summary == TextConstruct(value="Short", type="text")
        assert entry.rights is None

    def test_out_of_line_content(self, entry_data):
        entry_data["content"] = {"src": "https://example.com/post", "type": "text/html"}

        entry = normalize_entry(entry_data)

        assert entry.content == Content(
            value=None, type="text/html", src="https://example.com/post"
        )

    def test_content_without_value_or_src(self, entry_data):
        entry_data["content"] = {"type": "html"}

        with pytest.raises(InvalidContentError) as exc_info:
            normalize_entry(entry_data)

        assert exc_info.value.field == "entry.content"

    def test_missing_content(self, entry_data):
        del entry_data["content"]

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            normalize_entry(entry_data)

        assert exc_info.value.field == "entry.content"

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            ("id", "", "entry.id"),
            ("title", {"value": ""}, "entry.title"),
            ("authors", [], "entry.authors"),
        ],
    )
    def test_missing_required_fields(self, entry_data, field, value, expected):
        entry_data[field] = value

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            normalize_entry(entry_data)

        assert exc_info.value.field == expected


class TestEntrySource:
    @pytest.fixture
    def source_data(self):
        return {
            "id": "urn:origin",
            "title": "Origin Feed",
            "authors": [{"name": "O"}],
        }

    def test_source_is_normalized_like_feed_metadata(
        self, entry_data, source_data, ticking_clock
    ):
        entry_data["source"] = source_data

        entry = normalize_entry(entry_data, clock=ticking_clock)

        assert entry.source is not None
        assert entry.source.id == "urn:origin"
        assert entry.source.title == TextConstruct(value="Origin Feed")
        assert entry.source.generator.value == "AtomFeed"
        assert entry.source.updated == "2024-01-02T03:04:05.678Z"
        assert entry.updated == "2024-01-02T03:04:06.678Z"

    def test_source_uses_given_default_generator(self, entry_data, source_data):
        entry_data["source"] = source_data
        default = Generator(value="Relay")

        entry = normalize_entry(entry_data, default_generator=default)

        assert entry.source.generator is default

    def test_atom_source_alias(self, entry_data, source_data):
        entry_data["atomSource"] = source_data

        assert normalize_entry(entry_data).source.id == "urn:origin"

    def test_invalid_source_reports_nested_field(self, entry_data, source_data):
        source_data["authors"] = []
        entry_data["source"] = source_data

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            normalize_entry(entry_data)

        assert exc_info.value.field == "entry.source.authors"
