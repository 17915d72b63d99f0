"""Tests for document parsing, attribute validation, and ordering."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from content_pipeline_core.content import DocumentIdentifier
from content_pipeline_core.content._parsing import check_unique, parse_document, sort_newest_first
from content_pipeline_core.content.models import DocumentAttributes, DocumentSummary
from content_pipeline_core.exceptions import DocumentValidationError, DuplicateIdentifierError
from tests.support.helpers import make_post


def _parse(text: str, identifier: str = "post"):
    return parse_document(DocumentIdentifier(identifier), text)


class TestParseDocument:
    def test_hello_world_example(self):
        doc = _parse(make_post(), "hello-world")
        assert doc.identifier == "hello-world"
        assert doc.attributes.identifier == "hello-world"
        assert doc.attributes.title == "Hello"
        assert doc.attributes.description == "First post"
        assert doc.attributes.published_at == datetime(2024, 1, 5, tzinfo=UTC)
        assert doc.body == "# Hi"

    def test_missing_date_names_identifier(self):
        with pytest.raises(DocumentValidationError, match="Missing date in document draft"):
            _parse(make_post(date=None), "draft")

    def test_empty_date_is_missing(self):
        with pytest.raises(DocumentValidationError, match="Missing date"):
            _parse("---\ntitle: x\ndate:\n---\nbody")

    def test_no_front_matter_is_missing_date(self):
        with pytest.raises(DocumentValidationError, match="Missing date in document bare"):
            _parse("# no header", "bare")

    def test_unparseable_date(self):
        with pytest.raises(DocumentValidationError, match="Invalid front-matter in document odd"):
            _parse(make_post(date="not a date"), "odd")

    def test_malformed_yaml_names_identifier(self):
        with pytest.raises(DocumentValidationError, match="broken"):
            _parse("---\ntitle: [oops\n---\nbody", "broken")

    def test_non_mapping_front_matter(self):
        with pytest.raises(DocumentValidationError, match="listy"):
            _parse("---\n- 1\n---\nbody", "listy")

    def test_missing_title_and_description_default_to_empty(self):
        doc = _parse(make_post(title=None, description=None))
        assert doc.attributes.title == ""
        assert doc.attributes.description == ""

    def test_numeric_title_is_coerced(self):
        doc = _parse(make_post(title="2024"))
        assert doc.attributes.title == "2024"

    def test_extra_keys_ignored(self):
        doc = _parse("---\ndate: 2024-01-05\ntags: [a, b]\nauthor: me\n---\nbody")
        assert doc.attributes.title == ""
        assert doc.body == "body"


class TestPublishedAt:
    def test_timestamp_without_offset_is_utc(self):
        doc = _parse(make_post(date="2024-03-01 10:30:00"))
        assert doc.attributes.published_at == datetime(2024, 3, 1, 10, 30, tzinfo=UTC)
        assert doc.attributes.published_at.tzinfo is not None

    def test_timestamp_with_offset_keeps_instant(self):
        doc = _parse(make_post(date="2024-03-01T10:00:00+02:00"))
        assert doc.attributes.published_at == datetime(2024, 3, 1, 10, tzinfo=timezone(timedelta(hours=2)))

    def test_quoted_date_string(self):
        doc = _parse(make_post(date="'2024-01-05'"))
        assert doc.attributes.published_at == datetime(2024, 1, 5, tzinfo=UTC)

    def test_published_on(self):
        doc = _parse(make_post(date="2024-01-05"))
        assert doc.attributes.published_on == "2024-01-05"


class TestSortNewestFirst:
    @staticmethod
    def _summary(identifier: str, published_at: datetime) -> DocumentSummary:
        ident = DocumentIdentifier(identifier)
        return DocumentSummary(identifier=ident, attributes=DocumentAttributes(identifier=ident, published_at=published_at))

    def test_descending(self):
        old = self._summary("old", datetime(2024, 1, 5, tzinfo=UTC))
        new = self._summary("new", datetime(2024, 3, 1, tzinfo=UTC))
        mid = self._summary("mid", datetime(2024, 2, 1, tzinfo=UTC))
        assert [s.identifier for s in sort_newest_first([old, new, mid])] == ["new", "mid", "old"]

    def test_mixed_offsets_compare_by_instant(self):
        early = self._summary("early", datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=5))))
        late = self._summary("late", datetime(2024, 1, 1, 10, tzinfo=UTC))
        assert [s.identifier for s in sort_newest_first([early, late])] == ["late", "early"]


class TestCheckUnique:
    def test_distinct_identifiers_pass(self):
        check_unique(["a", "b", "c"])

    def test_case_collision_raises(self):
        with pytest.raises(DuplicateIdentifierError, match="post"):
            check_unique(["Post", "post"])

    def test_duplicate_is_a_validation_error(self):
        assert issubclass(DuplicateIdentifierError, DocumentValidationError)
