"""
Unit tests for the report sectionizer.

Covers section order, the Abstract invariant, empty-heading handling and
heading-level matching.
"""
import pytest
from backend.app.services.sectionizer import segment
from storage.document_store import load_document

pytestmark = pytest.mark.unit


class TestSegment:
    """Test cases for segment()."""

    def test_abstract_is_first(self, sample_document):
        sections = segment(sample_document)

        assert sections[0].title == "Abstract"
        assert sections[0].content == "This report describes the sample model."

    def test_titles_in_document_order(self, sample_document):
        titles = [s.title for s in segment(sample_document)]

        assert titles == ["Abstract", "I. First Part", "III. Last Part"]

    def test_empty_heading_is_dropped(self, sample_document):
        titles = [s.title for s in segment(sample_document)]

        assert "II. Empty Part" not in titles

    def test_content_excludes_heading_and_is_trimmed(self, sample_document):
        first = segment(sample_document)[1]

        assert not first.content.startswith("## ")
        assert first.content == first.content.strip()
        assert first.content.startswith("The first part covers the past.")

    def test_deeper_headings_stay_in_content(self, sample_document):
        first = segment(sample_document)[1]

        assert "### Detail" in first.content
        assert "A nested detail line." in first.content

    def test_trailing_heading_without_content(self):
        doc = "## Abstract\nSummary text.\n## I. X\nfoo\n## II. Y\n"

        sections = segment(doc)

        assert [(s.title, s.content) for s in sections] == [
            ("Abstract", "Summary text."),
            ("I. X", "foo"),
        ]

    def test_n_headings_give_n_plus_one_sections(self):
        doc = "## Abstract\nabstract\n" + "".join(f"## H{i}\nbody {i}\n" for i in range(4))

        sections = segment(doc)

        assert len(sections) == 5
        assert [s.title for s in sections[1:]] == ["H0", "H1", "H2", "H3"]

    def test_abstract_kept_when_missing(self):
        sections = segment("# Title\n\n## Only\ncontent\n")

        assert sections[0].title == "Abstract"
        assert sections[0].content == ""
        assert [s.title for s in sections] == ["Abstract", "Only"]

    def test_single_abstract_only(self):
        sections = segment("## Abstract\nJust the abstract.\n")

        assert [s.title for s in sections] == ["Abstract"]

    def test_preamble_is_not_a_section(self, sample_document):
        contents = " ".join(s.content for s in segment(sample_document))

        assert "# Sample Report" not in contents

    def test_bundled_report(self):
        titles = [s.title for s in segment(load_document())]

        assert titles == [
            "Abstract",
            "I. The Core Framework: A Scale of Existence",
            "II. The Encompassing Elements: The Unified Field of Consciousness",
            "III. The Psychological and Philosophical Interconnection",
            "Conclusion",
        ]
