"""
Unit tests for tripconf.config.snapshot module.

Tests template section replacement and the documentation snapshot check.
"""

from __future__ import annotations

import logging

import pytest

from tripconf.config.exceptions import DocumentationDriftError, TemplateError
from tripconf.config.snapshot import (
    AUTO_GENERATED_NOTE,
    check_documentation,
    render_document,
    replace_parameters_table,
    replace_section,
    verify_snapshot,
)

TEMPLATE = """# Build Configuration

## Parameter Summary

<!-- PARAMETERS-TABLE BEGIN -->
<!-- PARAMETERS-TABLE END -->

## Parameter Details

<!-- PARAMETERS-DETAILS BEGIN -->
<!-- PARAMETERS-DETAILS END -->
"""

TABLE = "| a | b |\n"
DETAILS = "### walkSpeed\n"


class TestReplaceSection:
    """Tests for replace_section."""

    def test_replace_empty_section(self):
        """The content is put between the markers, after the note."""
        doc = replace_parameters_table(TEMPLATE, TABLE)
        expected = (
            "<!-- PARAMETERS-TABLE BEGIN -->\n"
            f"{AUTO_GENERATED_NOTE}\n\n"
            "| a | b |\n\n"
            "<!-- PARAMETERS-TABLE END -->"
        )
        assert expected in doc
        assert doc.startswith("# Build Configuration\n")

    def test_replace_is_idempotent(self):
        """Replacing a generated section again gives the same document."""
        once = render_document(TEMPLATE, TABLE, DETAILS)
        twice = render_document(once, TABLE, DETAILS)
        assert once == twice

    def test_replace_changes_old_content(self):
        """Previously generated content is dropped."""
        doc = replace_section(TEMPLATE, "PARAMETERS-DETAILS", "old text")
        doc = replace_section(doc, "PARAMETERS-DETAILS", "new text")
        assert "old text" not in doc
        assert "new text" in doc

    def test_missing_marker(self):
        """A template without the markers is an error."""
        with pytest.raises(TemplateError, match="PARAMETERS-TABLE BEGIN"):
            replace_parameters_table("# No markers\n", TABLE)

    def test_end_before_begin(self):
        """An END marker before the BEGIN marker does not count."""
        doc = "<!-- X END -->\n<!-- X BEGIN -->\n"
        with pytest.raises(TemplateError):
            replace_section(doc, "X", "text")


class TestVerifySnapshot:
    """Tests for verify_snapshot."""

    def test_identical(self):
        """Identical texts pass."""
        verify_snapshot("same\n", "same\n")

    def test_difference_has_diff(self):
        """A difference raises with a unified diff in the message."""
        with pytest.raises(DocumentationDriftError) as exc_info:
            verify_snapshot("new line\n", "old line\n", name="docs/Build.md")

        err = exc_info.value
        assert err.name == "docs/Build.md"
        assert "-old line" in err.diff
        assert "+new line" in err.diff
        assert isinstance(err, AssertionError)

    def test_whitespace_counts(self):
        """Trailing whitespace and line endings are not normalised."""
        with pytest.raises(DocumentationDriftError):
            verify_snapshot("text\n", "text")
        with pytest.raises(DocumentationDriftError):
            verify_snapshot("text\r\n", "text\n")


class TestCheckDocumentation:
    """Tests for check_documentation."""

    @pytest.fixture
    def template(self, tmp_path):
        path = tmp_path / "template.md"
        path.write_text(TEMPLATE, encoding="utf-8")
        return path

    def test_up_to_date(self, template, tmp_path):
        """A committed document equal to the generated one passes."""
        output = tmp_path / "Build.md"
        output.write_text(render_document(TEMPLATE, TABLE, DETAILS), encoding="utf-8")

        doc = check_documentation(template, output, TABLE, DETAILS)
        assert doc == output.read_text(encoding="utf-8")

    def test_stale_document_fails(self, template, tmp_path):
        """A stale document fails and is left unchanged."""
        output = tmp_path / "Build.md"
        stale = render_document(TEMPLATE, TABLE, "### oldName\n")
        output.write_text(stale, encoding="utf-8")

        with pytest.raises(DocumentationDriftError, match="oldName"):
            check_documentation(template, output, TABLE, DETAILS)
        assert output.read_text(encoding="utf-8") == stale

    def test_update_writes_and_still_fails(self, template, tmp_path, caplog):
        """With update the document is rewritten, but the change still fails."""
        output = tmp_path / "Build.md"

        with caplog.at_level(logging.INFO), pytest.raises(DocumentationDriftError):
            check_documentation(template, output, TABLE, DETAILS, update=True)

        assert output.read_text(encoding="utf-8") == render_document(
            TEMPLATE, TABLE, DETAILS
        )
        assert "Wrote documentation" in caplog.text
        # A second run finds the document up to date
        check_documentation(template, output, TABLE, DETAILS, update=True)
