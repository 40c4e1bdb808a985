"""
Keep generated documentation in sync with the code.

A documentation template contains two marked sections::

    <!-- PARAMETERS-TABLE BEGIN -->
    <!-- PARAMETERS-TABLE END -->

    <!-- PARAMETERS-DETAILS BEGIN -->
    <!-- PARAMETERS-DETAILS END -->

The rendered summary table and detail list are put between the markers and
the result is compared byte for byte with the committed document. A test
that calls :func:`check_documentation` therefore fails whenever a parameter
changes without the documentation being regenerated and committed.
"""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

from .exceptions import DocumentationDriftError, TemplateError

logger = logging.getLogger(__name__)

__all__ = [
    "AUTO_GENERATED_NOTE",
    "PARAMETERS_DETAILS",
    "PARAMETERS_TABLE",
    "check_documentation",
    "render_document",
    "replace_parameters_details",
    "replace_parameters_table",
    "replace_section",
    "verify_snapshot",
]

PARAMETERS_TABLE = "PARAMETERS-TABLE"
PARAMETERS_DETAILS = "PARAMETERS-DETAILS"
AUTO_GENERATED_NOTE = (
    "<!-- NOTE! This section is auto-generated. "
    "Do not change, change doc in code instead. -->"
)


def replace_section(doc: str, section: str, text: str) -> str:
    """
    Replace everything between the BEGIN and END markers of ``section``.

    Parameters
    ----------
    doc
        Template or previously generated document
    section
        Section name, e.g. ``PARAMETERS-TABLE``
    text
        New section content

    Returns
    -------
    str
        Document with the section replaced; the markers are kept

    Raises
    ------
    TemplateError
        If either marker is missing
    """
    begin = f"<!-- {section} BEGIN -->"
    end = f"<!-- {section} END -->"
    start = doc.find(begin)
    stop = doc.find(end, start + len(begin)) if start >= 0 else -1
    if start < 0 or stop < 0:
        msg = f"Template is missing the '{begin}' ... '{end}' markers"
        raise TemplateError(msg)

    content = f"\n{AUTO_GENERATED_NOTE}\n\n{text}\n"
    return doc[: start + len(begin)] + content + doc[stop:]


def replace_parameters_table(doc: str, table: str) -> str:
    """Replace the parameter summary table section."""
    return replace_section(doc, PARAMETERS_TABLE, table)


def replace_parameters_details(doc: str, details: str) -> str:
    """Replace the parameter details section."""
    return replace_section(doc, PARAMETERS_DETAILS, details)


def render_document(template: str, table: str, details: str) -> str:
    """Fill both sections of a template."""
    doc = replace_parameters_table(template, table)
    return replace_parameters_details(doc, details)


def verify_snapshot(actual: str, expected: str, name: str = "document") -> None:
    """
    Compare generated documentation with the committed copy.

    No normalisation is done: whitespace and line endings count.

    Raises
    ------
    DocumentationDriftError
        If the texts differ; the message holds a unified diff
    """
    if actual == expected:
        return
    diff = "".join(
        difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=f"{name} (committed)",
            tofile=f"{name} (generated)",
        )
    )
    raise DocumentationDriftError(name, diff)


def _read(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def check_documentation(
    template_path: str | Path,
    output_path: str | Path,
    table: str,
    details: str,
    update: bool = False,
) -> str:
    """
    Render a document from its template and verify the committed copy.

    Parameters
    ----------
    template_path
        Template with the section markers
    output_path
        Committed document
    table
        Rendered summary table
    details
        Rendered detail list
    update
        Write the generated document to ``output_path`` before comparing.
        The check still fails if the content changed, so the update shows up
        as a diff to commit.

    Returns
    -------
    str
        The generated document

    Raises
    ------
    DocumentationDriftError
        If the generated document differs from the committed one
    """
    template_path = Path(template_path)
    output_path = Path(output_path)

    original = _read(output_path) if output_path.exists() else ""
    doc = render_document(_read(template_path), table, details)

    if update:
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(doc)
        logger.info(f"Wrote documentation to {output_path}")

    verify_snapshot(doc, original, name=str(output_path))
    return doc
