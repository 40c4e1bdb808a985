"""
Documentation generation from a parameter catalog.

This module provides:
- SkipNodes: paths replaced by a reference to another document
- render_summary_table: Markdown table with one row per parameter
- render_detail_list: Markdown sections with one block per parameter
- export_parameter_json: Export to JSON for tooling

Output only depends on the catalog and the skip nodes. Entries appear in the
order the mapping code registered them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .catalog import CatalogEntry, ParameterCatalog

__all__ = [
    "SkipNodes",
    "export_parameter_json",
    "render_detail_list",
    "render_summary_table",
]

_MAX_HEADING_LEVEL = 6
_TABLE_HEADER = "| Config Parameter | Type | Default | Summary | Since |"
_TABLE_UNDERLINE = "|------------------|------|---------|---------|-------|"
_SEPARATOR = " ∙ "


@dataclass(frozen=True)
class SkipNodes:
    """
    Paths left out of the documentation, with a reference to where they are
    documented instead.

    Skipping only affects rendering; the parameters are still read normally.

    Example:
        >>> skip = SkipNodes.of("dataOverlay", "/docs/sandbox/DataOverlay.md")
        >>> skip.reference("dataOverlay")
        '/docs/sandbox/DataOverlay.md'
    """

    nodes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def of(cls, *pairs: str) -> SkipNodes:
        """
        Create from alternating paths and references.

        Raises
        ------
        ValueError
            If an odd number of arguments is given
        """
        if len(pairs) % 2:
            msg = "SkipNodes.of expects pairs of (path, reference)"
            raise ValueError(msg)
        return cls(dict(zip(pairs[::2], pairs[1::2])))

    @classmethod
    def none(cls) -> SkipNodes:
        """Create an empty filter."""
        return cls()

    def is_skipped(self, path: str) -> bool:
        """Check if the dotted ``path`` is skipped (exact match)."""
        return path in self.nodes

    def reference(self, path: str) -> str | None:
        """Get the replacement reference for the dotted ``path``."""
        return self.nodes.get(path)


@dataclass(frozen=True)
class _Item:
    depth: int
    entry: CatalogEntry
    display_path: str
    parent_path: str
    reference: str | None


def _visible(catalog: ParameterCatalog, skip_nodes: SkipNodes) -> Iterator[_Item]:
    yield from _visible_children(catalog.root, 0, "", skip_nodes)


def _visible_children(
    parent: CatalogEntry, depth: int, parent_display: str, skip_nodes: SkipNodes
) -> Iterator[_Item]:
    for entry in parent.children.values():
        if not entry.has_leaves:
            continue
        display = f"{parent_display}.{entry.name}" if parent_display else entry.name
        if entry.is_list:
            display += "[]"
        reference = skip_nodes.reference(".".join(entry.path))
        yield _Item(depth, entry, display, parent_display, reference)
        if reference is None and not entry.is_leaf:
            yield from _visible_children(entry, depth + 1, display, skip_nodes)


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def _code(text: str) -> str:
    return f"`{text}`" if text else ""


def render_summary_table(
    catalog: ParameterCatalog, skip_nodes: SkipNodes | None = None
) -> str:
    """
    Render a Markdown table with one row per parameter.

    Parameters
    ----------
    catalog
        Catalog of a completed mapping pass
    skip_nodes
        Paths to replace by a reference row

    Returns
    -------
    str
        Markdown table, ending with a newline
    """
    skip_nodes = skip_nodes or SkipNodes.none()
    lines = [_TABLE_HEADER, _TABLE_UNDERLINE]

    for item in _visible(catalog, skip_nodes):
        record = item.entry.record
        if item.reference is not None:
            type_name = record.type_name if record else "object"
            since = str(record.since) if record else ""
            summary = f"See [{item.reference}]({item.reference})"
            cells = [_code(item.display_path), _code(type_name), "", summary, since]
        elif item.entry.is_leaf and record is not None:
            default = "Required" if record.is_required else _code(record.default_text)
            cells = [
                _code(item.display_path),
                _code(record.type_name),
                _cell(default),
                _cell(record.summary),
                str(record.since),
            ]
        else:
            continue
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines) + "\n"


def render_detail_list(
    catalog: ParameterCatalog,
    skip_nodes: SkipNodes | None = None,
    heading_level: int = 3,
) -> str:
    """
    Render one Markdown section per parameter.

    Groupings get a section of their own, and the parameters inside them
    are rendered one heading level deeper (at most level 6).

    Parameters
    ----------
    catalog
        Catalog of a completed mapping pass
    skip_nodes
        Paths to replace by a reference
    heading_level
        Heading level of top level parameters

    Returns
    -------
    str
        Markdown text, ending with a newline
    """
    skip_nodes = skip_nodes or SkipNodes.none()
    blocks = [
        "\n\n".join(_detail_block(item, heading_level))
        for item in _visible(catalog, skip_nodes)
    ]
    return "\n\n".join(blocks) + "\n"


def _detail_block(item: _Item, heading_level: int) -> list[str]:
    record = item.entry.record
    level = min(heading_level + item.depth, _MAX_HEADING_LEVEL)
    paragraphs = [f"{'#' * level} {item.entry.name}"]

    if record is not None:
        meta = [
            f"**Since version:** `{record.since}`",
            f"**Type:** `{record.type_name}`",
            f"**Cardinality:** `{'Required' if record.is_required else 'Optional'}`",
        ]
        if record.default_text:
            meta.append(f"**Default value:** `{record.default_text}`")
        paragraphs.append(_SEPARATOR.join(meta))
    paragraphs.append(f"**Path:** /{item.parent_path.replace('.', '/')}")

    if item.reference is not None:
        paragraphs.append(f"See [{item.reference}]({item.reference}).")
        return paragraphs
    if record is None:
        return paragraphs

    if record.enum_values:
        label = "Enum keys" if record.detail_type else "Enum values"
        values = " | ".join(f"`{v}`" for v in record.enum_values)
        paragraphs.append(f"**{label}:** {values}")
    if record.feature is not None:
        paragraphs.append(f"**Requires feature:** `{record.feature}`")
    paragraphs.append(record.summary)
    if record.description:
        paragraphs.append(record.description)
    return paragraphs


def export_parameter_json(
    catalog: ParameterCatalog, skip_nodes: SkipNodes | None = None
) -> dict[str, Any]:
    """
    Export the catalog to a JSON-serialisable dict.

    Returns
    -------
    dict
        Structure::

            {
                "parameters": [
                    {
                        "path": str,
                        "type": str,
                        "required": bool,
                        "default": str | None,
                        "since": str,
                        "summary": str,
                        "description": str | None,
                    }
                ],
                "skipped": [{"path": str, "reference": str}],
            }
    """
    skip_nodes = skip_nodes or SkipNodes.none()
    parameters = []
    skipped = []
    for item in _visible(catalog, skip_nodes):
        record = item.entry.record
        if item.reference is not None:
            skipped.append({"path": item.display_path, "reference": item.reference})
        elif item.entry.is_leaf and record is not None:
            parameters.append(
                {
                    "path": item.display_path,
                    "type": record.type_name,
                    "required": record.is_required,
                    "default": record.default_text or None,
                    "since": str(record.since),
                    "summary": record.summary,
                    "description": record.description,
                }
            )
    return {"parameters": parameters, "skipped": skipped}
