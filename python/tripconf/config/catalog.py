"""
Catalog of the parameters read during one mapping pass.

The catalog is a tree mirroring the configuration document. Internal entries
are object groupings (optionally carrying the metadata given to ``as_object``),
leaves carry a :class:`~tripconf.config.parameters.ParameterRecord`. Sibling
order is registration order, which is the order the mapping code reads the
parameters in.

A catalog belongs to exactly one pass. Mapping the same document twice with
the same catalog replaces records instead of adding new ones; to compare two
passes (e.g. with different documents) give each its own catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .exceptions import DuplicateParameterError
from .parameters import ParameterRecord, ValueType

logger = logging.getLogger(__name__)

__all__ = ["CatalogEntry", "ParameterCatalog"]

Path = tuple[str, ...]
ConcretePath = tuple[str | int, ...]


@dataclass
class CatalogEntry:
    """
    One entry of the catalog tree.

    Parameters
    ----------
    path
        Segment names from the root
    record
        Leaf record, grouping metadata, or ``None`` for an undocumented grouping
    children
        Nested entries by name, in registration order
    """

    path: Path
    record: ParameterRecord | None = None
    children: dict[str, CatalogEntry] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Last path segment."""
        return self.path[-1] if self.path else ""

    @property
    def is_leaf(self) -> bool:
        """Whether this entry is a parameter rather than a grouping."""
        return self.record is not None and not self.record.value_type.is_group

    @property
    def is_list(self) -> bool:
        """Whether this grouping is an array of objects."""
        return (
            self.record is not None
            and self.record.value_type is ValueType.OBJECT_LIST
        )

    @property
    def has_leaves(self) -> bool:
        """Whether a parameter is registered at or beneath this entry."""
        return self.is_leaf or any(c.has_leaves for c in self.children.values())


class ParameterCatalog:
    """
    The parameters registered during one mapping pass.

    Example:
        >>> catalog = ParameterCatalog()
        >>> catalog.register(
        ...     ParameterRecord(("walkSpeed",), ValueType.DOUBLE, "Speed.", 1.4)
        ... )
        >>> len(catalog)
        1
    """

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._root = CatalogEntry(path=())
        self._consumed: set[ConcretePath] = set()

    @property
    def root(self) -> CatalogEntry:
        """Root entry of the catalog tree."""
        return self._root

    def register(self, record: ParameterRecord) -> None:
        """
        Register a leaf parameter.

        A record registered again at the same path replaces the earlier one
        and keeps its position, even if its summary or type changed.

        Raises
        ------
        DuplicateParameterError
            If the path is a grouping with parameters beneath it, or lies
            beneath a parameter
        """
        for i in range(1, len(record.path)):
            parent = self._find(record.path[:i])
            if parent is not None and parent.is_leaf and parent.record is not None:
                raise DuplicateParameterError(
                    ".".join(record.path), parent.record.summary, record.summary
                )
        entry = self._entry(record.path)
        if any(c.has_leaves for c in entry.children.values()):
            summary = entry.record.summary if entry.record else "<object>"
            raise DuplicateParameterError(
                ".".join(record.path), summary, record.summary
            )
        self._replace(entry, record)

    def register_group(self, record: ParameterRecord) -> None:
        """
        Register the metadata of an object grouping.

        The grouping is only visible in :meth:`walk` once a leaf is
        registered beneath it.
        """
        entry = self._entry(record.path)
        self._replace(entry, record)

    def mark_consumed(self, path: ConcretePath) -> None:
        """Record that the value at the concrete (indexed) ``path`` was read."""
        self._consumed.add(tuple(path))

    @property
    def consumed_paths(self) -> frozenset[ConcretePath]:
        """Concrete paths of all values read."""
        return frozenset(self._consumed)

    def is_consumed(self, path: ConcretePath) -> bool:
        """Check if the value at the concrete ``path`` was read."""
        return tuple(path) in self._consumed

    def get(self, path: str | Path) -> ParameterRecord | None:
        """
        Get the record at ``path``.

        Parameters
        ----------
        path
            Dotted path (``"unpreferred.routes"``) or tuple of segments

        Returns
        -------
        ParameterRecord | None
            The leaf or grouping record, ``None`` if nothing is registered
        """
        entry = self._find(_as_path(path))
        return entry.record if entry is not None else None

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, tuple)):
            return False
        entry = self._find(_as_path(path))
        return entry is not None and entry.is_leaf

    def __len__(self) -> int:
        return sum(1 for _ in self.leaves())

    def leaves(self) -> Iterator[ParameterRecord]:
        """Iterate over the leaf records, depth first in registration order."""
        for _, entry in self.walk():
            if entry.is_leaf and entry.record is not None:
                yield entry.record

    def walk(self) -> Iterator[tuple[int, CatalogEntry]]:
        """
        Iterate depth first over groupings and leaves.

        Groupings without any leaf beneath them are left out.

        Yields
        ------
        tuple[int, CatalogEntry]
            Nesting depth (0 for top level entries) and the entry
        """
        yield from _walk(self._root, 0)

    def _entry(self, path: Path) -> CatalogEntry:
        entry = self._root
        for i, name in enumerate(path):
            if name not in entry.children:
                entry.children[name] = CatalogEntry(path=path[: i + 1])
            entry = entry.children[name]
        return entry

    def _find(self, path: Path) -> CatalogEntry | None:
        entry = self._root
        for name in path:
            if name not in entry.children:
                return None
            entry = entry.children[name]
        return entry

    @staticmethod
    def _replace(entry: CatalogEntry, record: ParameterRecord) -> None:
        if entry.record is not None:
            logger.debug(f"Parameter '{'.'.join(record.path)}' read again, replacing")
        entry.record = record


def _walk(entry: CatalogEntry, depth: int) -> Iterator[tuple[int, CatalogEntry]]:
    for child in entry.children.values():
        if child.is_leaf:
            yield depth, child
        elif child.has_leaves:
            yield depth, child
            yield from _walk(child, depth + 1)


def _as_path(path: str | Path) -> Path:
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(path)
