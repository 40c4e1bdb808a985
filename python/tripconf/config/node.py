"""
Read-only view of one node of a parsed configuration document.

A :class:`ConfigNode` pairs a fragment of the document tree (``dict``,
``list`` or scalar, as produced by ``json``/``tomllib``) with its path from
the root and the :class:`~tripconf.config.catalog.ParameterCatalog` of the
current mapping pass. Looking up a key that is not in the document gives a
*missing* node rather than an error, so mapping code can always ask for a
parameter and fall back to its default.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .catalog import ConcretePath, ParameterCatalog
from .parameters import REQUIRED, ParameterAccessor, ValueType
from .version import NA, ConfigVersion

__all__ = ["MISSING", "ConfigNode", "format_path"]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()
"""Value of a node whose key is absent from the document."""


def format_path(path: ConcretePath) -> str:
    """
    Format a concrete path for messages.

    Examples
    --------
    >>> format_path(("transferRequests", 1, "walkSpeed"))
    'transferRequests[1].walkSpeed'
    """
    text = ""
    for segment in path:
        if isinstance(segment, int):
            text += f"[{segment}]"
        else:
            text += f".{segment}" if text else segment
    return text


class ConfigNode:
    """
    A node of a configuration document together with its path.

    Parameters
    ----------
    value
        The document fragment, or ``MISSING``
    path
        Keys (``str``) and array indexes (``int``) from the root
    catalog
        Catalog of the current mapping pass
    source
        Optional name of the document, used in messages
    """

    def __init__(
        self,
        value: Any,
        path: ConcretePath,
        catalog: ParameterCatalog,
        source: str | None = None,
    ) -> None:
        self._value = MISSING if value is None else value
        self._path = tuple(path)
        self._catalog = catalog
        self._source = source

    @classmethod
    def root(
        cls,
        document: Any,
        catalog: ParameterCatalog | None = None,
        source: str | None = None,
    ) -> ConfigNode:
        """
        Wrap a parsed document.

        Parameters
        ----------
        document
            The parsed document (usually a ``dict``)
        catalog
            Catalog to register parameters in; a new one is created if omitted
        source
            Optional name of the document (e.g. the file name)
        """
        return cls(document, (), catalog if catalog is not None else ParameterCatalog(), source)

    @property
    def value(self) -> Any:
        """The raw document fragment (``MISSING`` when absent)."""
        return self._value

    @property
    def path(self) -> ConcretePath:
        """Keys and array indexes from the root."""
        return self._path

    @property
    def doc_path(self) -> tuple[str, ...]:
        """Path used in the catalog: the keys, without array indexes."""
        return tuple(s for s in self._path if not isinstance(s, int))

    @property
    def path_text(self) -> str:
        """Dotted path with array indexes, e.g. ``transferRequests[1].walkSpeed``."""
        return format_path(self._path)

    @property
    def catalog(self) -> ParameterCatalog:
        """Catalog of the current mapping pass."""
        return self._catalog

    @property
    def source(self) -> str | None:
        """Name of the document, if known."""
        return self._source

    def is_missing(self) -> bool:
        """Check if the node is absent from the document."""
        return self._value is MISSING

    def is_object(self) -> bool:
        """Check if the node is an object."""
        return isinstance(self._value, Mapping)

    def is_array(self) -> bool:
        """Check if the node is an array."""
        return isinstance(self._value, (list, tuple))

    def is_empty(self) -> bool:
        """Check if the node is missing or an empty object."""
        return self.is_missing() or (self.is_object() and not self._value)

    def keys(self) -> list[str]:
        """Keys of an object node, in document order."""
        return list(self._value.keys()) if self.is_object() else []

    def __len__(self) -> int:
        if self.is_object() or self.is_array():
            return len(self._value)
        return 0

    def child(self, name: str) -> ConfigNode:
        """Get the node for key ``name``; missing if the key is absent."""
        value = self._value.get(name, MISSING) if self.is_object() else MISSING
        return ConfigNode(value, (*self._path, name), self._catalog, self._source)

    def child_at(self, index: int) -> ConfigNode:
        """Get the node for array element ``index``; missing if out of range."""
        value = MISSING
        if self.is_array() and 0 <= index < len(self._value):
            value = self._value[index]
        return ConfigNode(value, (*self._path, index), self._catalog, self._source)

    def of(self, name: str) -> ParameterAccessor:
        """Start reading parameter ``name`` of this object."""
        return ParameterAccessor(self.child(name))

    def get(
        self,
        name: str,
        kind: ValueType,
        default: Any = REQUIRED,
        *,
        summary: str,
        since: ConfigVersion = NA,
        description: str | None = None,
        **options: Any,
    ) -> Any:
        """
        Read parameter ``name`` in one call.

        Equivalent to ``node.of(name).since(since).summary(summary)
        .description(description).as_type(kind, default, **options)``.
        """
        accessor = self.of(name).since(since).summary(summary)
        if description:
            accessor.description(description)
        return accessor.as_type(kind, default, **options)

    def mark_consumed(self) -> None:
        """Record in the catalog that this node's value was read."""
        self._catalog.mark_consumed(self._path)

    def __repr__(self) -> str:
        return f"ConfigNode(path={self.path_text!r}, value={self._value!r})"
