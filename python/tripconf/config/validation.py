"""
Checks on a configuration document beyond the typed values.

After a mapping pass the catalog knows every path that was read, so values
nobody read (usually misspelled keys) can be listed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .catalog import ConcretePath
from .exceptions import UnknownParametersError
from .node import MISSING, ConfigNode, format_path

logger = logging.getLogger(__name__)

__all__ = [
    "check_unknown_parameters",
    "find_unknown_parameters",
]


def find_unknown_parameters(root: ConfigNode) -> list[str]:
    """
    Find values in a document that no mapping code read.

    Call this after the mapping pass over ``root`` has finished. A value
    counts as read when it, or one of its parents, was consumed by a
    parameter accessor.

    Parameters
    ----------
    root
        Root node the mapping pass started from

    Returns
    -------
    list[str]
        Paths of the unread values, in document order

    Examples
    --------
    >>> root = ConfigNode.root({"walkSpeed": 1.5, "walkSped": 1.5})
    >>> root.of("walkSpeed").summary("Walk speed.").as_double(1.4)
    1.5
    >>> find_unknown_parameters(root)
    ['walkSped']
    """
    consumed = root.catalog.consumed_paths
    unknown: list[str] = []
    _collect_unknown(root.value, root.path, consumed, unknown)
    return unknown


def _collect_unknown(
    value: Any, path: ConcretePath, consumed: frozenset, unknown: list[str]
) -> None:
    if value is None or value is MISSING or path in consumed:
        return
    if isinstance(value, Mapping):
        for key, child in value.items():
            _collect_unknown(child, (*path, key), consumed, unknown)
    elif isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _collect_unknown(child, (*path, index), consumed, unknown)
    elif path:
        unknown.append(format_path(path))


def check_unknown_parameters(root: ConfigNode, strict: bool = False) -> list[str]:
    """
    Report values in a document that no mapping code read.

    Parameters
    ----------
    root
        Root node the mapping pass started from
    strict
        Raise instead of logging a warning

    Returns
    -------
    list[str]
        Paths of the unread values

    Raises
    ------
    UnknownParametersError
        In strict mode, if any value was not read
    """
    unknown = find_unknown_parameters(root)
    if unknown and strict:
        raise UnknownParametersError(unknown, root.source)
    if unknown:
        where = f" in {root.source}" if root.source else ""
        logger.warning(
            f"Unknown configuration parameters{where}: {', '.join(unknown)}. "
            "These will be ignored."
        )
    return unknown
