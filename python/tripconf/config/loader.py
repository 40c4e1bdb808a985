"""
Reading configuration documents from disk.

A document is parsed into plain ``dict``/``list``/scalar values and nothing
more: turning it into typed values is the job of the mapping modules in
:mod:`tripconf.config.models`. Deployments usually keep a shared base file
next to a small local override, so several files can be layered into one
document with :func:`load_config_layers`.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, BinaryIO

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "deep_merge",
    "load_config",
    "load_config_layers",
]

_PARSERS: dict[str, Callable[[BinaryIO], Any]] = {
    ".json": json.load,
    ".toml": tomllib.load,
}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Combine two documents, ``override`` winning on conflicts.

    Objects present on both sides are combined key by key. Anything else,
    arrays included, is taken from ``override`` as a whole, so a layer can
    replace the list of ``transferRequests`` but not append to it.
    Neither argument is modified.

    Examples
    --------
    >>> base = {"walkSpeed": 1.33, "islandPruning": {"islandWithStopsMaxSize": 2}}
    >>> deep_merge(base, {"islandPruning": {"islandWithStopsMaxSize": 5}})
    {'walkSpeed': 1.33, 'islandPruning': {'islandWithStopsMaxSize': 5}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Parse one configuration file.

    Parameters
    ----------
    path
        A ``.json`` or ``.toml`` file.

    Returns
    -------
    dict[str, Any]
        The parsed document.

    Raises
    ------
    ConfigError
        If the suffix is not supported, the file is malformed or its top
        level is not an object.
    """
    path = Path(path)
    parse = _PARSERS.get(path.suffix.lower())
    if parse is None:
        msg = f"Unsupported configuration file type: {path}"
        raise ConfigError(msg)

    with path.open("rb") as f:
        try:
            document = parse(f)
        except (ValueError, tomllib.TOMLDecodeError) as err:
            msg = f"Unable to parse {path}: {err}"
            raise ConfigError(msg) from err

    if not isinstance(document, dict):
        msg = f"The top level of {path} must be an object"
        raise ConfigError(msg)

    logger.info(f"Loaded configuration from {path}")
    return document


def load_config_layers(*paths: str | Path) -> dict[str, Any]:
    """
    Parse several configuration files and merge them in order.

    Each file is merged over the result of the files before it with
    :func:`deep_merge`. Calling this without paths gives an empty document,
    which maps to the defaults.

    Examples
    --------
    >>> document = load_config_layers("router-config.json", "local.toml")
    """
    document: dict[str, Any] = {}
    for path in paths:
        document = deep_merge(document, load_config(path))
    if len(paths) > 1:
        logger.debug(f"Merged {len(paths)} configuration layers")
    return document
