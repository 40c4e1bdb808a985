"""
tripconf Configuration Layer.

This module provides typed, self-documenting access to configuration
documents, supporting:
- JSON and TOML config files, optionally layered (defaults -> overrides)
- Typed parameter accessors that record metadata for every parameter read
- Markdown reference documentation generated from that metadata
- Snapshot checks keeping the committed documentation up to date

Example:
    >>> from tripconf.config import NA, ConfigNode, render_summary_table
    >>> root = ConfigNode.root({"walkSpeed": 1.5})
    >>> root.of("walkSpeed").since(NA).summary("Walking speed.").as_double(1.4)
    1.5
    >>> print(render_summary_table(root.catalog), end="")
    | Config Parameter | Type | Default | Summary | Since |
    |------------------|------|---------|---------|-------|
    | `walkSpeed` | `double` | `1.4` | Walking speed. | na |
"""

from __future__ import annotations

from .catalog import CatalogEntry, ParameterCatalog
from .docs import (
    SkipNodes,
    export_parameter_json,
    render_detail_list,
    render_summary_table,
)
from .exceptions import (
    ConfigError,
    DocumentationDriftError,
    DuplicateParameterError,
    MissingParameterError,
    ParameterDefinitionError,
    ParameterTypeError,
    TemplateError,
    UnknownParametersError,
    ValidationError,
)
from .features import Feature, FeatureSet, map_feature_set
from .loader import deep_merge, load_config, load_config_layers
from .node import ConfigNode
from .parameters import (
    NO_DEFAULT,
    REQUIRED,
    ParameterAccessor,
    ParameterRecord,
    ValueType,
)
from .snapshot import (
    check_documentation,
    render_document,
    replace_parameters_details,
    replace_parameters_table,
    verify_snapshot,
)
from .types import DurationForEnum, FeedScopedId, LinearFunction, Locale
from .validation import (
    check_unknown_parameters,
    find_unknown_parameters,
)
from .version import NA, ConfigVersion

__all__ = [
    "NA",
    "NO_DEFAULT",
    "REQUIRED",
    "CatalogEntry",
    "ConfigError",
    "ConfigNode",
    "ConfigVersion",
    "DocumentationDriftError",
    "DuplicateParameterError",
    "DurationForEnum",
    "Feature",
    "FeatureSet",
    "FeedScopedId",
    "LinearFunction",
    "Locale",
    "MissingParameterError",
    "ParameterAccessor",
    "ParameterCatalog",
    "ParameterDefinitionError",
    "ParameterRecord",
    "ParameterTypeError",
    "SkipNodes",
    "TemplateError",
    "UnknownParametersError",
    "ValidationError",
    "ValueType",
    "check_documentation",
    "check_unknown_parameters",
    "deep_merge",
    "export_parameter_json",
    "find_unknown_parameters",
    "load_config",
    "load_config_layers",
    "map_feature_set",
    "render_detail_list",
    "render_document",
    "render_summary_table",
    "replace_parameters_details",
    "replace_parameters_table",
    "verify_snapshot",
]
