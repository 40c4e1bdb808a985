"""
Mapping of the graph build configuration (``build-config.json``).

Example:
    >>> config, catalog = load_build_config({"maxAreaNodes": 250})
    >>> config.max_area_nodes
    250
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from tripconf.config.catalog import ParameterCatalog
from tripconf.config.features import Feature, FeatureSet
from tripconf.config.node import ConfigNode
from tripconf.config.validation import check_unknown_parameters
from tripconf.config.version import NA, V2_1, V2_2, V2_3

from .data_overlay import DataOverlayConfig, map_data_overlay_config
from .routing.preferences import RouteRequest
from .routing.route_request import map_route_request

logger = logging.getLogger(__name__)

__all__ = [
    "BuildConfig",
    "IslandPruningConfig",
    "load_build_config",
    "map_build_config",
]


@dataclass
class IslandPruningConfig:
    """Limits used when removing small disconnected parts of the street network."""

    island_with_stops_max_size: int = 2
    island_without_stops_max_size: int = 10
    adaptive_pruning_factor: float = 50.0
    adaptive_pruning_distance: int = 250


@dataclass
class BuildConfig:
    """
    Parameters of a graph build.

    Attributes
    ----------
    config_version
        Deployment version of the build configuration, if set
    data_import_report
        Whether to write an HTML report of the data import issues
    max_data_import_issues_per_file
        Maximum number of issues in each file of the report
    embed_router_config
        Whether to store the router configuration in the graph
    area_visibility
        Whether to compute visibility lines for walkable areas
    max_area_nodes
        Maximum number of nodes of an area for which visibility is computed
    boarding_location_tags
        OSM tags used to link stops to boarding locations
    subway_access_time
        Minutes needed to go from the street to a subway platform
    max_transfer_duration
        Longest walk between two stops considered a transfer
    island_pruning
        Street network island pruning limits
    data_overlay
        Data overlay file, if the feature is enabled and configured
    transfer_requests
        Route requests used to precompute transfers
    """

    config_version: str | None = None
    data_import_report: bool = False
    max_data_import_issues_per_file: int = 1000
    embed_router_config: bool = True
    area_visibility: bool = False
    max_area_nodes: int = 500
    boarding_location_tags: frozenset[str] = frozenset({"ref"})
    subway_access_time: float = 2.0
    max_transfer_duration: timedelta = timedelta(minutes=30)
    island_pruning: IslandPruningConfig = field(default_factory=IslandPruningConfig)
    data_overlay: DataOverlayConfig | None = None
    transfer_requests: list[RouteRequest] = field(
        default_factory=lambda: [RouteRequest()]
    )


def map_build_config(root: ConfigNode, features: FeatureSet | None = None) -> BuildConfig:
    """
    Map a build configuration document.

    Parameters
    ----------
    root
        Root of the build configuration
    features
        Enabled features; ``dataOverlay`` is only read when
        :attr:`Feature.DATA_OVERLAY` is on

    Returns
    -------
    BuildConfig
        The mapped configuration
    """
    if features is None:
        features = FeatureSet.none()
    dft = BuildConfig()
    config = BuildConfig()

    config.config_version = (
        root.of("configVersion")
        .since(V2_1)
        .summary("Deployment version of the *build-config.json*.")
        .description(
            """
            The config-version is a parameter which each deployment can set
            to track the version of the configuration. It is logged at startup
            and shown in the server info, but otherwise not used.
            """
        )
        .as_string(dft.config_version)
    )
    config.data_import_report = (
        root.of("dataImportReport")
        .since(NA)
        .summary("Generate nice HTML report of Graph errors/warnings")
        .description("The reports are stored in the same location as the graph.")
        .as_boolean(dft.data_import_report)
    )
    config.max_data_import_issues_per_file = (
        root.of("maxDataImportIssuesPerFile")
        .since(NA)
        .summary("When to split the import report.")
        .description(
            """
            If the number of issues is larger then `maxDataImportIssuesPerFile`,
            then the files will be split in multiple files. Since browsers have
            problems opening large HTML files.
            """
        )
        .as_int(dft.max_data_import_issues_per_file)
    )
    config.embed_router_config = (
        root.of("embedRouterConfig")
        .since(NA)
        .summary(
            "Embed the Router config in the graph, which allows it to be sent to "
            "a server fully configured over the wire."
        )
        .as_boolean(dft.embed_router_config)
    )
    config.area_visibility = (
        root.of("areaVisibility")
        .since(NA)
        .summary("Perform visibility calculations.")
        .description(
            """
            If this is `true` visibility lines are computed for walkable
            areas, so that routes can cross them in straight lines.
            """
        )
        .as_boolean(dft.area_visibility)
    )
    config.max_area_nodes = (
        root.of("maxAreaNodes")
        .since(V2_1)
        .summary(
            "Visibility calculations for an area will not be done if there are "
            "more nodes than this limit."
        )
        .as_int(dft.max_area_nodes)
    )
    config.boarding_location_tags = (
        root.of("boardingLocationTags")
        .since(V2_2)
        .summary(
            "What OSM tags should be looked on for the source of matching stops "
            "to platforms and stops."
        )
        .as_string_set(dft.boarding_location_tags)
    )
    config.subway_access_time = (
        root.of("subwayAccessTime")
        .since(NA)
        .summary(
            "Minutes necessary to reach stops served by trips on routes of "
            "route_type=1 (subway) from the street."
        )
        .as_double(dft.subway_access_time)
    )
    config.max_transfer_duration = (
        root.of("maxTransferDuration")
        .since(V2_1)
        .summary(
            "Transfers up to this duration with the default walk speed value will "
            "be pre-calculated and included in the Graph."
        )
        .as_duration(dft.max_transfer_duration)
    )
    config.island_pruning = _map_island_pruning(
        root.of("islandPruning")
        .since(V2_3)
        .summary("Settings for fixing street graph connectivity errors")
        .as_object()
    )
    if features.is_on(Feature.DATA_OVERLAY):
        overlay = (
            root.of("dataOverlay")
            .since(V2_1)
            .summary("Config for the DataOverlay Sandbox module")
            .feature(Feature.DATA_OVERLAY)
            .as_object()
        )
        if not overlay.is_empty():
            config.data_overlay = map_data_overlay_config(overlay)

    transfer_requests = (
        root.of("transferRequests")
        .since(NA)
        .summary("Routing requests to use for pre-calculating stop-to-stop transfers.")
        .description(
            """
            It will use the street network if OSM data has already been loaded
            into the graph. Otherwise it will use straight-line distance
            between stops.
            """
        )
        .as_object_list()
    )
    if transfer_requests:
        config.transfer_requests = [map_route_request(r, features) for r in transfer_requests]
    return config


def _map_island_pruning(c: ConfigNode) -> IslandPruningConfig:
    dft = IslandPruningConfig()
    return IslandPruningConfig(
        island_with_stops_max_size=c.of("islandWithStopsMaxSize")
        .since(V2_3)
        .summary("When a graph island with stops in it should be pruned.")
        .description(
            """
            This field indicates the pruning threshold for islands with stops.
            Any such island under this edge count will be pruned.
            """
        )
        .as_int(dft.island_with_stops_max_size),
        island_without_stops_max_size=c.of("islandWithoutStopsMaxSize")
        .since(V2_3)
        .summary("When a graph island without stops should be pruned.")
        .description(
            """
            This field indicates the pruning threshold for islands without
            stops. Any such island under this edge count will be pruned.
            """
        )
        .as_int(dft.island_without_stops_max_size),
        adaptive_pruning_factor=c.of("adaptivePruningFactor")
        .since(V2_3)
        .summary("Defines how much pruning thresholds grow maximally by distance.")
        .as_double(dft.adaptive_pruning_factor),
        adaptive_pruning_distance=c.of("adaptivePruningDistance")
        .since(V2_3)
        .summary("Search distance for analyzing islands in pruning.")
        .as_int(dft.adaptive_pruning_distance),
    )


def load_build_config(
    document: dict[str, Any],
    features: FeatureSet | None = None,
    strict: bool = False,
    source: str | None = None,
) -> tuple[BuildConfig, ParameterCatalog]:
    """
    Map a build configuration document and collect its parameters.

    Each call uses a new catalog, so a failed call leaves nothing behind.

    Parameters
    ----------
    document
        Parsed build configuration
    features
        Enabled features
    strict
        Raise if the document holds values that were not read, instead of
        logging a warning
    source
        Name of the document, used in messages

    Returns
    -------
    tuple[BuildConfig, ParameterCatalog]
        The build configuration and the parameters read

    Raises
    ------
    ValidationError
        If a value has the wrong type, a required value is missing, or (in
        strict mode) an unknown value is present
    """
    catalog = ParameterCatalog()
    root = ConfigNode.root(document, catalog, source)
    logger.debug(f"Mapping build configuration {source or ''}".rstrip())
    config = map_build_config(root, features)
    check_unknown_parameters(root, strict=strict)
    return config, catalog
