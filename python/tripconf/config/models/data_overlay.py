"""
Configuration of the data overlay sandbox.

The data overlay adds environmental data (noise, air quality, ...) from a
gridded data file to the street network. The build configuration names the
file and its variables; route requests supply penalties and thresholds by
parameter name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tripconf.config.features import Feature
from tripconf.config.node import ConfigNode
from tripconf.config.parameters import REQUIRED
from tripconf.config.version import V2_1

__all__ = [
    "DataOverlayConfig",
    "DataOverlayParameters",
    "IndexVariable",
    "TimeFormat",
    "map_data_overlay_config",
    "map_data_overlay_parameters",
]


class TimeFormat(Enum):
    """Unit of the time variable of the data file."""

    MS_EPOCH = "ms-epoch"
    SECONDS = "seconds"
    HOURS = "hours"


@dataclass
class IndexVariable:
    """A variable of the data file exposed to route requests."""

    name: str
    display_name: str
    variable: str


@dataclass
class DataOverlayConfig:
    """Location and layout of the data overlay file."""

    file_name: str
    latitude_variable: str = "lat"
    longitude_variable: str = "lon"
    time_variable: str = "time"
    time_format: TimeFormat = TimeFormat.HOURS
    index_variables: list[IndexVariable] = field(default_factory=list)


@dataclass
class DataOverlayParameters:
    """Penalties and thresholds of a route request, by overlay parameter name."""

    values: dict[str, float] = field(default_factory=dict)


def map_data_overlay_config(c: ConfigNode) -> DataOverlayConfig:
    """Map the build side ``dataOverlay`` object ``c``."""
    config = DataOverlayConfig(
        file_name=c.of("fileName")
        .since(V2_1)
        .summary("Path of the generic data file, relative to the graph directory.")
        .feature(Feature.DATA_OVERLAY)
        .as_string(REQUIRED),
        latitude_variable=c.of("latitudeVariable")
        .since(V2_1)
        .summary("Name of the latitude variable of the data file.")
        .feature(Feature.DATA_OVERLAY)
        .as_string("lat"),
        longitude_variable=c.of("longitudeVariable")
        .since(V2_1)
        .summary("Name of the longitude variable of the data file.")
        .feature(Feature.DATA_OVERLAY)
        .as_string("lon"),
        time_variable=c.of("timeVariable")
        .since(V2_1)
        .summary("Name of the time variable of the data file.")
        .feature(Feature.DATA_OVERLAY)
        .as_string("time"),
        time_format=c.of("timeFormat")
        .since(V2_1)
        .summary("Unit of the values of the time variable.")
        .feature(Feature.DATA_OVERLAY)
        .as_enum(TimeFormat.HOURS),
    )

    for v in (
        c.of("indexVariables")
        .since(V2_1)
        .summary("The variables of the data file that may be used for routing.")
        .feature(Feature.DATA_OVERLAY)
        .as_object_list()
    ):
        config.index_variables.append(
            IndexVariable(
                name=v.of("name")
                .since(V2_1)
                .summary("Name used for the variable in route requests.")
                .as_string(),
                display_name=v.of("displayName")
                .since(V2_1)
                .summary("Human readable name of the variable.")
                .as_string(""),
                variable=v.of("variable")
                .since(V2_1)
                .summary("Name of the variable in the data file.")
                .as_string(),
            )
        )
    return config


def map_data_overlay_parameters(c: ConfigNode) -> DataOverlayParameters:
    """
    Map the request side ``dataOverlay`` object ``c``.

    Every key of the object is a parameter name of the overlay (for example
    ``"noise_penalty"``) with a number as value.
    """
    values = {}
    for key in c.keys():
        values[key] = (
            c.of(key)
            .since(V2_1)
            .summary(f"Penalty or threshold of the data overlay parameter '{key}'.")
            .feature(Feature.DATA_OVERLAY)
            .as_double()
        )
    return DataOverlayParameters(values)
