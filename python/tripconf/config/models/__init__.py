"""
Mapping of the trip planner configuration files.

This package contains the mapping code for each configuration area:
- build: Graph build configuration (``build-config.json``)
- routing: Route requests and routing preferences
- booking: Booking rules of flexible transit
- data_overlay: The data overlay sandbox
"""

from __future__ import annotations

from tripconf.config.models.booking import BookingInfo, map_booking_info
from tripconf.config.models.build import BuildConfig, load_build_config, map_build_config
from tripconf.config.models.routing import (
    RouteRequest,
    load_routing_defaults,
    map_default_route_request,
    map_route_request,
)

__all__ = [
    "BookingInfo",
    "BuildConfig",
    "RouteRequest",
    "load_build_config",
    "load_routing_defaults",
    "map_booking_info",
    "map_build_config",
    "map_default_route_request",
    "map_route_request",
]
