"""
Route request configuration.

- modes: Street and transit modes
- preferences: The route request and its preference classes, with defaults
- route_request: Mapping of a route request object
"""

from __future__ import annotations

from tripconf.config.models.routing.preferences import RouteRequest, RoutingPreferences
from tripconf.config.models.routing.route_request import (
    load_routing_defaults,
    map_default_route_request,
    map_route_request,
)

__all__ = [
    "RouteRequest",
    "RoutingPreferences",
    "load_routing_defaults",
    "map_default_route_request",
    "map_route_request",
]
