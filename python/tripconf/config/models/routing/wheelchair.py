"""Mapping of the ``wheelchairAccessibility`` object of a route request."""

from __future__ import annotations

from tripconf.config.node import ConfigNode
from tripconf.config.version import NA, V2_2

from .preferences import AccessibilityPreferences, WheelchairPreferences

__all__ = [
    "map_wheelchair_enabled",
    "map_wheelchair_preferences",
]


def _accessibility_node(c: ConfigNode, name: str) -> ConfigNode:
    return (
        c.of(name)
        .since(V2_2)
        .summary("See [Wheelchair Accessibility](Accessibility.md)")
        .as_object()
    )


def map_wheelchair_enabled(c: ConfigNode, name: str) -> bool:
    """Read whether a wheelchair accessible trip is requested."""
    return (
        _accessibility_node(c, name)
        .of("enabled")
        .since(NA)
        .summary("Enable wheelchair accessibility.")
        .as_boolean(False)
    )


def map_wheelchair_preferences(
    c: ConfigNode, name: str, target: WheelchairPreferences
) -> None:
    """Map the wheelchair costs and limits into ``target``."""
    w = _accessibility_node(c, name)
    dft = WheelchairPreferences()

    target.trip = _map_accessibility(
        w,
        "trip",
        "Configuration for when to use inaccessible trips.",
        dft.trip,
    )
    target.stop = _map_accessibility(
        w,
        "stop",
        "Configuration for when to use inaccessible stops.",
        dft.stop,
    )
    target.elevator = _map_accessibility(
        w,
        "elevator",
        "Configuration for when to use inaccessible elevators.",
        dft.elevator,
    )
    target.inaccessible_street_reluctance = (
        w.of("inaccessibleStreetReluctance")
        .since(V2_2)
        .summary(
            "The factor to multiply the cost of traversing a street edge that is not "
            "wheelchair-accessible."
        )
        .as_double(dft.inaccessible_street_reluctance)
    )
    target.max_slope = (
        w.of("maxSlope")
        .since(NA)
        .summary("The maximum slope as a fraction of 1.")
        .description("9 percent would be `0.09`")
        .as_double(dft.max_slope)
    )
    target.slope_exceeded_reluctance = (
        w.of("slopeExceededReluctance")
        .since(V2_2)
        .summary("How much streets with high slope should be avoided.")
        .description(
            """
            What factor should be given to street edges, which are over the
            max slope. The penalty is not static but scales with how much you
            exceed the maximum slope. Set to negative to disable routing on
            too steep edges.
            """
        )
        .as_double(dft.slope_exceeded_reluctance)
    )
    target.stairs_reluctance = (
        w.of("stairsReluctance")
        .since(V2_2)
        .summary("How much stairs should be avoided.")
        .description(
            """
            Stairs are not completely excluded for wheelchair users but
            severely penalised by default. A stair is not wheelchair
            accessible, so this value is multiplied with the inaccessible
            street reluctance.
            """
        )
        .as_double(dft.stairs_reluctance)
    )


def _map_accessibility(
    w: ConfigNode, name: str, summary: str, dft: AccessibilityPreferences
) -> AccessibilityPreferences:
    a = w.of(name).since(V2_2).summary(summary).as_object()
    only_accessible = (
        a.of("onlyConsiderAccessible")
        .since(V2_2)
        .summary(
            "Whether to only use this entity if it is explicitly marked as "
            "wheelchair accessible."
        )
        .as_boolean(dft.only_consider_accessible)
    )
    unknown_cost = (
        a.of("unknownCost")
        .since(V2_2)
        .summary(
            "The cost to add when traversing an entity with unknown accessibility "
            "information."
        )
        .as_int(dft.unknown_cost)
    )
    inaccessible_cost = (
        a.of("inaccessibleCost")
        .since(V2_2)
        .summary("The cost to add when traversing an entity which is known to be inaccessible.")
        .as_int(dft.inaccessible_cost)
    )
    return AccessibilityPreferences(only_accessible, unknown_cost, inaccessible_cost)
