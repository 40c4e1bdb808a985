"""Mapping of the ``itineraryFilters`` object of a route request."""

from __future__ import annotations

import logging

from tripconf.config.node import ConfigNode
from tripconf.config.version import NA, V2_1, V2_2

from .preferences import ItineraryFilterPreferences

logger = logging.getLogger(__name__)

__all__ = ["map_itinerary_filter_preferences"]

# Keys of earlier releases that are no longer read
_LEGACY_KEYS = ("minSafeTransferTimeFactor", "groupSimilarityKeepNumOfItineraries")


def map_itinerary_filter_preferences(
    name: str, c: ConfigNode, target: ItineraryFilterPreferences
) -> None:
    """
    Map the itinerary filters object ``name`` of request ``c`` into ``target``.

    Keys used by earlier releases are logged and otherwise ignored.
    """
    f = (
        c.of(name)
        .since(NA)
        .summary(
            "Configure itinerary filters that may modify itineraries, sort them, "
            "and filter away less preferable results."
        )
        .description(
            """
            The purpose of the itinerary filter chain is to post process the
            result returned by the routing search. The filters may modify
            itineraries, sort them, and filter away less preferable results.
            """
        )
        .as_object()
    )
    for key in _LEGACY_KEYS:
        legacy = f.child(key)
        if not legacy.is_missing():
            logger.warning(
                f"Itinerary filter parameter '{legacy.path_text}' is no longer "
                "supported and is ignored."
            )
            legacy.mark_consumed()

    dft = ItineraryFilterPreferences()
    target.debug = (
        f.of("debug")
        .since(NA)
        .summary(
            "Enable this to attach a system notice to itineraries instead of "
            "removing them."
        )
        .description(
            """
            This is very convenient when tuning the filters, as it lets you see
            which itineraries were dropped and why.
            """
        )
        .as_boolean(dft.debug)
    )
    target.group_similarity_keep_one = (
        f.of("groupSimilarityKeepOne")
        .since(V2_1)
        .summary(
            "Pick ONE itinerary from each group after putting itineraries that "
            "are 85% similar together."
        )
        .as_double(dft.group_similarity_keep_one)
    )
    target.group_similarity_keep_three = (
        f.of("groupSimilarityKeepThree")
        .since(V2_1)
        .summary(
            "Reduce the number of itineraries to three itineraries by reducing "
            "each group of itineraries grouped by 68% similarity."
        )
        .as_double(dft.group_similarity_keep_three)
    )
    target.grouped_other_than_same_legs_max_cost_multiplier = (
        f.of("groupedOtherThanSameLegsMaxCostMultiplier")
        .since(V2_1)
        .summary(
            "Filter grouped itineraries, where the non-grouped legs are more "
            "expensive than in the lowest cost one."
        )
        .as_double(dft.grouped_other_than_same_legs_max_cost_multiplier)
    )
    target.transit_generalized_cost_limit = (
        f.of("transitGeneralizedCostLimit")
        .since(V2_1)
        .summary(
            "A relative limit for the generalized-cost for transit itineraries."
        )
        .description(
            """
            The filter compares all itineraries against every other itinerary.
            If the generalized-cost plus a `transitGeneralizedCostLimit` is
            higher than the other generalized-cost, then the itinerary is
            dropped.
            """
        )
        .as_linear_function(dft.transit_generalized_cost_limit)
    )
    target.non_transit_generalized_cost_limit = (
        f.of("nonTransitGeneralizedCostLimit")
        .since(V2_1)
        .summary(
            "The function define a max-limit for generalized-cost for non-transit "
            "itineraries."
        )
        .as_linear_function(dft.non_transit_generalized_cost_limit)
    )
    target.filter_itineraries_with_same_first_or_last_trip = (
        f.of("filterItinerariesWithSameFirstOrLastTrip")
        .since(V2_2)
        .summary(
            "If more than one itinerary begins or ends with same trip, filter "
            "out one of those itineraries so that only one remains."
        )
        .as_boolean(dft.filter_itineraries_with_same_first_or_last_trip)
    )
    target.accessibility_score = (
        f.of("accessibilityScore")
        .since(V2_2)
        .summary(
            "An experimental feature contributed by IBI which adds a sandbox "
            "accessibility *score* between 0 and 1 for each leg and itinerary."
        )
        .as_boolean(dft.accessibility_score)
    )
    target.remove_itineraries_with_same_routes_and_stops = (
        f.of("removeItinerariesWithSameRoutesAndStops")
        .since(V2_2)
        .summary(
            "Set to true if you want to list only the first itinerary which goes "
            "through the same stops and routes."
        )
        .as_boolean(dft.remove_itineraries_with_same_routes_and_stops)
    )
