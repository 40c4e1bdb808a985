"""
Mapping of route request configuration.

A route request object appears as ``routingDefaults`` in the router
configuration and as the elements of ``transferRequests`` in the build
configuration. The same mapping code reads both, so both are documented from
one place.
"""

from __future__ import annotations

import logging
from typing import Any

from tripconf.config.catalog import ParameterCatalog
from tripconf.config.features import Feature, FeatureSet
from tripconf.config.node import ConfigNode
from tripconf.config.parameters import ParameterAccessor
from tripconf.config.types import DurationForEnum
from tripconf.config.validation import check_unknown_parameters
from tripconf.config.version import NA, V2_0, V2_1, V2_2

from ..data_overlay import map_data_overlay_parameters
from .itinerary_filters import map_itinerary_filter_preferences
from .modes import RequestModes, StreetMode, TransitMode, parse_qualified_modes
from .preferences import (
    BikePreferences,
    CarPreferences,
    RouteRequest,
    RoutingPreferences,
    StreetPreferences,
    SystemPreferences,
    TransitPreferences,
    TriangleFactors,
    VehicleParkingPreferences,
    VehicleRentalPreferences,
    WalkPreferences,
)
from .transfer import map_transfer_preferences
from .wheelchair import map_wheelchair_enabled, map_wheelchair_preferences

logger = logging.getLogger(__name__)

__all__ = [
    "load_routing_defaults",
    "map_default_route_request",
    "map_route_request",
]

WHEELCHAIR_ACCESSIBILITY = "wheelchairAccessibility"


def map_default_route_request(
    root: ConfigNode,
    name: str = "routingDefaults",
    features: FeatureSet | None = None,
) -> RouteRequest:
    """
    Map the default route request object ``name`` of ``root``.

    Parameters
    ----------
    root
        Node holding the route request object
    name
        Key of the route request object
    features
        Enabled features, none if omitted

    Returns
    -------
    RouteRequest
        The mapped request; the defaults if the object is absent
    """
    c = (
        root.of(name)
        .since(V2_0)
        .summary("The default parameters for the routing query.")
        .description("Most of these are overridable through the various API endpoints.")
        .as_object()
    )
    return map_route_request(c, features)


def map_route_request(c: ConfigNode, features: FeatureSet | None = None) -> RouteRequest:
    """
    Map one route request object.

    Every parameter is registered even if ``c`` is empty or missing, so
    passing an empty document documents the complete request.

    Parameters
    ----------
    c
        The route request object
    features
        Enabled features, none if omitted

    Returns
    -------
    RouteRequest
        A new request with the configured values and defaults elsewhere
    """
    if features is None:
        features = FeatureSet.none()
    logger.debug(f"Mapping route request at '{c.path_text or '<root>'}'")

    dft = RouteRequest()
    request = RouteRequest()
    rental = request.journey.rental
    parking = request.journey.parking
    transit = request.journey.transit

    rental.allowed_networks = (
        c.of("allowedVehicleRentalNetworks")
        .since(NA)
        .summary(
            "The vehicle rental networks which may be used. If empty all networks "
            "may be used."
        )
        .as_string_set(dft.journey.rental.allowed_networks)
    )
    request.arrive_by = (
        c.of("arriveBy")
        .since(NA)
        .summary("Whether the trip should depart or arrive at the specified date and time.")
        .as_boolean(dft.arrive_by)
    )
    parking.banned_tags = (
        c.of("bannedVehicleParkingTags")
        .since(NA)
        .summary(
            "Tags with which a vehicle parking will not be used. If empty, no tags "
            "are banned."
        )
        .as_string_set(dft.journey.parking.banned_tags)
    )
    rental.banned_networks = (
        c.of("bannedVehicleRentalNetworks")
        .since(NA)
        .summary(
            "The vehicle rental networks which may not be used. If empty, no "
            "networks are banned."
        )
        .as_string_set(dft.journey.rental.banned_networks)
    )
    rental.allow_arriving_in_rented_vehicle_at_destination = (
        c.of("allowKeepingRentedBicycleAtDestination")
        .since(NA)
        .summary(
            "If a vehicle should be allowed to be kept at the end of a "
            "station-based rental."
        )
        .as_boolean(dft.journey.rental.allow_arriving_in_rented_vehicle_at_destination)
    )
    request.locale = (
        c.of("locale")
        .since(NA)
        .summary("The locale used for texts in the response, e.g. `en_US`.")
        .as_locale(dft.locale)
    )
    request.journey.modes = (
        c.of("modes")
        .since(NA)
        .summary(
            "The set of access/egress/direct/transit modes to be used for the "
            "route search."
        )
        .as_custom_string_type(RequestModes.default(), "TRANSIT,WALK", parse_qualified_modes)
    )
    request.num_itineraries = (
        c.of("numItineraries")
        .since(NA)
        .summary("The maximum number of itineraries to return.")
        .as_int(dft.num_itineraries)
    )
    request.search_window = (
        c.of("searchWindow")
        .since(NA)
        .summary("The duration of the search-window.")
        .description(
            """
            This is the time/duration from the earliest-departure-time (EDT) to
            the latest-departure-time (LDT). In case of a reverse search it
            will be the time from earliest to latest arrival time (LAT - EAT).

            All optimal travels that depart within the search window are
            guaranteed to be found.

            This is normally dynamically calculated by the server. Leave it
            unset to get a suitable value for each search, or use `0s` to do
            one search iteration. In a small to medium size operation you may
            use a fixed value, like 60 minutes. If you have a mixture of high
            frequency city routes and infrequent long distance journeys, the
            best option is normally to use the dynamic assignment.

            There is no need to set this when going to the next/previous page.
            The server will increase/decrease the search-window when paging to
            match the requested number of itineraries.
            """
        )
        .as_duration(dft.search_window)
    )
    parking.required_tags = (
        c.of("requiredVehicleParkingTags")
        .since(NA)
        .summary(
            "Tags which are required to use a vehicle parking. If empty, no tags "
            "are required."
        )
        .as_string_set(dft.journey.parking.required_tags)
    )
    request.wheelchair = map_wheelchair_enabled(c, WHEELCHAIR_ACCESSIBILITY)

    unpreferred = (
        c.of("unpreferred")
        .since(V2_2)
        .summary(
            "Parameters listing authorities or lines that preferably should not "
            "be used in trip patters."
        )
        .description(
            """
            A cost is applied to boarding nonpreferred authorities or lines.

            The routing engine will add extra penalty - on the *unpreferred*
            routes and/or agencies using a cost function. The cost function
            (`unpreferredCost`) is defined as a linear function of the form
            `A + B x`, where `A` is a fixed cost (in seconds) and `B` is
            reluctance multiplier for transit leg travel time `x` (in seconds).
            """
        )
        .as_object()
    )
    transit.unpreferred_agencies = (
        unpreferred.of("agencies")
        .since(V2_2)
        .summary("The ids of the agencies that incur an extra cost when being used.")
        .description("Format: `FeedId:AgencyId`")
        .as_feed_scoped_ids(dft.journey.transit.unpreferred_agencies)
    )
    transit.unpreferred_routes = (
        unpreferred.of("routes")
        .since(V2_2)
        .summary("The ids of the routes that incur an extra cost when being used.")
        .description("Format: `FeedId:RouteId`")
        .as_feed_scoped_ids(dft.journey.transit.unpreferred_routes)
    )

    _map_preferences(c, request.preferences, features)
    return request


def _map_preferences(
    c: ConfigNode, preferences: RoutingPreferences, features: FeatureSet
) -> None:
    _map_transit_preferences(c, preferences.transit)
    _map_bike_preferences(c, preferences.bike)
    _map_rental_preferences(c, preferences.rental)
    _map_street_preferences(c, preferences.street)
    _map_car_preferences(c, preferences.car)
    _map_system_preferences(c, preferences.system, features)
    map_transfer_preferences(c, preferences.transfer)
    _map_parking_preferences(c, preferences.parking)
    _map_walk_preferences(c, preferences.walk)
    map_wheelchair_preferences(c, WHEELCHAIR_ACCESSIBILITY, preferences.wheelchair)
    map_itinerary_filter_preferences("itineraryFilters", c, preferences.itinerary_filter)


def _map_transit_preferences(c: ConfigNode, target: TransitPreferences) -> None:
    dft = TransitPreferences()
    target.alight_slack = (
        c.of("alightSlack")
        .since(NA)
        .summary("The minimum extra time after exiting a public transport vehicle.")
        .description(
            "The slack is added to the time when going from the transit vehicle "
            "to the stop."
        )
        .as_duration(
            dft.alight_slack.default,
            per_key=c.of("alightSlackForMode")
            .since(V2_0)
            .summary("How much time alighting a vehicle takes for each given mode.")
            .description(
                "Sometimes there is a need to configure a longer alighting times "
                "for specific modes, such as airplanes or ferries."
            ),
            key_type=TransitMode,
        )
    )
    target.board_slack = (
        c.of("boardSlack")
        .since(NA)
        .summary(
            "The boardSlack is the minimum extra time to board a public transport "
            "vehicle."
        )
        .description(
            """
            The board time is added to the time when going from the stop
            (offboard) to onboard a transit vehicle.

            This is the same as the `transferSlack`, except that this also
            apply to the first transit leg in the trip. This is the default
            value used, if not overridden by the `boardSlackForMode`.
            """
        )
        .as_duration(
            dft.board_slack.default,
            per_key=c.of("boardSlackForMode")
            .since(V2_0)
            .summary("How much time boarding a vehicle takes for each given mode.")
            .description(
                """
                Sometimes there is a need to configure a board times for
                specific modes, such as airplanes or ferries, where the
                check-in process needs to be done in good time before ride.
                """
            ),
            key_type=TransitMode,
        )
    )
    target.ignore_realtime_updates = (
        c.of("ignoreRealtimeUpdates")
        .since(NA)
        .summary("When true, realtime updates are ignored during this search.")
        .as_boolean(dft.ignore_realtime_updates)
    )
    target.other_than_preferred_routes_penalty = (
        c.of("otherThanPreferredRoutesPenalty")
        .since(NA)
        .summary(
            "Penalty added for using every route that is not preferred if user "
            "set any route as preferred."
        )
        .description(
            "We return number of seconds that we are willing to wait for preferred route."
        )
        .as_int(dft.other_than_preferred_routes_penalty)
    )
    target.reluctance_for_mode = (
        c.of("transitReluctanceForMode")
        .since(NA)
        .summary("Transit reluctance for a given transport mode")
        .as_enum_map(TransitMode, float)
    )
    target.unpreferred_cost = (
        c.of("unpreferredCost")
        .since(V2_2)
        .summary("A cost function used to calculate penalty for an unpreferred route.")
        .description(
            """
            Function should return number of seconds that we are willing to wait
            for preferred route or for an unpreferred agency's departure. For
            example, `600 + 2.0 x`
            """
        )
        .as_linear_function(dft.unpreferred_cost)
    )


def _map_bike_preferences(c: ConfigNode, target: BikePreferences) -> None:
    dft = BikePreferences()
    target.speed = (
        c.of("bikeSpeed")
        .since(NA)
        .summary("Max bike speed along streets, in meters per second")
        .as_double(dft.speed)
    )
    target.reluctance = (
        c.of("bikeReluctance")
        .since(NA)
        .summary(
            "A multiplier for how bad biking is, compared to being in transit for "
            "equal lengths of time."
        )
        .as_double(dft.reluctance)
    )
    target.board_cost = (
        c.of("bikeBoardCost")
        .since(NA)
        .summary("Prevents unnecessary transfers by adding a cost for boarding a vehicle.")
        .description(
            "This is the cost that is used when boarding while cycling. "
            "This is usually higher that walkBoardCost."
        )
        .as_int(dft.board_cost)
    )
    target.park_time = (
        c.of("bikeParkTime").since(NA).summary("Time to park a bike.").as_int(dft.park_time)
    )
    target.park_cost = (
        c.of("bikeParkCost").since(NA).summary("Cost to park a bike.").as_int(dft.park_cost)
    )
    target.walking_speed = (
        c.of("bikeWalkingSpeed")
        .since(NA)
        .summary(
            "The user's bike walking speed in meters/second. Defaults to "
            "approximately 3 MPH."
        )
        .as_double(dft.walking_speed)
    )
    target.walking_reluctance = (
        c.of("bikeWalkingReluctance")
        .since(NA)
        .summary(
            "A multiplier for how bad walking with a bike is, compared to being in "
            "transit for equal lengths of time."
        )
        .as_double(dft.walking_reluctance)
    )
    target.switch_time = (
        c.of("bikeSwitchTime")
        .since(NA)
        .summary("The time it takes the user to fetch their bike and park it again in seconds.")
        .as_int(dft.switch_time)
    )
    target.switch_cost = (
        c.of("bikeSwitchCost")
        .since(NA)
        .summary("The cost of the user fetching their bike and parking it again.")
        .as_int(dft.switch_cost)
    )
    target.optimize_type = (
        c.of("optimize")
        .since(NA)
        .summary("The set of characteristics that the user wants to optimize for.")
        .as_enum(dft.optimize_type)
    )
    triangle = TriangleFactors()
    triangle.time = (
        c.of("bikeTriangleTimeFactor")
        .since(NA)
        .summary("For bike triangle routing, how much time matters (range 0-1).")
        .as_double(dft.optimize_triangle.time)
    )
    triangle.slope = (
        c.of("bikeTriangleSlopeFactor")
        .since(NA)
        .summary("For bike triangle routing, how much slope matters (range 0-1).")
        .as_double(dft.optimize_triangle.slope)
    )
    triangle.safety = (
        c.of("bikeTriangleSafetyFactor")
        .since(NA)
        .summary("For bike triangle routing, how much safety matters (range 0-1).")
        .as_double(dft.optimize_triangle.safety)
    )
    target.optimize_triangle = triangle


def _map_rental_preferences(c: ConfigNode, target: VehicleRentalPreferences) -> None:
    dft = VehicleRentalPreferences()
    target.dropoff_cost = (
        c.of("bikeRentalDropoffCost")
        .since(NA)
        .summary("Cost to drop-off a rented bike.")
        .as_int(dft.dropoff_cost)
    )
    target.dropoff_time = (
        c.of("bikeRentalDropoffTime")
        .since(NA)
        .summary("Time to drop-off a rented bike.")
        .as_int(dft.dropoff_time)
    )
    target.pickup_cost = (
        c.of("bikeRentalPickupCost")
        .since(NA)
        .summary("Cost to rent a bike.")
        .as_int(dft.pickup_cost)
    )
    target.pickup_time = (
        c.of("bikeRentalPickupTime")
        .since(NA)
        .summary("Time to rent a bike.")
        .as_int(dft.pickup_time)
    )
    target.use_availability_information = (
        c.of("useBikeRentalAvailabilityInformation")
        .since(NA)
        .summary(
            "Whether or not bike rental availability information will be used to "
            "plan bike rental trips."
        )
        .as_boolean(dft.use_availability_information)
    )
    target.arriving_in_rental_vehicle_at_destination_cost = (
        c.of("keepingRentedBicycleAtDestinationCost")
        .since(NA)
        .summary(
            "The cost of arriving at the destination with the rented bicycle, to "
            "discourage doing so."
        )
        .as_double(dft.arriving_in_rental_vehicle_at_destination_cost)
    )


def _map_street_preferences(c: ConfigNode, target: StreetPreferences) -> None:
    dft = StreetPreferences()
    target.turn_reluctance = (
        c.of("turnReluctance")
        .since(NA)
        .summary("Multiplicative factor on expected turning time.")
        .as_double(dft.turn_reluctance)
    )
    target.driving_direction = (
        c.of("drivingDirection")
        .since(NA)
        .summary("The driving direction to use in the intersection traversal calculation")
        .as_enum(dft.driving_direction)
    )

    elevator = target.elevator
    elevator.board_cost = (
        c.of("elevatorBoardCost")
        .since(NA)
        .summary("What is the cost of boarding a elevator?")
        .as_int(dft.elevator.board_cost)
    )
    elevator.board_time = (
        c.of("elevatorBoardTime")
        .since(NA)
        .summary("How long does it take to get on an elevator, on average.")
        .as_int(dft.elevator.board_time)
    )
    elevator.hop_cost = (
        c.of("elevatorHopCost")
        .since(NA)
        .summary("What is the cost of travelling one floor on an elevator?")
        .as_int(dft.elevator.hop_cost)
    )
    elevator.hop_time = (
        c.of("elevatorHopTime")
        .since(NA)
        .summary("How long does it take to advance one floor on an elevator?")
        .as_int(dft.elevator.hop_time)
    )

    target.max_access_egress_duration = _duration_for_street_mode(
        c.of("maxAccessEgressDuration")
        .since(V2_2)
        .summary("This is the maximum duration for access/egress for street searches.")
        .description(
            """
            This is a performance limit and should therefore be set high.
            Results close to the limit are not guaranteed to be optimal. Use
            itinerary-filters to limit what is presented to the client. The
            duration can be set per mode (`maxAccessEgressDurationForMode`),
            because some street modes searches are much more resource intensive
            than others. A default value is applied if the mode specific value
            does not exist.
            """
        ),
        c.of("maxAccessEgressDurationForMode")
        .since(V2_1)
        .summary("Limit access/egress per street mode.")
        .description(
            """
            Override the settings in `maxAccessEgressDuration` for specific
            street modes. This is done because some street modes searches are
            much more resource intensive than others.
            """
        ),
        dft.max_access_egress_duration,
    )
    target.max_direct_duration = _duration_for_street_mode(
        c.of("maxDirectStreetDuration")
        .since(NA)
        .summary("This is the maximum duration for a direct street search for each mode.")
        .description(
            """
            This is a performance limit and should therefore be set high.
            Results close to the limit are not guaranteed to be optimal. Use
            itinerary-filters to limit what is presented to the client. The
            duration can be set per mode (`maxDirectStreetDurationForMode`),
            because some street modes searches are much more resource intensive
            than others. A default value is applied if the mode specific value
            does not exist.
            """
        ),
        c.of("maxDirectStreetDurationForMode")
        .since(V2_2)
        .summary("Limit direct route duration per street mode.")
        .description(
            """
            Override the settings in `maxDirectStreetDuration` for specific
            street modes. This is done because some street modes searches are
            much more resource intensive than others.
            """
        ),
        dft.max_direct_duration,
    )
    target.intersection_traversal_model = (
        c.of("intersectionTraversalModel")
        .since(NA)
        .summary("The model that computes the costs of turns.")
        .as_enum(dft.intersection_traversal_model)
    )


def _duration_for_street_mode(
    duration: ParameterAccessor, per_mode: ParameterAccessor, dft: DurationForEnum
) -> DurationForEnum:
    return duration.as_duration(dft.default, per_key=per_mode, key_type=StreetMode)


def _map_car_preferences(c: ConfigNode, target: CarPreferences) -> None:
    dft = CarPreferences()
    target.speed = (
        c.of("carSpeed")
        .since(NA)
        .summary("Max car speed along streets, in meters per second")
        .as_double(dft.speed)
    )
    target.reluctance = (
        c.of("carReluctance")
        .since(NA)
        .summary(
            "A multiplier for how bad driving is, compared to being in transit for "
            "equal lengths of time."
        )
        .as_double(dft.reluctance)
    )
    target.dropoff_time = (
        c.of("carDropoffTime")
        .since(NA)
        .summary(
            "Time to park a car in a park and ride, w/o taking into account "
            "driving and walking cost."
        )
        .as_int(dft.dropoff_time)
    )
    target.park_cost = (
        c.of("carParkCost").since(NA).summary("Cost of parking a car.").as_int(dft.park_cost)
    )
    target.park_time = (
        c.of("carParkTime").since(NA).summary("Time to park a car").as_int(dft.park_time)
    )
    target.pickup_cost = (
        c.of("carPickupCost")
        .since(V2_1)
        .summary("Add a cost for car pickup changes when a pickup or drop off takes place")
        .as_int(dft.pickup_cost)
    )
    target.pickup_time = (
        c.of("carPickupTime")
        .since(V2_1)
        .summary("Add a time for car pickup changes when a pickup or drop off takes place")
        .as_int(dft.pickup_time)
    )
    target.acceleration_speed = (
        c.of("carAccelerationSpeed")
        .since(NA)
        .summary("The acceleration speed of an automobile, in meters per second per second.")
        .as_double(dft.acceleration_speed)
    )
    target.deceleration_speed = (
        c.of("carDecelerationSpeed")
        .since(NA)
        .summary("The deceleration speed of an automobile, in meters per second per second.")
        .as_double(dft.deceleration_speed)
    )


def _map_system_preferences(
    c: ConfigNode, target: SystemPreferences, features: FeatureSet
) -> None:
    dft = SystemPreferences()
    target.geoid_elevation = (
        c.of("geoidElevation")
        .since(NA)
        .summary(
            "If true, the Graph's ellipsoidToGeoidDifference is applied to all "
            "elevations returned by this query."
        )
        .as_boolean(dft.geoid_elevation)
    )
    target.max_journey_duration = (
        c.of("maxJourneyDuration")
        .since(NA)
        .summary(
            "The expected maximum time a journey can last across all possible "
            "journeys for the current deployment."
        )
        .description(
            """
            Normally you would just do an estimate and add enough slack, so you
            are sure that there is no journeys that falls outside this window.
            The parameter is used find all possible dates for the journey and
            then search only the services which run on those dates. The
            duration must include access, egress, wait-time and transit time
            for the whole journey. It should also take low frequency
            days/periods like holidays into account. In other words, pick the
            two points within your area that has the worst connection and then
            try to travel on the worst possible day, and find the maximum
            journey duration. Using a value that is too high has the effect of
            including more patterns in the search, hence, making it a bit
            slower. Recommended values would be from 12 hours (small town/city),
            1 day (region) to 2 days (country like Norway).
            """
        )
        .as_duration(dft.max_journey_duration)
    )
    if features.is_on(Feature.DATA_OVERLAY):
        target.data_overlay = map_data_overlay_parameters(
            c.of("dataOverlay")
            .since(NA)
            .summary("The filled request parameters for penalties and thresholds values")
            .feature(Feature.DATA_OVERLAY)
            .as_object()
        )


def _map_parking_preferences(c: ConfigNode, target: VehicleParkingPreferences) -> None:
    dft = VehicleParkingPreferences()
    target.use_availability_information = (
        c.of("useVehicleParkingAvailabilityInformation")
        .since(NA)
        .summary(
            "Whether or not to use vehicle parking availability information when "
            "planning park and ride trips."
        )
        .as_boolean(dft.use_availability_information)
    )


def _map_walk_preferences(c: ConfigNode, target: WalkPreferences) -> None:
    dft = WalkPreferences()
    target.speed = (
        c.of("walkSpeed")
        .since(NA)
        .summary("The user's walking speed in meters/second.")
        .as_double(dft.speed)
    )
    target.reluctance = (
        c.of("walkReluctance")
        .since(NA)
        .summary(
            "A multiplier for how bad walking is, compared to being in transit for "
            "equal lengths of time."
        )
        .description(
            """
            Empirically, values between 2 and 4 seem to correspond well to the
            concept of not wanting to walk too much without asking for totally
            ridiculous itineraries, but this observation should in no way be
            taken as scientific or definitive. Your mileage may vary.
            """
        )
        .as_double(dft.reluctance)
    )
    target.board_cost = (
        c.of("walkBoardCost")
        .since(NA)
        .summary(
            """
            Prevents unnecessary transfers by adding a cost for boarding a
            vehicle. This is the cost that is used when boarding while walking.
            """
        )
        .as_int(dft.board_cost)
    )
    target.stairs_reluctance = (
        c.of("stairsReluctance")
        .since(NA)
        .summary("Used instead of walkReluctance for stairs.")
        .as_double(dft.stairs_reluctance)
    )
    target.stairs_time_factor = (
        c.of("stairsTimeFactor")
        .since(NA)
        .summary(
            "How much more time does it take to walk a flight of stairs compared "
            "to walking a similar horizontal length."
        )
        .description(
            """
            Default value is based on: Fujiyama, T., & Tyler, N. (2010).
            Predicting the walking speed of pedestrians on stairs.
            Transportation Planning and Technology, 33(2), 177-202.
            """
        )
        .as_double(dft.stairs_time_factor)
    )
    target.safety_factor = (
        c.of("walkSafetyFactor")
        .since(NA)
        .summary("Factor for how much the walk safety is considered in routing.")
        .description(
            "Value should be between 0 and 1. If the value is set to be 0, safety "
            "is ignored."
        )
        .as_double(dft.safety_factor)
    )


def load_routing_defaults(
    document: dict[str, Any],
    features: FeatureSet | None = None,
    strict: bool = False,
    source: str | None = None,
) -> tuple[RouteRequest, ParameterCatalog]:
    """
    Map the ``routingDefaults`` of a router configuration document.

    Parameters
    ----------
    document
        Parsed router configuration
    features
        Enabled features
    strict
        Raise if the document holds values that were not read, instead of
        logging a warning
    source
        Name of the document, used in messages

    Returns
    -------
    tuple[RouteRequest, ParameterCatalog]
        The default request and the parameters read

    Raises
    ------
    UnknownParametersError
        In strict mode, if the ``routingDefaults`` hold unknown values
    """
    catalog = ParameterCatalog()
    root = ConfigNode.root(document, catalog, source)
    request = map_default_route_request(root, features=features)
    check_unknown_parameters(root.child("routingDefaults"), strict=strict)
    return request, catalog
