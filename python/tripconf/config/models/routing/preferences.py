"""
Route request and routing preference classes.

The defaults here are the values used when a parameter is absent from the
configuration; the mapping functions in
:mod:`tripconf.config.models.routing.route_request` read every default from
these classes, so the documentation shows them too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from tripconf.config.types import DurationForEnum, FeedScopedId, LinearFunction, Locale

from ..data_overlay import DataOverlayParameters
from .modes import (
    BicycleOptimizeType,
    DrivingDirection,
    IntersectionTraversalModel,
    RequestModes,
    TransitMode,
)

__all__ = [
    "AccessibilityPreferences",
    "BikePreferences",
    "CarPreferences",
    "ElevatorPreferences",
    "ItineraryFilterPreferences",
    "JourneyRequest",
    "RouteRequest",
    "RoutingPreferences",
    "StreetPreferences",
    "SystemPreferences",
    "TransferPreferences",
    "TransitPreferences",
    "TransitRequest",
    "TriangleFactors",
    "VehicleParkingPreferences",
    "VehicleParkingRequest",
    "VehicleRentalPreferences",
    "VehicleRentalRequest",
    "WalkPreferences",
    "WheelchairPreferences",
]


@dataclass
class VehicleRentalRequest:
    """Which rental networks may be used."""

    allowed_networks: frozenset[str] = frozenset()
    banned_networks: frozenset[str] = frozenset()
    allow_arriving_in_rented_vehicle_at_destination: bool = False


@dataclass
class VehicleParkingRequest:
    """Tags that select which vehicle parkings may be used."""

    banned_tags: frozenset[str] = frozenset()
    required_tags: frozenset[str] = frozenset()


@dataclass
class TransitRequest:
    """Routes and agencies to avoid."""

    unpreferred_routes: list[FeedScopedId] = field(default_factory=list)
    unpreferred_agencies: list[FeedScopedId] = field(default_factory=list)


@dataclass
class JourneyRequest:
    """What the journey may consist of."""

    modes: RequestModes = field(default_factory=RequestModes.default)
    rental: VehicleRentalRequest = field(default_factory=VehicleRentalRequest)
    parking: VehicleParkingRequest = field(default_factory=VehicleParkingRequest)
    transit: TransitRequest = field(default_factory=TransitRequest)


@dataclass
class TransitPreferences:
    """Preferences for riding transit."""

    alight_slack: DurationForEnum = field(default_factory=DurationForEnum)
    board_slack: DurationForEnum = field(default_factory=DurationForEnum)
    ignore_realtime_updates: bool = False
    other_than_preferred_routes_penalty: int = 300
    reluctance_for_mode: dict[TransitMode, float] = field(default_factory=dict)
    unpreferred_cost: LinearFunction = LinearFunction(0, 1)


@dataclass
class TriangleFactors:
    """Weights of the bicycle triangle optimisation (each in 0-1)."""

    time: float = 0.0
    slope: float = 0.0
    safety: float = 0.0


@dataclass
class BikePreferences:
    """Preferences for cycling."""

    speed: float = 5.0
    reluctance: float = 2.0
    board_cost: int = 600
    park_time: int = 60
    park_cost: int = 120
    walking_speed: float = 1.33
    walking_reluctance: float = 5.0
    switch_time: int = 0
    switch_cost: int = 0
    optimize_type: BicycleOptimizeType = BicycleOptimizeType.SAFE
    optimize_triangle: TriangleFactors = field(default_factory=TriangleFactors)


@dataclass
class VehicleRentalPreferences:
    """Costs and times of renting a vehicle."""

    dropoff_cost: int = 30
    dropoff_time: int = 30
    pickup_cost: int = 120
    pickup_time: int = 60
    use_availability_information: bool = False
    arriving_in_rental_vehicle_at_destination_cost: float = 0.0


@dataclass
class ElevatorPreferences:
    """Costs and times of using elevators."""

    board_cost: int = 90
    board_time: int = 90
    hop_cost: int = 20
    hop_time: int = 20


@dataclass
class StreetPreferences:
    """Preferences for the street network."""

    turn_reluctance: float = 1.0
    driving_direction: DrivingDirection = DrivingDirection.RIGHT
    elevator: ElevatorPreferences = field(default_factory=ElevatorPreferences)
    max_access_egress_duration: DurationForEnum = field(
        default_factory=lambda: DurationForEnum(timedelta(minutes=45))
    )
    max_direct_duration: DurationForEnum = field(
        default_factory=lambda: DurationForEnum(timedelta(hours=4))
    )
    intersection_traversal_model: IntersectionTraversalModel = (
        IntersectionTraversalModel.SIMPLE
    )


@dataclass
class CarPreferences:
    """Preferences for driving."""

    speed: float = 40.0
    reluctance: float = 2.0
    dropoff_time: int = 120
    park_cost: int = 120
    park_time: int = 60
    pickup_cost: int = 120
    pickup_time: int = 60
    acceleration_speed: float = 2.9
    deceleration_speed: float = 2.9


@dataclass
class SystemPreferences:
    """System wide limits."""

    geoid_elevation: bool = False
    max_journey_duration: timedelta = timedelta(hours=24)
    data_overlay: DataOverlayParameters | None = None


@dataclass
class VehicleParkingPreferences:
    """Preferences for parking."""

    use_availability_information: bool = False


@dataclass
class WalkPreferences:
    """Preferences for walking."""

    speed: float = 1.33
    reluctance: float = 2.0
    board_cost: int = 600
    stairs_reluctance: float = 2.0
    stairs_time_factor: float = 3.0
    safety_factor: float = 1.0


@dataclass
class AccessibilityPreferences:
    """How wheelchair accessibility of trips, stops or elevators is treated."""

    only_consider_accessible: bool = True
    unknown_cost: int = 600
    inaccessible_cost: int = 3600


@dataclass
class WheelchairPreferences:
    """Preferences for wheelchair users."""

    trip: AccessibilityPreferences = field(default_factory=AccessibilityPreferences)
    stop: AccessibilityPreferences = field(default_factory=AccessibilityPreferences)
    elevator: AccessibilityPreferences = field(
        default_factory=lambda: AccessibilityPreferences(False, 20, 3600)
    )
    inaccessible_street_reluctance: float = 25.0
    max_slope: float = 0.083
    slope_exceeded_reluctance: float = 1.0
    stairs_reluctance: float = 100.0


@dataclass
class TransferPreferences:
    """Preferences for transferring between vehicles."""

    cost: int = 0
    slack: int = 120
    wait_reluctance: float = 1.0
    nonpreferred_cost: int = 180
    max_transfers: int = 12


@dataclass
class ItineraryFilterPreferences:
    """Filters applied to the itineraries found."""

    debug: bool = False
    group_similarity_keep_one: float = 0.85
    group_similarity_keep_three: float = 0.68
    grouped_other_than_same_legs_max_cost_multiplier: float = 2.0
    transit_generalized_cost_limit: LinearFunction = LinearFunction(900, 1.5)
    non_transit_generalized_cost_limit: LinearFunction = LinearFunction(3600, 2)
    filter_itineraries_with_same_first_or_last_trip: bool = False
    accessibility_score: bool = False
    remove_itineraries_with_same_routes_and_stops: bool = False


@dataclass
class RoutingPreferences:
    """All routing preferences."""

    transit: TransitPreferences = field(default_factory=TransitPreferences)
    bike: BikePreferences = field(default_factory=BikePreferences)
    rental: VehicleRentalPreferences = field(default_factory=VehicleRentalPreferences)
    street: StreetPreferences = field(default_factory=StreetPreferences)
    car: CarPreferences = field(default_factory=CarPreferences)
    system: SystemPreferences = field(default_factory=SystemPreferences)
    transfer: TransferPreferences = field(default_factory=TransferPreferences)
    parking: VehicleParkingPreferences = field(default_factory=VehicleParkingPreferences)
    walk: WalkPreferences = field(default_factory=WalkPreferences)
    wheelchair: WheelchairPreferences = field(default_factory=WheelchairPreferences)
    itinerary_filter: ItineraryFilterPreferences = field(
        default_factory=ItineraryFilterPreferences
    )


@dataclass
class RouteRequest:
    """
    A route request with its preferences.

    Attributes
    ----------
    arrive_by
        Whether the date and time are the arrival rather than the departure
    locale
        Locale used for texts in the response
    num_itineraries
        Maximum number of itineraries to return
    search_window
        Search window, ``None`` to let the server pick one
    wheelchair
        Whether the trip must be wheelchair accessible
    journey
        What the journey may consist of
    preferences
        Costs, speeds and limits
    """

    arrive_by: bool = False
    locale: Locale = Locale("en", "US")
    num_itineraries: int = 50
    search_window: timedelta | None = None
    wheelchair: bool = False
    journey: JourneyRequest = field(default_factory=JourneyRequest)
    preferences: RoutingPreferences = field(default_factory=RoutingPreferences)

