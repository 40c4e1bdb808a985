"""Transport modes and the qualified mode set used by route requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "BicycleOptimizeType",
    "DrivingDirection",
    "IntersectionTraversalModel",
    "RequestModes",
    "StreetMode",
    "TransitMode",
    "parse_qualified_modes",
]


class TransitMode(Enum):
    """Mode of a public transport vehicle."""

    RAIL = "rail"
    COACH = "coach"
    SUBWAY = "subway"
    BUS = "bus"
    TRAM = "tram"
    FERRY = "ferry"
    AIRPLANE = "airplane"
    CABLE_CAR = "cable-car"
    GONDOLA = "gondola"
    FUNICULAR = "funicular"
    TROLLEYBUS = "trolleybus"
    MONORAIL = "monorail"
    CARPOOL = "carpool"
    TAXI = "taxi"


class StreetMode(Enum):
    """How the street network is used for access, egress, transfers or direct trips."""

    NOT_SET = "not-set"
    WALK = "walk"
    BIKE = "bike"
    BIKE_TO_PARK = "bike-to-park"
    BIKE_RENTAL = "bike-rental"
    SCOOTER_RENTAL = "scooter-rental"
    CAR = "car"
    CAR_TO_PARK = "car-to-park"
    CAR_PICKUP = "car-pickup"
    CAR_RENTAL = "car-rental"
    FLEXIBLE = "flexible"


class BicycleOptimizeType(Enum):
    """What a cyclist wants to optimise for."""

    QUICK = "quick"
    SAFE = "safe"
    FLAT = "flat"
    GREENWAYS = "greenways"
    TRIANGLE = "triangle"


class DrivingDirection(Enum):
    """Side of the road vehicles drive on."""

    RIGHT = "right"
    LEFT = "left"


class IntersectionTraversalModel(Enum):
    """Model used to compute the cost of turns."""

    NORWAY = "norway"
    SIMPLE = "simple"


@dataclass(frozen=True)
class RequestModes:
    """
    Street modes for each part of a trip plus the allowed transit modes.

    Attributes
    ----------
    access_mode
        Mode used to reach the first transit stop
    egress_mode
        Mode used from the last transit stop
    direct_mode
        Mode used for trips without transit
    transfer_mode
        Mode used between transit stops
    transit_modes
        Allowed transit modes, empty for street-only trips
    """

    access_mode: StreetMode = StreetMode.WALK
    egress_mode: StreetMode = StreetMode.WALK
    direct_mode: StreetMode = StreetMode.WALK
    transfer_mode: StreetMode = StreetMode.WALK
    transit_modes: frozenset[TransitMode] = field(
        default_factory=lambda: frozenset(TransitMode)
    )

    @classmethod
    def default(cls) -> RequestModes:
        """Walk plus every transit mode."""
        return cls()


# access, egress and direct mode for each street token
_STREET_TOKENS = {
    "WALK": (StreetMode.WALK, StreetMode.WALK, StreetMode.WALK),
    "BICYCLE": (StreetMode.BIKE, StreetMode.BIKE, StreetMode.BIKE),
    "BICYCLE_RENT": (StreetMode.BIKE_RENTAL, StreetMode.BIKE_RENTAL, StreetMode.BIKE_RENTAL),
    "BICYCLE_PARK": (StreetMode.BIKE_TO_PARK, StreetMode.WALK, StreetMode.BIKE_TO_PARK),
    "SCOOTER_RENT": (
        StreetMode.SCOOTER_RENTAL,
        StreetMode.SCOOTER_RENTAL,
        StreetMode.SCOOTER_RENTAL,
    ),
    "CAR": (StreetMode.CAR, StreetMode.CAR, StreetMode.CAR),
    "CAR_PARK": (StreetMode.CAR_TO_PARK, StreetMode.WALK, StreetMode.CAR_TO_PARK),
    "CAR_PICKUP": (StreetMode.CAR_PICKUP, StreetMode.CAR_PICKUP, StreetMode.CAR_PICKUP),
    "CAR_RENT": (StreetMode.CAR_RENTAL, StreetMode.CAR_RENTAL, StreetMode.CAR_RENTAL),
    "FLEX": (StreetMode.FLEXIBLE, StreetMode.FLEXIBLE, StreetMode.WALK),
}
_STREET_TOKENS["BIKE"] = _STREET_TOKENS["BICYCLE"]


def parse_qualified_modes(text: str) -> RequestModes:
    """
    Parse a comma separated mode list such as ``"TRANSIT,WALK"``.

    ``TRANSIT`` allows every transit mode, a transit mode name (``BUS``,
    ``RAIL``, ...) allows that mode. At most one street mode (``WALK``,
    ``BICYCLE``, ``BICYCLE_RENT``, ``CAR_PARK``, ...) may be given; walking is
    used when there is none.

    Raises
    ------
    ValueError
        For unknown tokens, an empty list or more than one street mode

    Examples
    --------
    >>> parse_qualified_modes("BUS,WALK").transit_modes
    frozenset({<TransitMode.BUS: 'bus'>})
    """
    tokens = [t.strip().upper().replace("-", "_") for t in text.split(",") if t.strip()]
    if not tokens:
        msg = "The mode list is empty"
        raise ValueError(msg)

    street: list[str] = []
    transit: set[TransitMode] = set()
    for token in tokens:
        if token in _STREET_TOKENS:
            street.append(token)
        elif token == "TRANSIT":
            transit.update(TransitMode)
        elif token in TransitMode.__members__:
            transit.add(TransitMode[token])
        else:
            msg = f"Unknown mode '{token}'"
            raise ValueError(msg)

    if len(street) > 1:
        msg = f"Only one street mode is allowed, got {', '.join(street)}"
        raise ValueError(msg)

    access, egress, direct = _STREET_TOKENS[street[0] if street else "WALK"]
    transfer = StreetMode.BIKE if access is StreetMode.BIKE else StreetMode.WALK
    return RequestModes(
        access_mode=access,
        egress_mode=egress,
        direct_mode=direct,
        transfer_mode=transfer,
        transit_modes=frozenset(transit),
    )
