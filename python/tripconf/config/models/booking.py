"""
Booking rules of flexible (on-demand) transit.

A booking info object tells the traveller how, and how long in advance, a
trip has to be booked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import time, timedelta
from enum import Enum

from tripconf.config.node import ConfigNode
from tripconf.config.version import V2_1

__all__ = [
    "BookingInfo",
    "BookingMethod",
    "BookingTime",
    "ContactInfo",
    "map_booking_info",
    "parse_time_of_day",
]

_TIME_OF_DAY = re.compile(r"^(\d{1,2}):(\d{2})$")


class BookingMethod(Enum):
    """Ways a trip may be booked."""

    CALL_DRIVER = "call-driver"
    CALL_OFFICE = "call-office"
    ONLINE = "online"
    PHONE_AT_STOP = "phone-at-stop"
    TEXT = "text"


def parse_time_of_day(text: str) -> time:
    """
    Parse a ``HH:MM`` time of day.

    Raises
    ------
    ValueError
        If ``text`` is not a valid time of day

    Examples
    --------
    >>> parse_time_of_day("07:30")
    datetime.time(7, 30)
    """
    match = _TIME_OF_DAY.match(text.strip())
    if match is None:
        msg = f"Expected a time of day as HH:MM, got '{text}'"
        raise ValueError(msg)
    return time(int(match.group(1)), int(match.group(2)))


@dataclass
class ContactInfo:
    """Who to contact to book a trip."""

    contact_person: str | None = None
    phone_number: str | None = None
    email: str | None = None
    fax_number: str | None = None
    info_url: str | None = None
    booking_url: str | None = None
    additional_details: str | None = None


@dataclass
class BookingTime:
    """A latest or earliest booking time: a time of day some days before travel."""

    time_of_day: time
    days_prior: int = 0


@dataclass
class BookingInfo:
    """
    How and when a trip can be booked.

    Attributes
    ----------
    contact_info
        Who to contact
    booking_methods
        Allowed ways of booking
    earliest_booking_time
        Earliest time a booking is accepted, if limited
    latest_booking_time
        Latest time a booking is accepted, if limited
    minimum_booking_notice
        Minimum time between booking and travel
    maximum_booking_notice
        Maximum time between booking and travel
    message
        General message to the traveller
    pickup_message
        Message about the pickup
    drop_off_message
        Message about the drop off
    """

    contact_info: ContactInfo = field(default_factory=ContactInfo)
    booking_methods: frozenset[BookingMethod] = frozenset()
    earliest_booking_time: BookingTime | None = None
    latest_booking_time: BookingTime | None = None
    minimum_booking_notice: timedelta | None = None
    maximum_booking_notice: timedelta | None = None
    message: str | None = None
    pickup_message: str | None = None
    drop_off_message: str | None = None


def map_booking_info(c: ConfigNode) -> BookingInfo:
    """Map a booking info object."""
    return BookingInfo(
        contact_info=_map_contact_info(
            c.of("contactInfo")
            .since(V2_1)
            .summary("Who to contact to book the trip.")
            .as_object()
        ),
        booking_methods=c.of("bookingMethods")
        .since(V2_1)
        .summary("The ways the trip may be booked.")
        .as_enum_set(BookingMethod),
        earliest_booking_time=_map_booking_time(
            c,
            "earliestBookingTime",
            "The earliest time the trip can be booked.",
        ),
        latest_booking_time=_map_booking_time(
            c,
            "latestBookingTime",
            "The latest time the trip can be booked.",
        ),
        minimum_booking_notice=c.of("minimumBookingNotice")
        .since(V2_1)
        .summary("Minimum time between booking and the start of the trip.")
        .as_duration(None),
        maximum_booking_notice=c.of("maximumBookingNotice")
        .since(V2_1)
        .summary("Maximum time between booking and the start of the trip.")
        .as_duration(None),
        message=c.of("message")
        .since(V2_1)
        .summary("General information about booking the trip.")
        .as_string(None),
        pickup_message=c.of("pickupMessage")
        .since(V2_1)
        .summary("Information about booking the pickup.")
        .as_string(None),
        drop_off_message=c.of("dropOffMessage")
        .since(V2_1)
        .summary("Information about booking the drop off.")
        .as_string(None),
    )


def _map_contact_info(c: ConfigNode) -> ContactInfo:
    text = {
        "contactPerson": "Name of the person to contact.",
        "phone": "Phone number to call.",
        "eMail": "Email address to write to.",
        "fax": "Fax number.",
        "url": "Web page with more information.",
        "bookingUrl": "Web page where the trip can be booked.",
        "additionalDetails": "Any other contact information.",
    }
    values = [
        c.of(name).since(V2_1).summary(summary).as_string(None)
        for name, summary in text.items()
    ]
    return ContactInfo(*values)


def _map_booking_time(c: ConfigNode, name: str, summary: str) -> BookingTime | None:
    t = c.of(name).since(V2_1).summary(summary).as_object()
    time_of_day = (
        t.of("time")
        .since(V2_1)
        .summary("Time of day, as HH:MM.")
        .as_custom_string_type(None, "HH:MM", parse_time_of_day)
    )
    days_prior = (
        t.of("daysPrior")
        .since(V2_1)
        .summary("Number of days before the day of travel.")
        .as_int(0)
    )
    if time_of_day is None:
        return None
    return BookingTime(time_of_day, days_prior)
