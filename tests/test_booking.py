"""
Tests for the booking info mapping of flexible transit.
"""

from __future__ import annotations

from datetime import time, timedelta

import pytest

from tripconf.config import ConfigNode, ParameterTypeError, render_summary_table
from tripconf.config.models.booking import (
    BookingInfo,
    BookingMethod,
    BookingTime,
    ContactInfo,
    map_booking_info,
    parse_time_of_day,
)

BOOKING = {
    "contactInfo": {
        "contactPerson": "Booking office",
        "phone": "+47 12345678",
        "bookingUrl": "https://example.com/book",
    },
    "bookingMethods": ["call-office", "ONLINE"],
    "latestBookingTime": {"time": "17:30", "daysPrior": 1},
    "minimumBookingNotice": "PT2H",
    "message": "Book at least two hours in advance.",
}


class TestParseTimeOfDay:
    """Tests for parse_time_of_day."""

    @pytest.mark.parametrize(
        "text, expected", [("07:30", time(7, 30)), ("7:05", time(7, 5)), ("23:59", time(23, 59))]
    )
    def test_valid(self, text, expected):
        """HH:MM times are parsed."""
        assert parse_time_of_day(text) == expected

    @pytest.mark.parametrize("text", ["", "7", "7.30", "24:00", "12:60", "12:3"])
    def test_invalid(self, text):
        """Other text is rejected."""
        with pytest.raises(ValueError):
            parse_time_of_day(text)


class TestMapBookingInfo:
    """Tests for map_booking_info."""

    def test_full(self):
        """All configured values are mapped."""
        info = map_booking_info(ConfigNode.root(BOOKING))

        assert info.contact_info == ContactInfo(
            contact_person="Booking office",
            phone_number="+47 12345678",
            booking_url="https://example.com/book",
        )
        assert info.booking_methods == {BookingMethod.CALL_OFFICE, BookingMethod.ONLINE}
        assert info.earliest_booking_time is None
        assert info.latest_booking_time == BookingTime(time(17, 30), 1)
        assert info.minimum_booking_notice == timedelta(hours=2)
        assert info.maximum_booking_notice is None
        assert info.message == "Book at least two hours in advance."

    def test_empty(self):
        """An empty object gives the defaults."""
        assert map_booking_info(ConfigNode.root({})) == BookingInfo()

    def test_booking_time_without_days_prior(self):
        """daysPrior defaults to the same day."""
        info = map_booking_info(ConfigNode.root({"earliestBookingTime": {"time": "06:00"}}))
        assert info.earliest_booking_time == BookingTime(time(6, 0))

    def test_invalid_time(self):
        """A time that is not HH:MM names the path."""
        root = ConfigNode.root({"latestBookingTime": {"time": "5pm"}})
        with pytest.raises(ParameterTypeError, match="latestBookingTime.time"):
            map_booking_info(root)

    def test_invalid_method(self):
        """Unknown booking methods list the allowed values."""
        root = ConfigNode.root({"bookingMethods": ["fax"]})
        with pytest.raises(ParameterTypeError, match="call-driver"):
            map_booking_info(root)

    def test_documented(self):
        """The booking parameters are documented, including custom types."""
        root = ConfigNode.root({})
        map_booking_info(root)
        table = render_summary_table(root.catalog)

        assert "| `contactInfo.eMail` | `string` |  | Email address to write to. | 2.1 |" in table
        assert (
            "| `latestBookingTime.time` | `custom` | `\"HH:MM\"` | "
            "Time of day, as HH:MM. | 2.1 |" in table
        )
        assert "| `bookingMethods` | `enum set` | `[]` |" in table
