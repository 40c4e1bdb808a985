"""
Domain scalar types read from configuration strings.

This module provides:
- Duration parsing/formatting (ISO-8601 and compact ``1h30m`` forms)
- LinearFunction: ``A + B x`` cost functions
- FeedScopedId: ``feed:id`` identifiers
- Locale: ``en_US`` style locales
- DurationForEnum: a default duration with per-enum overrides
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any

from attrs import field as attr_field
from attrs import frozen

__all__ = [
    "DurationForEnum",
    "FeedScopedId",
    "LinearFunction",
    "Locale",
    "format_duration",
    "parse_duration",
]

_ISO_DURATION = re.compile(
    r"^(?P<sign>[-+])?P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$",
    re.IGNORECASE,
)
_COMPACT_DURATION = re.compile(
    r"^(?P<sign>-)?(?:(?P<days>\d+)d)?(?:(?P<hours>\d+)h)?"
    r"(?:(?P<minutes>\d+)m)?(?:(?P<seconds>\d+(?:\.\d+)?)s)?$"
)
_NUMBER = r"[-+]?\d+(?:\.\d*)?"
_LINEAR_FUNCTION = re.compile(rf"^\s*({_NUMBER})\s*\+\s*({_NUMBER})\s*x\s*$")


def parse_duration(raw: Any) -> timedelta:
    """
    Parse a duration.

    Parameters
    ----------
    raw
        A number of seconds, an ISO-8601 duration (``PT1H30M``, ``P1D``) or a
        compact duration (``1h30m``, ``45s``, ``2d``)

    Returns
    -------
    timedelta
        Parsed duration

    Raises
    ------
    ValueError
        If the value is not a duration

    Examples
    --------
    >>> parse_duration("1h30m")
    datetime.timedelta(seconds=5400)
    >>> parse_duration("PT45S")
    datetime.timedelta(seconds=45)
    """
    if isinstance(raw, bool):
        msg = "a boolean is not a duration"
        raise ValueError(msg)
    try:
        return _parse_duration(raw)
    except OverflowError as err:
        msg = f"'{raw}' is too long for a duration"
        raise ValueError(msg) from err


def _parse_duration(raw: Any) -> timedelta:
    if isinstance(raw, (int, float)):
        return timedelta(seconds=raw)
    if not isinstance(raw, str):
        msg = f"expected a duration string, got {type(raw).__name__}"
        raise ValueError(msg)

    text = raw.strip()
    if re.fullmatch(_NUMBER, text):
        return timedelta(seconds=float(text))

    match = _ISO_DURATION.match(text) or _COMPACT_DURATION.match(text)
    if match is None or not any(
        match.group(name) for name in ("days", "hours", "minutes", "seconds")
    ):
        msg = f"'{raw}' is not a duration, use e.g. '1h30m' or 'PT1H30M'"
        raise ValueError(msg)

    value = timedelta(
        days=int(match.group("days") or 0),
        hours=int(match.group("hours") or 0),
        minutes=int(match.group("minutes") or 0),
        seconds=float(match.group("seconds") or 0),
    )
    return -value if match.group("sign") == "-" else value


def format_duration(value: timedelta) -> str:
    """
    Format a duration in the compact form accepted by :func:`parse_duration`.

    Examples
    --------
    >>> format_duration(timedelta(hours=1, minutes=30))
    '1h30m'
    >>> format_duration(timedelta(0))
    '0s'
    """
    if not value:
        return "0s"
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    hours, rest = divmod(value.seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    parts = []
    if value.days:
        parts.append(f"{value.days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if value.microseconds:
        parts.append(f"{seconds + value.microseconds / 1_000_000:g}s")
    elif seconds:
        parts.append(f"{seconds}s")
    return sign + "".join(parts)


@frozen
class LinearFunction:
    """
    A cost function of the form ``A + B x``.

    Attributes
    ----------
    constant
        The fixed part ``A``
    coefficient
        The multiplier ``B`` applied to ``x``
    """

    constant: float = attr_field(converter=float)
    coefficient: float = attr_field(converter=float)

    @classmethod
    def parse(cls, text: str) -> LinearFunction:
        """
        Parse ``"A + B x"``.

        Raises
        ------
        ValueError
            If the text does not have the expected form

        Examples
        --------
        >>> LinearFunction.parse("600 + 2.0 x")
        LinearFunction(constant=600.0, coefficient=2.0)
        """
        match = _LINEAR_FUNCTION.match(text)
        if match is None:
            msg = f"'{text}' is not a linear function, expected the form 'A + B x'"
            raise ValueError(msg)
        return cls(float(match.group(1)), float(match.group(2)))

    def __call__(self, x: float) -> float:
        return self.constant + self.coefficient * x

    def __str__(self) -> str:
        return f"{self.constant:g} + {self.coefficient:g} x"


def _not_blank(instance: Any, attribute: Any, value: str) -> None:
    if not value:
        msg = f"{attribute.name} must not be empty"
        raise ValueError(msg)


@frozen
class FeedScopedId:
    """An id qualified by the feed it belongs to, written ``feed:id``."""

    feed_id: str = attr_field(validator=_not_blank)
    id: str = attr_field(validator=_not_blank)

    @classmethod
    def parse(cls, text: str) -> FeedScopedId:
        """
        Parse ``"feed:id"``.

        Raises
        ------
        ValueError
            If the text has no feed part or no id part
        """
        feed_id, sep, id_ = text.strip().partition(":")
        if not sep:
            msg = f"'{text}' is not a feed scoped id, expected 'FeedId:Id'"
            raise ValueError(msg)
        return cls(feed_id, id_)

    def __str__(self) -> str:
        return f"{self.feed_id}:{self.id}"


def _language_code(instance: Any, attribute: Any, value: str) -> None:
    if not (value.isalpha() and 2 <= len(value) <= 3):  # noqa: PLR2004
        msg = f"'{value}' is not a language code"
        raise ValueError(msg)


@frozen
class Locale:
    """A locale made of a language, an optional country and an optional variant."""

    language: str = attr_field(converter=str.lower, validator=_language_code)
    country: str = attr_field(default="", converter=str.upper)
    variant: str = attr_field(default="")

    @classmethod
    def parse(cls, text: str) -> Locale:
        """
        Parse ``en``, ``en_US``, ``en-US`` or ``no_NO_NY``.

        Raises
        ------
        ValueError
            If the text is not a locale
        """
        parts = text.strip().replace("-", "_").split("_")
        if len(parts) > 3:  # noqa: PLR2004
            msg = f"'{text}' is not a locale"
            raise ValueError(msg)
        return cls(*parts)

    def __str__(self) -> str:
        return "_".join(p for p in (self.language, self.country, self.variant) if p)


@dataclass
class DurationForEnum:
    """
    A default duration with optional overrides per enum key.

    Parameters
    ----------
    default
        Duration used for keys without an override
    values
        Overrides by key
    """

    default: timedelta = timedelta(0)
    values: dict[Enum, timedelta] = field(default_factory=dict)

    def value_of(self, key: Enum) -> timedelta:
        """Get the duration for ``key``."""
        return self.values.get(key, self.default)
