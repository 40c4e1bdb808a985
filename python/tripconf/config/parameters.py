"""
Typed parameter access with metadata for documentation.

Every parameter is read through a :class:`ParameterAccessor`, obtained from a
:class:`~tripconf.config.node.ConfigNode` with ``node.of(name)``. The accessor
collects the metadata (introduction version, summary, description) and ends in
exactly one typed ``as_*`` call. That call returns the value and registers a
:class:`ParameterRecord` in the catalog of the current mapping pass, so the
documentation is produced by the same code that reads the configuration.

Example:
    >>> from tripconf.config.node import ConfigNode
    >>> root = ConfigNode.root({"walkSpeed": 1.5})
    >>> root.of("walkSpeed").since(NA).summary("Walking speed.").as_double(1.4)
    1.5
    >>> root.catalog.get("walkSpeed").default
    1.4
"""

from __future__ import annotations

import math
import re
import textwrap
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import (
    MissingParameterError,
    ParameterDefinitionError,
    ParameterTypeError,
)
from .features import Feature
from .types import (
    DurationForEnum,
    FeedScopedId,
    LinearFunction,
    Locale,
    format_duration,
    parse_duration,
)
from .version import NA, ConfigVersion

if TYPE_CHECKING:
    from .node import ConfigNode

__all__ = [
    "NO_DEFAULT",
    "REQUIRED",
    "ParameterAccessor",
    "ParameterRecord",
    "ValueType",
    "enum_value_text",
    "format_value",
    "parse_enum",
]


class _Sentinel:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


REQUIRED: Any = _Sentinel("REQUIRED")
"""Default marking a parameter that must be present in the document."""

NO_DEFAULT: Any = _Sentinel("NO_DEFAULT")
"""Default of object groupings, which have no value of their own."""


class ValueType(Enum):
    """Type of a configuration parameter."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    DURATION = "duration"
    ENUM = "enum"
    ENUM_MAP = "enum-map"
    ENUM_SET = "enum-set"
    STRING_SET = "string-set"
    FEED_SCOPED_ID_LIST = "feed-scoped-id-list"
    LINEAR_FUNCTION = "linear-function"
    LOCALE = "locale"
    OBJECT = "object"
    OBJECT_LIST = "object-list"
    CUSTOM = "custom"

    @property
    def is_group(self) -> bool:
        """Whether parameters of this type hold nested parameters."""
        return self in (ValueType.OBJECT, ValueType.OBJECT_LIST)


_DOC_TYPE_NAMES = {
    ValueType.ENUM_MAP: "enum map",
    ValueType.ENUM_SET: "enum set",
    ValueType.STRING_SET: "string[]",
    ValueType.FEED_SCOPED_ID_LIST: "feed-scoped-id[]",
    ValueType.OBJECT_LIST: "object[]",
}


def enum_value_text(member: Enum) -> str:
    """Text used for an enum member in documents and documentation."""
    return member.value if isinstance(member.value, str) else member.name.lower()


def format_value(value: Any) -> str:
    """
    Format a default value for documentation.

    Parameters
    ----------
    value
        The value to format

    Returns
    -------
    str
        JSON-like text, or an empty string for required parameters,
        groupings and ``None``

    Examples
    --------
    >>> format_value(True)
    'true'
    >>> format_value(timedelta(minutes=45))
    '"45m"'
    >>> format_value(frozenset())
    '[]'
    """
    if value is REQUIRED or value is NO_DEFAULT or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return f'"{enum_value_text(value)}"'
    if isinstance(value, timedelta):
        return f'"{format_duration(value)}"'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return "[" + ", ".join(sorted(format_value(v) for v in value)) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, Mapping):
        items = (f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    if isinstance(value, DurationForEnum):
        return format_value(value.default)
    return f'"{value}"'


def parse_enum(enum_type: type[Enum], raw: Any) -> Enum:
    """
    Look up an enum member by name or value.

    Matching ignores case, and ``-`` and ``_`` are interchangeable.

    Raises
    ------
    ValueError
        If no member matches
    """
    if isinstance(raw, enum_type):
        return raw
    if isinstance(raw, str):
        key = raw.strip().replace("-", "_").upper()
        for member in enum_type:
            if key in (member.name.upper(), enum_value_text(member).replace("-", "_").upper()):
                return member
    allowed = ", ".join(enum_value_text(m) for m in enum_type)
    msg = f"Expected one of: {allowed}"
    raise ValueError(msg)


@dataclass(frozen=True)
class ParameterRecord:
    """
    Metadata of one documented parameter.

    Attributes
    ----------
    path
        Segment names from the document root
    value_type
        Type of the parameter
    summary
        One-line description
    default
        Value used when the parameter is absent, ``REQUIRED`` or ``NO_DEFAULT``
    since
        Release that introduced the parameter
    description
        Optional longer description
    enum_type
        Enum of the allowed values (enum, enum set) or keys (enum map)
    detail_type
        Element type of an enum map, e.g. ``duration``
    display_default
        Text shown as the default instead of the formatted value
    feature
        Feature that must be enabled for the parameter to be read
    """

    path: tuple[str, ...]
    value_type: ValueType
    summary: str
    default: Any = NO_DEFAULT
    since: ConfigVersion = NA
    description: str | None = None
    enum_type: type[Enum] | None = None
    detail_type: str | None = None
    display_default: str | None = None
    feature: Feature | None = None

    @property
    def name(self) -> str:
        """Last path segment."""
        return self.path[-1] if self.path else ""

    @property
    def dotted_path(self) -> str:
        """Path with segments joined by dots."""
        return ".".join(self.path)

    @property
    def is_required(self) -> bool:
        """Whether the parameter must be present."""
        return self.default is REQUIRED

    @property
    def type_name(self) -> str:
        """Type as shown in the documentation."""
        name = _DOC_TYPE_NAMES.get(self.value_type, self.value_type.value)
        if self.detail_type:
            return f"{name} of {self.detail_type}"
        return name

    @property
    def default_text(self) -> str:
        """Default as shown in the documentation."""
        if self.display_default is not None:
            return f'"{self.display_default}"'
        return format_value(self.default)

    @property
    def enum_values(self) -> list[str]:
        """Allowed enum values (or keys), empty for other types."""
        if self.enum_type is None:
            return []
        return [enum_value_text(m) for m in self.enum_type]


_INTEGER = re.compile(r"[-+]?[0-9]+")
_DECIMAL = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def _to_boolean(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
        return raw.strip().lower() == "true"
    msg = "Expected true or false"
    raise ValueError(msg)


def _to_int(raw: Any) -> int:
    if isinstance(raw, bool):
        msg = "A boolean is not a number"
        raise ValueError(msg)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and _INTEGER.fullmatch(raw.strip()):
        return int(raw.strip())
    msg = "Expected a whole number"
    raise ValueError(msg)


def _to_double(raw: Any) -> float:
    if isinstance(raw, bool):
        msg = "A boolean is not a number"
        raise ValueError(msg)
    if isinstance(raw, str) and _DECIMAL.fullmatch(raw.strip()):
        raw = float(raw.strip())
    if isinstance(raw, (int, float)):
        value = float(raw)
        if math.isfinite(value):
            return value
        msg = "Expected a finite number"
        raise ValueError(msg)
    msg = "Expected a number"
    raise ValueError(msg)


def _to_string(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    msg = "Expected a text value"
    raise ValueError(msg)


def _to_string_list(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        msg = "Expected a list"
        raise ValueError(msg)
    return [_to_string(item) for item in raw]


# Value types supported as enum map values, with their documentation names
_MAP_VALUE_TYPES: dict[type, tuple[str, Callable[[Any], Any]]] = {
    bool: ("boolean", _to_boolean),
    int: ("integer", _to_int),
    float: ("double", _to_double),
    str: ("string", _to_string),
    timedelta: ("duration", parse_duration),
}


class ParameterAccessor:
    """
    Fluent builder for reading one parameter.

    Obtained with :meth:`ConfigNode.of`; configure it with :meth:`since`,
    :meth:`summary` (mandatory), :meth:`description` and :meth:`feature`, then
    finish with exactly one ``as_*`` call.

    If the value is absent the ``as_*`` call returns the default unchanged.
    If it is present it is coerced to the requested type, and a value that
    cannot be coerced raises :class:`ParameterTypeError` instead of falling
    back to the default.
    """

    def __init__(self, node: ConfigNode) -> None:
        self._node = node
        self._since = NA
        self._summary: str | None = None
        self._description: str | None = None
        self._feature: Feature | None = None

    @property
    def node(self) -> ConfigNode:
        """Node of the parameter being read."""
        return self._node

    def since(self, version: ConfigVersion) -> ParameterAccessor:
        """Set the release that introduced the parameter."""
        self._since = version
        return self

    def summary(self, text: str) -> ParameterAccessor:
        """Set the one-line summary (whitespace is collapsed)."""
        self._summary = " ".join(text.split())
        return self

    def description(self, text: str) -> ParameterAccessor:
        """Set the long description (dedented and stripped)."""
        self._description = textwrap.dedent(text).strip()
        return self

    def feature(self, feature: Feature) -> ParameterAccessor:
        """Document that the parameter is only read when ``feature`` is on."""
        self._feature = feature
        return self

    # Scalars

    def as_boolean(self, default: Any = REQUIRED) -> bool:
        """Read a boolean."""
        return self._scalar(ValueType.BOOLEAN, default, _to_boolean)

    def as_int(self, default: Any = REQUIRED) -> int:
        """Read an integer."""
        return self._scalar(ValueType.INTEGER, default, _to_int)

    def as_double(self, default: Any = REQUIRED) -> float:
        """Read a floating point number."""
        return self._scalar(ValueType.DOUBLE, default, _to_double)

    def as_string(self, default: Any = REQUIRED) -> str:
        """Read a text value."""
        return self._scalar(ValueType.STRING, default, _to_string)

    def as_duration(
        self,
        default: Any = REQUIRED,
        *,
        per_key: ParameterAccessor | None = None,
        key_type: type[Enum] | None = None,
    ) -> Any:
        """
        Read a duration, optionally with per-enum-key overrides.

        Parameters
        ----------
        default
            Duration used when the parameter is absent
        per_key
            Accessor for a sibling parameter holding overrides by key. When
            given, two records are registered (the scalar default and the
            enum map) and a :class:`DurationForEnum` is returned.
        key_type
            Enum of the override keys, required together with ``per_key``

        Returns
        -------
        timedelta | DurationForEnum
            The duration, or the duration and its overrides
        """
        value = self._scalar(ValueType.DURATION, default, parse_duration)
        if per_key is None:
            return value
        if key_type is None:
            msg = f"Parameter '{self._node.path_text}' needs a key_type for per_key"
            raise ParameterDefinitionError(msg)
        if per_key.node.path[:-1] != self._node.path[:-1]:
            msg = (
                f"Per key parameter '{per_key.node.path_text}' must be a sibling "
                f"of '{self._node.path_text}'"
            )
            raise ParameterDefinitionError(msg)
        return DurationForEnum(value, per_key.as_enum_map(key_type, timedelta))

    def as_enum(self, default: Any = REQUIRED, *, enum_type: type[Enum] | None = None) -> Any:
        """
        Read one enum member.

        Parameters
        ----------
        default
            Default member; its type is the enum type unless ``enum_type``
            is given
        enum_type
            Enum to read, needed when there is no default member
        """
        if enum_type is None:
            if not isinstance(default, Enum):
                msg = f"Parameter '{self._node.path_text}' needs an enum_type"
                raise ParameterDefinitionError(msg)
            enum_type = type(default)
        return self._scalar(
            ValueType.ENUM,
            default,
            lambda raw: parse_enum(enum_type, raw),
            enum_type=enum_type,
        )

    def as_linear_function(self, default: Any = REQUIRED) -> LinearFunction:
        """Read a ``A + B x`` linear function."""
        return self._scalar(
            ValueType.LINEAR_FUNCTION,
            default,
            lambda raw: LinearFunction.parse(_to_string(raw)),
        )

    def as_locale(self, default: Any = REQUIRED) -> Locale:
        """Read a locale such as ``en_US``."""
        return self._scalar(
            ValueType.LOCALE, default, lambda raw: Locale.parse(_to_string(raw))
        )

    def as_custom_string_type(
        self, default: Any, display_hint: str, parse: Callable[[str], Any]
    ) -> Any:
        """
        Read a text value and convert it with a domain specific function.

        Parameters
        ----------
        default
            Value used when the parameter is absent
        display_hint
            Text shown as the default in the documentation
        parse
            Conversion function; ``ValueError``, ``KeyError`` and ``TypeError``
            raised by it are reported as type errors
        """
        return self._scalar(
            ValueType.CUSTOM,
            default,
            lambda raw: parse(_to_string(raw)),
            display_default=display_hint,
        )

    # Collections

    def as_string_set(self, default: Any = frozenset()) -> Any:
        """Read a list of strings as a set."""
        return self._scalar(
            ValueType.STRING_SET, default, lambda raw: frozenset(_to_string_list(raw))
        )

    def as_enum_set(self, enum_type: type[Enum], default: Any = frozenset()) -> Any:
        """Read a list of enum values as a set."""
        return self._scalar(
            ValueType.ENUM_SET,
            default,
            lambda raw: frozenset(parse_enum(enum_type, v) for v in _to_string_list(raw)),
            enum_type=enum_type,
        )

    def as_feed_scoped_ids(self, default: Any = ()) -> Any:
        """Read a list of ``feed:id`` strings."""
        return self._scalar(
            ValueType.FEED_SCOPED_ID_LIST,
            default,
            lambda raw: [FeedScopedId.parse(v) for v in _to_string_list(raw)],
        )

    def as_enum_map(
        self, key_type: type[Enum], value_type: type, default: Any = None
    ) -> Any:
        """
        Read an object keyed by enum values.

        Parameters
        ----------
        key_type
            Enum of the keys
        value_type
            Type of the values: ``bool``, ``int``, ``float``, ``str`` or
            ``timedelta``
        default
            Mapping returned when absent (a new empty dict when ``None``)
        """
        if value_type not in _MAP_VALUE_TYPES:
            msg = (
                f"Parameter '{self._node.path_text}' has unsupported map value "
                f"type {value_type.__name__}"
            )
            raise ParameterDefinitionError(msg)
        detail, convert = _MAP_VALUE_TYPES[value_type]
        if default is None:
            default = {}
        self._register(
            ValueType.ENUM_MAP, default, enum_type=key_type, detail_type=detail
        )

        node = self._node
        if node.is_missing():
            return default
        if not node.is_object():
            raise ParameterTypeError(node.path_text, f"enum map of {detail}", node.value)
        node.mark_consumed()

        result = {}
        for name in node.keys():
            child = node.child(name)
            try:
                key = parse_enum(key_type, name)
            except ValueError as err:
                raise ParameterTypeError(child.path_text, "enum", name, str(err)) from err
            result[key] = self._convert(child, detail, convert)
        return result

    # Nesting

    def as_object(self) -> ConfigNode:
        """
        Get the node of a nested object for further mapping.

        No leaf is registered. The grouping (with this accessor's summary and
        description) shows up in the documentation once a parameter beneath it
        is registered.
        """
        record = self._make_record(ValueType.OBJECT, NO_DEFAULT)
        self._node.catalog.register_group(record)
        node = self._node
        if not node.is_missing() and not node.is_object():
            raise ParameterTypeError(node.path_text, "object", node.value)
        return node

    def as_object_list(self) -> list[ConfigNode]:
        """
        Get one node per element of an array of objects.

        All elements document their parameters under the same path.
        """
        record = self._make_record(ValueType.OBJECT_LIST, NO_DEFAULT)
        self._node.catalog.register_group(record)
        node = self._node
        if node.is_missing():
            return []
        if not node.is_array():
            raise ParameterTypeError(node.path_text, "object[]", node.value)
        elements = [node.child_at(i) for i in range(len(node))]
        for element in elements:
            if not element.is_object():
                raise ParameterTypeError(element.path_text, "object", element.value)
        return elements

    def as_type(self, kind: ValueType, default: Any = REQUIRED, **options: Any) -> Any:
        """
        Read the parameter as ``kind``, dispatching to the matching ``as_*`` call.

        Options are passed on by name: ``enum_type`` (enum, enum set),
        ``key_type``/``value_type`` (enum map), ``display_hint``/``parse``
        (custom).
        """
        try:
            if kind is ValueType.ENUM:
                return self.as_enum(default, enum_type=options.get("enum_type"))
            if kind is ValueType.ENUM_SET:
                return self.as_enum_set(
                    options["enum_type"], _collection_default(default, frozenset())
                )
            if kind is ValueType.ENUM_MAP:
                return self.as_enum_map(
                    options["key_type"],
                    options["value_type"],
                    _collection_default(default, None),
                )
            if kind is ValueType.CUSTOM:
                return self.as_custom_string_type(
                    default, options["display_hint"], options["parse"]
                )
        except KeyError as err:
            msg = f"Parameter '{self._node.path_text}' of type {kind.value} needs {err}"
            raise ParameterDefinitionError(msg) from err

        simple = {
            ValueType.BOOLEAN: self.as_boolean,
            ValueType.INTEGER: self.as_int,
            ValueType.DOUBLE: self.as_double,
            ValueType.STRING: self.as_string,
            ValueType.DURATION: self.as_duration,
            ValueType.LINEAR_FUNCTION: self.as_linear_function,
            ValueType.LOCALE: self.as_locale,
        }
        if kind in simple:
            return simple[kind](default)
        if kind is ValueType.STRING_SET:
            return self.as_string_set(_collection_default(default, frozenset()))
        if kind is ValueType.FEED_SCOPED_ID_LIST:
            return self.as_feed_scoped_ids(_collection_default(default, ()))
        if kind is ValueType.OBJECT:
            return self.as_object()
        return self.as_object_list()

    # Internals

    def _make_record(self, value_type: ValueType, default: Any, **extra: Any) -> ParameterRecord:
        if not self._summary:
            msg = f"Parameter '{self._node.path_text}' is missing a summary"
            raise ParameterDefinitionError(msg)
        return ParameterRecord(
            path=self._node.doc_path,
            value_type=value_type,
            summary=self._summary,
            default=default,
            since=self._since,
            description=self._description or None,
            feature=self._feature,
            **extra,
        )

    def _register(self, value_type: ValueType, default: Any, **extra: Any) -> None:
        self._node.catalog.register(self._make_record(value_type, default, **extra))

    def _scalar(
        self,
        value_type: ValueType,
        default: Any,
        convert: Callable[[Any], Any],
        **extra: Any,
    ) -> Any:
        self._register(value_type, default, **extra)
        node = self._node
        if node.is_missing():
            if default is REQUIRED:
                raise MissingParameterError(node.path_text)
            return default
        node.mark_consumed()
        return self._convert(node, value_type.value, convert)

    @staticmethod
    def _convert(node: ConfigNode, expected: str, convert: Callable[[Any], Any]) -> Any:
        try:
            return convert(node.value)
        except (ValueError, KeyError, TypeError, OverflowError) as err:
            reason = str(err) or None
            raise ParameterTypeError(node.path_text, expected, node.value, reason) from err


def _collection_default(default: Any, empty: Any) -> Any:
    return empty if default is REQUIRED else default
