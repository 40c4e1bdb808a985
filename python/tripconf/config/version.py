"""
Release tags used to annotate when a parameter was introduced.

The tags are ordered by release. ``NA`` marks parameters whose history is not
tracked and sorts before every release.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

__all__ = ["NA", "V1_5", "V2_0", "V2_1", "V2_2", "V2_3", "ConfigVersion"]


@total_ordering
class ConfigVersion(Enum):
    """Release in which a parameter first appeared."""

    NA = "na"
    V1_5 = "1.5"
    V2_0 = "2.0"
    V2_1 = "2.1"
    V2_2 = "2.2"
    V2_3 = "2.3"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ConfigVersion):
            return NotImplemented
        members = list(ConfigVersion)
        return members.index(self) < members.index(other)

    @property
    def is_tracked(self) -> bool:
        """Whether this is a real release rather than ``NA``."""
        return self is not ConfigVersion.NA


NA = ConfigVersion.NA
V1_5 = ConfigVersion.V1_5
V2_0 = ConfigVersion.V2_0
V2_1 = ConfigVersion.V2_1
V2_2 = ConfigVersion.V2_2
V2_3 = ConfigVersion.V2_3
