"""
Optional capabilities that gate parts of the configuration.

Mapping modules never consult a global toggle. The caller decides which
features are enabled and passes a :class:`FeatureSet` down to the mapping
functions, which then only map a gated parameter group when its feature is on.

Example:
    >>> features = FeatureSet.of(Feature.DATA_OVERLAY)
    >>> features.is_on(Feature.DATA_OVERLAY)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .version import V2_0, V2_1, V2_2

if TYPE_CHECKING:
    from .node import ConfigNode

__all__ = ["Feature", "FeatureSet", "map_feature_set"]


class Feature(Enum):
    """Feature that can be switched on in a deployment."""

    DATA_OVERLAY = "DataOverlay"
    FLEX_ROUTING = "FlexRouting"
    SANDBOX_API = "SandboxAPI"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FeatureSet:
    """
    The set of enabled features for one mapping pass.

    Parameters
    ----------
    enabled
        Features that are switched on
    """

    enabled: frozenset[Feature] = frozenset()

    @classmethod
    def of(cls, *features: Feature) -> FeatureSet:
        """Create a set with the given features enabled."""
        return cls(frozenset(features))

    @classmethod
    def all(cls) -> FeatureSet:
        """Create a set with every feature enabled (used for documentation)."""
        return cls(frozenset(Feature))

    @classmethod
    def none(cls) -> FeatureSet:
        """Create a set with every feature disabled."""
        return cls()

    def is_on(self, feature: Feature) -> bool:
        """Check if ``feature`` is enabled."""
        return feature in self.enabled

    def is_off(self, feature: Feature) -> bool:
        """Check if ``feature`` is disabled."""
        return feature not in self.enabled


_FEATURE_DOCS = {
    Feature.DATA_OVERLAY: (V2_1, "Enable the data overlay sandbox for routing."),
    Feature.FLEX_ROUTING: (V2_0, "Enable routing with flexible (on-demand) transit."),
    Feature.SANDBOX_API: (V2_2, "Enable the experimental sandbox API endpoints."),
}


def map_feature_set(node: ConfigNode, default: FeatureSet | None = None) -> FeatureSet:
    """
    Read the enabled features from an object of boolean flags.

    Parameters
    ----------
    node
        Node holding one boolean per feature, keyed by the feature value
        (e.g. ``{"DataOverlay": true}``)
    default
        Features enabled when a flag is absent

    Returns
    -------
    FeatureSet
        The enabled features
    """
    default = default or FeatureSet.none()
    enabled = set()
    for feature in Feature:
        since, summary = _FEATURE_DOCS[feature]
        if node.of(feature.value).since(since).summary(summary).as_boolean(
            default.is_on(feature)
        ):
            enabled.add(feature)
    return FeatureSet(frozenset(enabled))
