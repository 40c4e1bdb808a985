"""
Unit tests for tripconf.config.features module.
"""

from __future__ import annotations

import pytest

from tripconf.config.exceptions import ParameterTypeError
from tripconf.config.features import Feature, FeatureSet, map_feature_set
from tripconf.config.node import ConfigNode


class TestFeatureSet:
    """Tests for FeatureSet."""

    def test_of(self):
        """Only the given features are on."""
        features = FeatureSet.of(Feature.DATA_OVERLAY)
        assert features.is_on(Feature.DATA_OVERLAY)
        assert features.is_off(Feature.FLEX_ROUTING)

    def test_all_and_none(self):
        """all() enables every feature and none() disables them."""
        assert all(FeatureSet.all().is_on(f) for f in Feature)
        assert all(FeatureSet.none().is_off(f) for f in Feature)

    def test_value_semantics(self):
        """Feature sets compare by their content and are hashable."""
        assert FeatureSet.of(Feature.SANDBOX_API) == FeatureSet.of(Feature.SANDBOX_API)
        assert len({FeatureSet.none(), FeatureSet()}) == 1


class TestMapFeatureSet:
    """Tests for map_feature_set."""

    def test_flags(self):
        """Flags are read by feature name."""
        root = ConfigNode.root({"DataOverlay": True, "SandboxAPI": False})
        features = map_feature_set(root)

        assert features == FeatureSet.of(Feature.DATA_OVERLAY)
        assert [r.name for r in root.catalog.leaves()] == [
            "DataOverlay",
            "FlexRouting",
            "SandboxAPI",
        ]

    def test_defaults(self):
        """Absent flags keep their default."""
        root = ConfigNode.root({"SandboxAPI": False})
        default = FeatureSet.of(Feature.FLEX_ROUTING, Feature.SANDBOX_API)
        assert map_feature_set(root, default) == FeatureSet.of(Feature.FLEX_ROUTING)

    def test_invalid_flag(self):
        """A flag must be a boolean."""
        root = ConfigNode.root({"FlexRouting": "yes"})
        with pytest.raises(ParameterTypeError, match="FlexRouting"):
            map_feature_set(root)
