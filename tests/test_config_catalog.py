"""
Unit tests for tripconf.config.catalog module.

Tests registration order, re-registration and path conflicts.
"""

from __future__ import annotations

import logging

import pytest

from tripconf.config.catalog import ParameterCatalog
from tripconf.config.exceptions import DuplicateParameterError
from tripconf.config.node import ConfigNode
from tripconf.config.parameters import ParameterRecord, ValueType


def leaf(path: str, summary: str = "Summary.", default=1.0) -> ParameterRecord:
    return ParameterRecord(tuple(path.split(".")), ValueType.DOUBLE, summary, default)


def group(path: str, summary: str = "Group.") -> ParameterRecord:
    return ParameterRecord(tuple(path.split(".")), ValueType.OBJECT, summary)


class TestRegistration:
    """Tests for ParameterCatalog.register."""

    def test_registration_order_is_kept(self):
        """Leaves are listed in the order they were registered."""
        catalog = ParameterCatalog()
        for path in ("walkSpeed", "bikeSpeed", "arriveBy"):
            catalog.register(leaf(path))
        assert [r.dotted_path for r in catalog.leaves()] == [
            "walkSpeed",
            "bikeSpeed",
            "arriveBy",
        ]

    def test_same_parameter_again_replaces(self, caplog):
        """Registering the same parameter twice keeps one record, the last."""
        catalog = ParameterCatalog()
        catalog.register(leaf("walkSpeed", default=1.4))
        catalog.register(leaf("bikeSpeed"))
        with caplog.at_level(logging.DEBUG, logger="tripconf.config.catalog"):
            catalog.register(leaf("walkSpeed", default=1.5))

        assert len(catalog) == 2
        assert catalog.get("walkSpeed").default == 1.5
        assert [r.name for r in catalog.leaves()] == ["walkSpeed", "bikeSpeed"]
        assert "read again" in caplog.text

    def test_last_registration_wins(self):
        """A different summary on the same path replaces the earlier record."""
        catalog = ParameterCatalog()
        catalog.register(leaf("walkSpeed", "Walking speed."))
        catalog.register(leaf("bikeSpeed"))
        catalog.register(leaf("walkSpeed", "Speed of walking."))

        assert len(catalog) == 2
        assert catalog.get("walkSpeed").summary == "Speed of walking."
        assert [r.name for r in catalog.leaves()] == ["walkSpeed", "bikeSpeed"]

    def test_last_registration_wins_with_other_type(self):
        """The type of the last registration is kept."""
        catalog = ParameterCatalog()
        catalog.register(leaf("numItineraries"))
        catalog.register(
            ParameterRecord(("numItineraries",), ValueType.INTEGER, "Summary.", 50)
        )

        record = catalog.get("numItineraries")
        assert record.value_type is ValueType.INTEGER
        assert record.default == 50

    def test_leaf_over_group_is_aliasing(self):
        """A leaf cannot share the path of a grouping with parameters."""
        catalog = ParameterCatalog()
        catalog.register(leaf("islandPruning.size"))
        with pytest.raises(DuplicateParameterError, match="islandPruning"):
            catalog.register(leaf("islandPruning"))

    def test_leaf_under_leaf_is_aliasing(self):
        """A parameter cannot be registered beneath another parameter."""
        catalog = ParameterCatalog()
        catalog.register(leaf("walkSpeed", "Walking speed."))
        with pytest.raises(DuplicateParameterError, match="walkSpeed.max") as exc_info:
            catalog.register(leaf("walkSpeed.max", "Maximum walking speed."))
        assert exc_info.value.existing == "Walking speed."

    def test_mapping_the_same_path_twice(self):
        """Mapping one path twice keeps a single record from the last call."""
        root = ConfigNode.root({"walkSpeed": 1.5})
        root.of("walkSpeed").summary("Walking speed.").as_double(1.4)
        value = root.of("walkSpeed").summary("Another speed.").as_double(1.3)

        assert value == 1.5
        assert len(root.catalog) == 1
        record = root.catalog.get("walkSpeed")
        assert record.summary == "Another speed."
        assert record.default == 1.3


class TestLookup:
    """Tests for lookups and the tree walk."""

    def test_get_by_dotted_or_tuple_path(self):
        """get() accepts dotted paths and tuples."""
        catalog = ParameterCatalog()
        catalog.register(leaf("unpreferred.routes"))
        assert catalog.get("unpreferred.routes") is catalog.get(("unpreferred", "routes"))
        assert catalog.get("unpreferred.agencies") is None

    def test_contains_only_leaves(self):
        """Only parameters, not groupings, are contained."""
        catalog = ParameterCatalog()
        catalog.register_group(group("unpreferred"))
        catalog.register(leaf("unpreferred.routes"))
        assert "unpreferred.routes" in catalog
        assert "unpreferred" not in catalog
        assert 42 not in catalog

    def test_walk_skips_groups_without_leaves(self):
        """Groupings only show up once a parameter is registered beneath them."""
        catalog = ParameterCatalog()
        catalog.register_group(group("dataOverlay"))
        catalog.register_group(group("islandPruning"))
        catalog.register(leaf("islandPruning.size"))
        catalog.register(leaf("walkSpeed"))

        walked = [(depth, ".".join(e.path)) for depth, e in catalog.walk()]
        assert walked == [
            (0, "islandPruning"),
            (1, "islandPruning.size"),
            (0, "walkSpeed"),
        ]

    def test_group_record_is_kept(self):
        """The metadata given to a grouping is available on its entry."""
        catalog = ParameterCatalog()
        catalog.register_group(group("islandPruning", "Pruning settings."))
        catalog.register(leaf("islandPruning.size"))

        _, entry = next(catalog.walk())
        assert not entry.is_leaf
        assert entry.record.summary == "Pruning settings."

    def test_one_catalog_per_pass(self):
        """Separate passes over different documents do not share parameters."""
        first = ConfigNode.root({"walkSpeed": 1.5})
        first.of("walkSpeed").summary("Walking speed.").as_double(1.4)
        second = ConfigNode.root({"bikeSpeed": 5.0})
        second.of("bikeSpeed").summary("Biking speed.").as_double(5.0)

        assert [r.name for r in first.catalog.leaves()] == ["walkSpeed"]
        assert [r.name for r in second.catalog.leaves()] == ["bikeSpeed"]

    def test_consumed_paths(self):
        """Values read by the accessors are recorded as consumed."""
        root = ConfigNode.root({"walkSpeed": 1.5})
        root.of("walkSpeed").summary("Walking speed.").as_double(1.4)
        root.of("bikeSpeed").summary("Biking speed.").as_double(5.0)
        assert root.catalog.consumed_paths == frozenset({("walkSpeed",)})
