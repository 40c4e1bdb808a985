"""
Unit tests for tripconf.config.loader module.

Tests loading JSON and TOML documents, layering and deep merging.
"""

from __future__ import annotations

import pytest

from tripconf.config.exceptions import ConfigError
from tripconf.config.loader import (
    deep_merge,
    load_config,
    load_config_layers,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_overlapping_scalar_values(self):
        """deep_merge overrides scalar values."""
        base = {"walkSpeed": 1.3, "bikeSpeed": 5.0}
        override = {"bikeSpeed": 6.0}
        assert deep_merge(base, override) == {"walkSpeed": 1.3, "bikeSpeed": 6.0}

    def test_merge_nested_dicts(self):
        """deep_merge recursively merges nested objects."""
        base = {"routingDefaults": {"walkSpeed": 1.3, "numItineraries": 3}}
        override = {"routingDefaults": {"numItineraries": 5, "arriveBy": True}}
        result = deep_merge(base, override)
        assert result == {
            "routingDefaults": {"walkSpeed": 1.3, "numItineraries": 5, "arriveBy": True}
        }

    def test_merge_replaces_lists(self):
        """deep_merge replaces lists instead of concatenating."""
        base = {"transferRequests": [{"modes": "WALK"}, {"modes": "BICYCLE"}]}
        override = {"transferRequests": [{"modes": "CAR"}]}
        result = deep_merge(base, override)
        assert result == {"transferRequests": [{"modes": "CAR"}]}

    def test_object_replaces_scalar(self):
        """An object in the override replaces a scalar in the base."""
        base = {"modes": "WALK"}
        override = {"modes": {"accessMode": "BIKE"}}
        assert deep_merge(base, override) == override

    def test_scalar_replaces_object(self):
        """A scalar in the override replaces an object in the base."""
        base = {"dataOverlay": {"fileName": "data.nc"}}
        assert deep_merge(base, {"dataOverlay": None}) == {"dataOverlay": None}

    def test_merge_empty_documents(self):
        """deep_merge with an empty side returns the other side."""
        assert deep_merge({}, {"a": 1}) == {"a": 1}
        assert deep_merge({"a": 1}, {}) == {"a": 1}

    def test_inputs_unchanged(self):
        """Merging builds new objects where both sides have one."""
        base = {"islandPruning": {"islandWithStopsMaxSize": 2}}
        override = {"islandPruning": {"islandWithoutStopsMaxSize": 10}}
        merged = deep_merge(base, override)
        merged["islandPruning"]["islandWithStopsMaxSize"] = 99

        assert base == {"islandPruning": {"islandWithStopsMaxSize": 2}}
        assert override == {"islandPruning": {"islandWithoutStopsMaxSize": 10}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_json(self, tmp_path):
        """load_config loads a JSON document."""
        config_file = tmp_path / "router-config.json"
        config_file.write_text('{"routingDefaults": {"walkSpeed": 1.5}}')

        config = load_config(config_file)
        assert config == {"routingDefaults": {"walkSpeed": 1.5}}

    def test_load_valid_toml(self, tmp_path):
        """load_config loads a TOML document."""
        config_file = tmp_path / "build-config.toml"
        config_file.write_text("""
maxAreaNodes = 800

[islandPruning]
islandWithStopsMaxSize = 5
        """)

        config = load_config(config_file)
        assert config["maxAreaNodes"] == 800
        assert config["islandPruning"]["islandWithStopsMaxSize"] == 5

    def test_load_config_file_not_found(self, tmp_path):
        """load_config raises FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_load_config_invalid_json(self, tmp_path):
        """load_config raises ConfigError for invalid JSON."""
        config_file = tmp_path / "invalid.json"
        config_file.write_text('{"walkSpeed": ')

        with pytest.raises(ConfigError, match="Unable to parse"):
            load_config(config_file)

    def test_load_config_invalid_toml(self, tmp_path):
        """load_config raises ConfigError for invalid TOML."""
        config_file = tmp_path / "invalid.toml"
        config_file.write_text("this is not valid TOML [[")

        with pytest.raises(ConfigError, match="Unable to parse"):
            load_config(config_file)

    def test_load_config_unsupported_suffix(self, tmp_path):
        """load_config rejects files that are neither JSON nor TOML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("walkSpeed: 1.5")

        with pytest.raises(ConfigError, match="Unsupported configuration file type"):
            load_config(config_file)

    def test_load_config_top_level_must_be_object(self, tmp_path):
        """load_config rejects a JSON document whose top level is an array."""
        config_file = tmp_path / "list.json"
        config_file.write_text("[1, 2, 3]")

        with pytest.raises(ConfigError, match="must be an object"):
            load_config(config_file)

    def test_load_config_accepts_string_path(self, tmp_path):
        """load_config accepts a string path."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"configVersion": "v1"}')

        assert load_config(str(config_file)) == {"configVersion": "v1"}


class TestLoadConfigLayers:
    """Tests for load_config_layers function."""

    def test_load_single_layer(self, tmp_path):
        """load_config_layers works with a single file."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"maxAreaNodes": 100}')

        assert load_config_layers(config_file) == {"maxAreaNodes": 100}

    def test_load_multiple_layers_override(self, tmp_path):
        """load_config_layers merges files, later ones taking precedence."""
        base = tmp_path / "base.json"
        base.write_text('{"routingDefaults": {"walkSpeed": 1.3, "numItineraries": 3}}')

        override = tmp_path / "override.toml"
        override.write_text("""
[routingDefaults]
numItineraries = 5
arriveBy = true
        """)

        config = load_config_layers(base, override)
        defaults = config["routingDefaults"]
        assert defaults["walkSpeed"] == 1.3  # From base
        assert defaults["numItineraries"] == 5  # Overridden
        assert defaults["arriveBy"] is True  # New in override

    def test_load_config_layers_preserves_order(self, tmp_path):
        """load_config_layers applies overrides in argument order."""
        layers = []
        for name in ("first", "second", "third"):
            layer = tmp_path / f"{name}.json"
            layer.write_text(f'{{"test": {{"value": "{name}"}}}}')
            layers.append(layer)

        assert load_config_layers(*layers)["test"]["value"] == "third"
        assert load_config_layers(*reversed(layers))["test"]["value"] == "first"

    def test_load_config_layers_empty(self):
        """load_config_layers with no paths returns an empty dict."""
        assert load_config_layers() == {}
