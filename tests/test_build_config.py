"""
Tests for the build configuration mapping and its generated documentation.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from tripconf.config import (
    Feature,
    FeatureSet,
    MissingParameterError,
    ParameterTypeError,
    SkipNodes,
    UnknownParametersError,
    check_documentation,
    load_config,
    render_detail_list,
    render_summary_table,
)
from tripconf.config.models.build import BuildConfig, IslandPruningConfig, load_build_config
from tripconf.config.models.data_overlay import IndexVariable, TimeFormat
from tripconf.config.models.routing import RouteRequest
from tripconf.config.models.routing.modes import StreetMode

ROOT_DIR = Path(__file__).parent.parent
TEST_DATA_DIR = Path(__file__).parent / "test-data"

SKIP_NODES = SkipNodes.of(
    "dataOverlay",
    "/docs/sandbox/DataOverlay.md",
    "transferRequests",
    "/docs/RouteRequest.md",
)


@pytest.fixture
def build_document():
    return load_config(TEST_DATA_DIR / "build-config.json")


class TestLoadBuildConfig:
    """Tests for load_build_config."""

    def test_example(self, build_document):
        """The example document is mapped."""
        config, _ = load_build_config(
            build_document, FeatureSet.all(), strict=True, source="build-config.json"
        )

        assert config.config_version == "v2.3.0-EN000121"
        assert config.data_import_report is True
        assert config.max_data_import_issues_per_file == 500
        assert config.embed_router_config is True
        assert config.max_area_nodes == 800
        assert config.subway_access_time == 2.5
        assert config.max_transfer_duration == timedelta(minutes=45)
        assert config.island_pruning == IslandPruningConfig(
            island_with_stops_max_size=5, island_without_stops_max_size=20
        )

    def test_data_overlay(self, build_document):
        """The data overlay is mapped when the feature is on."""
        config, _ = load_build_config(build_document, FeatureSet.of(Feature.DATA_OVERLAY))

        overlay = config.data_overlay
        assert overlay.file_name == "graphs/data-file.nc4"
        assert overlay.time_format is TimeFormat.HOURS
        assert overlay.index_variables == [
            IndexVariable(
                "harmfulMicroparticlesPM2_5",
                "Harmful micro particles PM 2.5",
                "cnc_PM2_5",
            )
        ]

    def test_data_overlay_feature_off(self, build_document):
        """With the feature off the data overlay is not read."""
        config, catalog = load_build_config(build_document)
        assert config.data_overlay is None
        assert "dataOverlay.fileName" not in catalog

        with pytest.raises(UnknownParametersError, match="dataOverlay.fileName"):
            load_build_config(build_document, strict=True)

    def test_data_overlay_file_name_required(self):
        """A configured data overlay needs a file name."""
        document = {"dataOverlay": {"timeFormat": "seconds"}}
        with pytest.raises(MissingParameterError, match="dataOverlay.fileName"):
            load_build_config(document, FeatureSet.all())

    def test_transfer_requests(self, build_document):
        """Each transfer request is mapped as a route request."""
        config, _ = load_build_config(build_document, FeatureSet.all())

        assert len(config.transfer_requests) == 2
        first, second = config.transfer_requests
        assert first.journey.modes.transit_modes == frozenset()
        assert first.journey.modes.direct_mode is StreetMode.WALK
        assert first.wheelchair is False
        assert second.wheelchair is True

    def test_empty_document(self):
        """An empty document gives the default configuration."""
        config, catalog = load_build_config({})
        assert config == BuildConfig()
        assert config.transfer_requests == [RouteRequest()]
        assert "islandPruning.adaptivePruningDistance" in catalog

    def test_unknown_parameter(self, caplog):
        """Misspelled top level keys are reported."""
        config, _ = load_build_config({"maxAreaNode": 10}, source="build-config.json")
        assert config.max_area_nodes == 500
        assert "maxAreaNode" in caplog.text

    def test_duration_out_of_range(self):
        """A duration too long to represent is a type error naming the parameter."""
        with pytest.raises(ParameterTypeError, match="maxTransferDuration") as exc_info:
            load_build_config({"maxTransferDuration": "99999999999d"})
        assert exc_info.value.expected == "duration"
        assert exc_info.value.raw == "99999999999d"

    def test_transfer_request_errors_name_the_element(self):
        """Errors inside a transfer request include the element index."""
        document = {"transferRequests": [{}, {"walkSpeed": "fast"}]}
        with pytest.raises(ParameterTypeError, match=r"transferRequests\[1\]\.walkSpeed"):
            load_build_config(document)


class TestBuildConfigDocumentation:
    """The committed build configuration documentation is up to date."""

    def test_documentation_is_up_to_date(self, build_document):
        """
        The committed document equals the one generated from the code.

        If this fails, run ``python scripts/generate_config_docs.py --update``
        and commit the result.
        """
        _, catalog = load_build_config(build_document, FeatureSet.all())
        check_documentation(
            ROOT_DIR / "doc-templates" / "BuildConfiguration.md",
            ROOT_DIR / "docs" / "BuildConfiguration.md",
            render_summary_table(catalog, SKIP_NODES),
            render_detail_list(catalog, SKIP_NODES),
        )

    def test_documentation_does_not_depend_on_values(self, build_document):
        """The example and an empty document document the same parameters."""
        _, example = load_build_config(build_document, FeatureSet.all())
        _, empty = load_build_config(
            {"dataOverlay": {"fileName": "x.nc"}, "transferRequests": [{}]},
            FeatureSet.all(),
        )
        assert render_summary_table(example, SKIP_NODES) == render_summary_table(
            empty, SKIP_NODES
        )
