"""
Generate the configuration reference documentation.

Each target maps an example configuration with every feature enabled, so all
parameters are registered, and renders the parameter table and details into
a template from ``doc-templates/``. The result is compared with the
committed document in ``docs/``.

Usage:
    # Check that the committed documents are up to date
    python scripts/generate_config_docs.py

    # Rewrite the documents, then review and commit the diff
    python scripts/generate_config_docs.py --update
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from attrs import define

from tripconf.config import (
    DocumentationDriftError,
    FeatureSet,
    ParameterCatalog,
    SkipNodes,
    check_documentation,
    load_config,
    render_detail_list,
    render_summary_table,
)
from tripconf.config.models.build import load_build_config

ROOT_DIR = Path(__file__).parent.parent
TEST_DATA_DIR = ROOT_DIR / "tests" / "test-data"

logger = logging.getLogger("generate_config_docs")


@define
class DocTarget:
    """
    A generated configuration reference document
    """

    name: str
    example: Path
    build_catalog: Callable[[dict], ParameterCatalog]
    skip_nodes: SkipNodes
    heading_level: int = 3

    @property
    def file_name(self) -> str:
        """Name of the template and of the document"""
        return f"{self.name}.md"

    def render(self) -> tuple[str, str]:
        """Render the parameter table and details of the example"""
        catalog = self.build_catalog(load_config(self.example))
        table = render_summary_table(catalog, self.skip_nodes)
        details = render_detail_list(catalog, self.skip_nodes, self.heading_level)
        return table, details


def _build_config_catalog(document: dict) -> ParameterCatalog:
    _, catalog = load_build_config(document, FeatureSet.all(), source="build-config.json")
    return catalog


TARGETS = (
    DocTarget(
        name="BuildConfiguration",
        example=TEST_DATA_DIR / "build-config.json",
        build_catalog=_build_config_catalog,
        skip_nodes=SkipNodes.of(
            "dataOverlay",
            "/docs/sandbox/DataOverlay.md",
            "transferRequests",
            "/docs/RouteRequest.md",
        ),
    ),
)


def main() -> int:
    """Check or update every target, returning the exit code"""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--update",
        action="store_true",
        help="Write the generated documents to the docs directory",
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=ROOT_DIR / "doc-templates",
        help="Directory of the templates with the section markers",
    )
    parser.add_argument(
        "--docs",
        type=Path,
        default=ROOT_DIR / "docs",
        help="Directory of the committed documents",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    failed = 0
    for target in TARGETS:
        output = args.docs / target.file_name
        table, details = target.render()
        try:
            check_documentation(
                args.templates / target.file_name,
                output,
                table,
                details,
                update=args.update,
            )
        except DocumentationDriftError as e:
            failed += 1
            if args.update:
                logger.info(f"Updated {output}, review and commit the change")
            else:
                logger.error(str(e))
        else:
            logger.info(f"{output} is up to date")

    return 1 if failed and not args.update else 0


if __name__ == "__main__":
    sys.exit(main())
