"""
tripconf: self-documenting configuration for a trip planner.

The configuration framework lives in :mod:`tripconf.config`, the mapping of
the trip planner's configuration files in :mod:`tripconf.config.models`.
"""

from __future__ import annotations

__version__ = "0.1.0"
