"""Geo Regions

Parse, merge, buffer and format axis-aligned geographic regions
(west/east/south/north rectangles).
"""

from .constants import __version__
from .region import (
    Point,
    Region,
    REGIONS,
    get_region,
    merge_regions,
    parse_region,
    parse_regions,
)
from .formatters import (
    OutputMode,
    format_echo,
    format_feature,
    format_name,
    format_regions,
)
from .config import RegionsConfig, Settings

__all__ = [
    # Classes
    "Point",
    "Region",
    "OutputMode",
    "RegionsConfig",
    "Settings",
    # Operations
    "parse_region",
    "parse_regions",
    "merge_regions",
    "get_region",
    "REGIONS",
    # Formatters
    "format_echo",
    "format_name",
    "format_feature",
    "format_regions",
]
