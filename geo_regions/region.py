"""
Region Data Model

Axis-aligned geographic rectangles bounded by west/east/south/north, with the
geometric operations the regions tool applies to them: validity, center,
buffer and merge. Also parses region strings and named presets.

Example usage:
    from geo_regions.region import parse_region, merge_regions

    regions = [parse_region("-10/10/-5/5"), parse_region("0/20/0/10")]
    envelope = merge_regions(regions).buffer(2)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
import logging

import numpy as np

from .constants import REGION_DELIMITER, REGION_FIELDS, REGION_PRESETS
from .utils import float_or_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A planar (x, y) point, e.g. the center of a region."""
    x: float
    y: float


@dataclass
class Region:
    """
    A rectangular region in planar lon/lat coordinates.

    Mutable so it can be buffered in place.

    Attributes:
        west: Minimum x (longitude), aliased as xmin
        east: Maximum x (longitude), aliased as xmax
        south: Minimum y (latitude), aliased as ymin
        north: Maximum y (latitude), aliased as ymax
    """

    west: float = 0.0
    east: float = 0.0
    south: float = 0.0
    north: float = 0.0

    @property
    def xmin(self) -> float:
        return self.west

    @xmin.setter
    def xmin(self, value: float) -> None:
        self.west = value

    @property
    def xmax(self) -> float:
        return self.east

    @xmax.setter
    def xmax(self, value: float) -> None:
        self.east = value

    @property
    def ymin(self) -> float:
        return self.south

    @ymin.setter
    def ymin(self, value: float) -> None:
        self.south = value

    @property
    def ymax(self) -> float:
        return self.north

    @ymax.setter
    def ymax(self, value: float) -> None:
        self.north = value

    @property
    def width(self) -> float:
        """Extent in x (east - west)."""
        return self.east - self.west

    @property
    def height(self) -> float:
        """Extent in y (north - south)."""
        return self.north - self.south

    @property
    def center(self) -> Point:
        """Get center point as Point(x, y)."""
        return Point(
            x=self.west + (self.east - self.west) / 2,
            y=self.south + (self.north - self.south) / 2,
        )

    def is_valid(self) -> bool:
        """Check that west < east and south < north."""
        return self.west < self.east and self.south < self.north

    def buffer(self, margin: float) -> Region:
        """
        Extend all four bounds outward by margin, in place.

        A negative margin shrinks the region and may leave it invalid; the
        result is not re-validated.

        Args:
            margin: Distance to move each bound

        Returns:
            self, for chaining
        """
        self.west -= margin
        self.east += margin
        self.south -= margin
        self.north += margin
        return self

    def buffered(self, margin: float) -> Region:
        """Return a buffered copy, leaving this region untouched."""
        return self.copy().buffer(margin)

    def copy(self) -> Region:
        return Region(self.west, self.east, self.south, self.north)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Return as (west, east, south, north) tuple."""
        return (self.west, self.east, self.south, self.north)


def parse_region(token: str) -> Region:
    """
    Parse a region token into a Region.

    The token is either a preset name ("d" or "g") or a string of the form
    west/east/south/north. Parsing is tolerant: empty fields are skipped,
    extra fields are ignored, missing fields are 0.0 and non-numeric
    fields become 0.0.

    Args:
        token: Region string or preset name

    Returns:
        Parsed Region (possibly invalid)
    """
    region_string = REGION_PRESETS.get(token, token)
    fields = [f for f in region_string.split(REGION_DELIMITER) if f]

    if len(fields) != len(REGION_FIELDS):
        logger.debug(
            f"Region '{token}' has {len(fields)} field(s), expected {len(REGION_FIELDS)}"
        )

    values = [float_or_zero(f) for f in fields[:len(REGION_FIELDS)]]
    values += [0.0] * (len(REGION_FIELDS) - len(values))

    region = Region(*values)
    logger.debug(f"Parsed '{token}' -> {region}")
    return region


def parse_regions(tokens: Iterable[str]) -> List[Region]:
    """Parse region tokens, preserving their order."""
    return [parse_region(token) for token in tokens]


def merge_regions(regions: Iterable[Region]) -> Region:
    """
    Combine regions into their bounding envelope.

    Args:
        regions: One or more regions

    Returns:
        New Region with min west/south and max east/north

    Raises:
        ValueError: If no regions are given
    """
    bounds = np.array([r.to_tuple() for r in regions], dtype=float)
    if bounds.size == 0:
        raise ValueError("Cannot merge an empty list of regions")

    mins = bounds.min(axis=0)
    maxs = bounds.max(axis=0)

    merged = Region(
        west=float(mins[0]),
        east=float(maxs[1]),
        south=float(mins[2]),
        north=float(maxs[3]),
    )
    logger.debug(f"Merged {len(bounds)} region(s) -> {merged}")
    return merged


# Quick lookup by name
REGIONS = {name: parse_region(value) for name, value in REGION_PRESETS.items()}


def get_region(name: str) -> Region:
    """Get a copy of a preset region by name."""
    if name not in REGIONS:
        raise ValueError(f"Unknown region: {name}. Available: {list(REGIONS.keys())}")
    return REGIONS[name].copy()
