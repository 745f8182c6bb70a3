"""
Region Output Formatters

Renders regions as echo strings (-Rw/e/s/n), compact name strings
(n40x25_w105x50) or GMT/OGR multipolygon feature blocks.
"""

from enum import Enum
from typing import Iterable, Iterator, TYPE_CHECKING
import logging

from .constants import (
    ECHO_PREFIX,
    FEATURE_HEADER,
    FEATURE_NAME,
    NON_WEST_LETTER,
    NORTH_LETTER,
    SOUTH_LETTER,
    WEST_LETTER,
)
from .region import Region
from .utils import hundredths, trunc_int

if TYPE_CHECKING:
    from .config import RegionsConfig

logger = logging.getLogger(__name__)


class OutputMode(Enum):
    """How regions are written to stdout."""
    ECHO = "echo"
    NAME = "name"
    FEATURE = "feature"

    @classmethod
    def select(cls, echo: bool = False, name: bool = False) -> "OutputMode":
        """Pick the mode from CLI flags; echo wins over name, name over feature."""
        if echo:
            return cls.ECHO
        if name:
            return cls.NAME
        return cls.FEATURE


def format_echo(region: Region, prefix: bool = True) -> str:
    """Format as west/east/south/north, optionally with the -R marker."""
    text = "%f/%f/%f/%f" % region.to_tuple()
    return ECHO_PREFIX + text if prefix else text


def format_name(region: Region) -> str:
    """
    Format as a name string built from the north and west bounds.

    e.g. Region(-105.5, -104, 39, 40.25) -> "n40x25_w105x50"
    """
    ns = SOUTH_LETTER if region.north < 0 else NORTH_LETTER
    ew = WEST_LETTER if region.west < 0 else NON_WEST_LETTER
    return "%s%02dx%02d_%s%03dx%02d" % (
        ns, abs(trunc_int(region.north)), hundredths(region.north),
        ew, abs(trunc_int(region.west)), hundredths(region.west),
    )


def format_feature(region: Region, header: bool = False, name: str = FEATURE_NAME) -> str:
    """
    Format as a GMT/OGR multipolygon feature.

    The ring starts at the top-left corner and closes back on it.

    Args:
        region: Region to draw
        header: Prepend the @VGMT1.0 file header
        name: Value written to the @D field

    Returns:
        Multi-line feature text without a trailing newline
    """
    lines = []
    if header:
        lines.append(FEATURE_HEADER)
    lines.extend([">", f"# @D{name}", "# @P"])

    ring = [
        (region.west, region.north),
        (region.east, region.north),
        (region.east, region.south),
        (region.west, region.south),
        (region.west, region.north),
    ]
    lines.extend("%f %f" % vertex for vertex in ring)
    return "\n".join(lines)


def format_regions(regions: Iterable[Region], config: "RegionsConfig") -> Iterator[str]:
    """
    Format the valid regions according to the run configuration.

    Invalid regions are skipped without error. In feature mode the header
    is written once, ahead of the first region that is output.
    """
    header_pending = True
    for index, region in enumerate(regions):
        if not region.is_valid():
            logger.debug(f"Skipping invalid region #{index}: {region}")
            continue

        if config.output_mode is OutputMode.ECHO:
            yield format_echo(region, prefix=config.echo_prefix)
        elif config.output_mode is OutputMode.NAME:
            yield format_name(region)
        else:
            yield format_feature(region, header=header_pending, name=config.feature_name)
            header_pending = False
