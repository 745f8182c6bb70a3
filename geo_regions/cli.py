#!/usr/bin/env python3
"""
Regions Command Line Interface

Manipulate the given region(s), where a REGION is a rectangle representing a
specific geographic location.

Usage:
    regions -R -10/10/-5/5 -R 0/20/0/10 --merge --echo
    regions -R d --buffer 5 --name
    regions -R -10/10/-5/5 > region.gmt
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from .config import RegionsConfig, Settings
from .constants import HOME_PAGE, LICENSE_TEXT, PROGRAM_NAME, __version__
from .formatters import format_regions
from .region import Region, merge_regions, parse_regions
from .utils import float_or_zero

logger = logging.getLogger(__name__)

# Options whose value may itself start with "-" (e.g. -R -10/10/-5/5)
VALUE_OPTIONS = ("-R", "--region", "-b", "--buffer")
VALUE_SHORT_FLAGS = "Rb"
# Short flags that take no value and may precede -R/-b in a cluster (-mR)
SWITCH_SHORT_FLAGS = "men"
LONG_OPTIONS = (
    "--region", "--buffer", "--merge", "--echo", "--name",
    "--verbose", "--help", "--version",
)


class RegionsUsageError(Exception):
    """Raised when the command line cannot be used to run regions."""


class RegionsArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as RegionsUsageError."""

    def error(self, message):
        raise RegionsUsageError(message)


def build_parser() -> RegionsArgumentParser:
    """Create the regions argument parser."""
    parser = RegionsArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [OPTION]... -R<region> -R<region>...",
        description=(
            "Manipulate the given region(s) where a REGION is a rectangle which represents\n"
            "a specific geographic location."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HOME_PAGE,
        add_help=False,
    )

    parser.add_argument(
        "-R", "--region",
        action="append",
        metavar="REGION",
        help="the input region <west/east/south/north>, or 'd' / 'g'"
    )
    parser.add_argument(
        "-b", "--buffer",
        type=float_or_zero,
        metavar="VALUE",
        help="buffer the region(s) by value"
    )
    parser.add_argument(
        "-m", "--merge",
        action="store_true",
        help="merge the input region(s)"
    )
    parser.add_argument(
        "-e", "--echo",
        action="count",
        default=0,
        help="echo the (processed) region(s); twice to drop the -R"
    )
    parser.add_argument(
        "-n", "--name",
        action="store_true",
        help="echo the (processed) region(s) as a name-string"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="increase the verbosity"
    )
    parser.add_argument(
        "--help",
        action="store_true",
        help="print this help menu and exit"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print version information and exit"
    )
    return parser


def _expand_long_option(arg: str) -> str:
    """Resolve a unique abbreviation of a long option ("--reg" -> "--region")."""
    if arg in LONG_OPTIONS:
        return arg
    matches = [opt for opt in LONG_OPTIONS if opt.startswith(arg)]
    return matches[0] if len(matches) == 1 else arg


def _takes_value(arg: str) -> bool:
    """Check if arg is a value option still waiting for its argument."""
    if arg.startswith("--"):
        return "=" not in arg and _expand_long_option(arg) in VALUE_OPTIONS
    if len(arg) < 2 or not arg.startswith("-"):
        return False
    # Cluster of switches ending in a value flag, e.g. -R or -meb
    return arg[-1] in VALUE_SHORT_FLAGS and all(c in SWITCH_SHORT_FLAGS for c in arg[1:-1])


def attach_option_values(argv: Sequence[str]) -> List[str]:
    """
    Join value options with their following argument.

    argparse treats "-10/10/-5/5" as an unknown option, so "-R -10/10/-5/5"
    becomes "-R-10/10/-5/5", "-mR x" becomes "-mRx" and "--reg x" becomes
    "--region=x".
    """
    args = list(argv)
    joined = []
    i = 0
    while i < len(args):
        arg = args[i]
        if i + 1 < len(args) and _takes_value(arg):
            value = args[i + 1]
            if arg.startswith("--"):
                joined.append(f"{_expand_long_option(arg)}={value}")
            else:
                joined.append(f"{arg}{value}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def version_banner() -> str:
    return f"{PROGRAM_NAME} {__version__}\n" + LICENSE_TEXT.format(prog=PROGRAM_NAME)


def setup_logging(config: RegionsConfig) -> None:
    """Configure stderr logging for a run."""
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    logging.getLogger("geo_regions").setLevel(config.effective_log_level)


def process_regions(config: RegionsConfig) -> List[Region]:
    """
    Parse, merge and buffer the configured regions.

    Returns:
        Regions in input order (a single envelope when merging). Invalid
        regions are kept; the formatters drop them.
    """
    regions = parse_regions(config.regions)
    logger.info(f"Parsed {len(regions)} region(s)")

    if config.merge and regions:
        regions = [merge_regions(regions)]

    if config.buffer is not None:
        for region in regions:
            region.buffer(config.buffer)
        logger.debug(f"Buffered {len(regions)} region(s) by {config.buffer}")

    return regions


def run(config: RegionsConfig, out: Optional[TextIO] = None) -> int:
    """
    Run the regions pipeline and write formatted regions.

    Args:
        config: Run configuration
        out: Output stream (default: stdout)

    Returns:
        Exit status
    """
    out = out if out is not None else sys.stdout
    written = 0
    for text in format_regions(process_regions(config), config):
        print(text, file=out)
        written += 1
    logger.info(f"Wrote {written} region(s) as {config.output_mode.value}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    try:
        args = parser.parse_args(attach_option_values(argv))
    except RegionsUsageError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(2)

    if args.version:
        print(version_banner(), file=sys.stderr)
        sys.exit(0)
    if args.help:
        parser.print_help(sys.stderr)
        sys.exit(0)

    config = RegionsConfig.from_args(args, Settings())
    setup_logging(config)

    if not config.regions:
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        sys.exit(run(config))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
