"""
Regions Configuration

Environment-level settings plus the per-run configuration resolved from the
command line. The run configuration is built once and passed to the
pipeline explicitly.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import FEATURE_NAME
from .formatters import OutputMode


class Settings(BaseSettings):
    """Environment settings (REGIONS_* variables or a .env file)"""

    model_config = SettingsConfigDict(
        env_prefix="REGIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Log level used when --verbose is not given
    log_level: str = "WARNING"

    # @D value written into feature output
    feature_name: str = FEATURE_NAME


@dataclass(frozen=True)
class RegionsConfig:
    """Configuration for a single regions run"""
    regions: Tuple[str, ...] = field(default_factory=tuple)
    merge: bool = False
    buffer: Optional[float] = None  # None = no buffering
    output_mode: OutputMode = OutputMode.FEATURE
    echo_prefix: bool = True
    verbose: bool = False
    feature_name: str = FEATURE_NAME
    log_level: str = "WARNING"

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, DEBUG when verbose"""
        if self.verbose:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_args(cls, args, settings: Optional[Settings] = None) -> "RegionsConfig":
        """
        Build from parsed argparse arguments.

        Args:
            args: Namespace from the regions argument parser
            settings: Environment settings (loaded if not given)

        Returns:
            RegionsConfig
        """
        if settings is None:
            settings = Settings()

        echo_count = args.echo or 0
        return cls(
            regions=tuple(args.region or ()),
            merge=bool(args.merge),
            buffer=args.buffer,
            output_mode=OutputMode.select(echo=echo_count > 0, name=bool(args.name)),
            # -e given exactly twice prints bare w/e/s/n
            echo_prefix=echo_count != 2,
            verbose=bool(args.verbose),
            feature_name=settings.feature_name,
            log_level=settings.log_level,
        )
