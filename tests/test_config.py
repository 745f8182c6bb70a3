"""Tests for settings and run configuration"""

import argparse
import logging

from geo_regions import OutputMode, RegionsConfig, Settings


def make_args(**overrides):
    values = dict(region=None, merge=False, buffer=None, echo=0, name=False, verbose=False)
    values.update(overrides)
    return argparse.Namespace(**values)


def test_settings_defaults():
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.feature_name == "regions"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("REGIONS_FEATURE_NAME", "tiles")
    monkeypatch.setenv("REGIONS_LOG_LEVEL", "info")
    settings = Settings()
    assert settings.feature_name == "tiles"
    assert RegionsConfig(log_level=settings.log_level).effective_log_level == logging.INFO


def test_from_args_defaults():
    config = RegionsConfig.from_args(make_args(region=["d"]), Settings())
    assert config.regions == ("d",)
    assert config.output_mode is OutputMode.FEATURE
    assert config.buffer is None
    assert config.echo_prefix


def test_from_args_echo_count():
    assert RegionsConfig.from_args(make_args(echo=1), Settings()).echo_prefix
    assert not RegionsConfig.from_args(make_args(echo=2), Settings()).echo_prefix
    assert RegionsConfig.from_args(make_args(echo=3), Settings()).echo_prefix


def test_from_args_echo_beats_name():
    config = RegionsConfig.from_args(make_args(echo=1, name=True), Settings())
    assert config.output_mode is OutputMode.ECHO


def test_verbose_is_debug():
    assert RegionsConfig(verbose=True).effective_log_level == logging.DEBUG
    assert RegionsConfig().effective_log_level == logging.WARNING
    assert RegionsConfig(log_level="bogus").effective_log_level == logging.WARNING
