"""Tests for echo, name and feature output"""

from geo_regions import (
    OutputMode,
    Region,
    RegionsConfig,
    format_echo,
    format_feature,
    format_name,
    format_regions,
)


class TestOutputMode:

    def test_priority(self):
        assert OutputMode.select(echo=True, name=True) is OutputMode.ECHO
        assert OutputMode.select(name=True) is OutputMode.NAME
        assert OutputMode.select() is OutputMode.FEATURE


class TestEcho:

    def test_with_prefix(self, box):
        assert format_echo(box) == "-R-10.000000/10.000000/-5.000000/5.000000"

    def test_without_prefix(self, box):
        assert format_echo(box, prefix=False) == "-10.000000/10.000000/-5.000000/5.000000"


class TestName:

    def test_north_west(self):
        assert format_name(Region(-105.5, -104, 39, 40.25)) == "n40x25_w105x50"

    def test_south(self):
        assert format_name(Region(-70.75, -60, -40, -33.5)) == "s33x50_w070x75"

    def test_non_negative_west_uses_s(self):
        assert format_name(Region(12.5, 20, 0, 45)) == "n45x00_s012x50"

    def test_zero_north_is_north(self):
        assert format_name(Region(-1, 1, -1, 0)) == "n00x00_w001x00"


class TestFeature:

    def test_body(self, box):
        assert format_feature(box).splitlines() == [
            ">",
            "# @Dregions",
            "# @P",
            "-10.000000 5.000000",
            "10.000000 5.000000",
            "10.000000 -5.000000",
            "-10.000000 -5.000000",
            "-10.000000 5.000000",
        ]

    def test_header(self, box):
        lines = format_feature(box, header=True, name="tiles").splitlines()
        assert lines[:4] == [
            "# @VGMT1.0 @GMULTIPOLYGON",
            "# @NName",
            "# @Tstring",
            "# FEATURE_DATA",
        ]
        assert lines[5] == "# @Dtiles"
        assert len(lines) == 12


class TestFormatRegions:

    def test_invalid_regions_are_skipped(self, box):
        config = RegionsConfig(output_mode=OutputMode.ECHO)
        out = list(format_regions([Region(5, 5, -1, 1), box, Region(0, 1, 2, 1)], config))
        assert out == [format_echo(box)]

    def test_all_invalid_gives_nothing(self):
        config = RegionsConfig(output_mode=OutputMode.NAME)
        assert list(format_regions([Region(5, 5, -1, 1)], config)) == []

    def test_feature_header_once(self, box):
        config = RegionsConfig()
        out = list(format_regions([Region(5, 5, -1, 1), box, box], config))
        assert len(out) == 2
        assert out[0].startswith("# @VGMT1.0")
        assert out[1].startswith(">")

    def test_echo_prefix_from_config(self, box):
        config = RegionsConfig(output_mode=OutputMode.ECHO, echo_prefix=False)
        assert list(format_regions([box], config)) == [format_echo(box, prefix=False)]
