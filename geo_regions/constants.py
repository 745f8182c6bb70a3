"""Shared constants"""

__version__ = "0.0.4"

PROGRAM_NAME = "regions"

# Named region presets (west/east/south/north)
REGION_PRESETS = {
    "d": "-180/180/-90/90",  # degrees
    "g": "0/360/-90/90",     # global
}

# Field order of a region string
REGION_FIELDS = ("west", "east", "south", "north")
REGION_DELIMITER = "/"

# Echo output marker
ECHO_PREFIX = "-R"

# GMT/OGR feature output
FEATURE_NAME = "regions"
FEATURE_HEADER = (
    "# @VGMT1.0 @GMULTIPOLYGON\n"
    "# @NName\n"
    "# @Tstring\n"
    "# FEATURE_DATA"
)

# Name string letters
NORTH_LETTER = "n"
SOUTH_LETTER = "s"
WEST_LETTER = "w"
# Non-negative west also gets "s"; kept for compatibility with existing names
NON_WEST_LETTER = "s"

HOME_PAGE = "CIRES DEM home page: <http://ciresgroups.colorado.edu/coastalDEM>"

LICENSE_TEXT = (
    "Copyright (c) 2019 - 2021 Matthew Love <matthew.love@colorado.edu>\n"
    "{prog} is licensed under the GPL v.2 or later and is\n"
    "distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;\n"
    "without even the implied warranty of MERCHANTABILITY or FITNESS FOR A\n"
    "PARTICULAR PURPOSE.  See the GNU General Public License for more details.\n"
    "<http://www.gnu.org/licenses/>"
)
