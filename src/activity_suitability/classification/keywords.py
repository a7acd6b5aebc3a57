"""Keyword tables for location classification.

Three kinds of tables live here:

- **Tag sets**: user tags that force a flag (tier 1).
- **OSM token sets**: tokens matched against structured OpenStreetMap
  class/type values after splitting them on ``_``, ``-``, ``;`` and spaces
  (tier 2). ``national_park`` yields the tokens ``national`` and ``park``.
- **Free-text keywords and known places**: phrases matched on word
  boundaries against a lowercase blob of names and tags (tier 3). Matching on
  word boundaries keeps ``ski`` out of ``whiskey`` and ``park`` out of
  ``parking``.

All tables are immutable module constants.
"""

from __future__ import annotations

import re

# -----------------------------------------------------------------------------
# Tier 1: user tags
# -----------------------------------------------------------------------------

SURF_SPOT_TAGS = frozenset({"surf-spot", "surf_spot", "surf-break", "surfing", "surf"})

SNOW_RESORT_TAGS = frozenset(
    {"ski", "ski-area", "ski_area", "ski-resort", "ski_resort", "snowboard"}
)

# -----------------------------------------------------------------------------
# Tier 2: structured OSM values
# -----------------------------------------------------------------------------

# Land surrounded by water is coastal no matter what else is known
ISLAND_TYPES = frozenset({"island", "islet", "archipelago", "peninsula"})

COASTAL_TOKENS = frozenset(
    {
        "beach",
        "coastline",
        "bay",
        "strait",
        "cape",
        "cove",
        "reef",
        "shoal",
        "headland",
        "sea",
        "ocean",
        "gulf",
        "harbour",
        "harbor",
        "marina",
    }
)

LARGE_WATER_TOKENS = frozenset(
    {"lake", "reservoir", "lagoon", "river", "waterway", "estuary", "basin"}
)

LARGE_WATER_CLASSES = frozenset({"water", "waterway"})

# "water" only counts as a whole value; drinking_water is not a lake
LARGE_WATER_VALUES = frozenset({"water"})

# Compound values whose tokens would otherwise read as water or nature
IGNORED_OSM_VALUES = frozenset({"water_park", "drinking_water", "theme_park"})

PARK_TOKENS = frozenset({"park", "reserve", "forest", "wood", "protected"})

URBAN_PLACE_TYPES = frozenset({"city", "town", "suburb", "neighbourhood"})

SKI_TOKENS = frozenset({"ski", "piste"})

SKI_VALUES = frozenset({"winter_sports"})

# -----------------------------------------------------------------------------
# Tier 3: free-text keywords
# -----------------------------------------------------------------------------

COASTAL_KEYWORDS = (
    "coast",
    "coastal",
    "beach",
    "ocean",
    "sea",
    "seaside",
    "bay",
    "harbor",
    "harbour",
    "shore",
    "shoreline",
    "surf",
    "surfing",
    "cape",
    "pier",
    "marina",
    "boardwalk",
    "oceanfront",
)

LARGE_WATER_KEYWORDS = (
    "lake",
    "reservoir",
    "river",
    "lagoon",
    "inlet",
    "sound",
    "strait",
    "channel",
    "estuary",
    "delta",
    "waterway",
    "dam",
)

PARK_KEYWORDS = (
    "park",
    "national park",
    "state park",
    "recreation area",
    "preserve",
    "reserve",
    "forest",
    "woods",
    "garden",
    "gardens",
    "trail",
    "trails",
    "nature",
    "wildlife",
    "conservation",
    "sanctuary",
    "arboretum",
    "botanical",
)

URBAN_KEYWORDS = (
    "city",
    "downtown",
    "midtown",
    "uptown",
    "metropolitan",
    "urban",
    "residential",
    "commercial",
    "industrial",
    "business district",
    "plaza",
    "mall",
)

SKI_KEYWORDS = (
    "ski",
    "skiing",
    "ski area",
    "ski resort",
    "snowboard",
    "snowboarding",
)

# -----------------------------------------------------------------------------
# Tier 3: well-known places (matched against names only)
# -----------------------------------------------------------------------------

KNOWN_SKI_RESORTS = (
    # New York
    "gore mountain",
    "whiteface",
    "belleayre",
    "hunter mountain",
    "windham mountain",
    "holiday valley",
    "bristol mountain",
    "greek peak",
    # Vermont
    "mount snow",
    "killington",
    "stowe",
    "sugarbush",
    "jay peak",
    "okemo",
    "stratton",
    # Colorado
    "vail",
    "aspen",
    "breckenridge",
    "keystone",
    "copper mountain",
    "steamboat",
    "winter park",
    "telluride",
    "crested butte",
    # Utah
    "park city",
    "deer valley",
    "snowbird",
    "alta",
    # California
    "mammoth",
    "squaw valley",
    "palisades tahoe",
    "heavenly",
    "northstar",
    "kirkwood",
    # Other
    "jackson hole",
    "big sky",
    "sun valley",
    "whistler",
)

KNOWN_PARKS = (
    "central park",
    "prospect park",
    "golden gate park",
    "griffith park",
    "millennium park",
    "hyde park",
    "stanley park",
    "high park",
    "yosemite",
    "yellowstone",
    "grand canyon",
    "zion",
    "glacier",
    "rocky mountain",
    "great smoky",
    "acadia",
    "joshua tree",
    "death valley",
    "everglades",
    "mount rainier",
    "sequoia",
    "redwood",
    "big sur",
    "shenandoah",
    "blue ridge",
    "appalachian",
    "catskills",
    "adirondacks",
    "white mountains",
)

KNOWN_COASTAL_LOCATIONS = (
    "montauk",
    "rockaway",
    "long beach",
    "jones beach",
    "fire island",
    "coney island",
    "brighton beach",
    "manhattan beach",
    "breezy point",
    "santa monica",
    "malibu",
    "venice beach",
    "huntington beach",
    "newport beach",
    "laguna beach",
    "san diego",
    "la jolla",
    "waikiki",
    "north shore",
    "ocean city",
    "atlantic city",
    "virginia beach",
    "outer banks",
    "miami beach",
    "fort lauderdale",
    "cocoa beach",
    "daytona beach",
    "gulf shores",
    "galveston",
    "south padre",
    "corpus christi",
    "santa cruz",
    "half moon bay",
    "pacifica",
    "bolinas",
    "stinson beach",
)

# Anything not listed here needs a surf-spot tag
KNOWN_SURF_SPOTS = (
    "montauk",
    "rockaway",
    "long beach",
    "lido beach",
    "ditch plains",
    "mavericks",
    "rincon",
    "trestles",
    "pipeline",
    "waimea bay",
    "steamer lane",
)


def compile_phrases(phrases: tuple[str, ...]) -> re.Pattern[str]:
    """Compile phrases into one case-sensitive word-boundary pattern.

    Longer phrases are tried first so "ski resort" wins over "ski".
    """
    ordered = sorted(phrases, key=len, reverse=True)
    return re.compile(r"\b(?:" + "|".join(re.escape(p) for p in ordered) + r")\b")


COASTAL_PATTERN = compile_phrases(COASTAL_KEYWORDS)
LARGE_WATER_PATTERN = compile_phrases(LARGE_WATER_KEYWORDS)
PARK_PATTERN = compile_phrases(PARK_KEYWORDS)
URBAN_PATTERN = compile_phrases(URBAN_KEYWORDS)
SKI_PATTERN = compile_phrases(SKI_KEYWORDS)

KNOWN_SKI_RESORT_PATTERN = compile_phrases(KNOWN_SKI_RESORTS)
KNOWN_PARK_PATTERN = compile_phrases(KNOWN_PARKS)
KNOWN_COASTAL_PATTERN = compile_phrases(KNOWN_COASTAL_LOCATIONS)
KNOWN_SURF_SPOT_PATTERN = compile_phrases(KNOWN_SURF_SPOTS)
