"""Location classifier.

Turns a Nominatim reverse-geocoding payload, the user's name for a place and
the user's tags into a `LocationMetadata` feature vector.

## Resolution Order

Each tier only adds signal for the flags it controls:

1. **User tags** (strongest). A surf-spot tag forces coastal, large water and
   surf-friendly and skips tiers 2-3 for those flags. A ski-resort tag forces
   snow-friendly.
2. **Structured OSM fields**: ``class``/``category``, ``type`` and
   ``extratags.natural`` split into tokens and matched against curated sets.
   Islands and peninsulas are always coastal.
3. **Free text**: names, address POI names, class/type and tags joined into
   one lowercase blob and matched on word boundaries, plus curated lists of
   well-known places. Resorts and parks are matched on the user's name
   only, never on the Nominatim admin chain; coastal towns and surf spots
   also match the Nominatim names. Only consulted for a flag when tier 2
   did not already set it.

## Derived Flags
| Flag | Rule |
|------|------|
| is_urban | urban type or keyword, or address has a city, or address has a suburb and the place is not a park |
| has_large_water_nearby | always true when coastal |
| snow_friendly / surf_friendly | false unless a tier says otherwise |

## Nominatim Payload (format=json, addressdetails=1, extratags=1)
```json
{
  "class": "natural",
  "type": "beach",
  "name": "Rockaway Beach",
  "display_name": "Rockaway Beach, Queens, New York, United States",
  "address": {"natural": "Rockaway Beach", "suburb": "Queens", "country_code": "us"},
  "extratags": {"surface": "sand"}
}
```
The jsonv2 format names the class field ``category``; both are accepted.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from activity_suitability.classification.keywords import (
    COASTAL_PATTERN,
    COASTAL_TOKENS,
    IGNORED_OSM_VALUES,
    ISLAND_TYPES,
    KNOWN_COASTAL_PATTERN,
    KNOWN_PARK_PATTERN,
    KNOWN_SKI_RESORT_PATTERN,
    KNOWN_SURF_SPOT_PATTERN,
    LARGE_WATER_CLASSES,
    LARGE_WATER_PATTERN,
    LARGE_WATER_TOKENS,
    LARGE_WATER_VALUES,
    PARK_PATTERN,
    PARK_TOKENS,
    SKI_PATTERN,
    SKI_TOKENS,
    SKI_VALUES,
    SNOW_RESORT_TAGS,
    SURF_SPOT_TAGS,
    URBAN_PATTERN,
    URBAN_PLACE_TYPES,
)
from activity_suitability.models.location import LocationMetadata

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s_;\-]+")
_SEPARATORS = re.compile(r"[_\-;,]+")

# Address keys that hold names of the feature itself rather than admin areas
_ADDRESS_POI_KEYS = (
    "leisure",
    "tourism",
    "natural",
    "amenity",
    "landuse",
    "neighbourhood",
    "suburb",
)


@dataclass(frozen=True)
class StructuredSignals:
    """Flags inferred from structured OSM class/type values (tier 2)."""

    coastal: bool = False
    large_water: bool = False
    park: bool = False
    urban: bool = False
    ski: bool = False


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _tokens(value: str) -> set[str]:
    """Split an OSM value like 'nature_reserve' into {'nature', 'reserve'}."""
    return {t for t in _TOKEN_SPLIT.split(value.lower()) if t}


def _normalize_tags(tags: Sequence[str] | None) -> list[str]:
    if not tags:
        return []
    return [t.strip().lower() for t in tags if isinstance(t, str) and t.strip()]


def structured_signals(
    osm_class: str,
    osm_type: str,
    extratags: Mapping[str, Any],
) -> StructuredSignals:
    """Infer flags from structured OSM fields.

    Args:
        osm_class: OSM class (e.g. 'natural', 'leisure', 'place')
        osm_type: OSM type (e.g. 'beach', 'park', 'city')
        extratags: Nominatim extratags; only 'natural' is consulted

    Returns:
        StructuredSignals with the flags these fields support
    """
    lowered_class = osm_class.lower()
    lowered_type = osm_type.lower()
    natural = _as_text(extratags.get("natural")).lower()

    values = [v for v in (lowered_type, natural) if v and v not in IGNORED_OSM_VALUES]
    tokens: set[str] = set()
    for value in values:
        tokens |= _tokens(value)

    island = lowered_type in ISLAND_TYPES
    coastal = island or bool(tokens & COASTAL_TOKENS)
    large_water = (
        lowered_class in LARGE_WATER_CLASSES
        or bool(tokens & LARGE_WATER_TOKENS)
        or any(v in LARGE_WATER_VALUES for v in values)
    )
    park = bool(tokens & PARK_TOKENS)
    urban = lowered_class == "place" and lowered_type in URBAN_PLACE_TYPES
    ski = bool(tokens & SKI_TOKENS) or any(v in SKI_VALUES for v in values)

    return StructuredSignals(
        coastal=coastal,
        large_water=large_water,
        park=park,
        urban=urban,
        ski=ski,
    )


def _text_blob(parts: Sequence[str]) -> str:
    """Join non-empty parts into one lowercase blob with separators as spaces."""
    joined = " ".join(p for p in parts if p).lower()
    return _SEPARATORS.sub(" ", joined)


def classify_location(
    raw_place: Mapping[str, Any] | None,
    display_name: str,
    tags: Sequence[str] | None = None,
) -> LocationMetadata:
    """Build LocationMetadata from geocoding data, a place name and user tags.

    Never raises: missing or malformed geocoding data falls back to inference
    from the name and tags alone, with every flag defaulting to False.

    Args:
        raw_place: Nominatim reverse-geocoding payload, or None
        display_name: The user's name for the place
        tags: User tags such as 'surf-spot' or 'ski-resort'

    Returns:
        LocationMetadata with every flag set
    """
    place = _as_mapping(raw_place)
    address = _as_mapping(place.get("address"))
    extratags = _as_mapping(place.get("extratags"))

    osm_class = _as_text(place.get("class")) or _as_text(place.get("category"))
    osm_type = _as_text(place.get("type"))
    place_name = _as_text(place.get("name"))
    place_display_name = _as_text(place.get("display_name"))
    lowered_tags = _normalize_tags(tags)
    tag_set = set(lowered_tags)

    structured = structured_signals(osm_class, osm_type, extratags)
    type_text = "" if osm_type.lower() in IGNORED_OSM_VALUES else osm_type

    # Known resorts and parks match the user's name only
    pin_name = _text_blob([display_name])
    names = _text_blob([display_name, place_name, place_display_name])
    blob = _text_blob(
        [
            display_name,
            place_name,
            place_display_name,
            osm_class,
            type_text,
            *(_as_text(address.get(key)) for key in _ADDRESS_POI_KEYS),
            *lowered_tags,
        ]
    )

    # Coastal, large water and surf-friendly: tags win outright
    if tag_set & SURF_SPOT_TAGS:
        surf_friendly = True
        is_coastal = True
        has_large_water_nearby = True
    else:
        is_coastal = (
            structured.coastal
            or bool(COASTAL_PATTERN.search(blob))
            or bool(KNOWN_COASTAL_PATTERN.search(names))
        )
        has_large_water_nearby = (
            is_coastal
            or structured.large_water
            or bool(LARGE_WATER_PATTERN.search(blob))
        )
        surf_friendly = bool(KNOWN_SURF_SPOT_PATTERN.search(names))

    is_park = (
        structured.park
        or bool(PARK_PATTERN.search(blob))
        or bool(KNOWN_PARK_PATTERN.search(pin_name))
    )

    # A suburb field alone does not make a park urban
    is_urban = (
        structured.urban
        or bool(URBAN_PATTERN.search(blob))
        or bool(_as_text(address.get("city")))
        or (bool(_as_text(address.get("suburb"))) and not is_park)
    )

    snow_friendly = (
        bool(tag_set & SNOW_RESORT_TAGS)
        or structured.ski
        or bool(SKI_PATTERN.search(blob))
        or bool(KNOWN_SKI_RESORT_PATTERN.search(pin_name))
    )

    country_code = _as_text(address.get("country_code")).upper() or None

    metadata = LocationMetadata(
        name=display_name,
        country_code=country_code,
        osm_category=osm_class or None,
        osm_type=osm_type or None,
        is_coastal=is_coastal,
        has_large_water_nearby=has_large_water_nearby,
        is_park=is_park,
        is_urban=is_urban,
        snow_friendly=snow_friendly,
        surf_friendly=surf_friendly,
    )

    logger.debug(
        f"Classified {display_name!r} ({osm_class or '-'}/{osm_type or '-'}): "
        f"coastal={is_coastal} water={has_large_water_nearby} park={is_park} "
        f"urban={is_urban} snow={snow_friendly} surf={surf_friendly}"
    )
    return metadata
