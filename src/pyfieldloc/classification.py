"""Device-type classification.

Device type labels are free text (``"starlink_dish_01"``,
``"GPS-Receiver"``, ``"rpi-system-monitor"``). A label is matched,
case-insensitively, against a keyword table by substring; the first rule
that matches decides the category. Keyword sets of different categories
must not overlap (see :func:`validate_keyword_rules`), so in practice rule
order only matters for labels naming two device families at once.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyfieldloc.exceptions import FieldLocConfigError
from pyfieldloc.models.location import LocationSource

KeywordRule = tuple[str, LocationSource]

DEFAULT_KEYWORD_RULES: tuple[KeywordRule, ...] = (
    ("starlink", LocationSource.SATELLITE),
    ("gps", LocationSource.GPS),
    ("gnss", LocationSource.GPS),
    ("lora", LocationSource.LORA),
    ("arduino", LocationSource.ENVIRONMENTAL),
    ("adsb", LocationSource.ADSB),
    ("aircraft", LocationSource.ADSB),
    ("thermal", LocationSource.SYSTEM),
    ("probe", LocationSource.SYSTEM),
    ("system", LocationSource.SYSTEM),
    ("monitor", LocationSource.SYSTEM),
    ("wifi", LocationSource.WIFI),
    ("bluetooth", LocationSource.BLUETOOTH),
    ("ble", LocationSource.BLUETOOTH),
)

DEFAULT_SOURCE = LocationSource.GEOLOCATED


def validate_keyword_rules(rules: Iterable[KeywordRule]) -> tuple[KeywordRule, ...]:
    """Check a keyword table and return it as a tuple.

    Raises
    ------
    FieldLocConfigError
        If a keyword is blank or not lower-case, maps to ``UNKNOWN``, or
        overlaps (as a substring) with a keyword of another category.
    """
    checked: list[KeywordRule] = []
    for keyword, source in rules:
        if not isinstance(keyword, str) or not keyword.strip():
            raise FieldLocConfigError("keyword must be a non-empty string", field="keyword_rules")
        if keyword != keyword.strip().lower():
            raise FieldLocConfigError(f"keyword {keyword!r} must be lower-case and stripped", field="keyword_rules")
        try:
            source = LocationSource(source)
        except ValueError as exc:
            raise FieldLocConfigError(
                f"keyword {keyword!r} maps to unknown category {source!r}", field="keyword_rules"
            ) from exc
        if source == LocationSource.UNKNOWN:
            raise FieldLocConfigError(f"keyword {keyword!r} cannot map to 'unknown'", field="keyword_rules")
        for other, other_source in checked:
            if other_source == source:
                continue
            if keyword in other or other in keyword:
                raise FieldLocConfigError(
                    f"keyword {keyword!r} ({source}) overlaps {other!r} ({other_source})",
                    field="keyword_rules",
                )
        checked.append((keyword, source))
    return tuple(checked)


def classify_device_type(
    device_type: str | None,
    *,
    rules: Iterable[KeywordRule] = DEFAULT_KEYWORD_RULES,
    default: LocationSource = DEFAULT_SOURCE,
) -> LocationSource:
    """Map a free-text device type label to a :class:`LocationSource`.

    Labels matching no keyword (including empty ones) get *default*.
    """
    if not device_type:
        return default
    label = device_type.lower()
    for keyword, source in rules:
        if keyword in label:
            return source
    return default
