"""Codec between the data store's delimited strings and facet paths.

The organizations table stores hierarchy as ad-hoc strings:

* ``type``: ``"Main/Sub, Other"``
* ``areas_of_operation``: ``"Main/Level2 (Level3), Main"``
* ``visibility``: ``"Public (verified)"``
* ``tags``: ``"a, b, c"``

Everything past this module works with tuples of path segments; this is the
only place that knows the string form.
"""

import re
from typing import List, Optional, Tuple

from ..models.facets import FacetKey

FacetPath = Tuple[str, ...]

_AREA_LEVELS = re.compile(r"^(.*?)\s*\((.*)\)$")


def split_delimited(value: Optional[str]) -> List[str]:
    """Split a comma-delimited field into trimmed, non-empty tokens."""
    if not value:
        return []
    return [token.strip() for token in str(value).split(",") if token.strip()]


def normalize_path(value: str) -> str:
    """Trim whitespace around every ``/`` so ``"A / B"`` equals ``"A/B"``."""
    return "/".join(part.strip() for part in value.split("/"))


def strip_annotation(value: Optional[str]) -> Optional[str]:
    """Drop a parenthetical annotation.

    ``"Public (verified)"`` becomes ``"Public"``. The cut is made at the first
    ``(``, so any text after the annotation is dropped as well
    (``"Public (A) extra"`` also becomes ``"Public"``), matching how the
    directory has always displayed visibility. Returns ``None`` when nothing
    is left.
    """
    if value is None:
        return None
    stripped = str(value).split("(", 1)[0].strip()
    return stripped or None


def parse_type(token: str) -> FacetPath:
    """Parse a ``type`` token into ``(main,)`` or ``(main, sub)``.

    The sub-category keeps any further ``/`` segments, each trimmed.
    """
    parts = [part.strip() for part in token.split("/")]
    main = parts[0]
    if not main:
        return ()
    sub = "/".join(part for part in parts[1:] if part)
    return (main, sub) if sub else (main,)


def parse_area(token: str) -> FacetPath:
    """Parse an ``areas_of_operation`` token into up to three levels.

    Splits on the first ``/``. The remainder is read as
    ``<level2> (<level3>)`` when it has that shape, otherwise the whole
    remainder is level 2.
    """
    main, _, remainder = token.partition("/")
    main = main.strip()
    if not main:
        return ()
    remainder = normalize_path(remainder).strip()
    if not remainder:
        return (main,)

    match = _AREA_LEVELS.match(remainder)
    if match:
        level2, level3 = match.group(1).strip(), match.group(2).strip()
        if level2 and level3:
            return (main, level2, level3)
        if level2:
            return (main, level2)
        # "(X)" with no level 2 text: keep the raw remainder as level 2
    return (main, remainder)


def parse_token(facet: FacetKey, token: str) -> FacetPath:
    """Parse one token of a record field into a facet path."""
    if facet is FacetKey.TYPE:
        return parse_type(token)
    if facet is FacetKey.AREAS:
        return parse_area(token)
    if facet is FacetKey.VISIBILITY:
        value = strip_annotation(token)
        return (value,) if value else ()
    token = token.strip()
    return (token,) if token else ()


def format_path(facet: FacetKey, path: FacetPath) -> str:
    """Serialize a facet path into its canonical value-string."""
    if not path:
        return ""
    if facet is FacetKey.AREAS and len(path) == 3:
        return f"{path[0]}/{path[1]} ({path[2]})"
    if facet.hierarchical:
        return "/".join(path)
    return path[0]


def parse_value(facet: FacetKey, value: str) -> FacetPath:
    """Parse a selection value-string back into a facet path."""
    if facet is FacetKey.TYPE:
        return parse_type(value)
    if facet is FacetKey.AREAS:
        return parse_area(value)
    value = value.strip()
    return (value,) if value else ()


def canonical_value(facet: FacetKey, value: str) -> str:
    """Canonical form of a selection value-string.

    ``"NGO / Legal"`` becomes ``"NGO/Legal"`` and
    ``"Sudan / Darfur  (North)"`` becomes ``"Sudan/Darfur (North)"``, the same
    strings ``record_values`` produces. Returns ``""`` for blank values.
    """
    path = parse_value(facet, value)
    return format_path(facet, path) if path else ""


def record_values(facet: FacetKey, raw: Optional[str]) -> List[str]:
    """Canonical value-strings a record contributes to ``facet``.

    Multi-valued fields are split on commas first. ``status`` and
    ``visibility`` are single values.
    """
    if raw is None:
        return []
    tokens = split_delimited(raw) if facet.multi_valued else [str(raw)]
    values = []
    for token in tokens:
        path = parse_token(facet, token)
        if path:
            value = format_path(facet, path)
            if value not in values:
                values.append(value)
    return values
