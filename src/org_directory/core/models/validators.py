"""Validation functions for data models."""

from typing import Any, Optional


def to_str(value: Any) -> str:
    """Convert value to string and strip whitespace."""
    return str(value).strip()


def to_frozenset(value: Any) -> frozenset:
    """Convert a single value or an iterable of values to a frozenset of strings."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value])
    return frozenset(str(v) for v in value)


def empty_to_none(value: Any) -> Optional[Any]:
    """Convert empty strings to None."""
    if isinstance(value, str) and value == "":
        return None
    return value


def normalize(value: Any) -> Optional[Any]:
    """Normalize strings.

    - Strip white spaces, tabs and new lines.
    - Replace tabs, new lines and multiple white spaces with one white space.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return " ".join(value.split())

    return value


def to_year(value: Any) -> Optional[int]:
    """Coerce a founding year leniently.

    Accepts ints, numeric strings and integral floats. Anything else,
    including years that are zero or negative, becomes ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = int(float(value))
        except ValueError:
            return None
    elif not isinstance(value, int):
        return None

    return value if value > 0 else None


def to_delimited(value: Any) -> str:
    """Like ``to_str``, but join list values with commas.

    Multi-valued columns may come back from the data store either as a
    comma-delimited string or as an array.
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(to_str(v) for v in value if v is not None and to_str(v))
    return to_str(value)


def to_text(value: Any) -> str:
    """Convert non-string values to string, leaving strings untouched."""
    if isinstance(value, str):
        return value
    return str(value)
