"""Parsers for the data store's delimited facet fields."""

from .delimited import (
    split_delimited,
    normalize_path,
    strip_annotation,
    parse_type,
    parse_area,
    parse_token,
    parse_value,
    canonical_value,
    format_path,
    record_values,
)

__all__ = [
    "split_delimited",
    "normalize_path",
    "strip_annotation",
    "parse_type",
    "parse_area",
    "parse_token",
    "parse_value",
    "canonical_value",
    "format_path",
    "record_values",
]
