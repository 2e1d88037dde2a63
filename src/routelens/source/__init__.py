"""Scanner-based reading and editing of route handler sources."""

from routelens.source.exports import HTTP_METHODS, METHOD_ORDER, extract_methods, sort_methods
from routelens.source.mutation import (
    add_method,
    add_method_to_source,
    remove_method,
    remove_method_from_source,
)
from routelens.source.scaffold import create_fallback_file
from routelens.source.scanner import ScanState, scan, strip_comments

__all__ = [
    "HTTP_METHODS",
    "METHOD_ORDER",
    "ScanState",
    "add_method",
    "add_method_to_source",
    "create_fallback_file",
    "extract_methods",
    "remove_method",
    "remove_method_from_source",
    "scan",
    "sort_methods",
    "strip_comments",
]
