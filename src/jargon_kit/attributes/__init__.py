from .parser import (
    DuplicatePolicy,
    check_name,
    combine,
    merge_attributes,
    parse_attributes,
)

__all__ = [
    "DuplicatePolicy",
    "check_name",
    "combine",
    "merge_attributes",
    "parse_attributes",
]
