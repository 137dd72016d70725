from .escaping import (
    decode_references,
    escape,
    literal_text,
    normalize_whitespace,
    process_text,
)
from .lines import Line, split_lines

__all__ = [
    "Line",
    "split_lines",
    "decode_references",
    "escape",
    "literal_text",
    "normalize_whitespace",
    "process_text",
]
