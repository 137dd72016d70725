from .spans import Segment, Span, parse_spans

__all__ = ["Segment", "Span", "parse_spans"]
