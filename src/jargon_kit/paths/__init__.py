from .path import PathEntry, PathStack, Placement, decide_placement

__all__ = [
    "PathEntry",
    "PathStack",
    "Placement",
    "decide_placement",
]
