# src/jargon_kit/compiler/config.py

from dataclasses import dataclass
from enum import Enum

from jargon_kit.attributes.parser import DuplicatePolicy


class ErrorMode(str, Enum):
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


@dataclass(frozen=True)
class CompilerConfig:
    """Configuration for a compilation.

    Immutable. Explicit. No magic defaults from environment.
    """

    mode: ErrorMode = ErrorMode.FAIL_FAST
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
    root_tag: str | None = None  # Falls back to the jargon's root
