import pytest

from jargon_kit.jargons.jargon import Jargon, build_jargon
from jargon_kit.jargons.models import JargonDefinition

OUTLINE = {
    "name": "outline",
    "rules": [
        {"marker": "#", "tag": "section", "depth": 1, "content": "block"},
        {
            "marker": "-",
            "name": "para",
            "tag": "p",
            "depth": 2,
            "reusable": True,
            "within": ["section"],
        },
    ],
}


@pytest.fixture
def outline_definition() -> JargonDefinition:
    """Sections at depth 1 holding reusable paragraphs at depth 2."""
    return JargonDefinition(**OUTLINE)


@pytest.fixture
def outline(outline_definition: JargonDefinition) -> Jargon:
    return build_jargon(outline_definition)
