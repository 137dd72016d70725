from pathlib import Path

import pytest

from jargon_kit.jargons.defaults import default_registry, html_jargon
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.jargons.library import JargonLibrary


@pytest.fixture(scope="module")
def html() -> Jargon:
    return html_jargon()


@pytest.fixture
def jargons_dir(tmp_path: Path) -> Path:
    """A documentation dialect layered on the built-in HTML jargon."""
    (tmp_path / "docs.yaml").write_text(
        """name: docs
extends: html
root: main
rules:
  - marker: "!!"
    tag: aside
    depth: 2
    content: block
    continuation: indented
    defaults:
      class: note
    attributes:
      open: true
  - marker: "&#x24;"
    tag: code
    depth: 2
inlines:
  - sigil: "&#x7E;"
    tag: kbd
"""
    )
    return tmp_path


@pytest.fixture
def library(jargons_dir: Path) -> JargonLibrary:
    return JargonLibrary(str(jargons_dir), registry=default_registry())
