from pathlib import Path

import pytest

from jargon_kit.errors import MalformedJargonError
from jargon_kit.jargons.library import JargonLibrary
from jargon_kit.jargons.registry import JargonRegistry


@pytest.fixture
def jargons_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML jargon files."""
    # Sorted first, but extends a jargon defined in a later file
    (tmp_path / "a_notes.yaml").write_text(
        """name: notes
extends: base
rules:
  - marker: "-"
    tag: li
    depth: 2
    wrapper: ul
"""
    )

    (tmp_path / "base.yaml").write_text(
        """name: base
root: main
closer: "|"
attribute_sigils:
  ".": class
rules:
  - marker: "#"
    tag: section
    depth: 1
    content: block
  - marker: "-"
    tag: p
    depth: 2
"""
    )

    # Ignored: not a YAML file
    (tmp_path / "README.txt").write_text("not a jargon")

    return tmp_path


class TestJargonLibrary:
    def test_loads_jargons_from_directory(self, jargons_dir: Path) -> None:
        library = JargonLibrary(str(jargons_dir))
        assert sorted(library.list()) == ["base", "notes"]

    def test_bases_registered_first(self, jargons_dir: Path) -> None:
        library = JargonLibrary(str(jargons_dir))
        notes = library.get("notes")
        assert notes.chain == ("notes", "base")
        assert notes.resolve("-").tag == "li"
        assert notes.origin("#") == "base"
        assert notes.root == "main"

    def test_uses_given_registry(self, jargons_dir: Path) -> None:
        registry = JargonRegistry()
        JargonLibrary(str(jargons_dir), registry=registry)
        assert "notes" in registry

    def test_extends_jargon_already_in_registry(self, tmp_path: Path) -> None:
        registry = JargonRegistry()
        registry.register(
            {"name": "base", "rules": [{"marker": "#", "tag": "h1", "depth": 1}]}
        )
        (tmp_path / "child.yaml").write_text("name: child\nextends: base\n")
        library = JargonLibrary(str(tmp_path), registry=registry)
        assert library.get("child").resolve("#").tag == "h1"

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert JargonLibrary(str(tmp_path)).list() == []

    def test_get_unknown_raises(self, jargons_dir: Path) -> None:
        library = JargonLibrary(str(jargons_dir))
        with pytest.raises(KeyError, match="not found"):
            library.get("missing")

    def test_cycle(self, tmp_path: Path) -> None:
        (tmp_path / "x.yaml").write_text("name: x\nextends: y\n")
        (tmp_path / "y.yaml").write_text("name: y\nextends: x\n")
        with pytest.raises(MalformedJargonError, match="cycle"):
            JargonLibrary(str(tmp_path))

    def test_unknown_base(self, tmp_path: Path) -> None:
        (tmp_path / "x.yaml").write_text("name: x\nextends: nowhere\n")
        with pytest.raises(MalformedJargonError, match="unknown jargon 'nowhere'"):
            JargonLibrary(str(tmp_path))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text("name: [unclosed\n")
        with pytest.raises(MalformedJargonError, match="Cannot parse"):
            JargonLibrary(str(tmp_path))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "list.yaml").write_text("- one\n- two\n")
        with pytest.raises(MalformedJargonError, match="mapping"):
            JargonLibrary(str(tmp_path))

    def test_schema_error(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text("name: bad\nrules:\n  - marker: x\n")
        with pytest.raises(MalformedJargonError, match="bad"):
            JargonLibrary(str(tmp_path))

    def test_duplicate_names(self, tmp_path: Path) -> None:
        (tmp_path / "one.yaml").write_text("name: same\n")
        (tmp_path / "two.yaml").write_text("name: same\n")
        with pytest.raises(MalformedJargonError, match="defined twice"):
            JargonLibrary(str(tmp_path))
