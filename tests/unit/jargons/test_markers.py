import pytest

from jargon_kit.jargons.markers import MarkerMatch, MarkerTrie


@pytest.fixture
def trie() -> MarkerTrie:
    return MarkerTrie(["-", "--", "---", "#"])


def test_prefixes_longest_first(trie: MarkerTrie) -> None:
    assert list(trie.prefixes("--- rule")) == [
        MarkerMatch("---", 3),
        MarkerMatch("--", 2),
        MarkerMatch("-", 1),
    ]


def test_prefixes_from_offset(trie: MarkerTrie) -> None:
    assert list(trie.prefixes("a#b", 1)) == [MarkerMatch("#", 2)]


def test_longest(trie: MarkerTrie) -> None:
    assert trie.longest("-- item") == MarkerMatch("--", 2)
    assert trie.longest("plain") is None


def test_contains_and_len(trie: MarkerTrie) -> None:
    assert "--" in trie
    assert "----" not in trie
    assert "+" not in trie
    assert len(trie) == 4


def test_adding_twice_counts_once(trie: MarkerTrie) -> None:
    trie.add("#")
    assert len(trie) == 4


def test_empty_marker_rejected() -> None:
    with pytest.raises(ValueError):
        MarkerTrie([""])
