import pytest

from jargon_kit.dom.serialize import serialize
from jargon_kit.dom.simple import Element, SimpleDocument, Text


@pytest.fixture
def document() -> SimpleDocument:
    return SimpleDocument()


def test_builds_tree(document: SimpleDocument) -> None:
    body = document.create_element("body")
    section = document.create_element("section")
    document.append_child(body, section)
    document.append_child(section, document.create_text_node("Hi"))
    document.set_attribute(section, "id", "intro")

    assert body.elements == [section]
    assert section.parent is body
    assert section.get_attribute("id") == "intro"
    assert section.get_attribute("class") is None
    assert body.text_content == "Hi"


def test_append_moves_child(document: SimpleDocument) -> None:
    first = document.create_element("div")
    second = document.create_element("div")
    child = document.create_element("p")
    document.append_child(first, child)
    document.append_child(second, child)

    assert first.children == []
    assert child.parent is second


def test_attribute_order_is_insertion_order(document: SimpleDocument) -> None:
    node = document.create_element("p")
    document.set_attribute(node, "b", "1")
    document.set_attribute(node, "a", "2")
    document.set_attribute(node, "b", "3")
    assert list(node.attributes.items()) == [("b", "3"), ("a", "2")]


def test_iter_and_find_all(document: SimpleDocument) -> None:
    body = document.create_element("body")
    for _ in range(2):
        section = document.create_element("section")
        document.append_child(body, section)
        document.append_child(section, document.create_element("p"))

    assert [element.tag for element in body.iter()] == [
        "body",
        "section",
        "p",
        "section",
        "p",
    ]
    assert len(body.find_all("p")) == 2
    assert body.find_all("body") == []


class TestSerialize:
    def test_elements_and_attributes(self, document: SimpleDocument) -> None:
        body = document.create_element("body")
        link = document.create_element("a")
        document.set_attribute(link, "title", 'say "hi" & <bye>')
        document.set_attribute(link, "href", "/x?a=1&amp;b=2")
        document.append_child(link, document.create_text_node("A &amp; B"))
        document.append_child(body, link)

        assert serialize(body) == (
            '<body><a title="say &quot;hi&quot; &amp; &lt;bye&gt;" '
            'href="/x?a=1&amp;b=2">A &amp; B</a></body>'
        )

    def test_void_tags(self, document: SimpleDocument) -> None:
        body = document.create_element("body")
        document.append_child(body, document.create_element("hr"))
        document.append_child(body, document.create_element("p"))
        assert serialize(body) == "<body><hr><p></p></body>"

    def test_text_written_verbatim(self) -> None:
        assert serialize(Text("a &lt; b")) == "a &lt; b"

    def test_unknown_node_type(self) -> None:
        with pytest.raises(TypeError):
            serialize(object())

    def test_parent_is_weak(self) -> None:
        child = Element("p")
        SimpleDocument().append_child(Element("div"), child)
        assert child.parent is None
