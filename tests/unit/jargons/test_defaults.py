from jargon_kit.jargons.defaults import HTML_JARGON_NAME, default_registry, html_jargon
from jargon_kit.jargons.models import ContentModel


def test_html_jargon_sections() -> None:
    jargon = html_jargon()
    section = jargon.resolve("#")
    assert section.tag == "section"
    assert section.depth == 1
    assert section.heading == "h2"
    assert section.content is ContentModel.BLOCK


def test_html_jargon_settings() -> None:
    jargon = html_jargon()
    assert jargon.name == HTML_JARGON_NAME
    assert jargon.root == "body"
    assert jargon.closer == "|"
    assert jargon.attribute_sigils["."] == "class"
    assert jargon.catch_all.tag == "p"


def test_html_list_items_share_wrappers() -> None:
    jargon = html_jargon()
    assert jargon.resolve("-").wrapper == "ul"
    assert jargon.resolve("+").wrapper == "ol"
    assert jargon.resolve("?").wrapper == jargon.resolve(",").wrapper == "dl"


def test_html_span_sigils() -> None:
    jargon = html_jargon()
    assert (jargon.inline_open, jargon.inline_close) == ("\u27e8", "\u27e9")
    assert jargon.inlines["*"].tag == "em"
    assert jargon.inlines["`"].content is ContentModel.LITERAL
    assert jargon.inlines[";"].content is ContentModel.COMMENT
    assert jargon.inlines["&"].text_to == ["alt", "title"]
    assert jargon.inlines["@"].text_from == "href"


def test_default_registry() -> None:
    registry = default_registry()
    assert HTML_JARGON_NAME in registry
    assert registry.resolve(HTML_JARGON_NAME, "---").tag == "hr"
