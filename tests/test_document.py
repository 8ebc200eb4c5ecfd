from bs4 import NavigableString, Tag

from articlegen.document import Fragment, SoupDocument, child_nodes


def test_create_element_and_attributes_last_write_wins() -> None:
    document = SoupDocument()
    element = document.create_element("audio")
    document.set_attribute(element, "title", "first")
    document.set_attribute(element, "title", "second")

    assert isinstance(element, Tag)
    assert element.name == "audio"
    assert element.attrs == {"title": "second"}


def test_children_keep_insertion_order() -> None:
    document = SoupDocument()
    parent = document.create_element("p")
    document.append_child(parent, document.create_text_node("a"))
    document.append_child(parent, document.create_element("b"))
    document.append_child(parent, document.create_text_node("c"))

    kinds = [type(node) for node in child_nodes(parent)]
    assert kinds == [NavigableString, Tag, NavigableString]
    assert document.serialize(parent) == "<p>a<b></b>c</p>"


def test_appending_fragment_moves_its_children() -> None:
    document = SoupDocument()
    fragment = document.create_fragment()
    document.append_child(fragment, document.create_text_node("x"))
    document.append_child(fragment, document.create_text_node("y"))
    parent = document.create_element("i")

    document.append_child(parent, fragment)

    assert isinstance(fragment, Fragment)
    assert child_nodes(fragment) == []
    assert [str(node) for node in child_nodes(parent)] == ["x", "y"]


def test_serialize_escapes_text() -> None:
    document = SoupDocument()
    paragraph = document.create_element("p")
    document.append_child(paragraph, document.create_text_node("a < b & c"))

    assert document.serialize(paragraph) == "<p>a &lt; b &amp; c</p>"
    assert document.serialize(document.create_text_node("<x>")) == "&lt;x&gt;"


def test_text_nodes_have_no_children() -> None:
    document = SoupDocument()
    assert child_nodes(document.create_text_node("")) == []


def test_serialize_keeps_attribute_insertion_order() -> None:
    document = SoupDocument()
    element = document.create_element("a")
    document.set_attribute(element, "title", "t")
    document.set_attribute(element, "href", "h")
    document.set_attribute(element, "class", "c")

    assert document.serialize(element) == '<a title="t" href="h" class="c"></a>'
    assert document.serialize(element, formatted=True).splitlines()[0] == '<a title="t" href="h" class="c">'
