"""Markup document sink used by elements to build their output tree."""

from __future__ import annotations

from typing import Protocol, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


class Fragment(BeautifulSoup):
    """Tag-less holder for sibling nodes.

    Appending a fragment to a parent moves its children into the parent, the
    fragment itself never shows up in the output tree.
    """

    def __init__(self) -> None:
        super().__init__("", "html.parser")


MarkupNode = Union[Tag, NavigableString, Fragment]


class InsertionOrderFormatter(HTMLFormatter):
    """Minimal HTML escaping that writes attributes in the order they were set."""

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = InsertionOrderFormatter()


class DocumentSink(Protocol):
    """Operations an element needs to write its markup."""

    def create_element(self, tag: str) -> Tag: ...

    def create_text_node(self, text: str) -> NavigableString: ...

    def create_fragment(self) -> Fragment: ...

    def append_child(self, parent: MarkupNode, child: MarkupNode) -> None: ...

    def set_attribute(self, element: Tag, name: str, value: str) -> None: ...


class SoupDocument:
    """DocumentSink backed by a BeautifulSoup tree."""

    def __init__(self) -> None:
        self.soup = BeautifulSoup("", "html.parser")

    def create_element(self, tag: str) -> Tag:
        return self.soup.new_tag(tag)

    def create_text_node(self, text: str) -> NavigableString:
        return NavigableString(text)

    def create_fragment(self) -> Fragment:
        return Fragment()

    def append_child(self, parent: MarkupNode, child: MarkupNode) -> None:
        if isinstance(child, Fragment):
            for node in list(child.contents):
                parent.append(node.extract())
            return
        parent.append(child)

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = value

    def serialize(self, node: MarkupNode, *, formatted: bool = False) -> str:
        """Return the HTML text for a node produced by this document."""

        if isinstance(node, NavigableString):
            return node.output_ready(formatter=FORMATTER)
        if formatted:
            return node.prettify(formatter=FORMATTER)
        return node.decode(formatter=FORMATTER)


def child_nodes(node: MarkupNode) -> list:
    """Children of an element or fragment, in insertion order."""

    if isinstance(node, NavigableString):
        return []
    return list(node.contents)


__all__ = [
    "FORMATTER",
    "DocumentSink",
    "Fragment",
    "InsertionOrderFormatter",
    "MarkupNode",
    "SoupDocument",
    "child_nodes",
]
