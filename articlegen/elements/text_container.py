"""Base class for elements holding formatted text.

A text container keeps an ordered list of items, each either a plain string
or a nested element, e.g. ``This is <b>formatted</b> <a href="...">text</a>``.
"""

from __future__ import annotations

from typing import List, Tuple, Union

from ..document import DocumentSink, Fragment
from ..validators import is_text_empty
from .element import ChildrenContainer, Element

TextItem = Union[str, Element]


class TextContainer(Element, ChildrenContainer):
    """Element whose content is a mix of text runs and child elements."""

    def __init__(self) -> None:
        self._children: List[TextItem] = []

    def append(self, item: TextItem) -> "TextContainer":
        """Add a string or an element after the current content."""

        if not isinstance(item, (str, Element)):
            raise TypeError(
                f"{type(self).__name__} accepts str or Element items, got {type(item).__name__}"
            )
        self._children.append(item)
        return self

    def clear(self) -> None:
        self._children = []

    def get_children(self) -> Tuple[TextItem, ...]:
        return tuple(self._children)

    def flatten_to_plain_text(self) -> str:
        """Concatenate the text of this container and nested containers."""

        parts: List[str] = []
        for item in self._children:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, TextContainer):
                parts.append(item.flatten_to_plain_text())
        return "".join(parts)

    def render_fragment(self, document: DocumentSink) -> Fragment:
        """Render the content as a fragment; never returns one without children."""

        fragment = document.create_fragment()
        count = 0
        for item in self._children:
            if isinstance(item, str):
                document.append_child(fragment, document.create_text_node(item))
            else:
                document.append_child(fragment, item.render(document))
            count += 1

        if not count:
            document.append_child(fragment, document.create_text_node(""))
        return fragment

    def is_valid(self) -> bool:
        # The first nested element decides, whatever text surrounds it.
        text = ""
        for item in self._children:
            if isinstance(item, Element):
                return item.is_valid()
            text += item
        return not is_text_empty(text)

    def get_container_children(self) -> List[Element]:
        return [item for item in self._children if isinstance(item, Element)]


__all__ = ["TextContainer", "TextItem"]
