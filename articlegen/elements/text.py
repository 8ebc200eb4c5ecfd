"""Concrete formatted-text elements: paragraphs, bold, italic and links."""

from __future__ import annotations

from abc import abstractmethod

from ..document import DocumentSink, MarkupNode
from ..validators import is_text_empty
from .text_container import TextContainer


class FormattedText(TextContainer):
    """Text container rendered as its content wrapped in a single tag."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Tag wrapping the rendered text."""

    @classmethod
    def create(cls):
        return cls()

    def render(self, document: DocumentSink) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element(self.tag_name)
        self.set_attributes(element, document)
        document.append_child(element, self.render_fragment(document))
        return element

    def set_attributes(self, element, document: DocumentSink) -> None:
        pass


class Paragraph(FormattedText):
    tag_name = "p"


class Bold(FormattedText):
    tag_name = "b"


class Italic(FormattedText):
    tag_name = "i"


class Anchor(FormattedText):
    """Link around formatted text: ``<a href="https://foo.com">text</a>``."""

    tag_name = "a"

    def __init__(self) -> None:
        super().__init__()
        self._href = ""
        self._rel = ""

    def with_href(self, href: str) -> "Anchor":
        self._href = href
        return self

    def with_rel(self, rel: str) -> "Anchor":
        self._rel = rel
        return self

    def get_href(self) -> str:
        return self._href

    def get_rel(self) -> str:
        return self._rel

    def is_valid(self) -> bool:
        return not is_text_empty(self._href) and super().is_valid()

    def set_attributes(self, element, document: DocumentSink) -> None:
        document.set_attribute(element, "href", self._href)
        if self._rel:
            document.set_attribute(element, "rel", self._rel)


__all__ = ["Anchor", "Bold", "FormattedText", "Italic", "Paragraph"]
