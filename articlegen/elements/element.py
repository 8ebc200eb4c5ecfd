"""Base contract shared by every article element."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..config import RenderOptions
from ..document import DocumentSink, MarkupNode, SoupDocument
from ..io_utils import warn


class Element(ABC):
    """A node of the article content tree.

    Subclasses report their own validity and write their markup into a
    DocumentSink. An invalid element renders ``empty_element`` in place of its
    normal structure so the parent keeps one child per logical element.
    """

    @abstractmethod
    def render(self, document: DocumentSink) -> MarkupNode:
        """Build this element's markup using ``document``."""

    def is_valid(self) -> bool:
        return True

    def empty_element(self, document: DocumentSink) -> MarkupNode:
        """Neutral placeholder rendered in place of an invalid element."""

        return document.create_text_node("")

    def to_html(self, options: Optional[RenderOptions] = None) -> str:
        """Render into a fresh document and serialize it to HTML text."""

        options = options or RenderOptions()
        if not self.is_valid():
            warn(f"Rendering invalid {type(self).__name__}; output is empty")
        document = SoupDocument()
        html_text = document.serialize(self.render(document), formatted=options.formatted)
        return f"{options.doctype}{html_text}"


class ChildrenContainer(ABC):
    """Capability of elements that hold structured child elements."""

    @abstractmethod
    def get_container_children(self) -> List[Element]:
        """Child elements in order, leaving out bare text."""


__all__ = ["ChildrenContainer", "Element"]
