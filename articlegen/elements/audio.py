"""Audio element for an article.

Example::

    <audio title="audio title">
        <source src="http://foo.com/mp3"/>
    </audio>
"""

from __future__ import annotations

from ..document import DocumentSink, MarkupNode
from ..validators import is_text_empty
from .element import Element


class Audio(Element):
    """An audio clip referenced by URL. The URL is required."""

    def __init__(self) -> None:
        self._title = ""
        self._url = ""
        # Historical field: "", "muted" or "autoplay". Nothing sets it.
        self._playback = ""
        self._autoplay = False
        self._muted = False

    @classmethod
    def create(cls) -> "Audio":
        return cls()

    def with_url(self, url: str) -> "Audio":
        """Set the audio file URL, e.g. http://domain.com/audiofile.mp3."""

        self._url = url
        return self

    def with_title(self, title: str) -> "Audio":
        self._title = title
        return self

    def enable_autoplay(self) -> "Audio":
        self._autoplay = True
        return self

    def disable_autoplay(self) -> "Audio":
        self._autoplay = False
        return self

    def enable_muted(self) -> "Audio":
        self._muted = True
        return self

    def disable_muted(self) -> "Audio":
        self._muted = False
        return self

    def get_title(self) -> str:
        return self._title

    def get_url(self) -> str:
        return self._url

    def get_playback(self) -> str:
        return self._playback

    def is_autoplay(self) -> bool:
        return self._autoplay

    def is_muted(self) -> bool:
        return self._muted

    def is_valid(self) -> bool:
        return not is_text_empty(self._url)

    def render(self, document: DocumentSink) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element("audio")

        if self._title:
            document.set_attribute(element, "title", self._title)

        if self._autoplay:
            document.set_attribute(element, "autoplay", "autoplay")

        if self._muted:
            document.set_attribute(element, "muted", "muted")

        if self._url:
            source = document.create_element("source")
            document.set_attribute(source, "src", self._url)
            document.append_child(element, source)

        return element


__all__ = ["Audio"]
