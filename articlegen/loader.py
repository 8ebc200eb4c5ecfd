"""Build element trees from plain data payloads (dicts, YAML)."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .elements.audio import Audio
from .elements.element import Element
from .elements.text import Anchor, Bold, FormattedText, Italic, Paragraph
from .io_utils import read_yaml, warn


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow")


_ChildPayload = Union[str, "ElementPayload"]


class AudioPayload(_Payload):
    """Payload for an <audio> element."""

    type: Literal["audio"] = "audio"
    url: str = Field("", description="Audio file URL. Required for a valid element.")
    title: str = ""
    autoplay: bool = False
    muted: bool = False


class TextPayload(_Payload):
    """Payload for paragraph, bold or italic text."""

    type: Literal["paragraph", "bold", "italic"]
    children: List[_ChildPayload] = Field(default_factory=list)


class AnchorPayload(_Payload):
    """Payload for a link around formatted text."""

    type: Literal["anchor"] = "anchor"
    href: str = ""
    rel: str = ""
    children: List[_ChildPayload] = Field(default_factory=list)


ElementPayload = Annotated[
    Union[AudioPayload, TextPayload, AnchorPayload],
    Field(discriminator="type"),
]

TextPayload.model_rebuild()
AnchorPayload.model_rebuild()

_payload_adapter = TypeAdapter(ElementPayload)
_payload_list_adapter = TypeAdapter(List[ElementPayload])

_TEXT_TYPES = {
    "paragraph": Paragraph,
    "bold": Bold,
    "italic": Italic,
}


def _warn_extra(payload: _Payload) -> None:
    if payload.model_extra:
        keys = ", ".join(sorted(payload.model_extra))
        warn(f"Ignoring unknown keys for {payload.type}: {keys}")


def _fill_text(container: FormattedText, children: List[Any]) -> FormattedText:
    for child in children:
        if isinstance(child, str):
            container.append(child)
        else:
            container.append(build_element(child))
    return container


def build_element(payload: Union[AudioPayload, TextPayload, AnchorPayload]) -> Element:
    """Turn a validated payload into an element tree."""

    _warn_extra(payload)
    if isinstance(payload, AudioPayload):
        audio = Audio.create().with_url(payload.url).with_title(payload.title)
        if payload.autoplay:
            audio.enable_autoplay()
        if payload.muted:
            audio.enable_muted()
        return audio
    if isinstance(payload, AnchorPayload):
        anchor = Anchor.create().with_href(payload.href).with_rel(payload.rel)
        return _fill_text(anchor, payload.children)
    if isinstance(payload, TextPayload):
        return _fill_text(_TEXT_TYPES[payload.type].create(), payload.children)
    raise ValueError(f"Unsupported payload: {type(payload).__name__}")


def element_from_dict(data: dict) -> Element:
    """Validate ``data`` and build the element it describes.

    Raises ``pydantic.ValidationError`` for unknown types or malformed fields.
    """

    return build_element(_payload_adapter.validate_python(data))


def load_elements(path: Path) -> list[Element]:
    """Load a YAML list of element payloads."""

    data = read_yaml(path) or []
    if not isinstance(data, list):
        raise SystemExit(f"{path} must contain a list of elements.")
    try:
        payloads = _payload_list_adapter.validate_python(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid element payload in {path}: {exc}") from exc
    return [build_element(payload) for payload in payloads]


__all__ = [
    "AnchorPayload",
    "AudioPayload",
    "ElementPayload",
    "TextPayload",
    "build_element",
    "element_from_dict",
    "load_elements",
]
