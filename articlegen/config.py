"""Render options for serializing elements to HTML."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .io_utils import read_yaml


class RenderOptions(BaseModel):
    """How ``Element.to_html`` serializes its output."""

    doctype: str = Field(
        "", description="Text prepended to the markup, e.g. '<!doctype html>'."
    )
    formatted: bool = Field(
        False, description="Pretty-print the markup with one node per line."
    )

    model_config = ConfigDict(extra="forbid")


def load_render_options(path: Path) -> RenderOptions:
    data = read_yaml(path) or {}
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render options in {path}: {exc}") from exc


__all__ = ["RenderOptions", "load_render_options"]
