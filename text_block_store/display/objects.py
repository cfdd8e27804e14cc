"""Top-level display responses: pages and creation forms."""

from __future__ import annotations

from pydantic import BaseModel

from .components import DisplayComponent, MenuComponent


class PageMeta(BaseModel):
    """Page chrome. ``header_component`` replaces the plain ``header`` when set."""

    title: str | None = None
    header: str | None = None
    header_component: DisplayComponent | None = None
    menu: MenuComponent | None = None


class DisplayMeta(BaseModel):
    page: PageMeta | None = None


class DisplayObject(BaseModel):
    display: DisplayComponent
    meta: DisplayMeta | None = None


class CreationObject(BaseModel):
    """Form for a new block.

    The client substitutes each ``$[FIELD]$`` marker in ``input_template`` with
    the JSON-encoded value of the input named ``FIELD``; the result is the
    creation payload.
    """

    header_component: DisplayComponent
    main_component: DisplayComponent
    input_template: str


__all__ = ["CreationObject", "DisplayMeta", "DisplayObject", "PageMeta"]
