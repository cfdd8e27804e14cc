"""Display component models emitted by block types.

Components are plain pydantic models tagged by ``cid``; turning them into
pixels is the client's job.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from text_block_store.models.block import Block


class Icon(str, Enum):
    TYPE = "Type"
    ERROR = "Error"


class TextPreset(str, Enum):
    HEADING = "Heading"


class StackDirection(str, Enum):
    VERTICAL = "Vertical"


# ---------------------------------------------------------------------------
# Atomic components


class TextComponent(BaseModel):
    cid: Literal["text"] = "text"
    text: str
    preset: TextPreset | None = None

    @classmethod
    def heading(cls, text: str) -> TextComponent:
        return cls(text=text, preset=TextPreset.HEADING)


class InputComponent(BaseModel):
    """Text input, optionally wired to a method on the block it edits.

    ``editable`` starts out ``False``. A masked input shows its value as plain
    text until the viewer opens it for editing.
    """

    cid: Literal["input"] = "input"
    name: str | None = None
    label: str | None = None
    initial_value: str | None = None
    masked: bool = False
    editable: bool = False
    block_id: str | None = None
    method: str | None = None


class ErrorComponent(BaseModel):
    cid: Literal["error"] = "error"
    message: str


class MenuComponent(BaseModel):
    """Per-block action menu shown to signed-in viewers."""

    cid: Literal["menu"] = "menu"
    block_id: str
    user_id: int
    owned: bool = False

    @classmethod
    def from_block(cls, block: Block, user_id: int) -> MenuComponent:
        return cls(block_id=str(block.id), user_id=user_id, owned=block.owner_id == user_id)


# ---------------------------------------------------------------------------
# Layout components


class StackComponent(BaseModel):
    cid: Literal["stack"] = "stack"
    direction: StackDirection = StackDirection.VERTICAL
    items: list[DisplayComponent] = Field(default_factory=list)

    def add(self, component: DisplayComponent) -> StackComponent:
        self.items.append(component)
        return self


class CardHeader(BaseModel):
    title: str
    icon: Icon | None = None
    block_id: str | None = None
    menu: MenuComponent | None = None


class CardComponent(BaseModel):
    cid: Literal["card"] = "card"
    header: CardHeader
    content: DisplayComponent
    color: str | None = None


DisplayComponent = Annotated[
    Union[
        TextComponent,
        InputComponent,
        ErrorComponent,
        MenuComponent,
        StackComponent,
        CardComponent,
    ],
    Field(discriminator="cid"),
]

StackComponent.model_rebuild()
CardComponent.model_rebuild()


__all__ = [
    "CardComponent",
    "CardHeader",
    "DisplayComponent",
    "ErrorComponent",
    "Icon",
    "InputComponent",
    "MenuComponent",
    "StackComponent",
    "StackDirection",
    "TextComponent",
    "TextPreset",
]
