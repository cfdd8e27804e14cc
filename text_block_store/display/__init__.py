"""Display API models."""

from .components import (
    CardComponent,
    CardHeader,
    DisplayComponent,
    ErrorComponent,
    Icon,
    InputComponent,
    MenuComponent,
    StackComponent,
    StackDirection,
    TextComponent,
    TextPreset,
)
from .objects import CreationObject, DisplayMeta, DisplayObject, PageMeta

__all__ = [
    "CardComponent",
    "CardHeader",
    "CreationObject",
    "DisplayComponent",
    "DisplayMeta",
    "DisplayObject",
    "ErrorComponent",
    "Icon",
    "InputComponent",
    "MenuComponent",
    "PageMeta",
    "StackComponent",
    "StackDirection",
    "TextComponent",
    "TextPreset",
]
