"""Page, embed and creation-form composition for text blocks.

Composition is pure given the resolved children and a gate: placeholders for
missing or hidden children are substituted here and nowhere else. Every
editable input is built closed and only opened after ``gate.can_edit``
returns ``True`` for the block it edits.
"""

from __future__ import annotations

from text_block_store.blocks.text.gate import PermissionGate
from text_block_store.blocks.text.properties import TextProperties
from text_block_store.display import (
    CardComponent,
    CardHeader,
    CreationObject,
    DisplayComponent,
    DisplayMeta,
    DisplayObject,
    ErrorComponent,
    Icon,
    InputComponent,
    MenuComponent,
    PageMeta,
    StackComponent,
    StackDirection,
    TextComponent,
)
from text_block_store.models.block import Block

UNTITLED_BLOCK = "Untitled Block"
EMPTY_BLOCK = "Empty Block"
NO_CONTENT = "No content"
NAME_LABEL = "Group Name"
CONTENT_LABEL = "Text..."
PAGE_TITLE = "Text"
ERROR_TITLE = "Text Block"
CREATE_HEADING = "New Text Block"
CREATE_TEMPLATE = '{"name":$[NAME]$,"content":$[CONTENT]$}'


def edit_data_component(block: Block, *, label: str, masked: bool = False) -> InputComponent:
    """Input bound to the ``edit`` method of a data block. Always starts closed."""
    return InputComponent(
        name=f"DATA_{block.id}",
        label=label,
        initial_value=block.block_data or "",
        masked=masked,
        editable=False,
        block_id=str(block.id),
        method="edit",
    )


def compose_page(block: Block, resolved: TextProperties, gate: PermissionGate) -> DisplayObject:
    name = _visible(resolved.name, gate)
    page = PageMeta(title=PAGE_TITLE, header=_name_text(name))
    if name is not None:
        page.header_component = _name_field(name, gate)
    if gate.viewer_id is not None:
        page.menu = MenuComponent.from_block(block, gate.viewer_id)

    content = _content_slot(_visible(resolved.content, gate), gate)
    return DisplayObject(display=content, meta=DisplayMeta(page=page))


def compose_embed(block: Block, resolved: TextProperties, gate: PermissionGate) -> CardComponent:
    header = CardHeader(
        title=_name_text(_visible(resolved.name, gate)),
        icon=Icon.TYPE,
        block_id=str(block.id),
    )
    if gate.viewer_id is not None:
        header.menu = MenuComponent.from_block(block, gate.viewer_id)

    content = _content_slot(_visible(resolved.content, gate), gate)
    return CardComponent(header=header, content=content, color=block.color)


def compose_create_form() -> CreationObject:
    main = (
        StackComponent(direction=StackDirection.VERTICAL)
        .add(InputComponent(label="Name", name="NAME", editable=True))
        .add(InputComponent(label="Text", name="CONTENT", editable=True))
    )
    return CreationObject(
        header_component=TextComponent.heading(CREATE_HEADING),
        main_component=main,
        input_template=CREATE_TEMPLATE,
    )


def error_card(block: Block, message: str) -> CardComponent:
    return CardComponent(
        header=CardHeader(title=ERROR_TITLE, icon=Icon.ERROR, block_id=str(block.id)),
        content=ErrorComponent(message=message),
        color=block.color,
    )


# ---------------------------------------------------------------------------
# Slots


def _visible(child: Block | None, gate: PermissionGate) -> Block | None:
    if child is None or not gate.can_view(child):
        return None
    return child


def _name_text(name: Block | None) -> str:
    if name is None:
        return UNTITLED_BLOCK
    return name.block_data or UNTITLED_BLOCK


def _name_field(name: Block, gate: PermissionGate) -> InputComponent | None:
    field = edit_data_component(name, label=NAME_LABEL)
    if not gate.can_edit(name):
        return None
    field.editable = True
    return field


def _content_slot(content: Block | None, gate: PermissionGate) -> DisplayComponent:
    if content is None:
        return TextComponent(text=EMPTY_BLOCK)
    field = edit_data_component(content, label=CONTENT_LABEL, masked=True)
    if not gate.can_edit(content):
        return TextComponent(text=content.block_data or NO_CONTENT)
    field.editable = True
    return field


__all__ = [
    "compose_create_form",
    "compose_embed",
    "compose_page",
    "edit_data_component",
    "error_card",
]
