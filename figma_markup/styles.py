"""Scene node -> ordered list of CSS declarations.

Rules run in a fixed order: box sizing, auto layout (flex), typography,
color, absolute positioning. Every pixel value is rounded to an integer.
Duplicates are fine here; the stylesheet collapses them per selector.
"""
from __future__ import annotations

import logging
from numbers import Number

from .scene import MIXED, LayoutFacet, SceneNode


logger = logging.getLogger(__name__)

PRIMARY_AXIS_ALIGN = {
    "MIN": "justify-content: flex-start",
    "CENTER": "justify-content: center",
    "MAX": "justify-content: flex-end",
    "SPACE_BETWEEN": "justify-content: space-between",
}

COUNTER_AXIS_ALIGN = {
    "MIN": "align-items: flex-start",
    "CENTER": "align-items: center",
    "MAX": "align-items: flex-end",
    "BASELINE": "align-items: baseline",
}

# STRETCH emits no align-self
LAYOUT_ALIGN = {
    "MIN": "align-self: flex-start",
    "CENTER": "align-self: center",
    "MAX": "align-self: flex-end",
    "STRETCH": None,
    "INHERIT": "align-self: inherit",
}

WRAP = {"WRAP": "wrap", "NO_WRAP": "nowrap"}

SIZE_CONSTRAINTS = (
    ("min_width", "min-width"),
    ("max_width", "max-width"),
    ("min_height", "min-height"),
    ("max_height", "max-height"),
)


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def px(value) -> str:
    return f"{int(round(value))}px"


def fmt_number(value) -> str:
    """Plain CSS number: ``1`` rather than ``1.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _fills_width(node: SceneNode) -> bool:
    return node.layout_sizing_horizontal == "FILL" or node.layout_align == "STRETCH"


def auto_layout_width(node: SceneNode) -> str:
    layout = node.layout
    hugs = layout.primary_sizing if layout.mode == "HORIZONTAL" else layout.counter_sizing
    if hugs == "AUTO":
        return "width: fit-content"
    if _fills_width(node):
        return "width: 100%"
    return f"width: {px(node.width)}"


def auto_layout_height(node: SceneNode) -> str:
    layout = node.layout
    hugs = layout.primary_sizing if layout.mode == "VERTICAL" else layout.counter_sizing
    if hugs == "AUTO":
        return "height: fit-content"
    return f"height: {px(node.height)}"


def add_size_constraints(node: SceneNode, styles: list[str]) -> None:
    for attr, prop in SIZE_CONSTRAINTS:
        value = getattr(node, attr, None)
        if _is_number(value) and value > 0:
            styles.append(f"{prop}: {px(value)}")


def add_leaf_size(node: SceneNode, styles: list[str]) -> None:
    parent = node.parent
    if parent is not None and parent.is_frame and parent.width:
        styles.append(f"width: {int(round(node.width / parent.width * 100))}%")
    else:
        styles.append(f"width: {px(node.width)}")
    styles.append("height: auto" if node.is_image else f"height: {px(node.height)}")


def add_auto_layout_styles(node: SceneNode, styles: list[str]) -> None:
    layout: LayoutFacet = node.layout
    styles.append("display: flex")
    styles.append(f"flex-direction: {'row' if layout.mode == 'HORIZONTAL' else 'column'}")

    if layout.wrap in WRAP:
        styles.append(f"flex-wrap: {WRAP[layout.wrap]}")

    if layout.primary_align in PRIMARY_AXIS_ALIGN:
        styles.append(PRIMARY_AXIS_ALIGN[layout.primary_align])
    if layout.counter_align in COUNTER_AXIS_ALIGN:
        styles.append(COUNTER_AXIS_ALIGN[layout.counter_align])

    if _is_number(node.layout_grow) and node.layout_grow != 0:
        styles.append(f"flex-grow: {fmt_number(node.layout_grow)}")
    if _is_number(node.layout_shrink):
        styles.append(f"flex-shrink: {fmt_number(node.layout_shrink)}")
    align_self = LAYOUT_ALIGN.get(node.layout_align)
    if align_self:
        styles.append(align_self)

    if layout.item_spacing > 0:
        styles.append(f"gap: {px(layout.item_spacing)}")
    padding = (layout.padding_top, layout.padding_right, layout.padding_bottom, layout.padding_left)
    if any(p > 0 for p in padding):
        styles.append("padding: " + " ".join(px(p) for p in padding))


def _unit_value(value):
    """Number out of either a raw number or a ``{"value": n}`` object."""
    if isinstance(value, dict):
        value = value.get("value")
    else:
        value = getattr(value, "value", value)
    return value if _is_number(value) else None


def add_text_styles(node: SceneNode, styles: list[str]) -> None:
    text = node.text
    if text is None:
        return

    if _is_number(text.font_size):
        styles.append(f"font-size: {px(text.font_size)}")
    if text.font_weight is not None and text.font_weight is not MIXED:
        styles.append(f"font-weight: {fmt_number(text.font_weight)}")
    if text.font_family and text.font_family is not MIXED:
        styles.append(f'font-family: "{text.font_family}"')

    if text.letter_spacing is not MIXED:
        spacing = _unit_value(text.letter_spacing)
        if spacing is not None and spacing != 0:
            styles.append(f"letter-spacing: {px(spacing)}")

    line_height = text.line_height
    if isinstance(line_height, dict) and _is_number(line_height.get("value")):
        if str(line_height.get("unit", "")).upper().startswith("PERCENT"):
            logger.warning(f"[WARN] line-height of '{node.name}' is in percent, emitted as px")
        styles.append(f"line-height: {px(line_height['value'])}")

    if text.text_align_horizontal and text.text_align_horizontal is not MIXED:
        styles.append(f"text-align: {str(text.text_align_horizontal).lower()}")
    if text.text_decoration and text.text_decoration is not MIXED:
        styles.append(f"text-decoration: {str(text.text_decoration).lower()}")


def solid_fill_rgba(node: SceneNode):
    """``rgba()`` of the first fill when it is a visible solid paint."""
    if not node.fills:
        return None
    fill = node.fills[0]
    if fill.type != "SOLID" or not fill.visible:
        return None
    color = fill.color
    r = int(round(float(color.get("r", 0)) * 255))
    g = int(round(float(color.get("g", 0)) * 255))
    b = int(round(float(color.get("b", 0)) * 255))
    opacity = fill.opacity if fill.opacity is not None else 1
    return f"rgba({r}, {g}, {b}, {fmt_number(opacity)})"


def add_color_styles(node: SceneNode, styles: list[str]) -> None:
    rgba = solid_fill_rgba(node)
    if rgba is None:
        return
    styles.append(f"color: {rgba}" if node.is_text else f"background-color: {rgba}")


def node_styles(node: SceneNode) -> list[str]:
    styles: list[str] = []

    if node.has_layout:
        styles.append(auto_layout_width(node))
        styles.append(auto_layout_height(node))
        add_size_constraints(node, styles)
        add_auto_layout_styles(node, styles)
    elif node.is_text:
        styles.append("width: auto")
        styles.append("height: fit-content")
        add_size_constraints(node, styles)
        add_text_styles(node, styles)
    else:
        add_leaf_size(node, styles)
        add_size_constraints(node, styles)

    add_color_styles(node, styles)

    if node.layout_positioning == "ABSOLUTE":
        styles.append("position: absolute")
        styles.append(f"left: {px(node.x)}")
        styles.append(f"top: {px(node.y)}")

    return styles
