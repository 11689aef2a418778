"""Document edits on saved Figma JSON: layer renaming and PC/SP layouts.

These work on the raw JSON dicts (the "live" document), not on the
read-only ``SceneNode`` model used for generation.
"""
from __future__ import annotations

import logging
import re

from .scene import SceneError


logger = logging.getLogger(__name__)

# already named in the DSL, e.g. "div.card" or 'img[src="..."]'
NAMED_LAYER_RE = re.compile(r"^(div|p|img)[.\[]")

PLACEHOLD_URL = "https://placehold.jp/{width}x{height}.png"

DEVICE_WIDTHS = {"pc": 1440, "sp": 425}


def _require_frame(node: dict) -> None:
    if not isinstance(node, dict) or node.get("type") != "FRAME":
        raise SceneError("Invalid frame ID")


def _size(node: dict):
    box = node.get("absoluteBoundingBox") or {}
    size = node.get("size") or {}
    width = node.get("width", size.get("x", box.get("width", 0))) or 0
    height = node.get("height", size.get("y", box.get("height", 0))) or 0
    return width, height


def default_layer_name(node: dict) -> str:
    node_type = node.get("type")
    if node_type == "TEXT":
        return "p"
    if node_type == "RECTANGLE":
        fills = node.get("fills") or []
        if fills and isinstance(fills[0], dict) and fills[0].get("type") == "IMAGE":
            width, height = _size(node)
            src = PLACEHOLD_URL.format(width=int(round(width)), height=int(round(height)))
            return f'img[src="{src}"]'
    return "div"


def rename_layers(frame: dict) -> int:
    """Give every descendant of ``frame`` a DSL name (p / div / img).

    Layers already named like ``div.x``, ``p.x`` or ``img[...]`` are left
    alone, as is the frame itself. Returns the number of renamed layers.
    """
    _require_frame(frame)

    def walk(node: dict, is_top_level: bool) -> int:
        count = 0
        if not is_top_level and not NAMED_LAYER_RE.match(node.get("name", "") or ""):
            node["name"] = default_layer_name(node)
            count += 1
        for child in node.get("children") or []:
            if isinstance(child, dict):
                count += walk(child, False)
        return count

    renamed = walk(frame, True)
    logger.info(f"[LOG] Renamed layers: {renamed}")
    return renamed


def _resize_width(node: dict, width: int) -> None:
    if "width" in node:
        node["width"] = width
    if isinstance(node.get("size"), dict):
        node["size"]["x"] = width
    if isinstance(node.get("absoluteBoundingBox"), dict):
        node["absoluteBoundingBox"]["width"] = width


def apply_device_layout(frame: dict, device: str) -> dict:
    """Resize ``frame`` for ``device`` and toggle ``.is_pc`` / ``.is_sp`` layers.

    Returns ``{"shown": n, "hidden": n}``.
    """
    if device not in DEVICE_WIDTHS:
        raise ValueError(f"Unknown device: {device} (expected one of {', '.join(DEVICE_WIDTHS)})")
    _require_frame(frame)
    _resize_width(frame, DEVICE_WIDTHS[device])

    counts = {"shown": 0, "hidden": 0}

    def toggle(node: dict) -> None:
        name = node.get("name", "") or ""
        visible = None
        if ".is_pc" in name:
            visible = device == "pc"
        elif ".is_sp" in name:
            visible = device == "sp"
        if visible is not None:
            node["visible"] = visible
            counts["shown" if visible else "hidden"] += 1
        for child in node.get("children") or []:
            if isinstance(child, dict):
                toggle(child)

    toggle(frame)
    logger.info(f"[LOG] Applied {device.upper()} layout: shown={counts['shown']}, hidden={counts['hidden']}")
    return counts
