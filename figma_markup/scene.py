"""Read-only scene model built from Figma file JSON.

The generator never looks at raw JSON directly: every node is wrapped in a
``SceneNode`` exposing geometry plus optional capability facets (auto layout,
text, fills). Both the REST ``/v1/files`` shape and a plugin-style dump
(``x``/``y``/``fontSize``/``lineHeight`` objects) are accepted.
"""
from __future__ import annotations

import json
import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlparse, parse_qs, unquote

import requests


logger = logging.getLogger(__name__)

FIGMA_API_BASE = "https://api.figma.com/v1"


class SceneError(RuntimeError):
    """Host-side structural error (missing node, wrong node kind, bad JSON)."""


class _Mixed:
    def __repr__(self) -> str:
        return "MIXED"


# Text property that differs between character ranges
MIXED = _Mixed()


@dataclass
class Paint:
    type: str
    visible: bool = True
    opacity: Optional[float] = None
    color: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Paint":
        return cls(
            type=data.get("type", ""),
            visible=data.get("visible", True) is not False,
            opacity=data.get("opacity"),
            color=dict(data.get("color") or {}),
        )


@dataclass
class LayoutFacet:
    """Auto layout container properties (flex-box equivalent)."""
    mode: str
    primary_sizing: str = "FIXED"
    counter_sizing: str = "FIXED"
    primary_align: str = "MIN"
    counter_align: str = "MIN"
    item_spacing: float = 0
    padding_top: float = 0
    padding_right: float = 0
    padding_bottom: float = 0
    padding_left: float = 0
    wrap: Optional[str] = None


@dataclass
class TextFacet:
    characters: str = ""
    font_size: Any = None
    font_weight: Any = None
    font_family: Any = None
    letter_spacing: Any = None
    line_height: Any = None
    text_align_horizontal: Any = None
    text_decoration: Any = None


@dataclass(eq=False)
class SceneNode:
    type: str
    name: str = ""
    id: str = ""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    layout: Optional[LayoutFacet] = None
    text: Optional[TextFacet] = None
    fills: list = field(default_factory=list)
    layout_align: Optional[str] = None
    layout_grow: Optional[float] = None
    layout_shrink: Optional[float] = None
    layout_positioning: Optional[str] = None
    layout_sizing_horizontal: Optional[str] = None
    min_width: Optional[float] = None
    max_width: Optional[float] = None
    min_height: Optional[float] = None
    max_height: Optional[float] = None
    children: list = field(default_factory=list)
    _parent_ref: Any = field(default=None, repr=False)

    def __post_init__(self):
        for child in self.children:
            child._parent_ref = weakref.ref(self)

    @property
    def parent(self) -> Optional["SceneNode"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def has_layout(self) -> bool:
        return self.layout is not None

    @property
    def is_text(self) -> bool:
        return self.type == "TEXT"

    @property
    def is_frame(self) -> bool:
        return self.type == "FRAME"

    @property
    def is_image(self) -> bool:
        """Rectangle painted with an image fill."""
        return self.type == "RECTANGLE" and bool(self.fills) and self.fills[0].type == "IMAGE"

    @property
    def characters(self) -> Optional[str]:
        return self.text.characters if self.text is not None else None

    @classmethod
    def from_dict(cls, data: dict, origin: tuple[float, float] = (0.0, 0.0)) -> "SceneNode":
        """Wrap a Figma JSON node (and its subtree).

        ``origin`` is the parent's absolute position, used to turn
        ``absoluteBoundingBox`` into parent-relative ``x``/``y``.
        """
        box = data.get("absoluteBoundingBox") or {}
        size = data.get("size") or {}
        abs_x = float(box.get("x", 0) or 0)
        abs_y = float(box.get("y", 0) or 0)
        x = data["x"] if "x" in data else abs_x - origin[0]
        y = data["y"] if "y" in data else abs_y - origin[1]
        width = data.get("width", size.get("x", box.get("width", 0))) or 0
        height = data.get("height", size.get("y", box.get("height", 0))) or 0

        node_type = data.get("type", "")
        children = [
            cls.from_dict(child, origin=(abs_x, abs_y))
            for child in data.get("children") or []
            if isinstance(child, dict)
        ]
        return cls(
            type=node_type,
            name=data.get("name", "") or "",
            id=data.get("id", "") or "",
            x=x,
            y=y,
            width=width,
            height=height,
            layout=_layout_from_dict(data),
            text=_text_from_dict(data) if node_type == "TEXT" else None,
            fills=[Paint.from_dict(f) for f in data.get("fills") or [] if isinstance(f, dict)],
            layout_align=data.get("layoutAlign"),
            layout_grow=data.get("layoutGrow"),
            layout_shrink=data.get("layoutShrink"),
            layout_positioning=data.get("layoutPositioning"),
            layout_sizing_horizontal=data.get("layoutSizingHorizontal"),
            min_width=data.get("minWidth"),
            max_width=data.get("maxWidth"),
            min_height=data.get("minHeight"),
            max_height=data.get("maxHeight"),
            children=children,
        )


def _layout_from_dict(data: dict) -> Optional[LayoutFacet]:
    mode = data.get("layoutMode")
    if mode not in ("HORIZONTAL", "VERTICAL"):
        return None
    return LayoutFacet(
        mode=mode,
        primary_sizing=data.get("primaryAxisSizingMode", "AUTO"),
        counter_sizing=data.get("counterAxisSizingMode", "AUTO"),
        primary_align=data.get("primaryAxisAlignItems", "MIN"),
        counter_align=data.get("counterAxisAlignItems", "MIN"),
        item_spacing=data.get("itemSpacing", 0) or 0,
        padding_top=data.get("paddingTop", 0) or 0,
        padding_right=data.get("paddingRight", 0) or 0,
        padding_bottom=data.get("paddingBottom", 0) or 0,
        padding_left=data.get("paddingLeft", 0) or 0,
        wrap=data.get("layoutWrap"),
    )


# REST style key -> properties it controls in styleOverrideTable
_OVERRIDE_KEYS = {
    "font_size": ("fontSize",),
    "font_weight": ("fontWeight",),
    "font_family": ("fontFamily",),
    "letter_spacing": ("letterSpacing",),
    "line_height": ("lineHeightPx", "lineHeightPercent", "lineHeightPercentFontSize", "lineHeightUnit"),
    "text_align_horizontal": ("textAlignHorizontal",),
    "text_decoration": ("textDecoration",),
}


def _text_from_dict(data: dict) -> TextFacet:
    style = data.get("style") or {}
    font_name = data.get("fontName")

    line_height = data.get("lineHeight")
    if line_height is None and "lineHeightPx" in style:
        unit = style.get("lineHeightUnit", "PIXELS")
        if unit == "PIXELS":
            line_height = {"value": style["lineHeightPx"], "unit": "PIXELS"}
        elif unit == "FONT_SIZE_%":
            line_height = {"value": style.get("lineHeightPercentFontSize", 100), "unit": "PERCENT"}
        else:
            # INTRINSIC_%: the REST value in px is the rendered height
            line_height = {"value": style["lineHeightPx"], "unit": "PIXELS"}

    text = TextFacet(
        characters=data.get("characters", "") or "",
        font_size=data.get("fontSize", style.get("fontSize")),
        font_weight=data.get("fontWeight", style.get("fontWeight")),
        font_family=(font_name or {}).get("family") if isinstance(font_name, dict) else style.get("fontFamily"),
        letter_spacing=data.get("letterSpacing", style.get("letterSpacing")),
        line_height=line_height,
        text_align_horizontal=data.get("textAlignHorizontal", style.get("textAlignHorizontal")),
        text_decoration=data.get("textDecoration", style.get("textDecoration")),
    )

    overrides = [o for o in (data.get("styleOverrideTable") or {}).values() if isinstance(o, dict)]
    if overrides and data.get("characterStyleOverrides"):
        for attr, keys in _OVERRIDE_KEYS.items():
            if any(k in o for o in overrides for k in keys):
                setattr(text, attr, MIXED)
    return text


# ---------------- JSON acquisition ----------------

def load_local_json(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SceneError(f"Failed to read local JSON: {path} ({e})") from e
    logger.info(f"[LOG] Loaded local JSON: {path}")
    return data


def fetch_file_json(file_key: str, token: str):
    url = f"{FIGMA_API_BASE}/files/{file_key}"
    headers = {"X-Figma-Token": token}
    logger.info(f"[LOG] GET {url}")
    resp = requests.get(url, headers=headers, timeout=60)
    resp.raise_for_status()
    return resp.json()


def parse_figma_url(url: str):
    """Return ``(file_key, node_id)`` from a Figma file/design URL."""
    try:
        p = urlparse(url)
        parts = [s for s in p.path.split('/') if s]
        file_key = None
        for i, seg in enumerate(parts):
            if seg in ("file", "design") and i + 1 < len(parts):
                file_key = parts[i + 1]
                break
        q = parse_qs(p.query)
        node_id = None
        for k in ("node-id", "node_id"):
            if k in q and len(q[k]) > 0:
                node_id = unquote(q[k][0])
                if ':' not in node_id and '-' in node_id:
                    node_id = node_id.replace('-', ':', 1)
                break
        return file_key, node_id
    except (TypeError, ValueError, AttributeError):
        return None, None


def find_node_by_id(node, target_id):
    if not isinstance(node, dict):
        return None
    if node.get("id") == target_id:
        return node
    for child in node.get("children", []) or []:
        found = find_node_by_id(child, target_id)
        if found:
            return found
    return None


def top_level_frames(document: dict) -> list[dict]:
    """Summaries of the FRAME nodes sitting directly on each page."""
    root = document.get("document", document)
    pages = [c for c in root.get("children") or [] if isinstance(c, dict)]
    if root.get("type") == "CANVAS":
        pages = [root]
    frames = []
    for page in pages:
        for node in page.get("children") or []:
            if isinstance(node, dict) and node.get("type") == "FRAME":
                frames.append({
                    "name": node.get("name", ""),
                    "id": node.get("id", ""),
                    "children": len(node.get("children") or []),
                })
    return frames


def require_frame(document: dict, frame_id: str) -> dict:
    """Look up ``frame_id`` and make sure it is a FRAME node."""
    root = document.get("document", document)
    node = find_node_by_id(root, frame_id)
    if not node or node.get("type") != "FRAME":
        raise SceneError(f"Invalid frame ID: {frame_id}")
    return node
