"""Figma frame -> HTML + SCSS."""
from .elements import Element, build_element, derive_selector
from .export import ExportResult, export_frame, export_roots, write_export
from .markup import generate_html
from .names import ParsedName, parse_node_name
from .scene import MIXED, SceneError, SceneNode
from .styles import node_styles
from .stylesheet import generate_scss

__all__ = [
    "Element",
    "ExportResult",
    "MIXED",
    "ParsedName",
    "SceneError",
    "SceneNode",
    "build_element",
    "derive_selector",
    "export_frame",
    "export_roots",
    "generate_html",
    "generate_scss",
    "node_styles",
    "parse_node_name",
    "write_export",
]
