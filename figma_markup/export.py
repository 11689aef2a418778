"""Frame export: HTML + SCSS for the children of one FRAME.

Generation is all-or-nothing. Any failure is logged and replaced by a fixed
pair of commented-out placeholders so callers always get two strings back.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .elements import build_element
from .markup import generate_html
from .scene import SceneNode, require_frame
from .stylesheet import generate_scss


logger = logging.getLogger(__name__)

HTML_ERROR_PLACEHOLDER = "<!-- Error generating HTML -->"
SCSS_ERROR_PLACEHOLDER = "// Error generating SCSS"


@dataclass
class ExportResult:
    html: str
    scss: str

    @property
    def failed(self) -> bool:
        return self.html == HTML_ERROR_PLACEHOLDER and self.scss == SCSS_ERROR_PLACEHOLDER


ERROR_RESULT = ExportResult(HTML_ERROR_PLACEHOLDER, SCSS_ERROR_PLACEHOLDER)


def export_roots(roots) -> ExportResult:
    """Markup and stylesheet for a list of sibling scene roots."""
    elements = [build_element(root) for root in roots]
    html = "\n".join(generate_html(element) for element in elements)
    scss = "\n\n".join(generate_scss(element) for element in elements)
    return ExportResult(html, scss)


def export_frame(document: dict, frame_id: str) -> ExportResult:
    try:
        frame = SceneNode.from_dict(require_frame(document, frame_id))
        logger.info(f"[LOG] Exporting frame: {frame.name} ({len(frame.children)} children)")
        return export_roots(frame.children)
    except Exception as e:
        logger.error(f"[ERROR] Error in export: {e}", exc_info=True)
        return ERROR_RESULT


def write_export(result: ExportResult, out_dir: str):
    os.makedirs(out_dir, exist_ok=True)
    html_path = os.path.join(out_dir, "index.html")
    scss_path = os.path.join(out_dir, "style.scss")
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(result.html + "\n")
    with open(scss_path, "w", encoding="utf-8") as f:
        f.write(result.scss + "\n")
    logger.info(f"[LOG] Saved: {html_path}")
    logger.info(f"[LOG] Saved: {scss_path}")
    return html_path, scss_path
