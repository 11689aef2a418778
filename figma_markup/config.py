"""Settings shared by the numbered scripts (CLI > env > default)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .scene import parse_figma_url


DEFAULT_OUTPUT_DIR = "figma_layout"


def env_flag(name: str, default: str = "false") -> bool:
    return (os.getenv(name, default) or default).lower() == "true"


@dataclass
class Settings:
    token: Optional[str] = None
    file_key: Optional[str] = None
    frame_id: Optional[str] = None
    input_json: Optional[str] = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    allow_online: bool = False


def load_settings(
    url: Optional[str] = None,
    file_key: Optional[str] = None,
    frame_id: Optional[str] = None,
    input_json: Optional[str] = None,
    output_dir: Optional[str] = None,
    allow_online: bool = False,
) -> Settings:
    """Resolve settings from CLI values, then ``.env`` / environment."""
    load_dotenv()

    url_key, url_node = parse_figma_url(url or os.getenv("FIGMA_URL") or "")
    return Settings(
        token=os.getenv("FIGMA_API_TOKEN"),
        file_key=file_key or url_key or os.getenv("FILE_KEY"),
        frame_id=frame_id or os.getenv("FRAME_NODE_ID") or url_node,
        input_json=input_json or os.getenv("INPUT_JSON_FILE"),
        output_dir=output_dir or os.getenv("OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        allow_online=allow_online or env_flag("ALLOW_ONLINE"),
    )
