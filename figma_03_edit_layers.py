import json
import logging
import argparse

from figma_markup.config import load_settings
from figma_markup.layers import apply_device_layout, rename_layers
from figma_markup.scene import load_local_json, require_frame


logger = logging.getLogger(__name__)

COMMANDS = ("rename", "pc-layout", "sp-layout")


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    parser = argparse.ArgumentParser(description="Edit layers of a saved Figma JSON (rename / PC layout / SP layout)")
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("--json", dest="input_json", help="Path to saved JSON (fallback: env INPUT_JSON_FILE)")
    parser.add_argument("--frame-id", help="Target frame node-id (fallback: env FRAME_NODE_ID)")
    parser.add_argument("--output", help="Where to write the edited JSON (default: overwrite input)")
    args = parser.parse_args(argv)

    settings = load_settings(frame_id=args.frame_id, input_json=args.input_json)
    if not settings.input_json:
        raise SystemExit("Missing JSON: pass --json or set INPUT_JSON_FILE in .env")
    if not settings.frame_id:
        raise SystemExit("Missing FRAME_NODE_ID: pass --frame-id or set FRAME_NODE_ID in .env")

    document = load_local_json(settings.input_json)
    frame = require_frame(document, settings.frame_id)

    if args.command == "rename":
        rename_layers(frame)
    else:
        apply_device_layout(frame, args.command.split("-")[0])

    out_path = args.output or settings.input_json
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False, indent=2)
    logger.info(f"[LOG] Saved JSON: {out_path}")
    return out_path


if __name__ == "__main__":
    main()
