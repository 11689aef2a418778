import os
import logging
import argparse

from figma_markup.config import load_settings
from figma_markup.export import export_frame, write_export
from figma_markup.scene import fetch_file_json, load_local_json, top_level_frames


def load_document(settings):
    if settings.input_json:
        return load_local_json(settings.input_json)
    if not settings.allow_online:
        raise SystemExit("Missing JSON: pass --json or set INPUT_JSON_FILE in .env (or --allow-online to fetch)")
    if not (settings.token and settings.file_key):
        raise SystemExit("Online fetch needs FIGMA_API_TOKEN and FILE_KEY (or FIGMA_URL) in .env")
    return fetch_file_json(settings.file_key, settings.token)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    parser = argparse.ArgumentParser(description="Build HTML/SCSS from saved Figma JSON (offline by default)")
    parser.add_argument("--json", dest="input_json", help="Path to saved JSON (fallback: env INPUT_JSON_FILE)")
    parser.add_argument("--frame-id", help="Target frame node-id (fallback: env FRAME_NODE_ID)")
    parser.add_argument("--output-dir", help="Output directory (fallback: env OUTPUT_DIR)")
    parser.add_argument("--allow-online", action="store_true", help="Fetch the file from the Figma API when no JSON is given (fallback: env ALLOW_ONLINE=true)")
    parser.add_argument("--list-frames", action="store_true", help="Only list top-level frames and exit")
    args = parser.parse_args(argv)

    settings = load_settings(
        frame_id=args.frame_id,
        input_json=args.input_json,
        output_dir=args.output_dir,
        allow_online=args.allow_online,
    )
    document = load_document(settings)

    if args.list_frames:
        frames = top_level_frames(document)
        for frame in frames:
            print(f"{frame['id']}\t{frame['name']}\t({frame['children']} children)")
        return frames

    if not settings.frame_id:
        raise SystemExit("Missing FRAME_NODE_ID: pass --frame-id or set FRAME_NODE_ID in .env")

    result = export_frame(document, settings.frame_id)
    out_dir = os.path.join(settings.output_dir, settings.frame_id.replace(":", "_").replace(";", "_"))
    write_export(result, out_dir)
    if result.failed:
        raise SystemExit(1)
    return result


if __name__ == "__main__":
    main()
