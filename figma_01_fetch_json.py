import os
import json
import logging
import argparse
from datetime import datetime

from figma_markup.config import load_settings
from figma_markup.scene import fetch_file_json


logger = logging.getLogger(__name__)


def sanitize_filename(name: str) -> str:
    for ch in '\\/:*?"<>|':
        name = name.replace(ch, "_")
    return name


def save_json(data, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info(f"[LOG] Saved JSON: {path}")


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    parser = argparse.ArgumentParser(description="Fetch Figma file JSON and save locally.")
    parser.add_argument("--url", help="Figma URL (extracts file key; fallback: env FIGMA_URL)")
    parser.add_argument("--file-key", dest="file_key", help="Figma file key (fallback: env FILE_KEY)")
    parser.add_argument("--output-dir", dest="output_dir", help="Base output directory (fallback: env OUTPUT_DIR)")
    parser.add_argument("--save-latest", dest="save_latest", action="store_true", help="Also write latest.json")
    args = parser.parse_args(argv)

    settings = load_settings(url=args.url, file_key=args.file_key, output_dir=args.output_dir)
    if not settings.token:
        raise SystemExit("FIGMA_API_TOKEN is required (env)")
    if not settings.file_key:
        raise SystemExit("File key is required (use --file-key or --url, or set FIGMA_URL/FILE_KEY in .env)")

    raw_dir = os.path.join(settings.output_dir, "raw_figma_data")
    os.makedirs(raw_dir, exist_ok=True)

    data = fetch_file_json(settings.file_key, settings.token)
    proj = sanitize_filename(data.get("name") or "Unknown_Project")
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join(raw_dir, f"{proj}_{settings.file_key}_{ts}.json")
    save_json(data, path)
    if args.save_latest:
        save_json(data, os.path.join(raw_dir, "latest.json"))
    return path


if __name__ == "__main__":
    main()
