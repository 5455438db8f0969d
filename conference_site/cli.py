"""Command line entry point for operating the content store.

Commands:
    serve   run the development server
    export  print the current (normalized) content as JSON
    import  validate a JSON file and store it as the current content
    seed    store the default content unless content already exists
"""
from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from conference_site import config as app_config
from conference_site.kvstore import KeyValueStore, StoreError, build_store
from conference_site.services import (
    ContentValidationError,
    PersistenceError,
    default_content,
    read_site_content,
    validate_site_content,
    write_site_content,
)
from conference_site.utils.logging import get_logger

LOG = get_logger("conference_site.cli")


def parse_args(argv: List[str]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="conference-site", description=__doc__.splitlines()[0])
    sub = ap.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the development server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--debug", action="store_true")

    export = sub.add_parser("export", help="Print current content as JSON")
    export.add_argument("--output", type=Path, help="Write to file instead of stdout")

    imp = sub.add_parser("import", help="Validate and store content from a JSON file")
    imp.add_argument("source", type=Path)

    seed = sub.add_parser("seed", help="Store the default content if none exists")
    seed.add_argument("--force", action="store_true", help="Overwrite existing content")
    return ap.parse_args(argv)


def _dump(content: dict) -> str:
    return json.dumps(content, ensure_ascii=False, indent=2)


def cmd_export(store: KeyValueStore, key: str, output: Optional[Path]) -> int:
    text = _dump(read_site_content(store, key))
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        print(f"Exported content to {output}")
    else:
        print(text)
    return 0


def cmd_import(store: KeyValueStore, key: str, source: Path) -> int:
    if not source.exists():
        print(f"Source file {source} not found", file=sys.stderr)
        return 1
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except ValueError as exc:
        print(f"Source file is not valid JSON: {exc}", file=sys.stderr)
        return 1
    try:
        validated = validate_site_content(payload)
    except ContentValidationError as exc:
        print(f"Content rejected: {exc}", file=sys.stderr)
        for err in exc.errors:
            loc = ".".join(str(part) for part in err.get("loc", ()))
            print(f"  {loc}: {err.get('msg')}", file=sys.stderr)
        return 1
    write_site_content(store, validated, key)
    print(f"Imported content from {source}")
    return 0


def cmd_seed(store: KeyValueStore, key: str, force: bool) -> int:
    if store.get(key) is not None and not force:
        print(f"Content already present under key {key!r}; use --force to overwrite")
        return 0
    write_site_content(store, default_content(), key)
    print(f"Seeded default content under key {key!r}")
    return 0


def run(args: argparse.Namespace) -> int:
    if args.command == "serve":
        from conference_site.startup import create_app

        app = create_app()
        app.run(host=args.host, port=args.port, debug=args.debug)
        return 0
    store = build_store(app_config.store_settings())
    key = app_config.content_key()
    try:
        if args.command == "export":
            return cmd_export(store, key, args.output)
        if args.command == "import":
            return cmd_import(store, key, args.source)
        return cmd_seed(store, key, args.force)
    except (PersistenceError, StoreError) as exc:
        LOG.error("Store operation failed: %s", exc)
        print(f"Store operation failed: {exc}", file=sys.stderr)
        return 3


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
        return run(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 2
    except Exception as exc:
        print(f"FATAL: Unhandled exception: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 99


if __name__ == "__main__":
    sys.exit(main())
