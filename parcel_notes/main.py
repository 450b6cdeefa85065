# main.py
"""Command-line entrypoint.

Thin shell over parcel_notes.commands:
- load: summary of the stored document
- export-json / export-markdown / export-html: write an export to stdout or --output
- import FILE: replace the stored document with a JSON export
- data-dir: where notes.json lives
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from parcel_notes import commands
from parcel_notes.commands import CommandError
from parcel_notes.logging_setup import SESSION_ID, get_logger, install_global_exception_hooks, setup_logging

EXPORTERS = {
    "export-json": commands.export_notes_json,
    "export-markdown": commands.export_notes_markdown,
    "export-html": commands.export_notes_html,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="parcel-notes", description="Parcel notes storage and export")
    p.add_argument(
        "--data-root",
        type=Path,
        default=None,
        help="App data root (default: per-user application data directory)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("load", help="Load, validate and summarize the stored notes")
    sub.add_parser("data-dir", help="Print the storage directory")
    for name in EXPORTERS:
        ep = sub.add_parser(name, help=f"Render stored notes ({name[len('export-'):]})")
        ep.add_argument("-o", "--output", type=Path, default=None, help="Write to file instead of stdout")
    ip = sub.add_parser("import", help="Replace stored notes with a JSON export")
    ip.add_argument("file", type=Path)
    return p.parse_args(argv)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text)
        return
    output.write_text(text, encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    if args.command == "data-dir":
        print(commands.get_data_dir(args.data_root))
        return 0

    if args.command == "import":
        text = args.file.read_text(encoding="utf-8")
        parcel = commands.import_notes_json(args.data_root, text)
        print(f"Imported {len(parcel.notes)} notes, {len(parcel.folders)} folders")
        return 0

    parcel = commands.load_notes(args.data_root)
    if args.command == "load":
        pinned = sum(1 for n in parcel.notes if n.pinned)
        print(
            f"version {parcel.version}: {len(parcel.notes)} notes "
            f"({pinned} pinned), {len(parcel.folders)} folders"
        )
        return 0

    _emit(EXPORTERS[args.command](parcel), args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.WARNING)
    install_global_exception_hooks()
    log = get_logger()
    log.debug("parcel-notes %s, SID=%s", args.command, SESSION_ID)

    try:
        return run(args)
    except CommandError as e:
        print(e, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"io error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
