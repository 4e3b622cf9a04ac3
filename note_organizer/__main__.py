"""Entry point: python -m note_organizer [menu|serve]

- No args / "menu": interactive note menu
- "serve":          HTTP API (uvicorn)
"""

import argparse
import sys
from typing import List, Optional

from note_organizer import __version__
from note_organizer.config import settings
from note_organizer.logging_setup import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="note-organizer",
        description="Keep notes in a JSON file, from a menu or over HTTP.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--notes-file", help=f"notes JSON file (default: {settings.notes_file})")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("menu", help="interactive menu (default)")

    serve_parser = subparsers.add_parser("serve", help="run the HTTP API")
    serve_parser.add_argument("--host", help=f"bind address (default: {settings.server_host})")
    serve_parser.add_argument("--port", type=int, help=f"port (default: {settings.server_port})")

    return parser


def _run_menu(log_level: Optional[str]) -> None:
    from note_organizer.cli import NoteMenu

    # The menu owns stdout; logs go to stderr, warnings and up unless asked
    setup_logging(log_level or "WARNING", sys.stderr)
    try:
        NoteMenu().run()
    except KeyboardInterrupt:
        pass


def _run_serve(log_level: Optional[str], host: Optional[str], port: Optional[int]) -> None:
    from note_organizer.main import serve

    if log_level:
        settings.log_level = log_level
    setup_logging()
    serve(host=host, port=port)


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.notes_file:
        settings.notes_file = args.notes_file

    if args.command == "serve":
        _run_serve(args.log_level, args.host, args.port)
    else:
        _run_menu(args.log_level)


if __name__ == "__main__":
    main()
