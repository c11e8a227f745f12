"""Command-line interface.

Installed as the ``wren`` console script::

    wren run myproject.web:app --port 3000
"""

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wren",
        description="wren: ordered routes and middleware over ASGI.",
    )
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="Serve an app with pounce")
    run.add_argument("app", help="Import string such as myapp:app (attribute defaults to app)")
    run.add_argument("--host", help="Bind address (default: app.config.host)")
    run.add_argument("--port", type=int, help="Bind port (default: app.config.port)")
    run.add_argument(
        "--workers",
        type=int,
        help="Worker processes, 0 for one per CPU (default: app.config.workers)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``wren`` command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from wren.cli._run import run_server

        run_server(args)
