"""``wren run`` — start a server for an app given by import string."""

import argparse
import sys

from wren.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it.

    CLI flags override the app's config. The import string is forwarded
    so reload can re-import the app after code changes.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from wren.server.dev import run_server as _serve

    _serve(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=app.config.debug,
        workers=args.workers if args.workers is not None else app.config.workers,
        reload_include=app.config.reload_include,
        reload_dirs=app.config.reload_dirs,
        app_path=args.app,
    )
