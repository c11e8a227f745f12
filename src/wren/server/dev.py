"""Network listener backed by pounce.

pounce is an optional dependency (``pip install wren[server]``) and is
imported only when a server is actually started.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    workers: int = 0,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Serve *app* on *host*:*port* until interrupted.

    The live App object is handed to ``pounce.server.Server``. With
    *reload* the server watches the working tree (plus *reload_dirs* and
    any *reload_include* extensions) and runs exactly one worker;
    otherwise *workers* is passed through, 0 meaning one per CPU.

    *app_path* is the ``module:attribute`` string the app came from, if
    any. pounce re-imports it after a reload so edited routes take
    effect; without it the original object keeps serving.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    if reload:
        workers = 1

    Server(
        ServerConfig(
            host=host,
            port=port,
            workers=workers,
            reload=reload,
            reload_include=reload_include,
            reload_dirs=reload_dirs,
        ),
        app,
        app_path=app_path,
    ).run()
