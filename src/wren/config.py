"""Application configuration.

Read by ``App.run()``, ``App.listen()`` and ``wren run``. Dispatch itself
takes no settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Server settings for an App. Frozen; build a new one to change it::

        app = App(AppConfig(port=3000, debug=True))
    """

    host: str = "127.0.0.1"
    port: int = 8000

    # Single worker with auto-reload
    debug: bool = False
    # File extensions and directories watched in addition to .py under cwd
    reload_include: tuple[str, ...] = ()
    reload_dirs: tuple[str, ...] = ()

    # 0 = one worker per CPU; ignored when debug is on
    workers: int = 0
