"""Locate the App named by a ``module:attribute`` import string."""

import importlib

from wren.app import App

DEFAULT_ATTRIBUTE = "app"


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the wren App it names.

    ``"pkg.web"`` is shorthand for ``"pkg.web:app"``. When the attribute
    is a factory (any callable that is not itself an App) it is called
    with no arguments and must return one.

    Raises:
        ModuleNotFoundError: The module does not exist.
        AttributeError: The module has no such attribute.
        TypeError: The factory failed, or the result is not an App.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or DEFAULT_ATTRIBUTE)

    if not isinstance(target, App) and callable(target):
        target = _call_factory(import_string, target)

    if not isinstance(target, App):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a wren.App instance"
        raise TypeError(msg)
    return target


def _call_factory(import_string: str, factory: object) -> object:
    try:
        return factory()  # type: ignore[operator]
    except Exception as exc:
        msg = f"Factory function {import_string!r} raised an error: {exc}"
        raise TypeError(msg) from exc
