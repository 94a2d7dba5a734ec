"""Turn a ``module:name`` target into the App the CLI commands act on."""

import importlib

from mockingbird.app import App
from mockingbird.errors import ConfigurationError


def load_app(target: str) -> App:
    """Import *target* and return the App it names.

    ``name`` defaults to ``app``. A zero-argument factory such as
    ``create_app`` is called once and must return an App.

    Raises:
        ConfigurationError: If the module or name is missing, the factory
            fails, or the result is not an App.
    """
    module_name, _, attr = target.partition(":")
    attr = attr or "app"

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import {module_name!r}: {exc}"
        raise ConfigurationError(msg) from exc

    if not hasattr(module, attr):
        msg = f"Module {module_name!r} has no attribute {attr!r}"
        raise ConfigurationError(msg)
    found = getattr(module, attr)

    if not isinstance(found, App) and callable(found):
        try:
            found = found()
        except Exception as exc:
            msg = f"App factory {target!r} failed: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(found, App):
        msg = f"{target!r} is a {type(found).__name__}, not a mockingbird.App"
        raise ConfigurationError(msg)
    return found
