"""Locate the application named on the command line.

``switchyard run`` and ``switchyard routes`` take ``module[:attribute]``.
The attribute (``app`` when omitted) may hold an ``App``, a bare ``Router``,
or a zero-argument factory returning either. A ``Router`` is wrapped in an
``App`` with default configuration so both commands can work with it.
"""

import importlib
from typing import Any

from switchyard.app import App
from switchyard.errors import ConfigurationError
from switchyard.routing.router import Router

DEFAULT_ATTRIBUTE = "app"


class ResolveError(ConfigurationError):
    """The import string does not lead to an App or a Router."""


def split_target(target: str) -> tuple[str, str]:
    """``"pkg.mod:api"`` -> ``("pkg.mod", "api")``; ``"pkg.mod"`` -> ``("pkg.mod", "app")``."""
    module_name, _, attribute = target.partition(":")
    if not module_name:
        msg = f"no module named in {target!r}"
        raise ResolveError(msg)
    return module_name, attribute or DEFAULT_ATTRIBUTE


def resolve_app(target: str) -> App:
    """Import *target* and return the App it names.

    Raises:
        ResolveError: The module cannot be imported, lacks the attribute,
            the factory fails, or the result is neither an App nor a Router.
    """
    module_name, attribute = split_target(target)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"cannot import {module_name!r}: {exc}"
        raise ResolveError(msg) from exc

    try:
        found = getattr(module, attribute)
    except AttributeError as exc:
        msg = f"module {module_name!r} has no attribute {attribute!r}"
        raise ResolveError(msg) from exc

    # App and Router are callable themselves; only other callables are factories
    if callable(found) and not isinstance(found, (App, Router)):
        try:
            found = found()
        except Exception as exc:
            msg = f"factory {target!r} raised {type(exc).__name__}: {exc}"
            raise ResolveError(msg) from exc

    return as_app(found, target)


def as_app(found: Any, target: str) -> App:
    if isinstance(found, App):
        return found
    if isinstance(found, Router):
        return App(router=found)
    msg = f"{target!r} is a {type(found).__name__}, expected a switchyard App or Router"
    raise ResolveError(msg)
