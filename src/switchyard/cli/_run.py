"""``switchyard run`` — start a server for an app import string."""

import argparse
import sys

from switchyard.app import configure_logging
from switchyard.cli._resolve import ResolveError, resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it.

    CLI flags override the app's ``AppConfig``.
    """
    try:
        app = resolve_app(args.app)
    except ResolveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from switchyard.server.dev import run_server as start

    host = args.host or app.config.host
    port = args.port or app.config.port

    configure_logging(app.config.effective_log_level)
    start(app, host, port, reload=args.reload or app.config.effective_reload, app_path=args.app)
