# src/workboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the HTTP API:
- threaded werkzeug server (one thread per request) in a background thread,
- main thread waits for SIGINT/SIGTERM and shuts the server down.
"""

from __future__ import annotations

import logging
import signal
import threading

from werkzeug.serving import make_server

from ..api.app import create_app
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    app = create_app(state)

    try:
        server = make_server(settings.host, settings.port, app, threaded=True)
    except OSError:
        logger.exception("Failed to bind %s:%s", settings.host, settings.port)
        raise SystemExit(1)

    serve_thread = threading.Thread(target=server.serve_forever, daemon=True)
    serve_thread.start()
    logger.info("Serving on http://%s:%s", settings.host, settings.port)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        stop_main.wait()
    finally:
        server.shutdown()
        serve_thread.join(timeout=10.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
