"""Run the web UI under uvicorn, optionally opening it in a browser."""

from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Optional

import uvicorn

from .config import AppSettings
from .webapp import create_app

logger = logging.getLogger(__name__)

BROWSER_DELAY_SECONDS = 1.0


def run_server(
    *,
    host: str = "127.0.0.1",
    port: int = 8766,
    settings: Optional[AppSettings] = None,
    open_browser: bool = True,
    log_level: str = "info",
) -> None:
    """Serve the suggester until interrupted."""
    app = create_app(settings=settings or AppSettings.from_options())
    url = f"http://{host}:{port}/"
    logger.info("Activity Suggester available at %s", url)

    if open_browser:
        opener = threading.Timer(BROWSER_DELAY_SECONDS, _open_ui, args=(url,))
        opener.daemon = True
        opener.start()

    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def _open_ui(url: str) -> None:
    try:
        webbrowser.open_new_tab(url)
    except webbrowser.Error:
        logger.exception("Could not open a browser tab for %s", url)
