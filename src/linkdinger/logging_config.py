"""Configure logging for the application."""

import logging
import sys


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger("linkdinger")
    root.setLevel(level)
    # setup_logging runs once per CLI invocation; drop handlers from earlier runs
    root.handlers.clear()
    root.addHandler(handler)

    # Every Linkding call would otherwise log an INFO line from httpx
    httpx_level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)
    logging.getLogger("httpcore").setLevel(httpx_level)
