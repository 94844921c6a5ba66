"""Console logging helpers for the game front ends."""

import datetime
import logging


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure_logging(verbose=False):
    """Route library loggers to stderr; verbose also shows rejected moves."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
