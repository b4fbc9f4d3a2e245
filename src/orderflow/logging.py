"""Logger factory shared by every layer."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``orderflow`` hierarchy.

    The ``orderflow`` root logger gets a single stream handler the first
    time any logger is requested; children propagate to it.
    """
    root = logging.getLogger("orderflow")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if name == "orderflow" or name.startswith("orderflow."):
        return logging.getLogger(name)
    return root.getChild(name)


def set_verbose(verbose: bool) -> None:
    get_logger("orderflow").setLevel(logging.DEBUG if verbose else logging.INFO)
