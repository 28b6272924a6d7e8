"""
Logging configuration for the API.

``setup_logging`` applies ``Settings.log_level`` and ``Settings.log_file``
to the root logger.  The level is always applied, even when a host such
as uvicorn or pytest installed its own handlers first; the console
handler is only added when the root logger has none, and the file
handler is added once per path.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Configure the root logger from ``config`` and return it.

    Unknown level names fall back to ``INFO``.  Calling this repeatedly
    (one call per ``create_app``) never duplicates handlers.
    """
    config = config or default_settings
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return root
