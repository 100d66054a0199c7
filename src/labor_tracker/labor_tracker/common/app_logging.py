from __future__ import annotations

import logging


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure application logging to the console.

    Args:
        level: Logging level.

    Returns:
        Logger: Root logger configured.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return logger  # Already configured

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)

    return logger
