import logging
import os
import sys


def setup_logger(level: int = logging.INFO, name: str = "imagick_convert") -> logging.Logger:
    """Create or update the project logger.

    - Respects the IMAGICK_CONVERT_LOG_LEVEL env override on every call.
    - Ensures there is exactly one stderr StreamHandler on the base logger and
      updates its formatter instead of stacking new handlers.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("IMAGICK_CONVERT_LOG_LEVEL") or "").strip().lower()
    if env_level:
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
            "critical": logging.CRITICAL,
        }
        level = level_map.get(env_level, level)
    logger.setLevel(level)

    # FileHandler subclasses StreamHandler; only plain stream handlers are ours
    stream_handler: logging.StreamHandler | None = None
    for h in list(logger.handlers):
        if type(h) is logging.StreamHandler:
            stream_handler = h

    if stream_handler is None:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(stream_handler)
    elif stream_handler.stream is not sys.stderr:
        # stderr may have been swapped (test capture, embedding apps)
        stream_handler.setStream(sys.stderr)

    fmt = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    stream_handler.setFormatter(fmt)

    # Do not propagate beyond the project logger
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = setup_logger()
    return base if not name else base.getChild(name)
