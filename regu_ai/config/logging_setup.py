#=========== regu_ai/config/logging_setup.py

import logging
import sys

_LOGGER_PREFIX = "regu_ai"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Logger under the regu_ai namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level="INFO", stream=None) -> None:
    """
    Attach a stream handler to the regu_ai logger hierarchy.

    Streamlit re-executes the app script on every interaction, so this is
    idempotent: later calls only adjust the level.
    """
    global _configured

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(level)

    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def reset_logging() -> None:
    """Drop handlers again. Used by the tests."""
    global _configured
    _configured = False
    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True

#=========== end logging_setup.py
