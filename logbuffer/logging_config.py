"""Loguru setup for processes embedding logbuffer.

The package logs its own diagnostics (failing listeners or console sinks)
through stdlib ``logging``; ``setup_logging`` routes those records into loguru
next to the host application's output.
"""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """
    Route standard-library logging records to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # report the caller's frame, not this handler's
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    log_level: str = "INFO", enable_stdout: bool = True, colorize: bool = False
) -> None:
    """
    Configure Loguru as the process sink and intercept stdlib logging,
    including the ``logbuffer`` package's own diagnostics.

    ``colorize`` is passed to the stdout sink, so lines produced by
    ``logbuffer.view.render(..., colorize=True)`` and logged with
    ``logger.opt(colors=True)`` show their level colours.
    """
    logger.remove()

    if enable_stdout:
        logger.add(sys.stdout, level=log_level, colorize=colorize, enqueue=True)

    logging.basicConfig(handlers=[InterceptHandler()], level=log_level, force=True)
    logging.getLogger("logbuffer").setLevel(log_level)
