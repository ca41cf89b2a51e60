"""Logging configuration for the Year of Prayer API facade.

Package modules log through ``structlog`` with keyword context. Records from
plain stdlib loggers (httpx, caller code) are rendered by the same JSON
formatter, with their ``extra`` fields merged into the event.
"""

from __future__ import annotations

import logging
from typing import IO

import structlog

_HANDLER_NAME = "yearofprayer"


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(
    level: int | str = logging.INFO, *, stream: IO[str] | None = None
) -> logging.Handler:
    """Install a JSON handler on the root logger and route ``structlog`` through it.

    Calling it again replaces the handler installed by the previous call, so
    the level and output stream can be changed at runtime.
    """

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # module-level loggers are created at import time, before configuration
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *_shared_processors()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
