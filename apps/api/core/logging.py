"""Log setup for the extraction API.

Request handlers log events such as `extract_complete` through structlog.
The engine under packages/extraction_engine uses plain `logging.getLogger`.
Both end up on one stdout handler. Deployed instances emit one JSON object
per line. Local runs get readable console output.
"""

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Wire structlog and the engine logger to stdout at `log_level`.

    An unrecognised level name falls back to INFO. `json_output` picks
    the JSON renderer over the console one.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("packages.extraction_engine").setLevel(level)
