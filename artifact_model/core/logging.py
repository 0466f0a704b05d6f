"""Logging for the CLI and library: structlog events rendered by stdlib handlers.

Environment:
    ARTIFACT_MODEL_LOG_LEVEL   level name, default INFO
    ARTIFACT_MODEL_LOG_FORMAT  ``console`` or ``json``, default console
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LEVEL_ENV = "ARTIFACT_MODEL_LOG_LEVEL"
FORMAT_ENV = "ARTIFACT_MODEL_LOG_FORMAT"


def _pre_chain() -> list[structlog.types.Processor]:
    # Applied to structlog events and to records from plain stdlib loggers alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(pre_chain: list[structlog.types.Processor], fmt: str) -> logging.Handler:
    # stdout carries the CLI's own output.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(fmt),
            ],
        )
    )
    return handler


def setup_logging(level: str | None = None) -> None:
    """Route structlog through the root logger; *level* overrides the environment."""
    level_name = (level or os.environ.get(LEVEL_ENV) or "INFO").upper()
    fmt = (os.environ.get(FORMAT_ENV) or "console").lower()
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(pre_chain, fmt)]
    root.setLevel(level_name)
    logging.getLogger("artifact_model").setLevel(level_name)
