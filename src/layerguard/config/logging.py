"""structlog setup for layerguard diagnostics.

Findings go to stdout through the output layer; diagnostics (graph
construction, scan counts, unreadable files) go to stderr through logging.
Modules log with ``logging.getLogger(__name__)`` and structlog renders those
records alongside its own, as a console line or as a JSON object per line
with ``--log-json``.

Only the ``layerguard`` logger is raised to DEBUG by ``--verbose``; other
libraries stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

PACKAGE_LOGGER = "layerguard"

# Marks the handler installed here so reconfiguration replaces only it.
_HANDLER_NAME = "layerguard-stderr"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(*, log_json: bool, stream: IO[str]) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Route structlog and stdlib records to *stream* (default: stderr).

    Safe to call repeatedly: a previously installed layerguard handler is
    replaced, any other root handler is left alone.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr
    pre_chain = _pre_chain()
    if log_json:
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json, stream=stream),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
