"""Observability – structlog rendering for the library's DEBUG trail.

The core modules log through stdlib ``logging`` under the ``eventually``
namespace; :class:`JsonLoggerFactory` routes those records through
structlog's ``ProcessorFormatter``.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

LIBRARY_LOGGER = "eventually"


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


class JsonLoggerFactory:
    """Install one structlog-formatted handler on the root logger.

    Calling :meth:`configure` again replaces the handler it installed before
    and leaves every other root handler in place.
    """

    _installed: logging.Handler | None = None

    @classmethod
    def configure(
        cls,
        level: int = logging.INFO,
        library_level: int | None = None,
        *,
        json: bool = True,
    ) -> logging.Handler:
        """Render log records as JSON lines (or key=value text with ``json=False``).

        *library_level* sets the ``eventually`` logger independently of the
        root, e.g. ``logging.DEBUG`` to see each failed attempt and resolution.
        """
        pre_chain = _pre_chain()
        structlog.configure(
            processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=pre_chain,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )

        root = logging.getLogger()
        if cls._installed is not None:
            root.removeHandler(cls._installed)
        root.addHandler(handler)
        root.setLevel(level)
        cls._installed = handler
        if library_level is not None:
            logging.getLogger(LIBRARY_LOGGER).setLevel(library_level)
        return handler


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "LIBRARY_LOGGER", "get_logger"]
