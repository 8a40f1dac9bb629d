"""
Structlog logging configuration.

Nothing is configured on import; the host application keeps its own structlog
setup. configure_logging() routes structlog through stdlib logging and installs
a console/JSON handler on the root logger for applications that want it.
"""
import logging
import json
import structlog
from structlog.processors import TimeStamper, add_log_level, JSONRenderer
from structlog.dev import ConsoleRenderer
from structlog.contextvars import merge_contextvars
from structlog.stdlib import ProcessorFormatter
from typing import Any, List, Optional

from sberbank_acquiring.core.settings import acquiring_settings


def get_renderer(debug: bool) -> Any:
    """Console renderer in debug mode, JSON otherwise.

    structlog passes default/sort_keys to the serializer, so wrap json.dumps.
    """
    if debug:
        return ConsoleRenderer(colors=True)

    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
    return JSONRenderer(serializer=_dumps)


def _shared_pre_chain() -> List[Any]:
    return [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_structlog() -> None:
    """Hand structlog events to stdlib logging, rendered by ProcessorFormatter."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_pre_chain(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(debug: Optional[bool] = None) -> None:
    """Configure structlog and bridge stdlib logging into the same processor chain."""
    if debug is None:
        debug = acquiring_settings.debug
    configure_structlog()

    formatter = ProcessorFormatter(
        foreign_pre_chain=_shared_pre_chain(),
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(debug),
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to `name`."""
    return structlog.get_logger(name)

