"""Logging bootstrap for the real-ip service.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where records go and how they look:

* ``json_output=True``: one JSON object per line.  Resolution records
  carry ``client_ip`` and ``provider`` as top-level keys (empty for
  records that are not about a request).
* ``json_output=False``: uvicorn's coloured console format.

uvicorn's own loggers share the same handler so server and resolver
lines are interleaved in one stream.
"""

from __future__ import annotations

import logging
import sys

from realip.configs.system import LoggingConfig

# Extra keys attached by ``RealIPResolver.resolve``.
RESOLUTION_FIELDS = ("client_ip", "provider")

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s " + " ".join(
    f"%({field})s" for field in RESOLUTION_FIELDS
)
_DEV_FORMAT = "%(levelprefix)s %(asctime)s %(name)s  %(message)s"
_DEV_DATEFMT = "%H:%M:%S"


def build_formatter(config: LoggingConfig) -> logging.Formatter:
    """Return the JSON or console formatter selected by ``config``."""
    if config.json_output:
        from pythonjsonlogger.json import JsonFormatter

        return JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            defaults={field: "" for field in RESOLUTION_FIELDS},
        )

    from uvicorn.logging import DefaultFormatter

    return DefaultFormatter(fmt=_DEV_FORMAT, datefmt=_DEV_DATEFMT, use_colors=True)


def setup_logging(config: LoggingConfig | None = None) -> logging.Handler:
    """Install one stdout handler on the root and ``uvicorn`` loggers.

    Returns the handler so callers (and tests) can detach it again.
    """
    config = config or LoggingConfig()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(config))

    root = logging.getLogger()
    root.setLevel(config.level.upper())
    root.handlers = [handler]

    # uvicorn.error and uvicorn.access propagate to "uvicorn".
    uvicorn_logger = logging.getLogger("uvicorn")
    uvicorn_logger.handlers = [handler]
    uvicorn_logger.propagate = False

    return handler
