"""Logging bootstrap for the driver engine.

``configure_logging`` picks plain text or JSON lines from ``Settings``.
JSON mode (``DRIVERS_STRUCTURED_LOGGING=true``) writes one object per
record; data source resolution adds the vendor key it settled on.

Output schema per line::

    {
        "timestamp": "2025-05-15T12:34:56.789012+00:00",
        "level": "INFO",
        "logger": "driver_engine.datasource",
        "message": "Resolved data source driver POSTGRESQL (org.postgresql.Driver)",
        "driver": "POSTGRESQL",        // present when passed via extra={"driver": ...}
        "exc_info": "Traceback ..."    // present only on exceptions
    }
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from driver_engine.config import Settings

_TEXT_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, carrying the resolved vendor key.

    *context_fields* names the ``extra=`` attributes copied into the payload
    when a record carries them; resolution logs pass ``driver``.
    """

    def __init__(self, context_fields: tuple[str, ...] = ("driver",)) -> None:
        super().__init__()
        self.context_fields = context_fields

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {name: getattr(record, name) for name in self.context_fields if getattr(record, name, None) is not None}
        )
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_info"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from *settings*.

    Plain text via ``logging.basicConfig`` by default; with
    ``structured_logging`` the root handlers are replaced by a single
    ``StreamHandler`` using :class:`JSONFormatter`.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    if not settings.structured_logging:
        logging.basicConfig(level=level, format=_TEXT_FORMAT)
        return

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
