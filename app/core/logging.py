"""
Structured JSON logging with request_id, and menu_item_id / field when applicable.
"""
from __future__ import annotations

import json
import logging
import time
from contextvars import ContextVar
from typing import Optional

from app.config import get_settings

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Record attributes copied into the JSON line when passed via `extra=`
_EXTRA_FIELDS = ("menu_item_id", "field", "changed_fields")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + ".%03dZ" % record.msecs,
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if request_id_ctx.get():
            log["request_id"] = request_id_ctx.get()
        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log[name] = value if isinstance(value, (int, list)) else str(value)
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(get_settings().log_level.upper())
    return logger
