"""Logging setup — один stream handler, текстовый или JSON формат.

Инварианты:
    - Каждая запись содержит timestamp, level, имя логгера и сообщение
    - setup_logging вызывается один раз при старте CLI
"""

import json
import logging
from datetime import datetime, timezone

_HANDLER_NAME = "numeric-drills"


class JSONFormatter(logging.Formatter):
    """Форматирование записей в одну JSON-строку."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("operation", "operand1", "operand2"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Установка handler на root logger; повторный вызов заменяет прежний handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
