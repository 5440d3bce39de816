import json
import logging
from datetime import datetime, timezone


RESERVED_RECORD_FIELDS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    def __init__(self, include_stack: bool = False) -> None:
        super().__init__()
        self.include_stack = include_stack

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.include_stack:
            payload["location"] = f"{record.pathname}:{record.lineno}"
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in RESERVED_RECORD_FIELDS or key.startswith("_"):
                continue
            payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    *,
    level: str = "INFO",
    log_format: str = "json",
    include_stack: bool = False,
) -> None:
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level.upper())

    handler = logging.StreamHandler()
    if log_format.lower() == "json":
        handler.setFormatter(JsonFormatter(include_stack=include_stack))
    else:
        pattern = "%(asctime)s %(levelname)s %(name)s: %(message)s"
        if include_stack:
            pattern += " | %(pathname)s:%(lineno)d"
        handler.setFormatter(logging.Formatter(pattern))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
