"""
Log formatters referenced from settings.LOGGING.

JSON lines in production (LOG_JSON=1), a compact coloured line otherwise.
"""
import json
import logging
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else was passed through `extra=`.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _extras(record: logging.LogRecord) -> dict:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED}


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(_extras(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class DevelopmentFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""

        timestamp = datetime.now().strftime("%H:%M:%S")
        location = f"{record.module}:{record.lineno}"
        line = f"{color}[{timestamp}] {record.levelname:8}{reset} {location:28} {record.getMessage()}"

        extras = _extras(record)
        if extras:
            line = f"{line} | " + " ".join(f"{k}={v}" for k, v in extras.items())

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
