"""Logging for transpace: console and JSON formatters plus call tracing.

Everything logs under the `transpace` logger namespace to stderr, so log
lines never mix with encoded or decoded output on stdout.
"""

import functools
import json
import logging
import sys
import time
import traceback
from datetime import datetime, timezone

ROOT_LOGGER = "transpace"


def _truncate(value: object, max_len: int = 80) -> str:
    """Truncate a string for safe logging."""
    s = str(value)
    if len(s) > max_len:
        return s[:max_len] + "..."
    return s


class JsonFormatter(logging.Formatter):
    """Outputs one JSON object per line for machine parsing."""

    def format(self, record):
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "src": record.name,
        }
        if hasattr(record, "event"):
            entry["event"] = record.event
        if hasattr(record, "duration_ms"):
            entry["duration_ms"] = round(record.duration_ms, 2)
        if hasattr(record, "ctx"):
            entry["ctx"] = record.ctx
        if record.getMessage() and not hasattr(record, "event"):
            entry["msg"] = record.getMessage()
        if record.exc_info and record.exc_info[1]:
            entry["traceback"] = traceback.format_exception(*record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console output, colored when stderr is a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",    # cyan
        "INFO": "\033[32m",     # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",    # red
    }
    RESET = "\033[0m"

    def __init__(self, color: bool | None = None):
        super().__init__()
        self.color = sys.stderr.isatty() if color is None else color

    def format(self, record):
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        if self.color:
            level = f"{self.COLORS.get(record.levelname, '')}{record.levelname:5s}{self.RESET}"
        else:
            level = f"{record.levelname:5s}"
        parts = [ts, level, f"[{record.name}]"]

        if hasattr(record, "event"):
            parts.append(record.event)

        if hasattr(record, "duration_ms"):
            parts.append(f"({record.duration_ms:.1f}ms)")

        if hasattr(record, "ctx") and record.ctx:
            parts.append(" ".join(f"{k}={_truncate(v)}" for k, v in record.ctx.items()))
        elif record.getMessage() and not hasattr(record, "event"):
            parts.append(record.getMessage())

        if record.exc_info and record.exc_info[1]:
            parts.append(f"\n{''.join(traceback.format_exception(*record.exc_info))}")

        return " ".join(parts)


def setup_logging(level: str = "WARNING", log_file: str | None = None, json_format: bool = False):
    """Configure the root transpace logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
        log_file: If set, also write JSON logs to this file path.
        json_format: If True, use JSON format on the console too.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.handlers.clear()
    root.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JsonFormatter() if json_format else ConsoleFormatter())
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(JsonFormatter())
        root.addHandler(fh)


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger scoped under the transpace namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{module_name}")


def _emit(log: logging.Logger, level: int, event: str, exc_info=None, **fields):
    record = log.makeRecord(
        name=log.name, level=level, fn="", lno=0,
        msg="", args=(), exc_info=exc_info,
    )
    record.event = event
    for key, value in fields.items():
        setattr(record, key, value)
    log.handle(record)


def _summarize(value: object) -> str:
    if isinstance(value, (str, int, float, bool)):
        return _truncate(repr(value), 80)
    if hasattr(value, "__len__"):
        return f"{type(value).__name__}[{len(value)}]"
    return type(value).__name__


def trace(func=None, *, logger_name: str | None = None):
    """Decorator that logs function entry and exit with timing at DEBUG.

    Exceptions are logged with their traceback and re-raised unchanged.
    Nothing is formatted unless DEBUG is enabled.
    """
    def decorator(fn):
        _logger_name = logger_name or fn.__module__.removeprefix(f"{ROOT_LOGGER}.")
        log = get_logger(_logger_name)

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            if not log.isEnabledFor(logging.DEBUG):
                return fn(*args, **kwargs)

            fn_name = fn.__name__
            _emit(log, logging.DEBUG, f"{fn_name}.enter", ctx={
                "args": [_summarize(a) for a in args],
                "kwargs": {k: _summarize(v) for k, v in kwargs.items()},
            })

            start = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except Exception:
                _emit(log, logging.DEBUG, f"{fn_name}.error", exc_info=sys.exc_info(),
                      duration_ms=(time.perf_counter() - start) * 1000,
                      ctx={"function": fn_name})
                raise

            _emit(log, logging.DEBUG, f"{fn_name}.done",
                  duration_ms=(time.perf_counter() - start) * 1000,
                  ctx={"result": _summarize(result)})
            return result

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
