"""Logging policy for the setup engine and its host."""

from __future__ import annotations

import json
import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

_QUEUE_LISTENER: QueueListener | None = None
_QUEUE_HANDLER: QueueHandler | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "asctime",
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
        "message",
    }
)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging; file output is streamed through a queue listener."""
    global _QUEUE_HANDLER, _QUEUE_LISTENER

    shutdown_logging()

    level = getattr(logging, config.level_name.upper(), logging.INFO)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    _QUEUE_HANDLER = QueueHandler(log_queue)
    root.addHandler(_QUEUE_HANDLER)
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Detach the queue handler and drain the listener if one is running."""
    global _QUEUE_HANDLER, _QUEUE_LISTENER

    if _QUEUE_HANDLER is not None:
        logging.getLogger().removeHandler(_QUEUE_HANDLER)
        _QUEUE_HANDLER.close()
        _QUEUE_HANDLER = None
    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        for handler in _QUEUE_LISTENER.handlers:
            handler.close()
        _QUEUE_LISTENER = None


def build_logging_config() -> LoggingConfig:
    """Resolve logging configuration from env vars."""
    level_name = os.getenv("SEABOARD_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging from the environment."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("SEABOARD_LOG_DIR", "").strip()
    if not configured:
        return None
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(Path(configured) / f"seaboard_run_{stamp}.jsonl")


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
