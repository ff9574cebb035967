"""Logging configuration for the application."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


@dataclass(frozen=True, slots=True)
class LoggingOptions:
    level_name: str = "INFO"
    console_format: str = "json"
    log_dir: Path | None = None

    @classmethod
    def from_env(cls) -> LoggingOptions:
        level_name = os.getenv("CONNECT_FOUR_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
        log_dir = os.getenv("CONNECT_FOUR_LOG_DIR", "").strip()
        return cls(
            level_name=level_name.strip().upper(),
            console_format=os.getenv("LOG_FORMAT", "json").strip().lower(),
            log_dir=Path(log_dir) if log_dir else None,
        )

    @property
    def level(self) -> int:
        value = logging.getLevelName(self.level_name)
        return value if isinstance(value, int) else logging.INFO


def setup_logging(options: LoggingOptions | None = None) -> str | None:
    """Replace root handlers per ``options`` (env by default); return the run file path.

    The console uses ``LOG_FORMAT`` (json or text). The run file, written only
    when a log directory is configured, is always JSON lines.
    """
    options = options or LoggingOptions.from_env()
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_TEXT_FORMAT) if options.console_format == "text" else JsonFormatter())
    handlers: list[logging.Handler] = [console]

    run_file: str | None = None
    if options.log_dir is not None:
        options.log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
        run_file = str(options.log_dir / f"connect_four_run_{stamp}.jsonl")
        file_handler = logging.FileHandler(run_file, encoding="utf-8", delay=True)
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    for stale in list(root.handlers):
        root.removeHandler(stale)
        stale.close()
    root.setLevel(options.level)
    for handler in handlers:
        root.addHandler(handler)
    if run_file is not None:
        logging.getLogger(__name__).info("logging_file=%s", run_file)
    return run_file
