"""
Root logger setup for the ``mfg-scorer`` CLI and dashboard.

``configure_logging()`` runs once per process, right after the config is
loaded.  Scoring, import and export modules only ever ask for
``logging.getLogger(__name__)``; they never install handlers themselves.

Records go to stderr so that ``mfg-scorer score --json`` keeps stdout
parseable, and optionally to the file named by ``[logging] log_file``.

With ``json_format = true`` each record is one JSON line::

    {"ts": "2026-10-19T09:30:00Z", "level": "WARNING",
     "logger": "mfg_scorer.scoring.engine",
     "msg": "Acme: defect_rate=150.0 is outside the expected range; ..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mfg_scorer.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from extra=.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

# Third-party loggers pulled in by the dashboard extra.
_QUIET_LOGGERS = ("watchdog", "urllib3", "PIL")


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        line: dict = {
            "ts": created.strftime(TIMESTAMP_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        line.update(
            (k, v) for k, v in record.__dict__.items()
            if k not in _RECORD_ATTRS and not k.startswith("_")
        )
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonLineFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)


def _attach(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Args:
        config: ``AppConfig.logging``.
        debug:  ``AppConfig.debug``; forces DEBUG whatever ``config.level`` says.
    """
    level = logging.DEBUG if debug else logging.getLevelName(config.level.upper())
    formatter = _make_formatter(config.json_format)

    handlers = [_attach(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _attach(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
