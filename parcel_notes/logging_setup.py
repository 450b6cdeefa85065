from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from parcel_notes.settings import LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]
PACKAGE_LOGGER = "parcel_notes"


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def setup_logging(*, log_path: Path = LOG_PATH, console_level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(
        log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    # stdout carries command output; keep diagnostics on stderr
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logger.debug("Logging initialized. log_file=%s", log_path)
    return logger


def get_logger() -> SessionAdapter:
    return SessionAdapter(logging.getLogger(PACKAGE_LOGGER), {})


def install_global_exception_hooks() -> None:
    log = get_logger()

    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _qt_message_handler(mode, context, message):
        file = getattr(context, "file", None)
        line = getattr(context, "line", None)
        func = getattr(context, "function", None)
        where = f"{file}:{line} {func}" if file or line or func else "unknown"
        log.log(levels.get(mode, logging.WARNING), "Qt: %s | where=%s", message, where)

    qInstallMessageHandler(_qt_message_handler)
    log.debug("Qt message handler installed")
