# Rev 0.1.0

# erabu – logging setup (Rev 0.1.0)
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .paths import logs_dir

try:
    # Optional: pipe Qt messages into Python logging if Qt exists
    from PySide6.QtCore import qInstallMessageHandler, QtMsgType
    def _qt_handler(msg_type, context, message):
        lvl = {
            QtMsgType.QtDebugMsg: logging.DEBUG,
            QtMsgType.QtInfoMsg: logging.INFO,
            QtMsgType.QtWarningMsg: logging.WARNING,
            QtMsgType.QtCriticalMsg: logging.ERROR,
            QtMsgType.QtFatalMsg: logging.CRITICAL,
        }.get(msg_type, logging.INFO)
        logging.getLogger("qt").log(lvl, message)
except ImportError:
    qInstallMessageHandler = None  # PySide6 not available at import time

FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name if name.startswith("erabu") else f"erabu.{name}")


def setup_logging(app_name: str = "erabu", log_dir: Path | None = None) -> Path:
    # Level via env (DEBUG/INFO/WARNING/ERROR), default INFO
    level_name = os.environ.get("ERABU_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    log_dir = log_dir or logs_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / f"{app_name}.log"

    root = logging.getLogger()
    root.setLevel(level)

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.setFormatter(logging.Formatter(FMT, DATEFMT))
    fh.setLevel(level)
    root.addHandler(fh)

    # Console: inherit level
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(FMT, DATEFMT))
    ch.setLevel(level)
    root.addHandler(ch)

    # Uncaught exceptions → log as ERROR
    def _excepthook(exctype, value, tb):
        logging.getLogger("unhandled").error("Uncaught exception", exc_info=(exctype, value, tb))
        sys.__excepthook__(exctype, value, tb)
    sys.excepthook = _excepthook

    if qInstallMessageHandler is not None:
        qInstallMessageHandler(_qt_handler)

    get_logger(__name__).info("Logging initialized at %s; file: %s", level_name, logfile)
    return logfile
