"""Centralized logging configuration for the wizard process."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any


def _file_handler(log_file: str, cfg: dict[str, Any], level: int) -> logging.Handler:
    max_bytes = int(cfg.get("max_bytes", 1024 * 1024))
    backup_count = int(cfg.get("backup_count", 1))
    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    h.setLevel(level)
    return h


def _console_handler(level: int) -> logging.Handler:
    h = logging.StreamHandler()
    h.setLevel(level)
    return h


def setup_logging(settings: dict[str, Any]) -> None:
    """Configure the root logger from settings["logging"].

    Logs to stderr at WARNING by default so prompts and tool output stay
    readable. A rotating file handler is added only when a file is configured.
    """
    cfg = settings.get("logging", {})
    level_name = str(cfg.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)
    if cfg.get("log_to_console", True):
        console_handler = _console_handler(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
    log_file = cfg.get("file")
    if log_file:
        file_handler = _file_handler(log_file, cfg, level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
