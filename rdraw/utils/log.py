# File: rdraw/utils/log.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Logging de la app: consola + rdraw.log, nivel desde RDRAW_LOG_LEVEL.
# Notes:
# - Los handlers propios quedan registrados para poder quitarlos (tests, CLI embebida).
from __future__ import annotations

import logging
import os
from pathlib import Path

ENV_LOG_DIR = "RDRAW_LOG_DIR"
ENV_LOG_LEVEL = "RDRAW_LOG_LEVEL"
LOG_FILENAME = "rdraw.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handlers: list[logging.Handler] = []
_log_file: Path | None = None


def level_from_env(default: int = logging.INFO) -> int:
    """RDRAW_LOG_LEVEL acepta nombre ("debug", "WARNING") o número; si no se entiende, `default`."""
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    value = logging.getLevelName(raw.upper())
    return value if isinstance(value, int) else default


def setup_logging(log_dir: str | os.PathLike | None = None, level: int | None = None) -> Path | None:
    """Instala consola + archivo en el root logger (una sola vez).

    Devuelve la ruta de rdraw.log, o None si el archivo no se pudo abrir y quedó solo consola.
    """
    global _log_file
    if _handlers:
        return _log_file

    lvl = level_from_env() if level is None else int(level)
    root = logging.getLogger()
    root.setLevel(lvl)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    _handlers.append(console)

    d = Path(log_dir if log_dir is not None else os.environ.get(ENV_LOG_DIR, "logs"))
    problem: OSError | None = None
    try:
        d.mkdir(parents=True, exist_ok=True)
        _handlers.append(logging.FileHandler(d / LOG_FILENAME, encoding="utf-8"))
        _log_file = d / LOG_FILENAME
    except OSError as e:
        problem = e

    for h in _handlers:
        h.setLevel(lvl)
        h.setFormatter(fmt)
        root.addHandler(h)

    if problem is not None:
        logging.getLogger(__name__).warning("Sin archivo de log en %s: %s", d, problem)
    return _log_file


def shutdown_logging() -> None:
    """Quita y cierra los handlers instalados por setup_logging()."""
    global _log_file
    root = logging.getLogger()
    while _handlers:
        h = _handlers.pop()
        root.removeHandler(h)
        h.close()
    _log_file = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
