# File: rdraw/core/settings.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Defaults por proyecto (rdraw_settings.json) aplicados como variables de entorno.
# Notes: No depende de Qt; los consumidores (render/buffers) leen env vars con helpers acotados.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from rdraw.core.version import DEFAULT_LINE_WIDTH, DEFAULT_PLACEHOLDER_PX

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rdraw_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rdraw_settings.json"

ENV_LINE_WIDTH = "RDRAW_LINE_WIDTH"
ENV_ANTIALIAS = "RDRAW_ANTIALIAS"
ENV_PLACEHOLDER_PX = "RDRAW_PLACEHOLDER_PX"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rdraw_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rdraw_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    data = load_project_settings(p.parent, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    # Render - grosor de trazo (en px del contexto, no escala con la forma)
    lw = _deep_get(data, "render.line_width")
    if isinstance(lw, (int, float)) and not isinstance(lw, bool):
        lw = float(lw)
        if 0.0 <= lw <= 64.0:
            applied["render.line_width"] = lw
            _set_env(ENV_LINE_WIDTH, lw)

    aa = _deep_get(data, "render.antialias")
    if isinstance(aa, bool):
        applied["render.antialias"] = aa
        _set_env(ENV_ANTIALIAS, "1" if aa else "0")

    # Buffers - tamaño del placeholder "warning"
    ph = _deep_get(data, "buffers.placeholder_px")
    if isinstance(ph, int) and not isinstance(ph, bool) and 16 <= ph <= 512:
        applied["buffers.placeholder_px"] = ph
        _set_env(ENV_PLACEHOLDER_PX, ph)

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


# ------------------------------
# Lectura de env vars (acotada)
# ------------------------------

def env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    try:
        raw = os.environ.get(name, "")
        v = int(str(raw).strip()) if raw != "" else int(default)
    except ValueError:
        v = int(default)

    if min_value is not None:
        v = max(int(min_value), int(v))
    if max_value is not None:
        v = min(int(max_value), int(v))
    return int(v)


def env_float(name: str, default: float, *, min_value: float | None = None, max_value: float | None = None) -> float:
    try:
        raw = os.environ.get(name, "")
        v = float(str(raw).strip()) if raw != "" else float(default)
    except ValueError:
        v = float(default)

    if min_value is not None:
        v = max(float(min_value), v)
    if max_value is not None:
        v = min(float(max_value), v)
    return v


def env_bool(name: str, default: bool) -> bool:
    raw = str(os.environ.get(name, "")).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return bool(default)


def line_width() -> float:
    return env_float(ENV_LINE_WIDTH, DEFAULT_LINE_WIDTH, min_value=0.0, max_value=64.0)


def antialias() -> bool:
    return env_bool(ENV_ANTIALIAS, True)


def placeholder_px() -> int:
    return env_int(ENV_PLACEHOLDER_PX, DEFAULT_PLACEHOLDER_PX, min_value=16, max_value=512)
