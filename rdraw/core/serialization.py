# File: rdraw/core/serialization.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Carga/guardado de escenas (lista de formas) en JSON legible.
# Notes: Cambios incrementales, no romper funcionalidades probadas.
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from rdraw.core.shapes import Shape, shape_from_dict, shape_to_dict
from rdraw.core.version import SCHEMA_VERSION
from rdraw.utils.errors import RdrIOError, RdrSchemaError, RdrValidationError


def scene_to_dict(shapes: Iterable[Shape]) -> dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "shapes": [shape_to_dict(sh) for sh in shapes],
    }


def scene_from_dict(data: Any) -> list[Shape]:
    if not isinstance(data, dict):
        raise RdrSchemaError("Estructura de escena inválida: raíz no es objeto JSON")

    version = data.get("schema_version", SCHEMA_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        raise RdrSchemaError(f"schema_version inválido: {version!r}")
    if version > SCHEMA_VERSION:
        raise RdrSchemaError(
            f"schema_version {version} no soportado (máximo {SCHEMA_VERSION})"
        )

    raw = data.get("shapes", [])
    if not isinstance(raw, list):
        raise RdrSchemaError("Escena inválida: 'shapes' no es lista")
    return [shape_from_dict(d) for d in raw]


def save_scene(shapes: Iterable[Shape], path: str | Path) -> Path:
    """Guarda la escena en JSON.

    - Escribe de forma atómica (tmp + replace) para evitar archivos corruptos.
    """
    p = Path(path)
    txt = json.dumps(scene_to_dict(shapes), ensure_ascii=False, indent=2)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(txt, encoding="utf-8")
        tmp.replace(p)
        return p
    except OSError as e:
        raise RdrIOError("No se pudo guardar escena: {}".format(p)) from e


def load_scene(path: str | Path) -> list[Shape]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RdrIOError("No se pudo leer escena: {}".format(p)) from e
    except UnicodeDecodeError as e:
        raise RdrValidationError(
            "Escena inválida (no es UTF-8): {} (byte {})".format(p, e.start)
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RdrValidationError(
            "Escena inválida (JSON malformado): {} (línea {}, columna {})".format(p, e.lineno, e.colno)
        ) from e

    return scene_from_dict(data)
