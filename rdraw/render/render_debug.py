# File: rdraw/render/render_debug.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Harness CLI para debug de render de escenas (JSON) -> PNG (sin UI).
# Notes:
# - Reproduce rápido: mismas formas/estilos que la app, dibujadas offscreen.
# - No toca el flujo principal de la app; es una herramienta opt-in.
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import argparse
import datetime
import json
import os
import sys
from typing import Any, Iterable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QPainter

from rdraw.core.serialization import load_scene
from rdraw.core.settings import apply_project_settings
from rdraw.core.shapes import Shape
from rdraw.core.version import APP_VERSION
from rdraw.render.placeholder import warning_image
from rdraw.utils.errors import RdrError
from rdraw.utils.log import get_logger, setup_logging

log = get_logger(__name__)


@dataclass(frozen=True)
class RenderResult:
    scene: Path
    out_png: Path
    size_px: int
    shapes: int
    alpha_nonzero: int
    alpha_bbox: tuple[int, int, int, int] | None


def _ensure_qt_app() -> None:
    """Crea una app Qt mínima si no existe (necesaria para algunos plugins)."""
    from PySide6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        QGuiApplication(sys.argv[:1] or ["rdraw-render-debug"])


def alpha_stats(img: QImage, *, threshold: int = 1) -> tuple[int, tuple[int, int, int, int] | None]:
    """(cantidad de pixeles con alpha>=threshold, bbox). Bbox como (x,y,w,h) o None."""
    if img.isNull():
        return 0, None

    # Forzamos formato estable para leer bytes.
    if img.format() != QImage.Format_ARGB32_Premultiplied:
        img = img.convertToFormat(QImage.Format_ARGB32_Premultiplied)

    w = int(img.width())
    h = int(img.height())
    if w <= 0 or h <= 0:
        return 0, None

    nonzero = 0
    minx = miny = 10**9
    maxx = maxy = -1

    for y in range(h):
        for x in range(w):
            a = QColor.fromRgba(img.pixel(x, y)).alpha()
            if a >= threshold:
                nonzero += 1
                minx = min(minx, x)
                miny = min(miny, y)
                maxx = max(maxx, x)
                maxy = max(maxy, y)

    if nonzero <= 0:
        return 0, None

    return nonzero, (int(minx), int(miny), int(maxx - minx + 1), int(maxy - miny + 1))


def render_scene(shapes: Iterable[Shape], *, size_px: int, units_px: float) -> QImage:
    """Dibuja las formas en un cuadrado transparente, origen al centro, 1 unidad = units_px."""
    n = max(1, int(size_px))
    img = QImage(n, n, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)

    p = QPainter(img)
    try:
        p.translate(n / 2.0, n / 2.0)
        p.scale(float(units_px), float(units_px))
        for sh in shapes:
            sh.draw(p)
    finally:
        p.end()
    return img


def _render_one(scene_path: Path, *, out_dir: Path, size_px: int, units_px: float) -> RenderResult:
    out_png = out_dir / (scene_path.stem + ".png")
    out_dir.mkdir(parents=True, exist_ok=True)
    try:
        shapes = load_scene(scene_path)
        img = render_scene(shapes, size_px=size_px, units_px=units_px)
    except RdrError as e:
        log.warning("Escena inválida %s: %s", scene_path, e)
        shapes = []
        img = warning_image(size_px)

    img.save(str(out_png))
    nonzero, bbox = alpha_stats(img)
    return RenderResult(
        scene=scene_path,
        out_png=out_png,
        size_px=int(size_px),
        shapes=len(shapes),
        alpha_nonzero=nonzero,
        alpha_bbox=bbox,
    )


def _iter_scene_inputs(p: Path, *, recursive: bool, exclude: Path | None = None) -> list[Path]:
    """Escenas de entrada. En carpetas se saltean `_*.json` (p. ej. _summary.json) y la salida."""
    if p.is_file():
        return [p]
    if not p.exists():
        return []

    skip = exclude.resolve() if exclude is not None else None
    pat = "**/*.json" if recursive else "*.json"
    out: list[Path] = []
    for x in p.glob(pat):
        if not x.is_file() or x.name.startswith("_"):
            continue
        if skip is not None and skip in x.resolve().parents:
            continue
        out.append(x)
    return sorted(out)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="rdraw.render.render_debug",
        description="RDW: harness CLI: render escena JSON -> PNG sin UI.",
    )
    ap.add_argument("input", help="Ruta a escena .json o carpeta")
    ap.add_argument("--out", default="", help="Carpeta de salida (default: ./render_debug_out junto al input)")
    ap.add_argument("--size", type=int, default=int(os.environ.get("RDRAW_DBG_SIZE", "256")))
    ap.add_argument("--units", type=float, default=float(os.environ.get("RDRAW_DBG_UNITS_PX", "40")))
    ap.add_argument("--recursive", action="store_true", help="Si input es carpeta, busca JSON recursivo")
    args = ap.parse_args(argv)

    setup_logging()
    apply_project_settings(logger=log)

    inp = Path(args.input).expanduser()
    out_dir = Path(args.out).expanduser() if args.out else (
        inp.parent / "render_debug_out" if inp.is_file() else (inp / "render_debug_out")
    )
    scenes = _iter_scene_inputs(inp, recursive=bool(args.recursive), exclude=out_dir)
    if not scenes:
        print(f"[RDW] No se encontraron escenas en: {inp}")
        return 2

    _ensure_qt_app()

    summary: dict[str, Any] = {
        "tool": "rdraw.render.render_debug",
        "version": APP_VERSION,
        "when": datetime.datetime.now().isoformat(timespec="seconds"),
        "input": str(inp),
        "count": len(scenes),
        "size_px": int(args.size),
        "units_px": float(args.units),
        "items": [],
    }

    print(f"[RDW] Render debug: {len(scenes)} escena(s) → {out_dir}")
    for i, scene in enumerate(scenes, 1):
        print(f"  [{i:03d}/{len(scenes):03d}] {scene.name}")
        res = _render_one(scene, out_dir=out_dir, size_px=int(args.size), units_px=float(args.units))
        summary["items"].append(
            {
                "scene": str(res.scene),
                "png": str(res.out_png),
                "shapes": res.shapes,
                "alpha_nonzero": res.alpha_nonzero,
                "alpha_bbox": res.alpha_bbox,
            }
        )
        print(f"    shapes={res.shapes} alpha_nonzero={res.alpha_nonzero} bbox={res.alpha_bbox}")

    out_dir.mkdir(parents=True, exist_ok=True)
    summary_path = out_dir / "_summary.json"
    summary_path.write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"[RDW] OK, summary: {summary_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
