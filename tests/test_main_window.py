from __future__ import annotations

from pathlib import Path

from rdraw.core.serialization import save_scene
from rdraw.ui.main_window import MainWindow, demo_scene


def test_demo_scene() -> None:
    scene = demo_scene()
    assert len(scene) == 3
    assert {sh.kind for sh in scene} == {"square", "circle"}


def test_window_uses_demo_scene_by_default(qapp) -> None:
    win = MainWindow()
    assert win.shapes_view.drawables() == demo_scene()
    assert win.frame_buffer_panel.view.shown_version == 1


def test_window_loads_scene_file(qapp, tmp_path: Path) -> None:
    p = save_scene(demo_scene()[:1], tmp_path / "one.json")
    win = MainWindow(p)
    assert win.shapes_view.drawables() == demo_scene()[:1]


def test_invalid_scene_falls_back_to_demo(qapp, tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("no es json", encoding="utf-8")
    win = MainWindow(p)
    assert win.shapes_view.drawables() == demo_scene()
    win2 = MainWindow(tmp_path / "no_existe.json")
    assert len(win2.shapes_view.drawables()) == 3
