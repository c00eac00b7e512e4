"""Fixtures comunes.

- Qt en modo offscreen (sin display)
- una sola QApplication por sesión
"""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(["rdraw-tests"])
    return app


@pytest.fixture(autouse=True)
def _render_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Render determinista: sin antialias y trazo de 1 px salvo que el test pida otra cosa.
    monkeypatch.setenv("RDRAW_ANTIALIAS", "0")
    monkeypatch.setenv("RDRAW_LINE_WIDTH", "1")
    monkeypatch.delenv("RDRAW_PLACEHOLDER_PX", raising=False)
