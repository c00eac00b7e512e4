# File: rdraw/app.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Entry-point de la app demo.
# Notes: Uso: python -m rdraw.app [escena.json]
from __future__ import annotations

import sys
from PySide6.QtWidgets import QApplication

from rdraw.core.settings import apply_project_settings
from rdraw.core.version import APP_VERSION

from rdraw.ui.main_window import MainWindow
from rdraw.utils.log import setup_logging, get_logger

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    # Project-level defaults (repo-local): rdraw_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    app = QApplication(sys.argv)
    scene = sys.argv[1] if len(sys.argv) > 1 else None
    w = MainWindow(scene)
    w.show()
    log.info("RDW iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
