"""Render helpers.

This package is intentionally small: the fixed "warning" placeholder and
an opt-in debug harness that renders scene files to PNG without UI.
"""

from __future__ import annotations
