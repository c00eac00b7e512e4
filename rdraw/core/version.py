"""RDW - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core, render, UI, tools) and must not have side effects.
"""

APP_NAME = "RusticDraw"
APP_SHORT = "RDW"

# Library semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"
# Scene schema version used for scene JSON files.
# NOTE: must be int because `rdraw.core.serialization` compares it as integer.
SCHEMA_VERSION = 1

# Defaults
# NOTE: keep these stable; the buffers and the renderer rely on them.
DEFAULT_DEPTH = 2.0
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_PLACEHOLDER_PX = 64
