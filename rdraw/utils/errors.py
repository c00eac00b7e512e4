# File: rdraw/utils/errors.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Errores tipados del proyecto.
# Notes: Cambios incrementales, no romper funcionalidades probadas.
from __future__ import annotations


class RdrError(Exception):
    """Error base del proyecto."""


class RdrValidationError(RdrError):
    """Error de validación (input/archivo/estructura)."""


class RdrDecodeError(RdrValidationError, ValueError):
    """Texto que no corresponde a ningún caso de un enum (Style/Color/Transform)."""


class RdrSchemaError(RdrValidationError):
    """Error de esquema (escena JSON) o incompatibilidad de versión."""


class RdrIOError(RdrError):
    """Error de E/S (lectura/escritura)."""


class RdrIndexError(RdrError, IndexError):
    """Acceso fuera de rango a FrameBuffer/ZBuffer (violación de contrato)."""
