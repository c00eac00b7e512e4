# File: rdraw/ui/size_readers.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Lectores de geometría de widgets: ancho/alto máximo compartido y tamaño actual.
# Notes:
# - Las "preferencias" son reducers puros (testeables sin Qt).
# - Los readers son event filters: escuchan Resize/Show y llaman al callback solo si cambia el valor.
from __future__ import annotations

from typing import Callable, Iterable, Optional

from PySide6.QtCore import QEvent, QObject, QSize
from PySide6.QtWidgets import QWidget

UpdateWidthFunction = Callable[[Optional[int]], None]
UpdateHeightFunction = Callable[[Optional[int]], None]
UpdateSizeFunction = Callable[[QSize], None]


# ------------------------------
# Preferencias (reducers)
# ------------------------------

class MaxWidthPreference:
    default_value: Optional[int] = None

    @staticmethod
    def reduce(value: Optional[int], next_value: Optional[int]) -> Optional[int]:
        # sin valor nuevo, no cambia nada
        if next_value is None:
            return value
        # máximo entre el valor actual y el nuevo
        return max(value if value is not None else next_value, next_value)


class MaxHeightPreference:
    default_value: Optional[int] = None

    @staticmethod
    def reduce(value: Optional[int], next_value: Optional[int]) -> Optional[int]:
        if next_value is None:
            return value
        return max(value if value is not None else next_value, next_value)


class SizeReaderPreference:
    default_value: Optional[QSize] = None

    @staticmethod
    def reduce(value: Optional[QSize], next_value: Optional[QSize]) -> Optional[QSize]:
        # gana el último valor no-None
        return value if next_value is None else next_value


# ------------------------------
# Readers (event filters)
# ------------------------------

_WATCHED = (QEvent.Resize, QEvent.Show, QEvent.Hide)


class SharedExtentReader(QObject):
    """Reduce una medida (ancho/alto) sobre un grupo de widgets y avisa cuando cambia."""

    def __init__(
        self,
        widgets: Iterable[QWidget],
        measure: Callable[[QWidget], Optional[int]],
        preference: type,
        update: Callable[[Optional[int]], None],
    ) -> None:
        self._widgets = list(widgets)
        super().__init__(self._widgets[0] if self._widgets else None)
        self._measure = measure
        self._preference = preference
        self._update = update
        self._last: Optional[int] = None
        self._notified = False
        for w in self._widgets:
            w.installEventFilter(self)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() in _WATCHED:
            self.refresh()
        return False

    def refresh(self) -> Optional[int]:
        value = self._preference.default_value
        for w in self._widgets:
            value = self._preference.reduce(value, self._measure(w))
        if not self._notified or value != self._last:
            self._notified = True
            self._last = value
            self._update(value)
        return value

    def detach(self) -> None:
        for w in self._widgets:
            w.removeEventFilter(self)


class SizeReader(QObject):
    """Llama `update_size` con el tamaño del widget en cada resize (nunca con None)."""

    def __init__(self, widget: QWidget, update_size: UpdateSizeFunction) -> None:
        super().__init__(widget)
        self._widget = widget
        self._update = update_size
        self._value: Optional[QSize] = SizeReaderPreference.default_value
        widget.installEventFilter(self)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._widget and event.type() == QEvent.Resize:
            self._value = SizeReaderPreference.reduce(self._value, event.size())
            if self._value is not None:
                self._update(QSize(self._value))
        return False

    def detach(self) -> None:
        self._widget.removeEventFilter(self)


def _visible_width(w: QWidget) -> Optional[int]:
    return None if w.isHidden() else int(w.width())


def _visible_height(w: QWidget) -> Optional[int]:
    return None if w.isHidden() else int(w.height())


def shared_width_using_max(widgets: Iterable[QWidget], update_width: UpdateWidthFunction) -> SharedExtentReader:
    """Usar en widgets de una fila que deben tener el mismo ancho (el del más ancho).

    Ejemplo:
        reader = shared_width_using_max(cells, lambda w: [c.setMinimumWidth(w or 0) for c in cells])
    """
    return SharedExtentReader(widgets, _visible_width, MaxWidthPreference, update_width)


def shared_height_using_max(widgets: Iterable[QWidget], update_height: UpdateHeightFunction) -> SharedExtentReader:
    """Igual que shared_width_using_max pero con el alto (columnas/listas)."""
    return SharedExtentReader(widgets, _visible_height, MaxHeightPreference, update_height)


def size_reader(widget: QWidget, update_size: UpdateSizeFunction) -> SizeReader:
    return SizeReader(widget, update_size)
