from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QApplication, QWidget

from rdraw.ui.size_readers import (
    MaxHeightPreference,
    MaxWidthPreference,
    SizeReaderPreference,
    shared_height_using_max,
    shared_width_using_max,
    size_reader,
)


def test_max_preferences_reduce() -> None:
    v = MaxWidthPreference.default_value
    for nxt in (10, None, 30, 20):
        v = MaxWidthPreference.reduce(v, nxt)
    assert v == 30
    assert MaxHeightPreference.reduce(None, None) is None
    assert MaxHeightPreference.reduce(None, 5) == 5
    assert MaxHeightPreference.reduce(7, 5) == 7


def test_size_preference_keeps_last_value() -> None:
    v = SizeReaderPreference.reduce(None, QSize(1, 2))
    v = SizeReaderPreference.reduce(v, None)
    assert v == QSize(1, 2)
    assert SizeReaderPreference.reduce(v, QSize(3, 4)) == QSize(3, 4)


def test_shared_width_uses_widest_visible(qapp) -> None:
    parent = QWidget()
    a, b, c = QWidget(parent), QWidget(parent), QWidget(parent)
    a.resize(40, 10)
    b.resize(90, 10)
    c.resize(200, 10)
    parent.show()
    c.hide()

    seen: list = []
    reader = shared_width_using_max([a, b, c], seen.append)
    assert reader.refresh() == 90
    assert seen == [90]

    # mismo valor: no vuelve a avisar
    reader.refresh()
    assert seen == [90]

    a.resize(120, 10)
    assert reader.refresh() == 120
    assert seen == [90, 120]
    reader.detach()


def test_shared_height_of_empty_group_is_none(qapp) -> None:
    seen: list = []
    reader = shared_height_using_max([], seen.append)
    assert reader.refresh() is None
    assert seen == [None]


def test_shared_height_follows_resize_events(qapp) -> None:
    parent = QWidget()
    a, b = QWidget(parent), QWidget(parent)
    a.resize(10, 15)
    b.resize(10, 25)
    parent.show()
    seen: list = []
    shared_height_using_max([a, b], seen.append)
    QApplication.sendEvent(b, QResizeEvent(QSize(10, 25), QSize(10, 10)))
    assert seen[-1] == 25


def test_size_reader_reports_new_size(qapp) -> None:
    w = QWidget()
    seen: list = []
    reader = size_reader(w, seen.append)
    QApplication.sendEvent(w, QResizeEvent(QSize(30, 40), QSize(10, 10)))
    assert seen == [QSize(30, 40)]

    reader.detach()
    QApplication.sendEvent(w, QResizeEvent(QSize(50, 60), QSize(30, 40)))
    assert seen == [QSize(30, 40)]
