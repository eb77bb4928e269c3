from __future__ import annotations

from typing import Any, Callable, Optional

from PySide6.QtCore import QPointF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPen, QPolygonF
from PySide6.QtWidgets import QGraphicsItem, QGraphicsPathItem

from worldmap.model.catalog import ShapeFragment
from worldmap.model.interaction import PointerEventKind

PointerDispatch = Callable[["CountryPathItem", PointerEventKind, Any], Any]


class CountryPathItem(QGraphicsPathItem):
    """
    Scene item for one fragment of a country.

    The item does not decide how it looks on hover or press; it forwards the
    raw pointer event to ``dispatch`` and waits for ``set_fill`` calls.
    """

    def __init__(
        self,
        fragment: ShapeFragment,
        dispatch: Optional[PointerDispatch] = None,
        parent: QGraphicsItem | None = None,
    ) -> None:
        super().__init__(parent)
        self.fragment = fragment
        self.country_id = fragment.country_id
        self._dispatch = dispatch

        self.setPath(self._outline_path(fragment))
        self.setAcceptHoverEvents(True)

    def __repr__(self) -> str:
        return f"CountryPathItem({self.country_id!r}, {self.fragment.index})"

    @staticmethod
    def _outline_path(fragment: ShapeFragment) -> QPainterPath:
        polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in fragment.points])
        path = QPainterPath()
        path.addPolygon(polygon)
        path.closeSubpath()
        return path

    # ---- appearance ----

    def set_fill(self, color: str) -> None:
        self.setBrush(QBrush(QColor(color)))

    def set_stroke(self, color: str, width: float) -> None:
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        self.setPen(pen)

    def fill_color(self) -> str:
        return self.brush().color().name()

    # ---- pointer events ----

    def _forward(self, kind: PointerEventKind, event: Any) -> None:
        if self._dispatch is not None:
            self._dispatch(self, kind, event)

    def hoverEnterEvent(self, event) -> None:
        self._forward(PointerEventKind.ENTER, event)
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event) -> None:
        self._forward(PointerEventKind.EXIT, event)
        super().hoverLeaveEvent(event)

    def mousePressEvent(self, event) -> None:
        self._forward(PointerEventKind.PRESS, event)
        # accepting makes this item the grabber, so the release comes back here
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        self._forward(PointerEventKind.RELEASE, event)
        super().mouseReleaseEvent(event)
