"""
Embeddable world map widget.

The widget owns the scene items, the country registry built over them, the
interaction controller and the viewport scaler. Everything runs on the Qt GUI
thread; no method here is safe to call from a worker thread.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPalette
from PySide6.QtWidgets import QFrame, QGraphicsScene, QGraphicsView, QWidget

from worldmap.app.ui.country_path import CountryPathItem
from worldmap.model.catalog import ShapeCatalog, load_default_catalog
from worldmap.model.geo import GeoPoint
from worldmap.model.interaction import CountryCallback, InteractionController, PointerEventKind
from worldmap.model.registry import CountryRegistry
from worldmap.model.style import MapStyle
from worldmap.model.viewport import ContentBox, ViewportScaler

logger = logging.getLogger(__name__)


class WorldMap(QWidget):
    """
    World map with per-country hover/press feedback.

    Callbacks (one per event kind, last registration wins) receive
    ``(country_id, raw_qt_event)``. The matching signals carry the country id
    and are emitted after the callback.
    """
    country_entered = Signal(str)
    country_pressed = Signal(str)
    country_released = Signal(str)
    country_exited = Signal(str)
    locations_changed = Signal()

    def __init__(
        self,
        catalog: Optional[ShapeCatalog] = None,
        style: Optional[MapStyle] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.map_style = style if style is not None else MapStyle()
        self.scaler = ViewportScaler(self.catalog.design_width, self.catalog.design_height)

        self._locations: list[GeoPoint] = []
        self._user_callbacks: Dict[PointerEventKind, Optional[CountryCallback]] = {
            kind: None for kind in PointerEventKind
        }
        self._signals = {
            PointerEventKind.ENTER: self.country_entered,
            PointerEventKind.PRESS: self.country_pressed,
            PointerEventKind.RELEASE: self.country_released,
            PointerEventKind.EXIT: self.country_exited,
        }

        country_items = self._init_graphics()
        self.registry: CountryRegistry[CountryPathItem] = CountryRegistry(country_items)
        self.controller = InteractionController(self.registry, self.map_style)
        for kind in PointerEventKind:
            self.controller.set_callback(kind, self._make_relay(kind))

        self._apply_fill_and_stroke()
        self._apply_background()

        hints = self.scaler.size_hints
        self.setMaximumSize(int(hints.maximum[0]), int(hints.maximum[1]))
        logger.debug(f"WorldMap created with {len(self.registry)} countries.")

    # ------------------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------------------

    def _init_graphics(self) -> Dict[str, list[CountryPathItem]]:
        self.scene = QGraphicsScene(0.0, 0.0, self.catalog.design_width, self.catalog.design_height, self)

        country_items: Dict[str, list[CountryPathItem]] = {}
        for country in self.catalog:
            items = []
            for fragment in country.fragments:
                item = CountryPathItem(fragment, dispatch=self._dispatch)
                item.setToolTip(country.name)
                self.scene.addItem(item)
                items.append(item)
            country_items[country.id] = items

        self.view = QGraphicsView(self.scene, self)
        self.view.setFrameShape(QFrame.Shape.NoFrame)
        self.view.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.view.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.view.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.view.setMouseTracking(True)

        return country_items

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def country_paths(self) -> Dict[str, tuple[CountryPathItem, ...]]:
        """Country id -> its scene items."""
        return {cid: self.registry.fragments_of(cid) for cid in self.registry}

    # ---- colors ----

    def background_color(self) -> str:
        return self.map_style.background_color

    def set_background_color(self, color: str) -> None:
        self.map_style.background_color = color
        self._apply_background()

    def fill_color(self) -> str:
        return self.map_style.fill_color

    def set_fill_color(self, color: str) -> None:
        """Set the idle fill and repaint every country with it."""
        self.map_style.fill_color = color
        self._apply_fill_and_stroke()

    def stroke_color(self) -> str:
        return self.map_style.stroke_color

    def set_stroke_color(self, color: str) -> None:
        """Set the outline color and repaint every country with the idle fill."""
        self.map_style.stroke_color = color
        self._apply_fill_and_stroke()

    def hover_color(self) -> str:
        return self.map_style.hover_color

    def set_hover_color(self, color: str) -> None:
        """Used from the next hover transition on."""
        self.map_style.hover_color = color

    def pressed_color(self) -> str:
        return self.map_style.pressed_color

    def set_pressed_color(self, color: str) -> None:
        """Used from the next press transition on."""
        self.map_style.pressed_color = color

    # ---- callbacks ----

    def set_on_country_enter(self, callback: Optional[CountryCallback]) -> None:
        self._user_callbacks[PointerEventKind.ENTER] = callback

    def set_on_country_press(self, callback: Optional[CountryCallback]) -> None:
        self._user_callbacks[PointerEventKind.PRESS] = callback

    def set_on_country_release(self, callback: Optional[CountryCallback]) -> None:
        self._user_callbacks[PointerEventKind.RELEASE] = callback

    def set_on_country_exit(self, callback: Optional[CountryCallback]) -> None:
        self._user_callbacks[PointerEventKind.EXIT] = callback

    # ---- locations overlay ----

    def add_locations(self, *locations: GeoPoint) -> None:
        self._locations.extend(locations)
        self.locations_changed.emit()

    def clear_locations(self) -> None:
        self._locations.clear()
        self.locations_changed.emit()

    def locations(self) -> list[GeoPoint]:
        return list(self._locations)

    # ---- layout ----

    def sizeHint(self) -> QSize:
        w, h = self.scaler.size_hints.preferred
        return QSize(int(w), int(h))

    def minimumSizeHint(self) -> QSize:
        w, h = self.scaler.size_hints.minimum
        return QSize(int(w), int(h))

    def content_box(self) -> Optional[ContentBox]:
        return self.scaler.content_box

    def relayout(self) -> None:
        """Fit the map into the current widget size, keeping its aspect ratio."""
        rect = self.contentsRect()
        box = self.scaler.fit(rect.width(), rect.height())
        if box is None:
            return

        self.view.setGeometry(
            rect.x() + round(box.x),
            rect.y() + round(box.y),
            round(box.width),
            round(box.height),
        )
        self.view.resetTransform()
        self.view.scale(box.scale, box.scale)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.relayout()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _dispatch(self, item: CountryPathItem, kind: PointerEventKind, event: Any) -> None:
        self.controller.handle(item, kind, event)

    def _make_relay(self, kind: PointerEventKind) -> Callable[[str, Any], None]:
        def relay(country_id: str, event: Any) -> None:
            callback = self._user_callbacks[kind]
            if callback is not None:
                callback(country_id, event)
            self._signals[kind].emit(country_id)
        return relay

    def _apply_fill_and_stroke(self) -> None:
        style = self.map_style
        for item in self.registry.all_fragments():
            item.set_fill(style.fill_color)
            item.set_stroke(style.stroke_color, style.stroke_width)

    def _apply_background(self) -> None:
        color = QColor(self.map_style.background_color)
        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, color)
        self.setPalette(palette)
        self.setAutoFillBackground(True)
        self.view.setBackgroundBrush(QBrush(color))
