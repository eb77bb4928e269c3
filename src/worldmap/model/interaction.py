"""
Pointer interaction on countries.

Pointer events arrive per fragment, but feedback is per country: entering any
island of a country highlights all of its islands, and the user callback is
told about the country, not the fragment.

State machine (per country)::

    IDLE --enter--> HOVERED --press--> PRESSED
    PRESSED --release--> HOVERED
    HOVERED/PRESSED --exit--> IDLE

Any other (state, event) pair is ignored: no repaint and no callback.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol

from worldmap.model.errors import OrphanFragment
from worldmap.model.registry import CountryRegistry
from worldmap.model.style import MapStyle

logger = logging.getLogger(__name__)

CountryCallback = Callable[[str, Any], None]


class PointerEventKind(Enum):
    ENTER = "enter"
    PRESS = "press"
    RELEASE = "release"
    EXIT = "exit"


class InteractionState(Enum):
    IDLE = "idle"
    HOVERED = "hovered"
    PRESSED = "pressed"


class Paintable(Protocol):
    def set_fill(self, color: str) -> None: ...


_TRANSITIONS: Dict[tuple[InteractionState, PointerEventKind], InteractionState] = {
    (InteractionState.IDLE, PointerEventKind.ENTER): InteractionState.HOVERED,
    (InteractionState.HOVERED, PointerEventKind.PRESS): InteractionState.PRESSED,
    (InteractionState.PRESSED, PointerEventKind.RELEASE): InteractionState.HOVERED,
    (InteractionState.HOVERED, PointerEventKind.EXIT): InteractionState.IDLE,
    # a release is not guaranteed before the pointer leaves
    (InteractionState.PRESSED, PointerEventKind.EXIT): InteractionState.IDLE,
}


class InteractionController:
    """
    Resolves fragment events to countries, repaints and notifies callbacks.

    Args:
        registry: Registry whose fragments implement ``set_fill(color)``.
        style: Shared style; colors are read when a transition happens.
        strict: Raise OrphanFragment for unregistered fragments instead of
            logging and dropping the event.
    """

    def __init__(
        self,
        registry: CountryRegistry[Paintable],
        style: Optional[MapStyle] = None,
        strict: bool = False,
    ) -> None:
        self.registry = registry
        self.style = style if style is not None else MapStyle()
        self.strict = strict
        self._states: Dict[str, InteractionState] = {}
        self._callbacks: Dict[PointerEventKind, Optional[CountryCallback]] = {
            kind: None for kind in PointerEventKind
        }

    # ---- callbacks ----

    def set_callback(self, kind: PointerEventKind, callback: Optional[CountryCallback]) -> None:
        """Register the callback for an event kind. Replaces any previous one."""
        self._callbacks[PointerEventKind(kind)] = callback

    def callback(self, kind: PointerEventKind) -> Optional[CountryCallback]:
        return self._callbacks[PointerEventKind(kind)]

    # ---- state ----

    def state_of(self, country_id: str) -> InteractionState:
        return self._states.get(country_id, InteractionState.IDLE)

    def reset(self) -> None:
        self._states.clear()

    def _color_for(self, state: InteractionState) -> str:
        if state is InteractionState.HOVERED:
            return self.style.hover_color
        if state is InteractionState.PRESSED:
            return self.style.pressed_color
        return self.style.fill_color

    # ---- events ----

    def handle(self, fragment: Paintable, kind: Any, raw_event: Any = None) -> Optional[InteractionState]:
        """
        Apply a pointer event that hit ``fragment``.

        Returns:
            The new state of the owning country, or None if the event was
            ignored.
        """
        try:
            kind = PointerEventKind(kind)
        except ValueError:
            logger.debug(f"Ignoring unrecognized pointer event kind: {kind!r}")
            return None

        try:
            country_id = self.registry.country_of(fragment)
        except OrphanFragment:
            if self.strict:
                raise
            logger.warning(f"Dropping {kind.value} event for unregistered fragment {fragment!r}")
            return None

        current = self.state_of(country_id)
        new_state = _TRANSITIONS.get((current, kind))
        if new_state is None:
            return None

        if new_state is InteractionState.IDLE:
            self._states.pop(country_id, None)
        else:
            self._states[country_id] = new_state

        color = self._color_for(new_state)
        for f in self.registry.fragments_of(country_id):
            f.set_fill(color)

        callback = self._callbacks[kind]
        if callback is not None:
            callback(country_id, raw_event)

        return new_state
