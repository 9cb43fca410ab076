# gui/converter_session.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from core import state as st
from core.settings import ConverterSettings
from core.state import ConversionView, ConverterState
from core.units import LENGTH, Unit, UnitRegistry

log = logging.getLogger(__name__)


class ConverterSession(QObject):
    """
    Owns the converter state; emits viewChanged(ConversionView) after each update.

    Every public method applies one pure update from core.state, recomputes the
    view right away and emits it if anything visible changed.
    """
    viewChanged = Signal(object)

    def __init__(
        self,
        settings: Optional[ConverterSettings] = None,
        registry: UnitRegistry = LENGTH,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.settings = settings or ConverterSettings()
        self.registry = registry
        self._state = st.initial_state(self.settings, registry)
        self._view = self._derive(self._state)

    # ---- properties ----
    @property
    def state(self) -> ConverterState:
        return self._state

    @property
    def view(self) -> ConversionView:
        return self._view

    def shortcut_units(self) -> tuple[Unit, ...]:
        return self.registry.shortcut_units(self.settings.shortcut_count)

    # ---- updates ----
    def set_input(self, text: str) -> None:
        self._apply(st.set_input(self._state, text))

    def select_source(self, symbol: str) -> None:
        self._apply(st.select_source_symbol(self._state, symbol, self.registry))

    def select_target(self, symbol: str) -> None:
        self._apply(st.select_target_symbol(self._state, symbol, self.registry))

    def select_shortcut(self, unit: Unit) -> None:
        self._apply(st.select_shortcut(self._state, unit))

    def swap(self) -> None:
        new_state = st.swap(self._state, self.settings.result_places)
        log.info("Swap %s -> %s, input seeded with %s",
                 self._state.source.symbol, self._state.target.symbol, new_state.input_text)
        self._apply(new_state)

    # ---- internals ----
    def _derive(self, state: ConverterState) -> ConversionView:
        return st.derive_view(
            state,
            result_places=self.settings.result_places,
            factor_places=self.settings.factor_places,
        )

    def _apply(self, new_state: ConverterState) -> None:
        if new_state == self._state:
            return
        log.debug("State %s", new_state)
        self._state = new_state
        view = self._derive(new_state)
        if view != self._view:
            self._view = view
            self.viewChanged.emit(view)


# ======================================================================
# Helper mixin for widgets that render the session's view
# ======================================================================

class ViewAwareMixin:
    """Bind once; render in update_view."""
    _session: ConverterSession | None = None

    def bind_session(self, session: ConverterSession | None) -> None:
        self._session = session
        if session is None:
            return
        # initial sync
        self.update_view(session.view)
        # subscribe
        session.viewChanged.connect(self._on_view_changed_proxy)

    def _on_view_changed_proxy(self, view: ConversionView):
        self.update_view(view)

    def update_view(self, view: ConversionView) -> None:
        raise NotImplementedError
