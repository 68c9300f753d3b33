# src/LogScope/core/zoom_sync.py
# -*- coding: utf-8 -*-
"""
X-axis zoom synchronization across chart panels.

When the user zooms or pans one panel, its new X range (with a major step of
a tenth of the span) is copied onto every other registered panel. The Y axis
of each panel stays independent.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

from LogScope.core.chart_data import AxisScale, ChartState
from LogScope.shared.constants import X_AXIS_DIVISIONS, ZOOM_EPSILON

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomState:
    """Visible bounds of a panel before or after a zoom."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def from_view_range(cls, view_range) -> "ZoomState":
        """Build from a pyqtgraph ``viewRange()`` result ``[[x0, x1], [y0, y1]]``."""
        (x_min, x_max), (y_min, y_max) = view_range
        return cls(float(x_min), float(x_max), float(y_min), float(y_max))


class ZoomTarget(Protocol):
    """What the synchronizer needs from a panel."""

    state: Optional[ChartState]

    def apply_x_axis(self, scale: AxisScale, update_range: bool = True) -> None:
        ...


def is_zoom_state_changed(old: Optional[ZoomState], new: Optional[ZoomState],
                          epsilon: float = ZOOM_EPSILON) -> bool:
    """
    True if the zoom moved by at least ``epsilon`` on any X or Y bound.

    A missing state on either side always counts as a change.
    """
    if old is None or new is None:
        return True
    return (abs(old.x_min - new.x_min) >= epsilon
            or abs(old.x_max - new.x_max) >= epsilon
            or abs(old.y_min - new.y_min) >= epsilon
            or abs(old.y_max - new.y_max) >= epsilon)


class ZoomSynchronizer:
    """Propagates X-axis zoom from one panel to all the others."""

    def __init__(self, epsilon: float = ZOOM_EPSILON):
        self.epsilon = epsilon
        self._panels: List[ZoomTarget] = []
        self._propagating = False

    @property
    def panels(self) -> List[ZoomTarget]:
        return list(self._panels)

    def set_panels(self, panels: Iterable[ZoomTarget]) -> None:
        """Replace the registered panels (called whenever the grid is rebuilt)."""
        self._panels = list(panels)
        log.debug(f"Zoom synchronizer tracking {len(self._panels)} panels")

    def clear(self) -> None:
        self._panels = []

    def on_zoom(self, source: ZoomTarget, old: Optional[ZoomState], new: Optional[ZoomState]) -> bool:
        """
        Handle a zoom on ``source``.

        ``source`` does not have to be registered; it is never written to
        beyond its own tick spacing.

        Returns:
            True if the zoom was propagated.
        """
        if self._propagating:
            return False
        if not is_zoom_state_changed(old, new, self.epsilon):
            return False
        if new is None:
            # Nothing to copy from
            return False

        span = new.x_max - new.x_min
        minor = source.state.x.minor_step if source.state is not None else span / X_AXIS_DIVISIONS
        scale = AxisScale(new.x_min, new.x_max, span / X_AXIS_DIVISIONS, minor)

        self._propagating = True
        try:
            if source.state is not None:
                source.state.x = AxisScale(scale.min, scale.max, scale.major_step, scale.minor_step)
            source.apply_x_axis(scale, update_range=False)

            for panel in self._panels:
                if panel is source:
                    continue
                if panel.state is not None:
                    panel.state.x = AxisScale(scale.min, scale.max, scale.major_step, scale.minor_step)
                panel.apply_x_axis(scale)
        finally:
            self._propagating = False

        log.debug(f"Synchronized X range [{new.x_min:.3f}, {new.x_max:.3f}] to {len(self._panels)} panels")
        return True
