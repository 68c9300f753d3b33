import pytest

from LogScope.core.chart_data import AxisScale, ChartState
from LogScope.core.zoom_sync import ZoomState, ZoomSynchronizer, is_zoom_state_changed


class FakePanel:
    """Stands in for a chart panel; records applied X axes."""

    def __init__(self, x_max=100.0):
        self.state = ChartState(x=AxisScale(0.0, x_max, x_max / 10, 5.0))
        self.applied = []

    def apply_x_axis(self, scale, update_range=True):
        self.applied.append((scale, update_range))


@pytest.fixture
def panels():
    return [FakePanel() for _ in range(3)]


@pytest.fixture
def synchronizer(panels):
    sync = ZoomSynchronizer()
    sync.set_panels(panels)
    return sync


OLD = ZoomState(0.0, 100.0, -1.0, 1.0)
NEW = ZoomState(20.0, 40.0, -1.0, 1.0)


def test_missing_state_counts_as_change():
    assert is_zoom_state_changed(None, OLD)
    assert is_zoom_state_changed(OLD, None)


def test_change_below_epsilon_is_ignored():
    nudged = ZoomState(OLD.x_min + 1e-12, OLD.x_max, OLD.y_min, OLD.y_max - 1e-12)
    assert not is_zoom_state_changed(OLD, nudged)


def test_y_only_change_counts():
    assert is_zoom_state_changed(OLD, ZoomState(0.0, 100.0, -2.0, 1.0))


def test_zoom_copies_x_axis_to_other_panels(synchronizer, panels):
    source = panels[0]
    assert synchronizer.on_zoom(source, OLD, NEW)

    for panel in panels[1:]:
        assert (panel.state.x.min, panel.state.x.max) == (20.0, 40.0)
        assert panel.state.x.major_step == pytest.approx(2.0)
        assert panel.state.x.minor_step == 5.0
        (scale, update_range), = panel.applied
        assert update_range

    assert source.state.x.major_step == pytest.approx(2.0)
    (_, update_range), = source.applied
    assert not update_range


def test_same_zoom_twice_is_a_noop(synchronizer, panels):
    synchronizer.on_zoom(panels[0], OLD, NEW)
    assert not synchronizer.on_zoom(panels[0], NEW, NEW)
    assert all(len(panel.applied) == 1 for panel in panels)


def test_y_axis_is_not_synchronized(synchronizer, panels):
    panels[1].state.y_min, panels[1].state.y_max = -5.0, 5.0
    synchronizer.on_zoom(panels[0], OLD, ZoomState(20.0, 40.0, -0.5, 0.5))
    assert (panels[1].state.y_min, panels[1].state.y_max) == (-5.0, 5.0)


def test_unregistered_source_propagates_to_all(synchronizer, panels):
    single_view = FakePanel()
    synchronizer.on_zoom(single_view, OLD, NEW)
    assert all(panel.state.x.min == 20.0 for panel in panels)


def test_cleared_synchronizer_updates_only_source(synchronizer, panels):
    synchronizer.clear()
    synchronizer.on_zoom(panels[0], OLD, NEW)
    assert panels[1].applied == []
    assert panels[0].state.x.min == 20.0


def test_reentrant_zoom_is_ignored(panels):
    sync = ZoomSynchronizer()

    class EchoPanel(FakePanel):
        def apply_x_axis(self, scale, update_range=True):
            super().apply_x_axis(scale, update_range)
            # A target redraw reporting itself as a new zoom
            assert not sync.on_zoom(self, OLD, ZoomState(1.0, 2.0, 0.0, 1.0))

    echo = EchoPanel()
    sync.set_panels([panels[0], echo])
    assert sync.on_zoom(panels[0], OLD, NEW)
    assert echo.state.x.min == 20.0


def test_zoom_state_from_view_range():
    assert ZoomState.from_view_range([[1, 2], [3, 4]]) == ZoomState(1.0, 2.0, 3.0, 4.0)
