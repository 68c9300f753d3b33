import pytest
from PySide6 import QtGui

from LogScope.application.gui.graph_window import GraphGridWindow
from LogScope.core.chart_data import AxisScale, build_grid_panels
from LogScope.core.graph_specs import GRAPH_SPECS
from LogScope.core.zoom_sync import ZoomSynchronizer
from LogScope.shared.constants import IMAGE_FILE_FILTER
from LogScope.shared.error_handling import ExportError, PlottingError

FILTERS = IMAGE_FILE_FILTER.split(";;")


@pytest.fixture
def synchronizer():
    return ZoomSynchronizer()


@pytest.fixture
def window(qtbot, log_dir, synchronizer):
    panels = build_grid_panels(sorted(log_dir.glob("ST_L1_P2_*_Step.csv")))
    grid = GraphGridWindow(panels, "BC1, BC2 / Step", synchronizer)
    qtbot.addWidget(grid)
    return grid


def test_window_layout(window, synchronizer):
    assert window.windowTitle() == "LogScope - BC1, BC2 / Step"
    assert len(window.chart_panels) == len(GRAPH_SPECS) == 12
    assert synchronizer.panels == window.chart_panels
    assert all(panel.initial_state == panel.state for panel in window.chart_panels)


def test_panels_placed_in_three_columns(window):
    layout = window.layout_widget.ci
    assert layout.getItem(0, 0) is window.chart_panels[0].plot_item
    assert layout.getItem(1, 0) is window.chart_panels[3].plot_item
    assert layout.getItem(3, 2) is window.chart_panels[11].plot_item


def test_missing_columns_are_drawn_as_zeros(window):
    oisy_panel = window.chart_panels[1]
    # Every file lacks OISY_current_DAC, so it is drawn as zeros
    assert len(oisy_panel.curves) == 3


def test_save_all_graphs_writes_selected_format(window, tmp_path):
    target = window.save_all_graphs(str(tmp_path / "grid.jpg"), FILTERS[1])
    assert target == tmp_path / "grid.jpg"
    assert target.exists()
    assert bytes(QtGui.QImageReader(str(target)).format()).lower() == b"jpeg"


def test_save_all_graphs_dialog_cancel(window, mocker):
    mocker.patch("PySide6.QtWidgets.QFileDialog.getSaveFileName", return_value=("", ""))
    save = mocker.spy(window.exporter, "save_widget")
    assert window.save_all_graphs() is None
    save.assert_not_called()


def test_save_all_graphs_failure_shows_error(window, tmp_path, message_boxes, mocker):
    mocker.patch.object(window.exporter, "save_widget", side_effect=ExportError("disk full"))
    assert window.save_all_graphs(str(tmp_path / "grid.png"), FILTERS[0]) is None
    assert len(message_boxes["critical"]) == 1
    assert "disk full" in message_boxes["critical"][0]


def test_copy_all_graphs(window, message_boxes, mocker):
    copy = mocker.patch.object(window.exporter, "copy_widget")
    assert window.copy_all_graphs() is True
    copy.assert_called_once_with(window.layout_widget)

    copy.side_effect = ExportError("no clipboard")
    assert window.copy_all_graphs() is False
    assert message_boxes["warning"] == ["no clipboard"]


def test_context_menu_actions(window):
    assert window.copy_action.text() == "Copy to All Graphs"
    assert window.save_action.text() == "Save All Graphs"


def test_reset_zoom_restores_every_panel(window):
    for panel in window.chart_panels:
        panel.apply_x_axis(AxisScale(1, 2, 0.1, 5))
    window.reset_zoom()
    for panel in window.chart_panels:
        (x_min, x_max), _ = panel.view_box.viewRange()
        assert (x_min, x_max) == pytest.approx((0.0, 10.0))
        assert panel.state == panel.initial_state


def test_close_stops_synchronization(qtbot, window, synchronizer):
    window.show()
    with qtbot.waitSignal(window.closed):
        window.close()
    assert synchronizer.panels == []


def test_too_many_panels_is_a_plotting_error(qtbot, log_dir, synchronizer):
    panels = build_grid_panels([log_dir / "ST_L1_P2_T1_BC1_Step.csv"])
    with pytest.raises(PlottingError):
        GraphGridWindow(panels + panels[:1], "BC1 / Step", synchronizer)
