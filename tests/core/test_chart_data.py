import numpy as np
import pytest

from LogScope.core.catalog import collect_csv_files, match_files
from LogScope.core.chart_data import (
    ChartDataBuilder,
    build_grid_panels,
    build_single_chart,
    calculate_major_step,
    scale_value,
    x_axis_scale,
)
from LogScope.core.graph_specs import GRAPH_SPECS, get_graph_spec
from LogScope.shared.constants import NO_DATA_LABEL


@pytest.fixture
def step_files(log_dir):
    return match_files(collect_csv_files([log_dir]), ["Step"], ["BC1"], ["T1"])


# --- Scaling and axes ---

def test_dac_scaling():
    assert scale_value("OISX_current_DAC", 1023) == pytest.approx(200.0)
    assert scale_value("OISX_current_DAC", 0) == 0
    assert scale_value("OIS_X", 1023) == 1023


@pytest.mark.parametrize("max_x, expected_max, expected_major", [
    (96, 100, 10),
    (100, 100, 10),
    (101, 110, 11),
    (0, 0, 0),
])
def test_x_axis_rounding(max_x, expected_max, expected_major):
    scale = x_axis_scale(max_x)
    assert scale.min == 0
    assert scale.max == expected_max
    assert scale.major_step == pytest.approx(expected_major)
    assert scale.minor_step == pytest.approx(expected_major / 5)


def test_x_axis_fixed_minor_step():
    assert x_axis_scale(96, 5).minor_step == 5


@pytest.mark.parametrize("value_range, expected", [
    (200, 50),
    (30, 5),
    (7, 1),
    (1, 0.2),
    (0, 0),
    (-3, 0),
    (float("inf"), 0),
    (float("nan"), 0),
])
def test_calculate_major_step(value_range, expected):
    assert calculate_major_step(value_range) == pytest.approx(expected)


# --- Grid panels ---

def test_grid_builds_one_panel_per_spec(step_files):
    panels = build_grid_panels(step_files)
    assert [p.title for p in panels] == [spec.title for spec in GRAPH_SPECS]


def test_grid_excludes_last_line_and_scales_dac(step_files):
    panel = ChartDataBuilder().build_panel(get_graph_spec("OISX current"), step_files)
    (series,) = panel.series
    np.testing.assert_array_equal(series.x, [0, 1, 2])
    np.testing.assert_allclose(series.y, [200.0, 0.0, 511 * 200 / 1023])
    assert panel.has_data
    assert panel.x_scale.max == 10
    assert panel.x_scale.minor_step == 5


def test_grid_missing_column_plots_zeros(step_files):
    panel = ChartDataBuilder().build_panel(get_graph_spec("OISY Current"), step_files)
    (series,) = panel.series
    np.testing.assert_array_equal(series.y, [0, 0, 0])


def test_grid_unparseable_cells_become_zero(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["OIS_X", "OIS_Y", "AF_Z"],
                       [[1, "bad", 3], [4, 5], [7, 8, 9], [0, 0, 0]])
    panel = ChartDataBuilder().build_panel(get_graph_spec("FW Positions"), [path])
    by_name = {s.name: s.y.tolist() for s in panel.series}
    assert by_name == {"OIS_X": [1, 4, 7], "OIS_Y": [0, 5, 8], "AF_Z": [3, 0, 9]}


def test_grid_non_finite_sensor_cells_become_zero(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["OISX_APS_lsb"], [[1], ["inf"], [2], ["nan"], [3]])
    panel = ChartDataBuilder().build_panel(get_graph_spec("OISX Sensors"), [path])
    sensor = next(s for s in panel.series if s.name == "OISX_APS_lsb")
    assert sensor.y.tolist() == [1, 0, 2, 0]
    assert (panel.secondary_axis.scale.min, panel.secondary_axis.scale.max) == (0, 2)
    assert panel.secondary_axis.scale.major_step == pytest.approx(0.5)


def test_single_chart_skips_non_finite_cells(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["NTC_Temp"], [[20], ["-inf"], ["1e999"], [23]])
    (series,) = build_single_chart(["NTC_Temp"], [path]).series
    np.testing.assert_array_equal(series.x, [0, 3])


def test_grid_secondary_axis_from_sensor_column(step_files):
    panel = ChartDataBuilder().build_panel(get_graph_spec("OISX Sensors"), step_files)
    secondary = panel.secondary_axis
    assert secondary.title == "OISX Laser pos (um)"
    assert (secondary.scale.min, secondary.scale.max) == (100, 300)
    assert secondary.scale.major_step == pytest.approx(50)
    assert secondary.scale.minor_step == pytest.approx(10)


def test_grid_panel_without_sensor_has_no_secondary_axis(step_files):
    panel = ChartDataBuilder().build_panel(get_graph_spec("FW Positions"), step_files)
    assert panel.secondary_axis is None


def test_grid_legend_deduplicated_across_files(log_dir):
    files = match_files(collect_csv_files([log_dir]), ["Step"], ["BC1", "BC2"], ["T1"])
    panel = ChartDataBuilder().build_panel(get_graph_spec("OISX current"), files)
    assert [s.legend_visible for s in panel.series] == [True, False]


def test_grid_header_only_file_gives_placeholder(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["OIS_X"], [])
    panel = ChartDataBuilder().build_panel(get_graph_spec("FW Positions"), [path])
    assert not panel.has_data
    (placeholder,) = panel.series
    assert placeholder.name == NO_DATA_LABEL
    assert placeholder.placeholder
    assert placeholder.color[3] == 0
    assert panel.x_scale.max == 0


def test_grid_with_no_files_gives_placeholder_panels():
    panels = build_grid_panels([])
    assert all(not p.has_data and p.series[0].placeholder for p in panels)


def test_grid_reads_each_file_once(step_files, mocker):
    builder = ChartDataBuilder()
    spy = mocker.spy(builder.reader, "read_log")
    builder.build_grid(step_files)
    assert spy.call_count == len(step_files)


# --- Single chart ---

def test_single_chart_includes_last_line(step_files):
    chart = build_single_chart(["OISX_current_DAC"], step_files)
    (series,) = chart.series
    np.testing.assert_array_equal(series.x, [0, 1, 2, 3])
    assert series.y[-1] == pytest.approx(5 * 200 / 1023)
    assert chart.x_scale.max == 10
    assert chart.x_scale.major_step == 1
    assert chart.x_scale.minor_step == pytest.approx(0.2)


def test_single_chart_skips_unparseable_cells(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["NTC_Temp"], [[20], ["x"], [22]])
    (series,) = build_single_chart(["NTC_Temp"], [path]).series
    np.testing.assert_array_equal(series.x, [0, 2])
    np.testing.assert_array_equal(series.y, [20, 22])


def test_single_chart_omits_missing_and_empty_columns(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["NTC_Temp", "INT_Temp"], [[20, "n/a"], [21, ""]])
    chart = build_single_chart(["NTC_Temp", "INT_Temp", "b1_coil_res"], [path])
    assert [s.name for s in chart.series] == ["NTC_Temp"]


def test_single_chart_x_axis_follows_last_file(csv_factory):
    long_log = csv_factory("A_B_C_T1_BC1_Long.csv", ["NTC_Temp"], [[i] for i in range(50)])
    short_log = csv_factory("A_B_C_T1_BC1_Short.csv", ["NTC_Temp"], [[1], [2]])
    chart = build_single_chart(["NTC_Temp"], [long_log, short_log])
    assert chart.x_scale.max == 10
    assert [s.legend_visible for s in chart.series] == [True, False]


def test_single_chart_without_columns_is_empty(step_files):
    chart = build_single_chart([], step_files)
    assert chart.series == []
    assert chart.x_scale is None
