import pytest

from LogScope.infrastructure.file_readers import CsvLog, CsvLogReader, parse_float
from LogScope.shared.error_handling import LogReadError, LogScopeError


@pytest.mark.parametrize("text, expected", [
    ("1", 1.0),
    (" 2.5 ", 2.5),
    ("-3e2", -300.0),
    ("", None),
    ("abc", None),
    (None, None),
    ("inf", None),
    ("-Infinity", None),
    ("nan", None),
    ("1e999", None),
    ("1_0", None),
])
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_read_log_splits_header(csv_factory):
    path = csv_factory("A_B_C_T1_BC1_Test.csv", ["OIS_X", "OIS_Y"], [[1, 2], [3, 4]])
    csv_log = CsvLogReader().read_log(path)
    assert csv_log.header == ["OIS_X", "OIS_Y"]
    assert csv_log.line_count == 3
    assert csv_log.column_index("OIS_Y") == 1
    assert csv_log.column_index("AF_Z") == -1
    assert csv_log.value(2, 1) == 4.0


def test_value_handles_short_rows_and_missing_columns(tmp_path):
    csv_log = CsvLog(path=tmp_path / "x.csv", lines=["a,b,c", "1", "1,2,x"])
    assert csv_log.value(1, 1) is None
    assert csv_log.value(2, 2) is None
    assert csv_log.value(2, -1) is None
    assert csv_log.value(2, 1) == 2.0


def test_byte_order_mark_is_dropped(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("\ufeffOIS_X,OIS_Y\r\n1,2\r\n".encode("utf-8"))
    csv_log = CsvLogReader().read_log(path)
    assert csv_log.header == ["OIS_X", "OIS_Y"]
    assert csv_log.line_count == 2


def test_empty_file_has_no_header(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    csv_log = CsvLogReader().read_log(path)
    assert csv_log.line_count == 0
    assert csv_log.column_index("OIS_X") == -1


def test_missing_file_raises_log_read_error(tmp_path):
    with pytest.raises(LogReadError) as excinfo:
        CsvLogReader().read_log(tmp_path / "missing.csv")
    assert isinstance(excinfo.value, LogScopeError)
    assert isinstance(excinfo.value, IOError)
