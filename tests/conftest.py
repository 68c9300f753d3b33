import os
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Make sure src directory is included for imports if running pytest from root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def write_csv(path: Path, header: Sequence[str], rows: Iterable[Sequence]) -> Path:
    """Write a comma-separated log with ``header`` and ``rows``."""
    lines = [",".join(header)]
    lines.extend(",".join(str(cell) for cell in row) for row in rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def log_name(test_time: str, barcode: str, test_name: str, prefix: str = "ST_L1_P2") -> str:
    """Filename following the default convention (time and barcode at tokens 3 and 4)."""
    return f"{prefix}_{test_time}_{barcode}_{test_name}.csv"


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Directory holding a small set of test logs.

    Files:
        T1/BC1/Step    T1/BC2/Step    T2/BC1/Step    T2/BC1/Sweep
        plus one alternate-convention log and two files that are not logs.
    """
    directory = tmp_path / "logs"
    directory.mkdir()
    header = ["OISX_current_DAC", "OIS_X", "Laser_OIS_X_um", "OISX_APS_lsb"]
    rows = [[1023, 1.0, 2.0, 100], [0, 2.0, 3.0, 300], [511, 3.0, 4.0, 200], [5, 5, 5, 5]]
    for test_time, barcode, test_name in (("T1", "BC1", "Step"), ("T1", "BC2", "Step"),
                                          ("T2", "BC1", "Step"), ("T2", "BC1", "Sweep")):
        write_csv(directory / log_name(test_time, barcode, test_name), header, rows)
    # Alternate convention: time at token 2, barcode at token 3
    write_csv(directory / "ST_L1_T3_JH0042_Step.csv", header, rows)
    (directory / "short_name.csv").write_text("a,b\n1,2\n")
    (directory / "notes.txt").write_text("not a log")
    return directory


@pytest.fixture
def csv_factory(tmp_path):
    """Returns a function writing a CSV log into tmp_path."""
    def _make(name: str, header: Sequence[str], rows: Iterable[Sequence],
              directory: Optional[Path] = None) -> Path:
        target = directory or tmp_path
        target.mkdir(parents=True, exist_ok=True)
        return write_csv(target / name, header, rows)
    return _make
