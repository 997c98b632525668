import sys
from pathlib import Path

import pytest

# Make the project root (parent of this directory) importable when running pytest from anywhere
THIS_DIR = Path(__file__).resolve().parent
ROOT_DIR = THIS_DIR.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from constants import ACTIVITY_FILES, TEMPERATURE_FILES  # noqa: E402

TEMPERATURE_ROWS = {
    "AvgFemTempEst.csv": [(0, 36.8), (6, 37.2), (12, 37.5), (18, 37.1)],
    "AvgFemTempNonEst.csv": [(0, 36.5), (6, 36.9), (12, 37.3), (18, 36.7)],
    "AvgMaleTemp.csv": [(0, 36.1), (6, 36.4), (12, 37.0), (18, 36.6)],
}
ACTIVITY_ROWS = {
    "AvgFemActEst.csv": [(0, 12.0), (6, 3.5), (12, 1.25), (18, 20.0)],
    "AvgFemActNonEst.csv": [(0, 10.0), (6, 2.0), (12, 1.0), (18, 15.5)],
    "AvgMaleAct.csv": [(0, 8.0), (6, 2.5), (12, 0.5), (18, 14.0)],
}


def write_csv(path: Path, rows) -> None:
    lines = ["hour,avg_value"] + [f"{h},{v}" for h, v in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    for name in TEMPERATURE_FILES:
        write_csv(tmp_path / name, TEMPERATURE_ROWS[name])
    for name in ACTIVITY_FILES:
        write_csv(tmp_path / name, ACTIVITY_ROWS[name])
    return tmp_path


@pytest.fixture()
def loaded(data_dir: Path):
    from cohort_data import load_datasets

    return load_datasets(data_dir)
