from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

import pandas as pd

from constants import ACTIVITY_FILES, COHORT_KEYS, TEMPERATURE_FILES

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"

REQUIRED_COLUMNS = ("hour", "avg_value")


class DatasetLoadError(RuntimeError):
    """Raised when any of the source CSVs cannot be fetched or parsed."""


@dataclass(frozen=True)
class Sample:
    hour: float
    avg_value: float


CohortSeries = Tuple[Sample, ...]


@dataclass(frozen=True)
class MetricDataset:
    """The three cohort series of one metric, keyed femEst / femNonEst / male."""

    femEst: CohortSeries
    femNonEst: CohortSeries
    male: CohortSeries

    def __getitem__(self, cohort: str) -> CohortSeries:
        if cohort not in COHORT_KEYS:
            raise KeyError(cohort)
        return getattr(self, cohort)

    def __iter__(self) -> Iterator[str]:
        return iter(COHORT_KEYS)

    def __len__(self) -> int:
        return len(COHORT_KEYS)

    def items(self) -> Iterator[tuple[str, CohortSeries]]:
        for key in COHORT_KEYS:
            yield key, self[key]

    def avg_values(self) -> list[float]:
        """All avg_value readings across the three cohorts, NaN included."""
        return [s.avg_value for _, series in self.items() for s in series]


@dataclass(frozen=True)
class Datasets:
    temperature: MetricDataset
    activity: MetricDataset


def parse_samples(frame: pd.DataFrame) -> CohortSeries:
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise KeyError(f"missing column(s): {', '.join(missing)}")
    hours = pd.to_numeric(frame["hour"], errors="coerce")
    values = pd.to_numeric(frame["avg_value"], errors="coerce")
    return tuple(
        Sample(hour=float(h), avg_value=float(v)) for h, v in zip(hours, values)
    )


def _resolve(source: Union[str, Path], name: str) -> Union[str, Path]:
    src = str(source)
    if src.startswith(("http://", "https://")):
        return f"{src.rstrip('/')}/{name}"
    return Path(source) / name


def _fetch(location: Union[str, Path]) -> CohortSeries:
    # Keep the raw text so coercion happens in one place.
    frame = pd.read_csv(location, dtype=str, skipinitialspace=True)
    series = parse_samples(frame)
    malformed = sum(
        1 for s in series if pd.isna(s.hour) or pd.isna(s.avg_value)
    )
    if malformed:
        logger.warning(
            "%s: %d row(s) with non-numeric hour/avg_value kept as NaN",
            location,
            malformed,
        )
    logger.info("Loaded %d samples from %s", len(series), location)
    return series


def load_datasets(source: Optional[Union[str, Path]] = None) -> Datasets:
    """
    Fetch the six cohort CSVs concurrently and build the temperature and
    activity datasets. Either both are returned fully populated or
    DatasetLoadError is raised.
    """
    root = DATA_DIR if source is None else source
    names = TEMPERATURE_FILES + ACTIVITY_FILES
    locations = [_resolve(root, name) for name in names]
    with ThreadPoolExecutor(max_workers=len(locations)) as pool:
        futures = [pool.submit(_fetch, loc) for loc in locations]
        try:
            results = [f.result() for f in futures]
        except Exception as exc:
            raise DatasetLoadError(f"Error loading CSV files: {exc}") from exc

    temperature = MetricDataset(*results[:3])
    activity = MetricDataset(*results[3:])
    return Datasets(temperature=temperature, activity=activity)
