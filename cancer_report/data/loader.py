"""Dataset loading module for the breast cancer cytology data."""

import csv
from pathlib import Path

import pandas as pd

from cancer_report.config import (
    COLUMN_MAP,
    DEFAULT_DATA_FILE,
    DEFAULT_SEPARATOR,
    FEATURE_COLUMNS,
    ID_COLUMN,
    RAW_COLUMNS,
    RAW_LABEL_COLUMN,
)
from cancer_report.utils import get_logger

log = get_logger(__name__)

# Registry of available datasets
DATASET_REGISTRY = {
    "breast_cancer_wisconsin": {
        "path": DEFAULT_DATA_FILE,
        "description": "Wisconsin Breast Cancer (original) cytology data (699 samples, 9 features)",
        "task": "binary_classification",
        "positive_label": "malignant",
        "negative_label": "benign",
    },
}


class ParseError(ValueError):
    """Raised when a data file does not match the fixed column layout."""


def _normalize(name: str) -> str:
    return " ".join(str(name).split()).lower()


def _is_header(row: list[str]) -> bool:
    names = [_normalize(c) for c in row]
    raw = [_normalize(c) for c in RAW_COLUMNS]
    canonical = [_normalize(COLUMN_MAP[c]) for c in RAW_COLUMNS]
    return names == raw or names == canonical


def _check_layout(path: Path, sep: str) -> bool:
    """Validate the column count of every row; return True if a header is present."""
    expected = len(RAW_COLUMNS)
    has_header = False
    n_rows = 0
    with open(path, newline="") as fh:
        for lineno, row in enumerate(csv.reader(fh, delimiter=sep), start=1):
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) != expected:
                raise ParseError(
                    f"{path}:{lineno}: expected {expected} columns, found {len(row)}"
                )
            if n_rows == 0 and _is_header(row):
                has_header = True
            n_rows += 1

    if n_rows - int(has_header) == 0:
        raise ParseError(f"{path}: no data rows")
    return has_header


class DatasetLoader:
    """Reads the fixed-layout cytology file into a raw DataFrame."""

    def __init__(self, sep: str = DEFAULT_SEPARATOR):
        self.sep = sep
        self.datasets = {}

    @staticmethod
    def list_available() -> list[str]:
        """Return names of all registered datasets."""
        return list(DATASET_REGISTRY.keys())

    def load_registered(self, name: str = "breast_cancer_wisconsin") -> dict:
        """Load a registered dataset by name."""
        if name not in DATASET_REGISTRY:
            raise ValueError(
                f"Unknown dataset '{name}'. "
                f"Available: {self.list_available()}"
            )
        entry = DATASET_REGISTRY[name]
        log.info("Description: %s", entry["description"])
        return self.load(entry["path"])

    def load(self, path) -> dict:
        """
        Load a delimited file with the UCI column order.

        Every cell is kept as a string; type coercion is the cleaner's job.

        Returns a dict with keys:
            - df: pd.DataFrame with the raw column names
            - feature_names: list of raw feature column names
            - target_name: raw label column name
            - id_name: raw identifier column name
            - metadata: extra info about the file
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")

        log.info("Loading dataset from: %s", path)
        has_header = _check_layout(path, self.sep)

        try:
            df = pd.read_csv(
                path,
                sep=self.sep,
                header=None,
                names=RAW_COLUMNS,
                skiprows=1 if has_header else 0,
                dtype=str,
                skipinitialspace=True,
                skip_blank_lines=True,
            )
        except pd.errors.ParserError as e:
            raise ParseError(f"{path}: {e}") from e

        reverse = {v: k for k, v in COLUMN_MAP.items()}
        metadata = {
            "name": path.name,
            "source": str(path),
            "n_samples": len(df),
            "n_columns": df.shape[1],
            "had_header": has_header,
        }

        log.info(
            "Loaded %d rows with %d columns",
            metadata["n_samples"],
            metadata["n_columns"],
        )

        result = {
            "df": df,
            "feature_names": [reverse[c] for c in FEATURE_COLUMNS],
            "target_name": reverse[RAW_LABEL_COLUMN],
            "id_name": reverse[ID_COLUMN],
            "metadata": metadata,
        }
        self.datasets[path.name] = result
        return result
