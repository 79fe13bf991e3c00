import numpy as np
import pandas as pd
import pytest

from cancer_report.config import FEATURE_COLUMNS, LABEL_COLUMN
from cancer_report.data import Cleaner, DatasetLoader, recode_label
from tests.conftest import write_rows


@pytest.mark.parametrize(
    "value, expected",
    [(2, 0.0), (4, 1.0), ("2", 0.0), ("4", 1.0), (2.0, 0.0), (4.0, 1.0)],
)
def test_recode_known_codes(value, expected):
    assert recode_label(pd.Series([value]))[0] == expected


@pytest.mark.parametrize("value", [0, 1, 3, 5, "?", "malignant", None])
def test_recode_unknown_codes_become_missing(value):
    assert np.isnan(recode_label(pd.Series([value], dtype=object))[0])


def test_clean_renames_and_replaces_label(clean_dataset):
    df = clean_dataset["df"]
    assert "class" not in df.columns
    assert LABEL_COLUMN in df.columns
    assert list(df.columns) == ["id"] + FEATURE_COLUMNS + [LABEL_COLUMN]
    assert set(df[LABEL_COLUMN].dropna().unique()) <= {0.0, 1.0}


def test_clean_coerces_to_numeric_without_dropping_rows(clean_dataset, raw_rows):
    df = clean_dataset["df"]
    assert len(df) == len(raw_rows)
    for col in FEATURE_COLUMNS:
        assert pd.api.types.is_float_dtype(df[col])
    assert df["bare_nuclei"].isna().sum() == 12
    assert df.drop(columns=["bare_nuclei"]).notna().all().all()


def test_cleaning_info(clean_dataset, raw_rows):
    info = clean_dataset["cleaning_info"]
    assert info["missing_values"] == {"bare_nuclei": 12}
    assert info["unrecognised_labels"] == 0
    assert info["complete_rows"] == len(raw_rows) - 12
    dist = clean_dataset["metadata"]["class_distribution"]
    assert sum(dist.values()) == len(raw_rows)


def test_unrecognised_label_kept_as_missing(tmp_path, raw_rows):
    rows = [list(r) for r in raw_rows]
    rows[3][-1] = "3"
    rows[7][-1] = "x"
    path = write_rows(tmp_path / "labels.data", rows)

    cleaned = Cleaner().run(DatasetLoader().load(path))
    df = cleaned["df"]
    assert len(df) == len(rows)
    assert df[LABEL_COLUMN].isna().sum() == 2
    assert cleaned["cleaning_info"]["unrecognised_labels"] == 2


def test_clean_does_not_modify_input(data_file):
    raw = DatasetLoader().load(data_file)
    before = raw["df"].copy()
    Cleaner().run(raw)
    pd.testing.assert_frame_equal(raw["df"], before)
