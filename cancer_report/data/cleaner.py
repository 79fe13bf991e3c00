"""Data cleaning module: canonical names, numeric coercion and label recode."""

import numpy as np
import pandas as pd

from cancer_report.config import (
    COLUMN_MAP,
    FEATURE_COLUMNS,
    ID_COLUMN,
    LABEL_COLUMN,
    LABEL_RECODE,
    RAW_LABEL_COLUMN,
)
from cancer_report.utils import get_logger

log = get_logger(__name__)


def recode_label(values: pd.Series) -> pd.Series:
    """Map class codes 2 -> 0 (benign) and 4 -> 1 (malignant); anything else -> NaN."""
    numeric = pd.to_numeric(values, errors="coerce")
    return numeric.map(lambda v: LABEL_RECODE.get(v, np.nan)).astype(float)


class Cleaner:
    """Renames, coerces and recodes a raw dataset. Rows are never dropped."""

    def run(self, dataset: dict) -> dict:
        """
        Full cleaning pass.

        Takes a dataset dict from DatasetLoader and returns a new dict
        with canonical column names, numeric features and the recoded label.
        """
        df = dataset["df"].rename(columns=COLUMN_MAP)

        log.info("Starting cleaning on %d rows", len(df))

        # Step 1: coerce to numeric; bad tokens ('?') become NaN
        missing = {}
        for col in [ID_COLUMN] + FEATURE_COLUMNS:
            before = df[col].isna().sum()
            df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
            n_missing = int(df[col].isna().sum())
            if n_missing:
                missing[col] = n_missing
                log.warning(
                    "Column %s: %d missing values (%d from non-numeric tokens)",
                    col, n_missing, n_missing - before,
                )

        # Step 2: recode the label and replace the original column
        label = recode_label(df[RAW_LABEL_COLUMN])
        unrecognised = int(label.isna().sum())
        if unrecognised:
            log.warning("%d rows with unrecognised class codes set to missing", unrecognised)
        df = df.drop(columns=[RAW_LABEL_COLUMN])
        df[LABEL_COLUMN] = label

        class_distribution = {
            int(k): int(v) for k, v in df[LABEL_COLUMN].value_counts().items()
        }
        log.info("Class distribution (0=benign, 1=malignant): %s", class_distribution)

        n_complete = int(df[FEATURE_COLUMNS + [LABEL_COLUMN]].notna().all(axis=1).sum())
        metadata = dict(dataset["metadata"])
        metadata["class_distribution"] = class_distribution

        return {
            "df": df,
            "feature_names": list(FEATURE_COLUMNS),
            "target_name": LABEL_COLUMN,
            "id_name": ID_COLUMN,
            "metadata": metadata,
            "cleaning_info": {
                "missing_values": missing,
                "total_missing": int(np.sum(list(missing.values()))) if missing else 0,
                "unrecognised_labels": unrecognised,
                "complete_rows": n_complete,
                "incomplete_rows": len(df) - n_complete,
            },
        }
