"""Correlation analysis for the cleaned cytology data."""

import pandas as pd

from cancer_report.config import HIGH_CORRELATION_THRESHOLD
from cancer_report.utils import get_logger

log = get_logger(__name__)


def complete_case_correlation(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Pearson matrix over rows with no missing value in ``columns``."""
    complete = df[columns].dropna(how="any")
    return complete.corr(method="pearson")


def drop_incomplete_features_correlation(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Pearson matrix over all rows after removing every column with a missing value."""
    kept = [c for c in columns if not df[c].isna().any()]
    return df[kept].corr(method="pearson")


def high_correlation_pairs(corr: pd.DataFrame, threshold: float = HIGH_CORRELATION_THRESHOLD) -> list[dict]:
    """List off-diagonal pairs with |r| above ``threshold``, strongest first."""
    names = list(corr.columns)
    pairs = []
    for i in range(len(names)):
        for j in range(i + 1, len(names)):
            r = corr.iloc[i, j]
            if abs(r) > threshold:
                pairs.append({
                    "feature_1": names[i],
                    "feature_2": names[j],
                    "correlation": round(float(r), 4),
                })
    pairs.sort(key=lambda x: abs(x["correlation"]), reverse=True)
    return pairs


class CorrelationAnalyzer:
    """Computes the descriptive correlation matrices for the report."""

    def __init__(self, threshold: float = HIGH_CORRELATION_THRESHOLD):
        self.threshold = threshold

    def run(self, dataset: dict) -> dict:
        """
        Compute both correlation matrices over the features and the label.

        The identifier column is excluded. Nothing downstream consumes the
        result; it is printed in the report only.
        """
        df = dataset["df"]
        columns = dataset["feature_names"] + [dataset["target_name"]]

        complete = complete_case_correlation(df, columns)
        n_complete = int(df[columns].notna().all(axis=1).sum())
        log.info(
            "Complete-case correlation: %d of %d rows used",
            n_complete, len(df),
        )

        reduced = drop_incomplete_features_correlation(df, columns)
        dropped = [c for c in columns if c not in reduced.columns]
        if dropped:
            log.info("Feature-dropped correlation: excluded columns %s", dropped)

        pairs = high_correlation_pairs(complete, self.threshold)
        log.info(
            "Found %d highly correlated pairs (|r|>%.2f)", len(pairs), self.threshold
        )

        return {
            "complete_case": complete,
            "complete_case_rows": n_complete,
            "drop_incomplete_features": reduced,
            "dropped_features": dropped,
            "highly_correlated_pairs": pairs,
        }
