"""In-sample classification metrics for a fitted model."""

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    recall_score,
    roc_auc_score,
)

from cancer_report.config import CLASSIFICATION_THRESHOLD


def classification_metrics(y_true, y_prob, threshold: float = CLASSIFICATION_THRESHOLD) -> dict:
    """Accuracy, sensitivity, specificity and ROC AUC at ``threshold``."""
    y_true = np.asarray(y_true, dtype=int)
    y_prob = np.asarray(y_prob, dtype=float)
    y_pred = (y_prob >= threshold).astype(int)

    metrics = {
        "threshold": float(threshold),
        "accuracy": round(accuracy_score(y_true, y_pred), 4),
        "sensitivity": round(recall_score(y_true, y_pred, pos_label=1, zero_division=0), 4),
        "specificity": round(recall_score(y_true, y_pred, pos_label=0, zero_division=0), 4),
        "confusion_matrix": confusion_matrix(y_true, y_pred, labels=[0, 1]).tolist(),
    }
    if len(np.unique(y_true)) == 2:
        metrics["roc_auc"] = round(roc_auc_score(y_true, y_prob), 4)
    return metrics
