import numpy as np
import pandas as pd

from cancer_report.config import LABEL_COLUMN
from cancer_report.evaluation import (
    classification_metrics,
    plot_ranked_probabilities,
    rank_probabilities,
)


def test_ranks_are_one_to_n_in_ascending_probability():
    rng = np.random.RandomState(42)
    probs = pd.Series(rng.uniform(size=200), index=rng.permutation(1000)[:200])
    labels = pd.Series((probs > 0.5).astype(float), index=probs.index)

    ranked = rank_probabilities(probs, labels)

    assert list(ranked["rank"]) == list(range(1, 201))
    assert ranked["probability"].is_monotonic_increasing
    pd.testing.assert_series_equal(
        ranked[LABEL_COLUMN], labels.loc[ranked.index], check_names=False
    )


def test_ties_keep_order_and_unique_ranks():
    probs = pd.Series([0.3, 0.1, 0.3, 0.1], index=[10, 11, 12, 13])
    labels = pd.Series([1.0, 0.0, 0.0, 1.0], index=[10, 11, 12, 13])

    ranked = rank_probabilities(probs, labels)

    assert list(ranked.index) == [11, 13, 10, 12]
    assert list(ranked["rank"]) == [1, 2, 3, 4]


def test_plot_written(tmp_path):
    probs = pd.Series(np.linspace(0.01, 0.99, 30))
    labels = pd.Series([0.0] * 15 + [1.0] * 15)
    ranked = rank_probabilities(probs, labels)

    out = tmp_path / "plots" / "ranked.png"
    result = plot_ranked_probabilities(ranked, out)

    assert result["status"] == "success"
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_classification_metrics():
    y = [0, 0, 0, 1, 1, 1]
    p = [0.1, 0.2, 0.7, 0.4, 0.8, 0.9]

    m = classification_metrics(y, p)

    assert m["confusion_matrix"] == [[2, 1], [1, 2]]
    assert m["accuracy"] == round(4 / 6, 4)
    assert m["sensitivity"] == round(2 / 3, 4)
    assert m["specificity"] == round(2 / 3, 4)
    assert m["roc_auc"] == round(8 / 9, 4)
