"""Ranking of fitted probabilities and the diagnostic scatter plot."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
import numpy as np
import pandas as pd

from cancer_report.config import (
    LABEL_COLORS,
    LABEL_COLUMN,
    LABEL_NAMES,
    PLOT_DPI,
    PLOT_TITLE,
    PLOT_XLABEL,
    PLOT_YLABEL,
)
from cancer_report.utils import get_logger

log = get_logger(__name__)


def rank_probabilities(probabilities: pd.Series, labels: pd.Series) -> pd.DataFrame:
    """
    Sort fitted probabilities ascending and number them 1..N.

    Ties keep their original order. ``labels`` is aligned on the index of
    ``probabilities``.
    """
    frame = pd.DataFrame({
        "probability": probabilities.astype(float),
        LABEL_COLUMN: labels.reindex(probabilities.index),
    })
    frame = frame.sort_values("probability", kind="mergesort")
    frame.insert(0, "rank", np.arange(1, len(frame) + 1))
    return frame


def plot_ranked_probabilities(ranked: pd.DataFrame, output_path) -> dict:
    """
    Scatter of rank against fitted probability, colored by the true label.

    Returns:
        Status dict with output file path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 6))

    colors = [LABEL_COLORS.get(v, "#9E9E9E") for v in ranked[LABEL_COLUMN]]
    ax.scatter(
        ranked["rank"], ranked["probability"],
        c=colors, s=14, alpha=0.8, edgecolors="none",
    )

    ax.set_xlabel(PLOT_XLABEL, fontsize=12)
    ax.set_ylabel(PLOT_YLABEL, fontsize=12)
    ax.set_title(PLOT_TITLE, fontsize=14, fontweight="bold")
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.3)

    legend_elements = [
        Line2D([0], [0], marker="o", linestyle="", color=LABEL_COLORS[k],
               label=LABEL_NAMES[k])
        for k in sorted(LABEL_COLORS)
    ]
    ax.legend(handles=legend_elements, title="Observed", loc="upper left", fontsize=10)

    fig.savefig(output_path, dpi=PLOT_DPI, bbox_inches="tight")
    plt.close(fig)

    log.info("Saved ranked probability plot to %s", output_path)
    return {
        "status": "success",
        "output_file": str(output_path),
        "description": f"Ranked fitted probabilities for {len(ranked)} records",
    }
