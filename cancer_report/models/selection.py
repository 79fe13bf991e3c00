"""Backward elimination of non-significant predictors by Wald p-value."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from cancer_report.config import SIGNIFICANCE_LEVEL
from cancer_report.models.logistic import FittedModel, fit_logistic
from cancer_report.utils import get_logger

log = get_logger(__name__)


@dataclass
class SelectionResult:
    selected: list[str]
    model: FittedModel
    steps: list[tuple[str, float]] = field(default_factory=list)


def backward_select(
    df: pd.DataFrame,
    features: list[str],
    target: str,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> SelectionResult:
    """
    Start from the full model and drop the least significant predictor
    until every remaining p-value is at most ``alpha``.

    At least one predictor is always kept. The intercept is never a
    candidate for removal.
    """
    selected = list(features)
    steps = []

    model = fit_logistic(df, selected, target)
    while len(selected) > 1:
        pvalues = model.pvalues[selected]
        worst = pvalues.idxmax()
        worst_p = float(pvalues[worst])
        if worst_p <= alpha:
            break

        log.info("Backward: removing %s (p=%.4f > %.2f)", worst, worst_p, alpha)
        selected.remove(worst)
        steps.append((worst, worst_p))
        model = fit_logistic(df, selected, target)

    log.info(
        "Backward elimination complete: %d of %d predictors kept %s",
        len(selected), len(features), selected,
    )
    return SelectionResult(selected=selected, model=model, steps=steps)
