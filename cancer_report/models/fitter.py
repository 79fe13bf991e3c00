"""Model fitting stage: full model, reduced model and Wald test."""

from cancer_report.config import DEFAULT_REDUCED_FEATURES, SIGNIFICANCE_LEVEL
from cancer_report.models.logistic import fit_logistic, wald_test
from cancer_report.models.selection import backward_select
from cancer_report.utils import get_logger

log = get_logger(__name__)


class ModelFitter:
    """Fits the full and reduced logistic models for the report."""

    def __init__(
        self,
        reduced_features: list[str] | None = DEFAULT_REDUCED_FEATURES,
        wald_terms: list[str] | None = None,
        alpha: float = SIGNIFICANCE_LEVEL,
    ):
        """
        Args:
            reduced_features: predictors of the reduced model, or None to
                choose them by backward elimination.
            wald_terms: full-model terms to test jointly; defaults to the
                predictors left out of the reduced model.
            alpha: significance level for backward elimination.
        """
        self.reduced_features = list(reduced_features) if reduced_features is not None else None
        self.wald_terms = list(wald_terms) if wald_terms is not None else None
        self.alpha = alpha

    def _check_features(self, requested: list[str], available: list[str]):
        unknown = set(requested) - set(available)
        if unknown:
            raise ValueError(
                f"Unknown features: {sorted(unknown)}. Available: {available}"
            )

    def run(self, dataset: dict) -> dict:
        """
        Fit both models and test the dropped terms.

        Returns dict with the full model, the reduced model, the selection
        steps (empty for a manual feature list) and the Wald result.
        """
        df = dataset["df"]
        features = dataset["feature_names"]
        target = dataset["target_name"]

        log.info("Fitting full model with %d predictors", len(features))
        full = fit_logistic(df, features, target)

        steps = []
        if self.reduced_features is None:
            log.info("Selecting reduced model by backward elimination (alpha=%.2f)", self.alpha)
            selection = backward_select(df, features, target, alpha=self.alpha)
            reduced_features = selection.selected
            reduced = selection.model
            steps = selection.steps
        else:
            self._check_features(self.reduced_features, features)
            reduced_features = self.reduced_features
            log.info("Fitting reduced model with %s", reduced_features)
            reduced = fit_logistic(df, reduced_features, target)

        wald_terms = self.wald_terms
        if wald_terms is None:
            wald_terms = [f for f in features if f not in reduced_features]
        else:
            self._check_features(wald_terms, features)

        wald = None
        if wald_terms:
            wald = wald_test(full, wald_terms)
        else:
            log.info("Reduced model keeps every predictor; no Wald test")

        return {
            "full_model": full,
            "reduced_model": reduced,
            "reduced_features": list(reduced_features),
            "selection_steps": steps,
            "wald": wald,
        }
