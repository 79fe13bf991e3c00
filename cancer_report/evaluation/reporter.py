"""Report assembly: text summary and JSON output."""

import json
from datetime import datetime, timezone

import numpy as np
import pandas as pd

from cancer_report import __version__
from cancer_report.models.logistic import FittedModel
from cancer_report.utils import get_logger

log = get_logger(__name__)


def _model_section(model: FittedModel) -> dict:
    table = model.coefficient_table().join(model.odds_ratios())
    return {
        "features": model.features,
        "n_obs": model.n_obs,
        "n_params": model.n_params,
        "coefficients": table.to_dict(orient="index"),
        "deviance": model.deviance,
        "null_deviance": model.null_deviance,
        "aic": model.aic,
        "log_likelihood": model.llf,
        "iterations": model.iterations,
        "converged": model.converged,
        "warnings": model.warnings,
    }


class Reporter:
    """Collects stage outputs into a report dict and renders it."""

    def generate(
        self,
        dataset_metadata: dict,
        cleaning_info: dict,
        correlation: dict,
        modelling: dict,
        metrics: dict,
        ranked: pd.DataFrame,
        plot: dict,
    ) -> dict:
        wald = modelling["wald"]
        report = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "dataset": dataset_metadata,
            "cleaning": cleaning_info,
            "correlation": {
                "complete_case": correlation["complete_case"].to_dict(),
                "complete_case_rows": correlation["complete_case_rows"],
                "drop_incomplete_features": correlation["drop_incomplete_features"].to_dict(),
                "dropped_features": correlation["dropped_features"],
                "highly_correlated_pairs": correlation["highly_correlated_pairs"],
            },
            "full_model": _model_section(modelling["full_model"]),
            "reduced_model": _model_section(modelling["reduced_model"]),
            "selection_steps": [
                {"removed": name, "p_value": p} for name, p in modelling["selection_steps"]
            ],
            "wald_test": None if wald is None else {
                "terms": wald.terms,
                "chi2": wald.statistic,
                "df": wald.df,
                "p_value": wald.p_value,
            },
            "metrics": metrics,
            "ranking": {
                "n": len(ranked),
                "min_probability": float(ranked["probability"].min()),
                "max_probability": float(ranked["probability"].max()),
            },
            "plot": plot,
        }
        return self._make_serializable(report)

    def print_summary(self, report: dict) -> str:
        """Render the report as plain text."""
        lines = []
        rule = "=" * 72

        lines.append(rule)
        lines.append("BREAST CANCER CYTOLOGY: LOGISTIC REGRESSION REPORT")
        lines.append(rule)

        ds = report["dataset"]
        cl = report["cleaning"]
        lines.append(f"Source:            {ds.get('source')}")
        lines.append(f"Records:           {ds.get('n_samples')}")
        lines.append(f"Complete records:  {cl['complete_rows']}")
        lines.append(f"Missing values:    {cl['missing_values'] or 'none'}")
        lines.append(f"Unrecognised class codes: {cl['unrecognised_labels']}")
        lines.append(f"Class distribution: {ds.get('class_distribution')}")

        corr = report["correlation"]
        lines.append("")
        lines.append(f"Correlation (complete cases, {corr['complete_case_rows']} rows)")
        lines.append(pd.DataFrame(corr["complete_case"]).round(3).to_string())
        lines.append("")
        dropped = ", ".join(corr["dropped_features"]) or "none"
        lines.append(f"Correlation (all rows, dropped features: {dropped})")
        lines.append(pd.DataFrame(corr["drop_incomplete_features"]).round(3).to_string())
        if corr["highly_correlated_pairs"]:
            lines.append("Highly correlated pairs:")
            for pair in corr["highly_correlated_pairs"]:
                lines.append(
                    f"  {pair['feature_1']} ~ {pair['feature_2']}: {pair['correlation']:+.3f}"
                )

        for key, title in (("full_model", "Full model"), ("reduced_model", "Reduced model")):
            lines.extend(self._model_lines(report[key], title))

        if report["selection_steps"]:
            lines.append("")
            lines.append("Backward elimination:")
            for step in report["selection_steps"]:
                lines.append(f"  - {step['removed']} (p={step['p_value']:.4f})")

        wald = report["wald_test"]
        lines.append("")
        if wald is None:
            lines.append("Wald test: not run")
        else:
            lines.append(f"Wald test on {', '.join(wald['terms'])}")
            lines.append(
                f"  X2 = {wald['chi2']:.3f}, df = {wald['df']}, P(> X2) = {wald['p_value']:.4g}"
            )

        m = report["metrics"]
        lines.append("")
        lines.append(f"Reduced model, in-sample at threshold {m['threshold']}:")
        lines.append(
            f"  accuracy={m['accuracy']:.4f}  sensitivity={m['sensitivity']:.4f}  "
            f"specificity={m['specificity']:.4f}  auc={m.get('roc_auc', 'N/A')}"
        )
        lines.append(f"  confusion matrix [[TN, FP], [FN, TP]]: {m['confusion_matrix']}")

        lines.append("")
        lines.append(f"Plot: {report['plot']['output_file']}")
        lines.append(rule)
        return "\n".join(lines)

    def _model_lines(self, section: dict, title: str) -> list[str]:
        lines = ["", f"{title}: malignant ~ {' + '.join(section['features'])}"]
        table = pd.DataFrame(section["coefficients"]).T
        lines.append(table.to_string(float_format=lambda v: f"{v:.4g}"))
        lines.append(
            f"  n={section['n_obs']}  deviance={section['deviance']:.3f} "
            f"(null {section['null_deviance']:.3f})  AIC={section['aic']:.3f}  "
            f"IRLS iterations={section['iterations']}"
        )
        for w in section["warnings"]:
            lines.append(f"  WARNING: {w}")
        return lines

    def save_json(self, report: dict, path: str):
        with open(path, "w") as f:
            json.dump(self._make_serializable(report), f, indent=2)

    def _make_serializable(self, obj):
        """Recursively convert NumPy and pandas values to JSON types."""
        if isinstance(obj, dict):
            return {str(k): self._make_serializable(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [self._make_serializable(v) for v in obj]
        if isinstance(obj, (pd.DataFrame, pd.Series)):
            return self._make_serializable(obj.to_dict())
        if isinstance(obj, np.ndarray):
            return self._make_serializable(obj.tolist())
        if isinstance(obj, np.bool_):
            return bool(obj)
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, (np.floating, float)):
            value = float(obj)
            return None if np.isnan(value) or np.isinf(value) else value
        return obj
