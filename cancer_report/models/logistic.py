"""Binomial logistic regression fitted by IRLS, plus the Wald test."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

import numpy as np
import pandas as pd
import statsmodels.api as sm
from scipy import stats
from scipy.special import expit

from cancer_report.config import IRLS_MAX_ITER, IRLS_TOLERANCE
from cancer_report.utils import get_logger

log = get_logger(__name__)

INTERCEPT = "const"

# Library housekeeping, not fit diagnostics
_IGNORED_WARNINGS = (DeprecationWarning, PendingDeprecationWarning, FutureWarning)


@dataclass
class FittedModel:
    """Estimates and diagnostics of one logistic regression fit.

    ``params``, ``bse``, ``zvalues`` and ``pvalues`` are indexed by term
    name with the intercept first; ``probabilities`` is indexed like the
    rows the model was fitted on.
    """

    features: list[str]
    target: str
    params: pd.Series
    bse: pd.Series
    zvalues: pd.Series
    pvalues: pd.Series
    cov: pd.DataFrame
    conf_int: pd.DataFrame
    probabilities: pd.Series
    observed: pd.Series
    n_obs: int
    deviance: float
    null_deviance: float
    aic: float
    llf: float
    iterations: int
    converged: bool
    warnings: list[str] = field(default_factory=list)

    @property
    def n_params(self) -> int:
        return len(self.params)

    def predict(self, df: pd.DataFrame) -> pd.Series:
        """P(label=1) = sigmoid(intercept + sum of coefficient * feature)."""
        X = df[self.features].to_numpy(dtype=float)
        eta = self.params[INTERCEPT] + X @ self.params[self.features].to_numpy()
        return pd.Series(expit(eta), index=df.index, name="probability")

    def odds_ratios(self) -> pd.DataFrame:
        """exp(coefficients) with the exponentiated 95% confidence interval."""
        return pd.DataFrame({
            "odds_ratio": np.exp(self.params),
            "ci_lower": np.exp(self.conf_int["lower"]),
            "ci_upper": np.exp(self.conf_int["upper"]),
        })

    def coefficient_table(self) -> pd.DataFrame:
        return pd.DataFrame({
            "estimate": self.params,
            "std_error": self.bse,
            "z_value": self.zvalues,
            "p_value": self.pvalues,
        })


@dataclass
class WaldResult:
    terms: list[str]
    statistic: float
    df: int
    p_value: float


def _design(df: pd.DataFrame, features: list[str], target: str):
    rows = df[features + [target]].dropna(how="any")
    X = sm.add_constant(rows[features].astype(float), has_constant="add")
    y = rows[target].astype(float)
    return X, y


def fit_logistic(
    df: pd.DataFrame,
    features: list[str],
    target: str,
    maxiter: int = IRLS_MAX_ITER,
    tol: float = IRLS_TOLERANCE,
) -> FittedModel:
    """
    Fit ``target ~ features`` as a binomial GLM with logit link.

    Rows with a missing value in any used column are excluded. Convergence
    problems are recorded on the returned model and logged, not raised.
    """
    if not features:
        raise ValueError("At least one feature is required")
    unknown = [f for f in features + [target] if f not in df.columns]
    if unknown:
        raise ValueError(
            f"Unknown columns: {unknown}. Available: {list(df.columns)}"
        )

    X, y = _design(df, features, target)
    n_dropped = len(df) - len(y)
    if n_dropped:
        log.info("Excluding %d incomplete rows from the fit", n_dropped)
    if y.nunique() < 2:
        raise ValueError(f"Target '{target}' needs both classes to fit a logistic model")

    glm = sm.GLM(y, X, family=sm.families.Binomial())
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = glm.fit(method="IRLS", maxiter=maxiter, tol=tol)

    fit_warnings = [
        f"{w.category.__name__}: {w.message}"
        for w in caught
        if not issubclass(w.category, _IGNORED_WARNINGS)
    ]
    converged = bool(getattr(result, "converged", True))
    if not converged:
        fit_warnings.append(f"IRLS did not converge in {maxiter} iterations")
    for message in fit_warnings:
        log.warning("Fit %s ~ %s: %s", target, " + ".join(features), message)

    ci = result.conf_int(alpha=0.05)
    ci.columns = ["lower", "upper"]

    model = FittedModel(
        features=list(features),
        target=target,
        params=result.params,
        bse=result.bse,
        zvalues=result.tvalues,
        pvalues=result.pvalues,
        cov=result.cov_params(),
        conf_int=ci,
        probabilities=pd.Series(
            np.asarray(result.fittedvalues), index=y.index, name="probability"
        ),
        observed=y,
        n_obs=int(result.nobs),
        deviance=float(result.deviance),
        null_deviance=float(result.null_deviance),
        aic=float(result.aic),
        llf=float(result.llf),
        iterations=int(result.fit_history.get("iteration", 0)),
        converged=converged,
        warnings=fit_warnings,
    )

    log.info(
        "Fitted %d terms on %d rows in %d IRLS iterations (deviance=%.3f, AIC=%.3f)",
        model.n_params, model.n_obs, model.iterations, model.deviance, model.aic,
    )
    return model


def wald_test(model: FittedModel, terms: list[str]) -> WaldResult:
    """
    Joint Wald test of H0: the coefficients of ``terms`` are all zero.

    W = b' V^-1 b with V the covariance block of the tested terms;
    W follows a chi-squared distribution with len(terms) degrees of freedom.
    """
    if not terms:
        raise ValueError("Wald test needs at least one term")
    missing = [t for t in terms if t not in model.params.index]
    if missing:
        raise KeyError(f"Terms not in model: {missing}")

    b = model.params[terms].to_numpy()
    V = model.cov.loc[terms, terms].to_numpy()
    statistic = float(b @ np.linalg.solve(V, b))
    dof = len(terms)
    p_value = float(stats.chi2.sf(statistic, dof))

    log.info("Wald test on %s: X2=%.3f, df=%d, p=%.4g", terms, statistic, dof, p_value)
    return WaldResult(terms=list(terms), statistic=statistic, df=dof, p_value=p_value)
