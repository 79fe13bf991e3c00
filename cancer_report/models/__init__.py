from cancer_report.models.logistic import FittedModel, WaldResult, fit_logistic, wald_test
from cancer_report.models.selection import SelectionResult, backward_select
from cancer_report.models.fitter import ModelFitter

__all__ = [
    "FittedModel",
    "WaldResult",
    "fit_logistic",
    "wald_test",
    "SelectionResult",
    "backward_select",
    "ModelFitter",
]
