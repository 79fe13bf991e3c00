import pytest

from cancer_report.config import DEFAULT_REDUCED_FEATURES, FEATURE_COLUMNS, LABEL_COLUMN
from cancer_report.models import ModelFitter, backward_select


def test_backward_select_drops_noise(clean_dataset):
    result = backward_select(clean_dataset["df"], FEATURE_COLUMNS, LABEL_COLUMN, alpha=0.05)

    assert set(DEFAULT_REDUCED_FEATURES) <= set(result.selected)
    assert result.model.n_params == len(result.selected) + 1
    assert all(result.model.pvalues[f] <= 0.05 for f in result.selected)
    removed = [name for name, _ in result.steps]
    assert len(removed) == len(FEATURE_COLUMNS) - len(result.selected)
    assert all(p > 0.05 for _, p in result.steps)


def test_backward_select_keeps_at_least_one(clean_dataset):
    result = backward_select(clean_dataset["df"], ["mitoses", "cell_size"], LABEL_COLUMN, alpha=1e-300)
    assert len(result.selected) == 1


def test_fitter_manual_reduced_model(clean_dataset):
    result = ModelFitter().run(clean_dataset)

    assert result["reduced_features"] == DEFAULT_REDUCED_FEATURES
    assert result["reduced_model"].n_params == len(DEFAULT_REDUCED_FEATURES) + 1
    assert result["full_model"].n_params == len(FEATURE_COLUMNS) + 1
    assert result["selection_steps"] == []

    dropped = [f for f in FEATURE_COLUMNS if f not in DEFAULT_REDUCED_FEATURES]
    assert result["wald"].terms == dropped
    assert result["wald"].df == len(dropped)


def test_fitter_explicit_wald_terms(clean_dataset):
    result = ModelFitter(wald_terms=["mitoses"]).run(clean_dataset)
    assert result["wald"].terms == ["mitoses"]


def test_fitter_auto_select(clean_dataset):
    result = ModelFitter(reduced_features=None).run(clean_dataset)
    assert result["reduced_model"].features == result["reduced_features"]
    assert result["reduced_model"].n_params == len(result["reduced_features"]) + 1


def test_fitter_all_features_skips_wald(clean_dataset):
    result = ModelFitter(reduced_features=FEATURE_COLUMNS).run(clean_dataset)
    assert result["wald"] is None


def test_fitter_unknown_feature(clean_dataset):
    with pytest.raises(ValueError, match="Unknown features"):
        ModelFitter(reduced_features=["clump_thickness", "tumour_size"]).run(clean_dataset)
