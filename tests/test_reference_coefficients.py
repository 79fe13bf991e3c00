"""Reduced model on the published 699-record UCI file.

Set CANCER_REPORT_DATA or place breast-cancer-wisconsin.data under data/.
"""

import pytest

from cancer_report.config import DEFAULT_DATA_FILE, DEFAULT_REDUCED_FEATURES, LABEL_COLUMN
from cancer_report.data import Cleaner, DatasetLoader
from cancer_report.models import fit_logistic

pytestmark = pytest.mark.skipif(
    not DEFAULT_DATA_FILE.exists(),
    reason=f"UCI data file not available at {DEFAULT_DATA_FILE}",
)

EXPECTED = {
    "const": -10.11,
    "clump_thickness": 0.812,
    "marginal_adhesion": 0.434,
    "bare_nuclei": 0.481,
    "bland_chromatin": 0.702,
}


def test_reduced_model_reproduces_published_coefficients():
    dataset = Cleaner().run(DatasetLoader().load(DEFAULT_DATA_FILE))
    assert len(dataset["df"]) == 699

    model = fit_logistic(dataset["df"], DEFAULT_REDUCED_FEATURES, LABEL_COLUMN)

    assert model.converged
    for term, value in EXPECTED.items():
        assert model.params[term] == pytest.approx(value, abs=1e-2)
