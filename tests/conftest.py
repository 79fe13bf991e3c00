import numpy as np
import pytest

from cancer_report.config import RAW_COLUMNS


def make_raw_rows(n=400, n_missing=12, seed=42):
    """Rows in the UCI layout with a known logistic signal and '?' in Bare Nuclei."""
    rng = np.random.RandomState(seed)
    X = rng.randint(1, 11, size=(n, 9))

    # clump_thickness, marginal_adhesion, bare_nuclei, bland_chromatin
    logits = -9.0 + 0.7 * X[:, 0] + 0.4 * X[:, 3] + 0.5 * X[:, 5] + 0.5 * X[:, 6]
    probs = 1.0 / (1.0 + np.exp(-logits))
    y = rng.binomial(1, probs)

    rows = []
    missing = set(rng.choice(n, size=n_missing, replace=False).tolist())
    for i in range(n):
        cells = [str(1000000 + i)] + [str(v) for v in X[i]] + ["4" if y[i] else "2"]
        if i in missing:
            cells[6] = "?"
        rows.append(cells)
    return rows


def write_rows(path, rows, header=False, sep=","):
    lines = []
    if header:
        lines.append(sep.join(RAW_COLUMNS))
    lines.extend(sep.join(r) for r in rows)
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def raw_rows():
    return make_raw_rows()


@pytest.fixture
def data_file(tmp_path, raw_rows):
    return write_rows(tmp_path / "breast-cancer-wisconsin.data", raw_rows)


@pytest.fixture
def clean_dataset(data_file):
    from cancer_report.data import Cleaner, DatasetLoader

    return Cleaner().run(DatasetLoader().load(data_file))
