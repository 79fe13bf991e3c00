"""Configuration constants for the breast cancer cytology report."""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_DATA_FILE = Path(
    os.environ.get("CANCER_REPORT_DATA", DATA_DIR / "breast-cancer-wisconsin.data")
)
DEFAULT_OUTPUT_DIR = "cancer_report_output"
DEFAULT_SEPARATOR = ","

# UCI column order (breast-cancer-wisconsin.names)
RAW_COLUMNS = [
    "Sample code number",
    "Clump Thickness",
    "Uniformity of Cell Size",
    "Uniformity of Cell Shape",
    "Marginal Adhesion",
    "Single Epithelial Cell Size",
    "Bare Nuclei",
    "Bland Chromatin",
    "Normal Nucleoli",
    "Mitoses",
    "Class",
]

# Raw header -> canonical name
COLUMN_MAP = {
    "Sample code number": "id",
    "Clump Thickness": "clump_thickness",
    "Uniformity of Cell Size": "size_uniformity",
    "Uniformity of Cell Shape": "shape_uniformity",
    "Marginal Adhesion": "marginal_adhesion",
    "Single Epithelial Cell Size": "cell_size",
    "Bare Nuclei": "bare_nuclei",
    "Bland Chromatin": "bland_chromatin",
    "Normal Nucleoli": "normal_nucleoli",
    "Mitoses": "mitoses",
    "Class": "class",
}

ID_COLUMN = "id"
RAW_LABEL_COLUMN = "class"
LABEL_COLUMN = "malignant"
FEATURE_COLUMNS = [
    "clump_thickness",
    "size_uniformity",
    "shape_uniformity",
    "marginal_adhesion",
    "cell_size",
    "bare_nuclei",
    "bland_chromatin",
    "normal_nucleoli",
    "mitoses",
]

# Class codes: 2 = benign, 4 = malignant
LABEL_RECODE = {2: 0, 4: 1}

# Predictors kept after removing the non-significant terms of the full fit
DEFAULT_REDUCED_FEATURES = [
    "clump_thickness",
    "marginal_adhesion",
    "bare_nuclei",
    "bland_chromatin",
]

# Model parameters
SIGNIFICANCE_LEVEL = 0.05
IRLS_MAX_ITER = 100
IRLS_TOLERANCE = 1e-8
CLASSIFICATION_THRESHOLD = 0.5

# Correlation pairs above this |r| are listed in the report
HIGH_CORRELATION_THRESHOLD = 0.8

# Plot settings
PLOT_FILENAME = "ranked_probabilities.png"
PLOT_TITLE = "Predicted probability of malignancy"
PLOT_XLABEL = "Rank"
PLOT_YLABEL = "Predicted probability of malignancy"
PLOT_DPI = 150
LABEL_COLORS = {0: "#2196F3", 1: "#F44336"}
LABEL_NAMES = {0: "benign", 1: "malignant"}
