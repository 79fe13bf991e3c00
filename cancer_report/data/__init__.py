from cancer_report.data.loader import DATASET_REGISTRY, DatasetLoader, ParseError
from cancer_report.data.cleaner import Cleaner, recode_label

__all__ = ["DATASET_REGISTRY", "DatasetLoader", "ParseError", "Cleaner", "recode_label"]
