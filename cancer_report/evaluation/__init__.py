from cancer_report.evaluation.metrics import classification_metrics
from cancer_report.evaluation.ranking import plot_ranked_probabilities, rank_probabilities
from cancer_report.evaluation.reporter import Reporter

__all__ = [
    "classification_metrics",
    "plot_ranked_probabilities",
    "rank_probabilities",
    "Reporter",
]
