from cancer_report.analysis.correlation import (
    CorrelationAnalyzer,
    complete_case_correlation,
    drop_incomplete_features_correlation,
    high_correlation_pairs,
)

__all__ = [
    "CorrelationAnalyzer",
    "complete_case_correlation",
    "drop_incomplete_features_correlation",
    "high_correlation_pairs",
]
