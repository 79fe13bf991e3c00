"""
Breast cancer cytology report pipeline.

Orchestrates the full run: load -> clean -> correlation -> model fitting
-> ranking, plot and report. Single pass, no state survives between runs.
"""

import os
import traceback

from cancer_report import __version__
from cancer_report.analysis import CorrelationAnalyzer
from cancer_report.config import (
    DEFAULT_DATA_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REDUCED_FEATURES,
    DEFAULT_SEPARATOR,
    PLOT_FILENAME,
    SIGNIFICANCE_LEVEL,
)
from cancer_report.data import Cleaner, DatasetLoader
from cancer_report.evaluation import (
    Reporter,
    classification_metrics,
    plot_ranked_probabilities,
    rank_probabilities,
)
from cancer_report.models import ModelFitter
from cancer_report.utils import get_logger

log = get_logger("cancer_report")

STAGES = [
    "Data Loading",
    "Cleaning",
    "Correlation Analysis",
    "Model Fitting",
    "Report Generation",
]


class ReportPipeline:
    """
    Runs the complete cytology analysis and writes the report.

    Stages:
        1. Data Loading          - read the fixed-layout file
        2. Cleaning              - canonical names, numeric coercion, label recode
        3. Correlation Analysis  - complete-case and feature-dropped matrices
        4. Model Fitting         - full and reduced logistic models, Wald test
        5. Report Generation     - ranking, plot, text summary, JSON
    """

    def __init__(
        self,
        data_path=DEFAULT_DATA_FILE,
        sep: str = DEFAULT_SEPARATOR,
        reduced_features: list[str] | None = DEFAULT_REDUCED_FEATURES,
        wald_terms: list[str] | None = None,
        alpha: float = SIGNIFICANCE_LEVEL,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        on_progress=None,
    ):
        self.data_path = data_path
        self.sep = sep
        self.reduced_features = reduced_features
        self.wald_terms = wald_terms
        self.alpha = alpha
        self.output_dir = output_dir
        self.on_progress = on_progress

        # Pipeline state
        self._raw_data = None
        self._clean_data = None
        self._correlation = None
        self._modelling = None
        self._report = None

    def run(self) -> dict:
        """
        Execute every stage in order.

        Returns the final report dict.
        """
        log.info("=" * 60)
        log.info("BREAST CANCER CYTOLOGY REPORT v%s", __version__)
        log.info("=" * 60)

        stages = [
            (STAGES[0], self._stage_load),
            (STAGES[1], self._stage_clean),
            (STAGES[2], self._stage_correlation),
            (STAGES[3], self._stage_fit),
            (STAGES[4], self._stage_report),
        ]

        total = len(stages)
        for i, (stage_name, stage_fn) in enumerate(stages):
            log.info("")
            log.info("-" * 60)
            log.info("STAGE: %d/%d %s", i + 1, total, stage_name)
            log.info("-" * 60)
            if self.on_progress:
                self.on_progress(i, total, stage_name)
            try:
                stage_fn()
            except Exception:
                log.error("Stage '%s' failed:\n%s", stage_name, traceback.format_exc())
                raise

        if self.on_progress:
            self.on_progress(total, total, "Done")
        return self._report

    def _stage_load(self):
        loader = DatasetLoader(sep=self.sep)
        self._raw_data = loader.load(self.data_path)

    def _stage_clean(self):
        self._clean_data = Cleaner().run(self._raw_data)

    def _stage_correlation(self):
        self._correlation = CorrelationAnalyzer().run(self._clean_data)

    def _stage_fit(self):
        fitter = ModelFitter(
            reduced_features=self.reduced_features,
            wald_terms=self.wald_terms,
            alpha=self.alpha,
        )
        self._modelling = fitter.run(self._clean_data)

    def _stage_report(self):
        reduced = self._modelling["reduced_model"]
        metrics = classification_metrics(reduced.observed, reduced.probabilities)
        ranked = rank_probabilities(reduced.probabilities, reduced.observed)

        os.makedirs(self.output_dir, exist_ok=True)
        plot = plot_ranked_probabilities(
            ranked, os.path.join(self.output_dir, PLOT_FILENAME)
        )

        reporter = Reporter()
        self._report = reporter.generate(
            dataset_metadata=self._clean_data["metadata"],
            cleaning_info=self._clean_data["cleaning_info"],
            correlation=self._correlation,
            modelling=self._modelling,
            metrics=metrics,
            ranked=ranked,
            plot=plot,
        )

        summary = reporter.print_summary(self._report)
        print("\n" + summary)

        json_path = os.path.join(self.output_dir, "report.json")
        reporter.save_json(self._report, json_path)
        log.info("Full JSON report saved to: %s", json_path)
