"""CLI entry point: python -m cancer_report"""

import argparse
import logging
import sys

from cancer_report.config import (
    DEFAULT_DATA_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REDUCED_FEATURES,
    DEFAULT_SEPARATOR,
    FEATURE_COLUMNS,
    SIGNIFICANCE_LEVEL,
)
from cancer_report.pipeline import ReportPipeline
from cancer_report.utils import set_level


def main(argv=None):
    parser = argparse.ArgumentParser(
        description=(
            "Breast cancer cytology report - "
            "cleans the data, fits logistic regression models and plots the fit."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m cancer_report --data breast-cancer-wisconsin.data\n"
            "  python -m cancer_report --auto-select --alpha 0.01\n"
            "  python -m cancer_report --reduced-features clump_thickness bare_nuclei\n"
            "  python -m cancer_report --output-dir ./results\n"
        ),
    )

    parser.add_argument(
        "--data",
        type=str,
        default=str(DEFAULT_DATA_FILE),
        help=f"Delimited data file (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--sep",
        type=str,
        default=DEFAULT_SEPARATOR,
        help="Field separator (default: ',')",
    )
    parser.add_argument(
        "--reduced-features",
        type=str,
        nargs="+",
        default=DEFAULT_REDUCED_FEATURES,
        choices=FEATURE_COLUMNS,
        help="Predictors of the reduced model (default: %(default)s)",
    )
    parser.add_argument(
        "--auto-select",
        action="store_true",
        help="Choose the reduced model by backward elimination instead",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=SIGNIFICANCE_LEVEL,
        help=f"Significance level for backward elimination (default: {SIGNIFICANCE_LEVEL})",
    )
    parser.add_argument(
        "--wald-terms",
        type=str,
        nargs="+",
        default=None,
        choices=FEATURE_COLUMNS,
        help="Full-model terms to test jointly (default: those left out of the reduced model)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for output files (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    parser.add_argument(
        "--list-features",
        action="store_true",
        help="List the canonical feature names and exit",
    )

    args = parser.parse_args(argv)

    if args.list_features:
        print("Available features:")
        for name in FEATURE_COLUMNS:
            marker = "*" if name in DEFAULT_REDUCED_FEATURES else " "
            print(f"  {marker} {name}")
        print("(* = default reduced model)")
        return

    if args.quiet:
        set_level(logging.WARNING)

    pipeline = ReportPipeline(
        data_path=args.data,
        sep=args.sep,
        reduced_features=None if args.auto_select else args.reduced_features,
        wald_terms=args.wald_terms,
        alpha=args.alpha,
        output_dir=args.output_dir,
    )

    try:
        pipeline.run()
    except Exception as e:
        print(f"\nPipeline failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
