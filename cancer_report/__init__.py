"""
Breast cancer cytology report.

Loads the Wisconsin breast cancer cytology data, cleans and recodes it,
computes correlations, fits full and reduced logistic regression models,
runs a Wald test on the dropped terms and renders a ranked-probability plot.

DISCLAIMER: This is a statistical analysis of a public research dataset.
It does NOT provide medical diagnoses or replace professional medical advice.
"""

__version__ = "0.1.0"
