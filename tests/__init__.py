"""
Test suite for the cytology report.

Tests cover:
- Loading and column-layout validation
- Cleaning and label recode
- Correlation matrices
- Logistic fits, Wald test and backward elimination
- Ranking, plot and end-to-end report
"""
