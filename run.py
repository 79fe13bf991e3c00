#!/usr/bin/env python3
"""
Breast cancer cytology report - one command to run everything.

Usage:
    python run.py                          # default data file and reduced model
    python run.py --data path/to/file.data --output-dir results
"""

import os
import sys

sys.path.insert(0, os.path.dirname(__file__))


if __name__ == "__main__":
    from cancer_report.__main__ import main
    main()
