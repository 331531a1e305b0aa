#!/usr/bin/env python3
"""
numstat — Descriptive Statistics Calculator
===========================================
Thin entry-point. All logic lives in src.numstat.

Usage:
    python3 numstat.py data.txt            # read from file
    echo "1 2 3" | python3 numstat.py      # read from stdin
    python3 numstat.py -j -p 2 data.txt    # JSON, 2 decimal places
"""

from src.numstat.cli import main

if __name__ == "__main__":
    main()
