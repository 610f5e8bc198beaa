#!/usr/bin/env python3
"""
Simple wrapper to summarize a gradebook without installing the package
Usage: python3 generate_report.py <gradebook.xlsx> [--class ClassNo.] [--export]
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gradebook_summary.cli import main

if __name__ == "__main__":
    sys.exit(main())
