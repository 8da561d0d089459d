#!/usr/bin/env -S uv run python
"""
Calibration report: observed win rate per implied-probability bucket for completed games.
Usage: uv run python scripts/calibration_report.py <games.json> <bucket_count>
"""

import os
import sys

# Add src to path so oddscal is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from oddscal.cli import run

if __name__ == "__main__":
    run()
