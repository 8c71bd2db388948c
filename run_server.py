#!/usr/bin/env python3
"""Builds and runs the service in release mode from this checkout"""
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from hostprep.main import run_main

if __name__ == "__main__":
    sys.exit(run_main(project_dir=ROOT_DIR))
