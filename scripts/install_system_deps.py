#!/usr/bin/env python3
"""
Installs the system packages needed to compile the Rust project.
Supports apt (Debian/Ubuntu), dnf (Fedora/RHEL/CentOS), and pacman (Arch).
"""
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from hostprep.main import install_main

if __name__ == "__main__":
    sys.exit(install_main())
