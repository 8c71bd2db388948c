"""
hostprep
Installs system build dependencies (apt, dnf or pacman) and launches
the release build of the service
"""

__version__ = "1.0.0"

from .main import HostPrep

__all__ = ["HostPrep", "__version__"]
