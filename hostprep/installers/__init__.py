"""
Installer components for different package managers
"""

from .base_installer import BaseInstaller
from .apt_installer import AptInstaller
from .dnf_installer import DnfInstaller
from .pacman_installer import PacmanInstaller
from .orchestrator import InstallOrchestrator

__all__ = [
    "BaseInstaller",
    "AptInstaller",
    "DnfInstaller",
    "PacmanInstaller",
    "InstallOrchestrator"
]
