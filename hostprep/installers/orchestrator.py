"""
Install orchestrator that picks and runs the right package manager installer
"""

from typing import Dict, Any, List, Optional

from .base_installer import BaseInstaller
from .apt_installer import AptInstaller
from .dnf_installer import DnfInstaller
from .pacman_installer import PacmanInstaller
from ..platform import PlatformDetector
from ..utils import UnsupportedPackageManagerError


class InstallOrchestrator:
    """Orchestrates detection and installation of system build dependencies"""

    # Map installer kinds to installer classes
    INSTALLER_MAP = {
        "apt": AptInstaller,
        "dnf": DnfInstaller,
        "pacman": PacmanInstaller,
    }

    def __init__(self,
                 config: Any,
                 detector: PlatformDetector,
                 logger: Any,
                 dry_run: bool = False):
        """
        Initialize install orchestrator

        Args:
            config: Configuration loader
            detector: Platform detector
            logger: Logger instance
            dry_run: If True, don't actually install
        """
        self.config = config
        self.detector = detector
        self.logger = logger
        self.dry_run = dry_run

    def detect(self) -> Optional[str]:
        """
        Detect the host package manager

        Returns:
            Package manager name, or None if unsupported
        """
        order = self.config.get_detection_order()
        binaries = self.config.get_binaries()
        name = self.detector.detect_package_manager(order, binaries)
        if name:
            self.logger.debug(f"Package manager: {name} ({binaries.get(name, name)})")
        else:
            self.logger.debug(f"No package manager found (tried: {', '.join(order)})")
        return name

    def privilege_prefix(self) -> List[str]:
        """Privilege escalation command, empty when already root"""
        if self.detector.is_root():
            return []
        command = self.config.get_option("privilege_command", "sudo")
        if not command:
            return []
        if isinstance(command, str):
            return command.split()
        return [str(c) for c in command]

    def get_installer(self, name: str) -> BaseInstaller:
        """
        Get appropriate installer for a package manager

        Args:
            name: Package manager name

        Returns:
            Installer instance
        """
        pm_config = self.config.get_package_manager_config(name)

        kind = pm_config.get("installer", name)
        installer_class = self.INSTALLER_MAP.get(kind)
        if not installer_class:
            raise ValueError(f"Unknown installer: {kind}")

        return installer_class(
            name=name,
            config=pm_config,
            logger=self.logger,
            privilege_prefix=self.privilege_prefix(),
            dry_run=self.dry_run
        )

    def install(self) -> str:
        """
        Detect the package manager and install dependencies with it

        Returns:
            Name of the package manager used

        Raises:
            UnsupportedPackageManagerError: no supported package manager found
            CommandError: an install command failed
        """
        name = self.detect()
        if name is None:
            raise UnsupportedPackageManagerError()

        installer = self.get_installer(name)
        installer.execute()
        return name

    def get_install_info(self, name: str) -> Dict[str, Any]:
        """
        Get install information for a package manager

        Args:
            name: Package manager name

        Returns:
            Dictionary with install information
        """
        installer = self.get_installer(name)
        return {
            "name": name,
            "binary": installer.binary,
            "packages": installer.packages,
            "groups": installer.groups,
            "commands": installer.planned_commands(),
        }


__all__ = ["InstallOrchestrator"]
