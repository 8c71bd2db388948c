"""
apt installer implementation (Debian/Ubuntu)
"""

from typing import List
from .base_installer import BaseInstaller


class AptInstaller(BaseInstaller):
    """Installer for apt-based distributions"""

    def update_command(self) -> List[str]:
        return [self.binary, "update"]

    def install_command(self) -> List[str]:
        return [self.binary, "install", "--yes"] + self.packages

    def commands(self) -> List[List[str]]:
        return [self.update_command(), self.install_command()]

    def refresh(self) -> None:
        """Update the package index before installing"""
        self.logger.info("Updating package index...")
        self.run_command(self.update_command())

    def install(self) -> None:
        """Install packages with apt-get"""
        self.logger.info(f"Installing {' '.join(self.packages)}...")
        self.run_command(self.install_command())
