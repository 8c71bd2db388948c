"""
pacman installer implementation (Arch)
"""

from typing import List
from .base_installer import BaseInstaller


class PacmanInstaller(BaseInstaller):
    """Installer for pacman-based distributions"""

    def install_command(self) -> List[str]:
        # -Sy refreshes the sync database in the same transaction
        return [self.binary, "-Sy", "--noconfirm"] + self.packages

    def commands(self) -> List[List[str]]:
        return [self.install_command()]

    def install(self) -> None:
        """Install packages with pacman"""
        self.logger.info(f"Installing {' '.join(self.packages)}...")
        self.run_command(self.install_command())
