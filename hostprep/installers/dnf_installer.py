"""
dnf installer implementation (Fedora/RHEL/CentOS)
"""

from typing import List
from .base_installer import BaseInstaller


class DnfInstaller(BaseInstaller):
    """Installer for dnf-based distributions"""

    def group_command(self) -> List[str]:
        return [self.binary, "groupinstall", "--yes"] + self.groups

    def install_command(self) -> List[str]:
        return [self.binary, "install", "--yes"] + self.packages

    def commands(self) -> List[List[str]]:
        cmds = []
        if self.groups:
            cmds.append(self.group_command())
        if self.packages:
            cmds.append(self.install_command())
        return cmds

    def install(self) -> None:
        """Install package groups, then individual packages"""
        self.logger.info("Installing development tools group and dependencies...")
        for cmd in self.commands():
            self.run_command(cmd)
