"""
Base installer class that all installers inherit from
"""

import os
import subprocess
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any

from ..utils import CommandError


class BaseInstaller(ABC):
    """Abstract base class for all package manager installers"""

    def __init__(self,
                 name: str,
                 config: Dict[str, Any],
                 logger: Any,
                 privilege_prefix: Optional[List[str]] = None,
                 dry_run: bool = False):
        """
        Initialize base installer

        Args:
            name: Package manager name
            config: Package manager configuration
            logger: Logger instance
            privilege_prefix: Command prepended to every install command
                (e.g. ["sudo"]); empty when already root
            dry_run: If True, don't actually run commands
        """
        self.name = name
        self.config = config
        self.logger = logger
        self.privilege_prefix = list(privilege_prefix or [])
        self.dry_run = dry_run

        self.binary = config.get("binary", name)
        self.description = config.get("description", name)
        self.packages: List[str] = [str(p) for p in config.get("packages", [])]
        self.groups: List[str] = [str(g) for g in config.get("groups", [])]

        # Setup environment
        self.env = os.environ.copy()
        for key, value in (config.get("env") or {}).items():
            self.env[str(key)] = str(value)

    def run_command(self,
                    cmd: List[str],
                    env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess:
        """
        Run a command with the privilege prefix applied

        Args:
            cmd: Command and arguments
            env: Environment variables

        Returns:
            CompletedProcess instance

        Raises:
            CommandError: the command exited non-zero or could not be started
        """
        if env is None:
            env = self.env

        full_cmd = self.privilege_prefix + [str(c) for c in cmd]
        cmd_str = " ".join(full_cmd)
        self.logger.debug(f"Running: {cmd_str}")

        if self.dry_run:
            self.logger.info(f"[DRY RUN] Would run: {cmd_str}")
            return subprocess.CompletedProcess(full_cmd, 0, "", "")

        try:
            return subprocess.run(full_cmd, env=env, check=True)
        except subprocess.CalledProcessError as e:
            self.logger.error(f"Command failed: {cmd_str}")
            raise CommandError(full_cmd, e.returncode) from e
        except FileNotFoundError as e:
            self.logger.error(f"Command not found: {full_cmd[0]}")
            raise CommandError(full_cmd, 127, reason=f"{full_cmd[0]}: command not found") from e

    def refresh(self) -> None:
        """Refresh the package index (no-op unless the manager needs it)"""

    @abstractmethod
    def install(self) -> None:
        """Install the configured packages"""

    @abstractmethod
    def commands(self) -> List[List[str]]:
        """Install commands in run order, without the privilege prefix"""

    def planned_commands(self) -> List[List[str]]:
        """Commands execute() would run, privilege prefix included"""
        return [self.privilege_prefix + cmd for cmd in self.commands()]

    def execute(self) -> None:
        """Execute the full install sequence, stopping at the first failure"""
        self.logger.info(f"Detected {self.description}-based distribution.")
        self.refresh()
        self.install()


__all__ = ["BaseInstaller"]
