"""
Launcher for the release build of the service
"""

import os
import shutil
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..utils import CommandError

PROJECT_DIR_ENV = "HOSTPREP_PROJECT_DIR"

# Checkout root holding the hostprep package
CHECKOUT_ROOT = Path(__file__).resolve().parents[2]


def resolve_project_dir(project_dir: Optional[Path] = None) -> Path:
    """
    Pick the directory the build tool runs in

    Explicit argument first, then HOSTPREP_PROJECT_DIR, then the checkout root.
    The caller's working directory is never consulted.
    """
    if project_dir is not None:
        return Path(project_dir).resolve()
    env_dir = (os.environ.get(PROJECT_DIR_ENV) or "").strip()
    if env_dir:
        return Path(env_dir).resolve()
    return CHECKOUT_ROOT


class Launcher:
    """Sets up the environment and hands the process over to the build tool"""

    def __init__(self,
                 project_dir: Path,
                 config: Dict[str, Any],
                 logger: Any,
                 dry_run: bool = False):
        """
        Initialize launcher

        Args:
            project_dir: Directory to run the build tool from
            config: Launcher configuration (env_defaults, command)
            logger: Logger instance
            dry_run: If True, log the command instead of exec'ing it
        """
        self.project_dir = Path(project_dir).resolve()
        self.env_defaults: Dict[str, str] = dict(config.get("env_defaults", {}))
        self.command: List[str] = list(config["command"])
        self.logger = logger
        self.dry_run = dry_run

    def prepare_environment(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Copy the environment and fill in defaults

        A default only applies when the variable is unset or empty.
        """
        env = dict(os.environ if environ is None else environ)
        for key, value in self.env_defaults.items():
            if not env.get(key):
                env[key] = value
                self.logger.debug(f"{key} defaulted to {value}")
            else:
                self.logger.debug(f"{key} kept as {env[key]}")
        return env

    def launch(self) -> None:
        """
        Change to the project directory and replace this process with the
        build tool. Only returns in dry-run mode.

        Raises:
            CommandError: the build tool is not installed
        """
        if not self.project_dir.is_dir():
            raise FileNotFoundError(f"Project directory not found: {self.project_dir}")

        env = self.prepare_environment()
        cmd_str = " ".join(self.command)

        if self.dry_run:
            self.logger.info(f"[DRY RUN] Would exec: {cmd_str} (in {self.project_dir})")
            return

        os.chdir(self.project_dir)
        if shutil.which(self.command[0], path=env.get("PATH")) is None:
            raise CommandError(self.command, 127, reason=f"{self.command[0]}: command not found")

        self.logger.debug(f"Exec: {cmd_str} (in {self.project_dir})")
        try:
            os.execvpe(self.command[0], self.command, env)
        except FileNotFoundError as e:
            raise CommandError(self.command, 127, reason=f"{self.command[0]}: command not found") from e


__all__ = ["Launcher", "resolve_project_dir", "PROJECT_DIR_ENV", "CHECKOUT_ROOT"]
