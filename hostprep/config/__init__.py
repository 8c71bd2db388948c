"""
Configuration management for hostprep
"""

import os
import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional


CONFIG_DIR_ENV = "HOSTPREP_CONFIG_DIR"
BUNDLED_CONFIG_DIR = Path(__file__).parent.resolve()

DEFAULT_DETECTION_ORDER = ["apt", "dnf", "pacman"]
DEFAULT_TOOLCHAIN = {"compiler": "cc", "version_args": ["--version"]}
DEFAULT_LAUNCHER = {
    "env_defaults": {"RUST_LOG": "info"},
    "command": ["cargo", "run", "--release"],
}


def resolve_config_dir(config_dir: Optional[Path] = None) -> Path:
    """
    Pick the configuration directory

    Explicit argument first, then HOSTPREP_CONFIG_DIR, then the bundled files.
    """
    if config_dir is not None:
        return Path(config_dir)
    env_dir = (os.environ.get(CONFIG_DIR_ENV) or "").strip()
    if env_dir:
        return Path(env_dir)
    return BUNDLED_CONFIG_DIR


class ConfigLoader:
    """Loads and manages hostprep configuration"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration loader

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = resolve_config_dir(config_dir)

        # Load package manager configuration
        pm_file = self.config_dir / "package_managers.yaml"
        if not pm_file.exists():
            raise FileNotFoundError(f"Package manager config not found: {pm_file}")

        with open(pm_file, 'r') as f:
            self.pm_config = yaml.safe_load(f) or {}

        # Load launcher configuration
        launcher_file = self.config_dir / "launcher.yaml"
        if not launcher_file.exists():
            raise FileNotFoundError(f"Launcher config not found: {launcher_file}")

        with open(launcher_file, 'r') as f:
            self.launcher_config = yaml.safe_load(f) or {}

    def get_detection_order(self) -> List[str]:
        """Get package managers in probe order"""
        return list(self.pm_config.get("detection_order", DEFAULT_DETECTION_ORDER))

    def get_package_managers(self) -> List[str]:
        """Get list of all configured package managers"""
        return list(self.pm_config.get("package_managers", {}).keys())

    def get_package_manager_config(self, name: str) -> Dict[str, Any]:
        """
        Get configuration for a specific package manager

        Args:
            name: Package manager name

        Returns:
            Package manager configuration dictionary
        """
        managers = self.pm_config.get("package_managers", {})
        if name not in managers:
            raise ValueError(f"Unknown package manager: {name}")
        pm_config = dict(managers[name] or {})
        pm_config.setdefault("binary", name)
        pm_config.setdefault("installer", name)
        pm_config.setdefault("description", name)
        return pm_config

    def get_binaries(self) -> Dict[str, str]:
        """Map each package manager name to the executable probed for it"""
        return {
            name: self.get_package_manager_config(name)["binary"]
            for name in self.get_package_managers()
        }

    def get_toolchain_config(self) -> Dict[str, Any]:
        """Get compiler verification settings"""
        toolchain = dict(DEFAULT_TOOLCHAIN)
        toolchain.update(self.pm_config.get("toolchain") or {})
        return toolchain

    def get_launcher_config(self) -> Dict[str, Any]:
        """Get launcher settings (env defaults and build tool command)"""
        launcher = dict(DEFAULT_LAUNCHER)
        launcher.update(self.launcher_config or {})
        if not launcher.get("command"):
            raise ValueError("Launcher command must not be empty")
        launcher["command"] = [str(c) for c in launcher["command"]]
        launcher["env_defaults"] = {
            str(k): str(v) for k, v in (launcher.get("env_defaults") or {}).items()
        }
        return launcher

    def get_option(self, key: str, default: Any = None) -> Any:
        """
        Get an option

        Args:
            key: Option key
            default: Default value if not found

        Returns:
            Option value
        """
        options = self.pm_config.get("options") or {}
        return options.get(key, default)


__all__ = ["ConfigLoader", "resolve_config_dir", "CONFIG_DIR_ENV", "BUNDLED_CONFIG_DIR"]
