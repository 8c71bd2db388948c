"""
Platform detection: package manager, privilege level and distribution
"""

import os
import sys
import shutil
import platform
import subprocess
from pathlib import Path
from typing import Dict, Any, Optional, Iterable, Mapping


class PlatformDetector:
    """Detects and provides information about the current host"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize platform detector

        Args:
            environ: Environment to read EUID from (defaults to os.environ)
        """
        self.environ = os.environ if environ is None else environ

    def detect(self) -> Dict[str, Any]:
        """
        Detect current platform

        Returns:
            Dictionary with platform information
        """
        info = {
            "os": platform.system(),
            "platform": platform.system().lower(),
            "machine": platform.machine(),
            "python_version": sys.version.split()[0],
            "euid": self.effective_uid(),
        }

        if info["platform"] == "linux":
            info["distribution"] = self._detect_linux_distribution()

        return info

    def detect_package_manager(self,
                               order: Iterable[str],
                               binaries: Mapping[str, str]) -> Optional[str]:
        """
        Find the first package manager whose binary resolves on PATH

        Args:
            order: Package manager names in priority order
            binaries: Executable to probe for each name

        Returns:
            Package manager name, or None when nothing matches
        """
        for name in order:
            binary = binaries.get(name, name)
            if shutil.which(binary):
                return name
        return None

    def effective_uid(self) -> Optional[int]:
        """Effective user id, preferring an EUID exported by the caller"""
        raw = (self.environ.get("EUID") or "").strip()
        if raw:
            try:
                return int(raw)
            except ValueError:
                pass
        if hasattr(os, "geteuid"):
            return os.geteuid()
        return None

    def is_root(self) -> bool:
        """Check whether commands already run with root privileges"""
        return self.effective_uid() == 0

    def _detect_linux_distribution(self) -> str:
        """Detect Linux distribution family"""
        dist_files = {
            "/etc/debian_version": "debian",
            "/etc/redhat-release": "rhel",
            "/etc/centos-release": "rhel",
            "/etc/fedora-release": "rhel",
            "/etc/rocky-release": "rhel",
            "/etc/almalinux-release": "rhel",
            "/etc/arch-release": "arch",
        }

        for file_path, dist_name in dist_files.items():
            if Path(file_path).exists():
                return dist_name

        try:
            with open("/etc/os-release", 'r') as f:
                content = f.read().lower()
        except OSError:
            content = ""

        if content:
            return self._classify_os_release(content)

        if shutil.which("lsb_release"):
            try:
                result = subprocess.run(
                    ["lsb_release", "-is"],
                    capture_output=True,
                    text=True,
                    check=True
                )
                return self._classify_os_release(result.stdout.strip().lower())
            except (subprocess.CalledProcessError, OSError):
                pass

        return "unknown"

    @staticmethod
    def _classify_os_release(content: str) -> str:
        """Map os-release or lsb_release text to a distribution family"""
        if "debian" in content or "ubuntu" in content:
            return "debian"
        elif any(x in content for x in ["rhel", "redhat", "centos", "fedora", "rocky", "alma"]):
            return "rhel"
        elif "arch" in content or "manjaro" in content:
            return "arch"
        return "unknown"


__all__ = ["PlatformDetector"]
