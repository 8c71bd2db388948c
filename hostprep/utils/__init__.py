"""
Utility modules for hostprep
"""

import sys
import shutil
import logging
import subprocess
from typing import Optional, Dict, Any, List

from .exceptions import (
    HostPrepError,
    UnsupportedPackageManagerError,
    CompilerNotFoundError,
    CommandError,
)


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[92m',  # Bright Green
        'RESET': '\033[0m'
    }

    def format(self, record):
        if sys.stdout.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']

            record.levelname = f"{color}{record.levelname}{reset}"
            record.msg = f"{color}{record.msg}{reset}"

        return super().format(record)


class Logger:
    """hostprep logger"""

    SUCCESS = 25  # Between INFO and WARNING
    PREFIX = "setup"

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger

        Args:
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        self.verbose = verbose

        logging.addLevelName(self.SUCCESS, "SUCCESS")

        self.logger = logging.getLogger("hostprep")
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self.logger.propagate = False

        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

        if verbose:
            fmt = f"%(asctime)s [{self.PREFIX}] [%(levelname)s] %(message)s"
        else:
            fmt = f"[{self.PREFIX}] %(message)s"

        console_formatter = ColoredFormatter(fmt, datefmt="%H:%M:%S")
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)

    def info(self, msg: str):
        """Log info message"""
        self.logger.info(msg)

    def warning(self, msg: str):
        """Log warning message"""
        self.logger.warning(msg)

    def error(self, msg: str):
        """Log error message"""
        self.logger.error(msg)

    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)


class ToolchainVerifier:
    """Checks that a C compiler is usable after installation"""

    def __init__(self, config: Dict[str, Any], logger: Logger):
        """
        Initialize verifier

        Args:
            config: Toolchain configuration (compiler, version_args)
            logger: Logger instance
        """
        self.compiler = config.get("compiler", "cc")
        self.version_args: List[str] = list(config.get("version_args", ["--version"]))
        self.logger = logger

    def find_compiler(self) -> Optional[str]:
        """Return the resolved compiler path, or None"""
        return shutil.which(self.compiler)

    def compiler_version(self) -> Optional[str]:
        """
        Get the first line of the compiler's version banner

        Returns:
            Version line ("" if the compiler printed nothing), or None when
            the compiler does not resolve
        """
        path = self.find_compiler()
        if path is None:
            self.logger.debug(f"{self.compiler} not found on PATH")
            return None

        cmd = [self.compiler] + self.version_args
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            self.logger.debug(f"Failed to run {self.compiler}: {e}")
            return ""

        lines = (result.stdout or "").splitlines()
        return lines[0].strip() if lines else ""

    def verify(self) -> str:
        """
        Verify the compiler resolves and log its version

        Returns:
            The compiler version line

        Raises:
            CompilerNotFoundError: the compiler does not resolve
        """
        version = self.compiler_version()
        if version is None:
            raise CompilerNotFoundError(self.compiler)
        self.logger.info(f"C toolchain available: {version}")
        return version


__all__ = [
    "Logger",
    "ColoredFormatter",
    "ToolchainVerifier",
    "HostPrepError",
    "UnsupportedPackageManagerError",
    "CompilerNotFoundError",
    "CommandError",
]
