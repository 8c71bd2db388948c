"""Holds exceptions raised by hostprep"""

from typing import List, Sequence


class HostPrepError(Exception):
    """Base error, carries the exit status the CLI should return"""

    exit_code = 1

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class UnsupportedPackageManagerError(HostPrepError):
    """Raised when none of the known package managers is on PATH"""

    def __init__(self, message: str = ("Unsupported package manager. Please install a C "
                                       "toolchain, pkg-config, and OpenSSL headers manually.")):
        super().__init__(message, exit_code=1)


class CompilerNotFoundError(HostPrepError):
    """Raised when the C compiler still does not resolve after installing"""

    def __init__(self, compiler: str = "cc"):
        super().__init__(f"{compiler} still not found. Verify your installation manually.",
                         exit_code=1)
        self.compiler = compiler


class CommandError(HostPrepError):
    """Raised when an external command exits non-zero or cannot be started"""

    def __init__(self, cmd: Sequence[str], returncode: int, reason: str = ""):
        self.cmd: List[str] = [str(c) for c in cmd]
        self.returncode = returncode
        cmd_str = " ".join(self.cmd)
        if reason:
            message = f"Command failed: {cmd_str} ({reason})"
        else:
            message = f"Command failed with exit status {returncode}: {cmd_str}"
        super().__init__(message, exit_code=returncode)


__all__ = [
    "HostPrepError",
    "UnsupportedPackageManagerError",
    "CompilerNotFoundError",
    "CommandError",
]
