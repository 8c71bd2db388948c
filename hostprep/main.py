#!/usr/bin/env python3
"""
Main entry point for hostprep
Installs system build dependencies and launches the release build
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import Optional, List

from .config import ConfigLoader
from .installers import InstallOrchestrator
from .launcher import Launcher, resolve_project_dir
from .platform import PlatformDetector
from .utils import Logger, ToolchainVerifier, HostPrepError


class HostPrep:
    """Main hostprep class"""

    def __init__(self,
                 config_dir: Optional[Path] = None,
                 project_dir: Optional[Path] = None,
                 verbose: bool = False,
                 dry_run: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize hostprep

        Args:
            config_dir: Directory holding package_managers.yaml and launcher.yaml
            project_dir: Directory the build tool runs in
            verbose: Enable verbose output
            dry_run: Log commands instead of running them
            log_file: Optional log file path
        """
        self.verbose = verbose
        self.dry_run = dry_run

        self.logger = Logger(verbose=verbose, log_file=log_file)
        self.config = ConfigLoader(config_dir)
        self.logger.debug(f"Config directory: {self.config.config_dir}")

        self.detector = PlatformDetector()
        self.project_dir = resolve_project_dir(project_dir)

        self.orchestrator = InstallOrchestrator(
            config=self.config,
            detector=self.detector,
            logger=self.logger,
            dry_run=dry_run
        )

        self.verifier = ToolchainVerifier(
            config=self.config.get_toolchain_config(),
            logger=self.logger
        )

    def install(self) -> str:
        """
        Install system build dependencies and verify the C toolchain

        Returns:
            Name of the package manager used
        """
        name = self.orchestrator.install()
        self.verifier.verify()
        self.logger.success("System dependencies installed successfully.")
        return name

    def check(self) -> str:
        """Verify the C toolchain without installing anything"""
        return self.verifier.verify()

    def run(self) -> None:
        """Launch the release build; replaces the current process"""
        launcher = Launcher(
            project_dir=self.project_dir,
            config=self.config.get_launcher_config(),
            logger=self.logger,
            dry_run=self.dry_run
        )
        launcher.launch()

    def show_info(self) -> None:
        """Show host information"""
        from . import __version__

        info = self.detector.detect()
        pm_name = self.orchestrator.detect()
        launcher_config = self.config.get_launcher_config()

        print(f"\nhostprep v{__version__}")
        print(f"{'='*50}")
        print(f"OS: {info['os']} ({info['machine']})")
        if "distribution" in info:
            print(f"Distribution: {info['distribution']}")
        print(f"Running as root: {'yes' if self.detector.is_root() else 'no'}")
        print(f"Config Directory: {self.config.config_dir}")
        print(f"Project Directory: {self.project_dir}")

        print(f"\nPackage managers (probe order):")
        for name in self.config.get_detection_order():
            marker = "[OK] Detected" if name == pm_name else "[X] Not used"
            print(f"  - {name:20} {marker}")

        if pm_name:
            print(f"\nInstall commands:")
            for cmd in self.orchestrator.get_install_info(pm_name)["commands"]:
                print(f"  $ {' '.join(cmd)}")
        else:
            self.logger.warning("No supported package manager found; install a C toolchain, "
                                "pkg-config, and OpenSSL headers manually.")

        version = self.verifier.compiler_version()
        print(f"\nC compiler ({self.verifier.compiler}): {version if version is not None else 'not found'}")
        print(f"Launch command: {' '.join(launcher_config['command'])}")
        for key, value in launcher_config["env_defaults"].items():
            print(f"  default {key}={value}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser"""
    parser = argparse.ArgumentParser(
        prog="hostprep",
        description="hostprep - install system build dependencies and launch the release build",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s install                  # Install compiler, pkg-config and OpenSSL headers
  %(prog)s install --dry-run        # Show the install commands without running them
  %(prog)s check                    # Verify the C compiler is available
  %(prog)s run                      # Build and run the service in release mode
  %(prog)s info                     # Show host information
        """
    )

    parser.add_argument(
        "command",
        choices=["install", "check", "run", "info"],
        help="Command to execute"
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory with package_managers.yaml and launcher.yaml"
    )

    parser.add_argument(
        "--project-dir",
        type=Path,
        help="Directory to launch the build tool from (run command)"
    )

    parser.add_argument(
        "--log-file",
        help="Also write a debug log to this file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log commands without running them"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface"""
    args = build_parser().parse_args(argv)

    try:
        hp = HostPrep(
            config_dir=args.config_dir,
            project_dir=args.project_dir,
            verbose=args.verbose,
            dry_run=args.dry_run,
            log_file=args.log_file
        )
    except Exception as e:
        print(f"Error initializing hostprep: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "install":
            hp.install()
        elif args.command == "check":
            hp.check()
        elif args.command == "run":
            hp.run()
        elif args.command == "info":
            hp.show_info()
        return 0

    except HostPrepError as e:
        print(e.message, file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"hostprep error: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return 1


def install_main() -> int:
    """Entry point equivalent to `hostprep install`; takes no arguments"""
    return main(["install"])


def run_main(project_dir: Optional[Path] = None) -> int:
    """Entry point equivalent to `hostprep run`; takes no arguments beyond the pinned directory"""
    argv = ["run"]
    if project_dir is not None:
        argv += ["--project-dir", str(project_dir)]
    return main(argv)


if __name__ == "__main__":
    sys.exit(main())
