"""
setup.py for hostprep

Runtime Requirements:
- One of apt-get, dnf or pacman on PATH for `hostprep install`
- sudo when not running as root
- cargo for `hostprep run`

Configuration:
- Package manager commands live in hostprep/config/package_managers.yaml
- Launcher command and environment defaults live in hostprep/config/launcher.yaml
- Point HOSTPREP_CONFIG_DIR at a directory holding both files to override them
- Set HOSTPREP_PROJECT_DIR to choose where `hostprep run` starts the build tool
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="hostprep",
    version="1.0.0",
    description="Installs system build dependencies and launches the release build",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["hostprep", "hostprep.*"]),
    package_data={
        "hostprep": [
            "config/*.yaml",
        ]
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "hostprep=hostprep.main:main",
            "hostprep-install=hostprep.main:install_main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
    ],
)
