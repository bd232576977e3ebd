"""
Setup script for mmsparse

This setup.py is primarily for compatibility. The main configuration is in pyproject.toml.
It only supplies the version, read from src/mmsparse/__init__.py so the
package keeps a single source of truth.
"""

from pathlib import Path
from setuptools import setup


# Read version from src/mmsparse/__init__.py
def get_version():
    version_file = Path("src/mmsparse/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Configuration is primarily in pyproject.toml
setup(
    version=get_version(),
    zip_safe=True,
)
