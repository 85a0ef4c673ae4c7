"""Shared utility functions."""
import os
from pathlib import Path


def get_project_root() -> Path:
    """
    Get the package root directory.

    Returns:
        Path to the installed schemagraph package
    """
    return Path(__file__).parent


def get_metamodel_path(filename: str = None) -> Path:
    """
    Get path to the bundled metamodel directory or file.

    Args:
        filename: Optional metamodel filename

    Returns:
        Path to metamodel directory or specific metamodel file
    """
    metamodel_dir = get_project_root() / "metamodel"
    if filename:
        return metamodel_dir / filename
    return metamodel_dir


class Config:
    """Configuration constants."""

    # Metamodel
    METAMODEL_DIR = os.getenv("SCHEMAGRAPH_METAMODEL_DIR", str(get_metamodel_path()))

    # Logging
    LOG_LEVEL = os.getenv("SCHEMAGRAPH_LOG_LEVEL", "WARNING").upper()
