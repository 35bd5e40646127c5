"""Path management utilities for rwa-deployments library."""

from pathlib import Path
from typing import Optional, Union

from .constants import DEPLOYMENTS_DIR, MODULES_DIR


def get_default_modules_dir() -> Path:
    """
    Get default module descriptor directory.

    Returns:
        Path to ./ignition/modules
    """
    return Path.cwd() / MODULES_DIR


def get_plan_path(network: str, root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the rendered plan path for a network.

    Args:
        network: Network name
        root: Project root (defaults to current directory)

    Returns:
        Path to <root>/ignition/deployments/<network>/plan.json
    """
    if root is None:
        root = Path.cwd()
    else:
        root = Path(root).absolute()

    return root / DEPLOYMENTS_DIR / network / "plan.json"
