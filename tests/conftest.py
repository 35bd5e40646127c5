"""Shared pytest fixtures for rwa-deployments tests."""

from pathlib import Path
from typing import Dict

import pytest

from rwa_deployments.builder import ModuleBuilder
from rwa_deployments.config import load_network_profile
from rwa_deployments.types import NetworkProfile

SAMPLE_KEY = "infura-test-key"
SAMPLE_PRIVATE_KEY = "0x" + "ab" * 32
SAMPLE_EXPLORER_KEY = "etherscan-test-key"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def modules_dir(fixtures_dir: Path) -> Path:
    """Return the directory of sample module descriptors."""
    return fixtures_dir / "modules"


@pytest.fixture
def cyclic_modules_dir(fixtures_dir: Path) -> Path:
    """Return a directory whose descriptors reference each other."""
    return fixtures_dir / "cyclic"


@pytest.fixture
def sample_env() -> Dict[str, str]:
    """Return a complete configuration environment."""
    return {
        "KEY": SAMPLE_KEY,
        "PRIVATE_KEY": SAMPLE_PRIVATE_KEY,
        "ETHERSCAN_API_KEY": SAMPLE_EXPLORER_KEY,
    }


@pytest.fixture
def sepolia(sample_env: Dict[str, str]) -> NetworkProfile:
    """Return the sepolia profile built from sample_env."""
    return load_network_profile("sepolia", sample_env)


@pytest.fixture
def builder() -> ModuleBuilder:
    """Return an empty module builder."""
    return ModuleBuilder()


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    """Unset configuration variables and chdir to an empty directory."""
    for var in ("KEY", "PRIVATE_KEY", "ETHERSCAN_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
