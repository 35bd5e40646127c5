"""Environment and network configuration for rwa-deployments library."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    CONTRACT_SOURCES_DIR,
    ENV_API_KEY,
    ENV_EXPLORER_API_KEY,
    ENV_PRIVATE_KEY,
    MODULES_DIR,
    NETWORK_CONFIG,
    SOLIDITY_VERSION,
)
from .exceptions import ConfigFileNotFoundError, MissingConfigurationError, UnknownNetworkError
from .types import NetworkProfile


@dataclass(frozen=True)
class ProjectConfig:
    """Compiler and layout settings for the contracts project."""

    solidity_version: str = SOLIDITY_VERSION
    sources_dir: str = CONTRACT_SOURCES_DIR
    modules_dir: str = MODULES_DIR


def load_environment(
    dotenv_path: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Take a snapshot of configuration variables.

    Values from the .env file are overridden by the real environment.
    os.environ itself is left untouched.

    Args:
        dotenv_path: Path to .env file (defaults to ./.env, which may be absent)
        environ: Environment to read (defaults to os.environ)

    Returns:
        Merged variable mapping

    Raises:
        ConfigFileNotFoundError: If dotenv_path is given but does not exist
    """
    if dotenv_path is None:
        dotenv_path = Path.cwd() / ".env"
    elif not Path(dotenv_path).is_file():
        raise ConfigFileNotFoundError(f"Environment file not found at {dotenv_path}")
    if environ is None:
        environ = os.environ

    env: Dict[str, str] = {}
    if Path(dotenv_path).exists():
        env.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
    env.update(environ)
    return env


def available_networks() -> List[str]:
    return list(NETWORK_CONFIG.keys())


def load_network_profile(
    name: str,
    env: Mapping[str, str],
    require_explorer_key: bool = False,
) -> NetworkProfile:
    """
    Build the profile for a named network.

    Args:
        name: Network name ("sepolia" or "mainnet")
        env: Variables from load_environment()
        require_explorer_key: Also require $ETHERSCAN_API_KEY

    Returns:
        Immutable NetworkProfile

    Raises:
        UnknownNetworkError: If name is not a configured network
        MissingConfigurationError: If required variables are unset or empty
    """
    if name not in NETWORK_CONFIG:
        raise UnknownNetworkError(
            f"Unknown network '{name}'. Available: {', '.join(available_networks())}"
        )

    required = [ENV_API_KEY, ENV_PRIVATE_KEY]
    if require_explorer_key:
        required.append(ENV_EXPLORER_API_KEY)

    missing = [var for var in required if not env.get(var)]
    if missing:
        raise MissingConfigurationError(missing)

    network_config = NETWORK_CONFIG[name]
    return NetworkProfile(
        name=name,
        chain_id=network_config["chain_id"],
        url=network_config["url_template"].format(key=env[ENV_API_KEY]),
        account=env[ENV_PRIVATE_KEY],
        explorer_api_key=env.get(ENV_EXPLORER_API_KEY) or None,
        block_explorer_url=network_config["block_explorer_url"],
        chain_name=network_config["chain_name"],
    )
