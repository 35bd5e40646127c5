"""Endpoint preflight checks for rwa-deployments library."""

import logging

import requests

from .exceptions import NetworkMismatchError
from .types import NetworkProfile

logger = logging.getLogger(__name__)


def get_chain_id(rpc_url: str) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain id reported by eth_chainId

    Raises:
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={"jsonrpc": "2.0", "method": "eth_chainId", "params": [], "id": 1},
            timeout=30,
        )

        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"], 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def verify_network(profile: NetworkProfile) -> None:
    """
    Check that a profile's endpoint serves the profile's chain.

    Raises:
        NetworkMismatchError: If the endpoint reports another chain id
    """
    chain_id = get_chain_id(profile.url)
    if chain_id != profile.chain_id:
        raise NetworkMismatchError(
            f"Endpoint for network '{profile.name}' serves chain {chain_id}, "
            f"expected {profile.chain_id}"
        )
    logger.info("Endpoint for %s serves chain %d", profile.name, chain_id)
