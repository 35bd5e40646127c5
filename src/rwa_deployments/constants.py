"""Configuration constants for rwa-deployments library."""

# Compiler settings for the contracts under ./contracts
SOLIDITY_VERSION = "0.8.26"
CONTRACT_SOURCES_DIR = "contracts"
MODULES_DIR = "ignition/modules"
DEPLOYMENTS_DIR = "ignition/deployments"

# Environment variables read at startup
ENV_API_KEY = "KEY"
ENV_PRIVATE_KEY = "PRIVATE_KEY"
ENV_EXPLORER_API_KEY = "ETHERSCAN_API_KEY"

# Network profiles, keyed by the name passed on the command line.
# url_template is formatted with the value of $KEY.
NETWORK_CONFIG = {
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "url_template": "https://sepolia.infura.io/v3/{key}",
        "block_explorer_url": "https://sepolia.etherscan.io",
    },
    "mainnet": {
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "url_template": "https://mainnet.infura.io/v3/{key}",
        "block_explorer_url": "https://etherscan.io",
    },
}

# Pre-deployed contracts the sale modules are wired to
KYC_ADDRESS = "0x2Ff598aaAb89aa39dfe597a9546a4d9B9F6a8B99"
USDT_ADDRESS = "0xB9A0B25B041B950686b78B68E7156B8f38141F80"
SALE_ESCROW_ADDRESS = "0x220878008d3eb7c94Afda696d2057462df66fdd8"

# Output name for a module that does not declare one
DEFAULT_OUTPUT = "address"
