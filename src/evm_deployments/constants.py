"""Configuration constants for evm-deployments library."""

# Network configuration based on ethereum-lists/chains
# Hardhat network names map to chain metadata and the env var holding the RPC URL.
# zkSync Era networks only accept EIP-712 (type 0x71) deployment transactions.
NETWORK_CONFIG = {
    "mainnet": {
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "block_explorer_url": "https://etherscan.io",
        "default_rpc_env": "ETH_RPC_URL",
        "zksync": False,
    },
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "block_explorer_url": "https://sepolia.etherscan.io",
        "default_rpc_env": "SEP_RPC_URL",
        "zksync": False,
    },
    "gnosis": {
        "chain_id": 100,
        "chain_name": "Gnosis Chain",
        "block_explorer_url": "https://gnosisscan.io",
        "default_rpc_env": "GNO_RPC_URL",
        "zksync": False,
    },
    "zkSyncMainnet": {
        "chain_id": 324,
        "chain_name": "zkSync Era Mainnet",
        "block_explorer_url": "https://explorer.zksync.io",
        "default_rpc_env": "ZKSYNC_RPC_URL",
        "zksync": True,
    },
    "zkSyncSepoliaTestnet": {
        "chain_id": 300,
        "chain_name": "zkSync Era Sepolia Testnet",
        "block_explorer_url": "https://sepolia.explorer.zksync.io",
        "default_rpc_env": "ZKSYNC_SEPOLIA_RPC_URL",
        "zksync": True,
    },
    "localhost": {
        "chain_id": 31337,
        "chain_name": "Hardhat Local",
        "block_explorer_url": None,
        "default_rpc_env": "LOCAL_RPC_URL",
        "zksync": False,
    },
}

# Prefix for per-network environment variables, e.g. EVM_DEPLOY_SEPOLIA_OWNER
ENV_PREFIX = "EVM_DEPLOY_"

VERIFY_COMMAND_PREFIX = "npx hardhat verify"

# Receipt polling defaults (seconds)
DEFAULT_POLL_INTERVAL = 2.0
DEFAULT_CONFIRMATION_TIMEOUT = 300.0
DEFAULT_RPC_TIMEOUT = 30

# Hardhat "_format" of artifacts compiled by zksolc
ZKSOLC_ARTIFACT_PREFIX = "hh-zksolc-artifact"
