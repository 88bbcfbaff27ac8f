from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the storage accounting constants of the
SocialDB contract, the fixed contract method names, gas allowances and
network presets. All currency amounts are integers in yoctoNEAR.
"""

from typing import Dict

KEY_DELIMITER = "/"

# -----------------------------------------------------------------------------
# CONTRACT METHODS
# -----------------------------------------------------------------------------
METHOD_GET = "get"
METHOD_KEYS = "keys"
METHOD_SET = "set"
METHOD_GET_ACCOUNT_STORAGE = "get_account_storage"

# -----------------------------------------------------------------------------
# STORAGE ESTIMATION
# -----------------------------------------------------------------------------
# Internal trie bookkeeping of the contract per key/value slot and per node
ESTIMATED_KEY_VALUE_SIZE = 40 * 3 + 8 + 12
ESTIMATED_NODE_SIZE = 40 * 2 + 8 + 10

# Fallback size for leaves without a length (numbers, booleans, null)
MIN_SCALAR_SIZE = 8

# -----------------------------------------------------------------------------
# CURRENCY & GAS
# -----------------------------------------------------------------------------
TGAS = 10 ** 12
SET_GAS = TGAS * 300

STORAGE_COST_PER_BYTE = 10 ** 19

MIN_STORAGE_BALANCE = STORAGE_COST_PER_BYTE * 2000
INITIAL_ACCOUNT_STORAGE_BALANCE = STORAGE_COST_PER_BYTE * 500
EXTRA_STORAGE_BALANCE = STORAGE_COST_PER_BYTE * 500

# 0.05 NEAR, avoids a wallet confirmation on the next few writes
EXTRA_STORAGE_FOR_SESSION = 10 ** 22 * 5

# -----------------------------------------------------------------------------
# NETWORK PRESETS
# -----------------------------------------------------------------------------
DEFAULT_NETWORK = "mainnet"

NETWORKS: Dict[str, Dict[str, str]] = {
    "mainnet": {
        "contract_name": "social.near",
        "rpc_url": "https://rpc.mainnet.near.org",
    },
    "testnet": {
        "contract_name": "v1.social08.testnet",
        "rpc_url": "https://rpc.testnet.near.org",
    },
}
