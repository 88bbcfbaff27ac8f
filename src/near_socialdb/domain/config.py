from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent client configuration stored as JSON in the user data
directory: network preset, contract account, RPC endpoint and signer account.
Environment variables override the stored values.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from near_socialdb.domain.constants import DEFAULT_NETWORK, NETWORKS
from near_socialdb.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

ENV_OVERRIDES: Dict[str, str] = {
    "NEAR_SOCIALDB_NETWORK": "network",
    "NEAR_SOCIALDB_RPC_URL": "rpc_url",
    "NEAR_SOCIALDB_CONTRACT": "contract_name",
    "NEAR_SOCIALDB_ACCOUNT_ID": "account_id",
}


def get_default_config(network: str = DEFAULT_NETWORK) -> Dict[str, Any]:
    """
    Generate the default client configuration for a network preset.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    if not isinstance(network, str) or network not in NETWORKS:
        network = DEFAULT_NETWORK
    preset = NETWORKS[network]
    return {
        "network": network,
        "contract_name": preset["contract_name"],
        "rpc_url": preset["rpc_url"],
        "account_id": None,
        "timeout": 10,
        "log_level": "INFO",
        "log_file": None,
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None, *, use_env: bool = True) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over network defaults.

    A missing or corrupted file falls back to defaults. Switching the
    network re-derives the contract and RPC defaults unless the file
    sets them explicitly.

    Args:
        path: Config file location, defaults to the user data directory.
        use_env: Apply NEAR_SOCIALDB_* environment overrides.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config_path = path or get_config_path()
    stored: Dict[str, Any] = {}

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                stored = data
            else:
                logger.warning("Corrupted config file. Using defaults.")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config: {e}. Using defaults.")
    else:
        logger.debug(f"Config file not found at {config_path}. Using defaults.")

    if use_env:
        for env_name, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                stored[key] = value

    config = get_default_config(stored.get("network", DEFAULT_NETWORK))
    config.update({k: v for k, v in stored.items() if v is not None})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """Persist the configuration as JSON."""
    config_path = path or get_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
