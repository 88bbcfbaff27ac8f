from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from disk, the environment or
the command line. Invalid values either raise (strict mode) or fall back to
defaults with a warning.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from near_socialdb.domain.config import get_default_config
from near_socialdb.domain.constants import NETWORKS

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a client configuration.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of coercing them.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return get_default_config(), warnings

    network = config.get("network")
    if not isinstance(network, str) or network not in NETWORKS:
        msg = f"Unknown network '{network}': expected one of {sorted(NETWORKS)}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        network = None

    defaults = get_default_config(network) if network else get_default_config()
    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)
    merged["network"] = defaults["network"]

    for field in ("contract_name", "rpc_url"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["account_id"] = _as_optional_str(merged.get("account_id"), "account_id", warnings, strict)
    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)
    merged["timeout"] = _as_positive_number(
        merged.get("timeout"), defaults["timeout"], "timeout", warnings, strict
    )

    level = _as_str(merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict)
    if level.upper() not in _LOG_LEVELS:
        msg = f"Invalid field 'log_level': unknown level '{level}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        level = defaults["log_level"]
    merged["log_level"] = level.upper()

    if not merged["rpc_url"].startswith(("http://", "https://")):
        msg = f"Invalid field 'rpc_url': '{merged['rpc_url']}' is not an HTTP(S) URL."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["rpc_url"] = defaults["rpc_url"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignoring.")
    return None


def _as_positive_number(
        value: Any,
        fallback: float,
        field: str,
        warnings: List[str],
        strict: bool,
) -> float:
    if value is None:
        return fallback
    if isinstance(value, bool):
        number = None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = None

    if number is not None and number > 0:
        return int(number) if number.is_integer() else number

    msg = f"Invalid field '{field}': expected a positive number, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
