from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, stored file, environment, flags),
construction of the RPC-backed client and rendering of command results.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from near_socialdb.client import SocialDb
from near_socialdb.core.config_validator import validate_config
from near_socialdb.domain.config import get_default_config, load_config
from near_socialdb.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    SocialDbError,
    ValidationError,
)
from near_socialdb.infra.logging import LoggingConfig, configure_logging, get_logger
from near_socialdb.infra.network import JsonRpcClient, RpcSigner
from near_socialdb.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# Keys that follow the network preset unless set explicitly
_NETWORK_BOUND_KEYS = ("contract_name", "rpc_url")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    overrides = cli_args.args_to_overrides(args)

    # 1. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, overrides)
    conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf.get("log_file"),
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Using contract '{conf['contract_name']}' via {conf['rpc_url']}")
    db = build_client(conf)

    # 3. Command dispatch
    try:
        if args.command == "get":
            _print_json(db.get(args.keys))
        elif args.command == "keys":
            paths = db.keys(args.keys)
            if args.json_output:
                _print_json(paths)
            else:
                for path in paths:
                    print(path)
        elif args.command == "plan":
            try:
                data = _load_request(args.data_file)
            except (OSError, ValueError) as e:
                logger.error(f"Cannot read write request: {e}")
                return EXIT_USAGE
            plan = db.prepare_set(data)
            if plan.is_noop:
                logger.info("Nothing to update.")
            _print_json(plan.summary())
    except (ValidationError, AuthenticationError, AuthorizationError) as e:
        logger.error(str(e))
        return EXIT_USAGE
    except SocialDbError as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    return EXIT_OK


def build_client(conf: Dict[str, Any]) -> SocialDb:
    """Assemble a SocialDb backed by the configured RPC node."""
    rpc = JsonRpcClient(conf["rpc_url"], timeout=conf["timeout"])
    signer = RpcSigner(rpc, account_id=conf.get("account_id"))
    return SocialDb(signer, conf["contract_name"])


# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge non-null overrides into the base configuration.

    Selecting another network resets the contract and RPC endpoint to that
    network's preset before explicit overrides apply.
    """
    out = dict(base)
    network = overrides.get("network")
    if network and network != base.get("network"):
        preset = get_default_config(network)
        for key in _NETWORK_BOUND_KEYS:
            out[key] = preset[key]

    for key, value in overrides.items():
        if value is not None:
            out[key] = value
    return out


# -----------------------------------------------------------------------------
# I/O HELPERS
# -----------------------------------------------------------------------------

def _load_request(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print_json(value: Any) -> None:
    print(json.dumps(value, ensure_ascii=False, indent=2))
