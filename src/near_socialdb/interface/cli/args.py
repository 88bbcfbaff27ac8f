from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global connection options plus the `get`,
`keys` and `plan` subcommands) and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from near_socialdb.domain.constants import NETWORKS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the near-socialdb CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="near-socialdb",
        description="Read SocialDB data and preview the cost of writes.",
    )

    # --- Connection ---
    p.add_argument(
        "--network",
        choices=sorted(NETWORKS),
        default=None,
        help="Network preset providing the default contract and RPC node.",
    )
    p.add_argument("--rpc-url", dest="rpc_url", default=None, help="RPC node endpoint.")
    p.add_argument("--contract", dest="contract_name", default=None, help="SocialDB contract account.")
    p.add_argument("--account-id", dest="account_id", default=None, help="Account acting as the signer.")
    p.add_argument("--timeout", type=float, default=None, help="RPC timeout in seconds.")

    # --- Configuration and Diagnostics ---
    p.add_argument("--config", dest="config_path", default=None, help="Path to a JSON config file.")
    p.add_argument("--use-defaults", action="store_true", help="Ignore the stored config file.")
    p.add_argument("--dump-config", action="store_true", help="Print the effective config and exit.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")

    sub = p.add_subparsers(dest="command")

    get_cmd = sub.add_parser("get", help="Fetch data under key patterns.")
    get_cmd.add_argument("keys", nargs="+", help="Key patterns such as 'alice.near/profile/**'.")

    keys_cmd = sub.add_parser("keys", help="List existing paths under key patterns.")
    keys_cmd.add_argument("keys", nargs="+", help="Key patterns such as 'alice.near/profile/*'.")
    keys_cmd.add_argument("--json", dest="json_output", action="store_true", help="Print a JSON array.")

    plan_cmd = sub.add_parser("plan", help="Diff a write request and compute its deposit.")
    plan_cmd.add_argument("data_file", help="JSON file with the write request ('-' for stdin).")

    return p


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map parsed arguments onto configuration keys.

    Returns:
        Dict[str, Any]: Overrides, with None for options not given.
    """
    return {
        "network": args.network,
        "rpc_url": args.rpc_url,
        "contract_name": args.contract_name,
        "account_id": args.account_id,
        "timeout": args.timeout,
        "log_file": args.log_file,
        "log_level": "DEBUG" if args.debug else None,
    }
