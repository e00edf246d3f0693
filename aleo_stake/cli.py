"""
Aleo Stake CLI

Usage:
    # Total stake on mainnet with the configured explorer
    python -m aleo_stake

    # Another network / explorer root
    python -m aleo_stake --network testnet --api-root https://api.explorer.provable.com/v1

    # Machine-readable output
    python -m aleo_stake --json
"""

import argparse
import json
import sys
from typing import List, Optional

import httpx

from aleo_stake.adapters.staking import compute_total_stake_sync, get_staking_summary_text
from aleo_stake.core.config import get_config
from aleo_stake.core.exceptions import StakeAdapterError
from aleo_stake.utils.logger import LOG_LEVELS, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aleo-stake",
        description="Compute the total stake of the current Aleo validator committee"
    )
    parser.add_argument("--api-root", help="Explorer API root (default: NEXT_PUBLIC_API_ROOT or config)")
    parser.add_argument("--network", help="Network name (default: ALEO_NETWORK or mainnet)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="Log level (default: LOG_LEVEL or config)"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    logger = setup_logger(
        "aleo_stake",
        log_level=args.log_level or config.log_level,
        log_file=config.get("logging.file") or None
    )

    try:
        result = compute_total_stake_sync(config=config, api_root=args.api_root, network=args.network)
    except (StakeAdapterError, httpx.HTTPError, ValueError) as e:
        logger.error(f"Stake computation failed: {e}")
        return 1

    network = args.network or config.network
    if args.json:
        payload = result.model_dump()
        payload["total_credits"] = str(result.total_credits)
        payload["network"] = network
        print(json.dumps(payload))
    else:
        print(get_staking_summary_text(result, network=network))

    return 0


if __name__ == "__main__":
    sys.exit(main())
