"""
Aleo native stake adapter

Fetches the current validator committee from the Aleo block explorer,
sums its stake (falling back to bonded history at the latest height)
and reports the total to a TVL accumulator.
"""

from .adapters.staking import staking, tvl, compute_total_stake, AleoStakeFetcher
from .core.exceptions import CommitteeUnavailable, StakeAdapterError

methodology = (
    "Fetches current committee and sums bonded ALEO (microcredits). "
    "Falls back to latest bonded-by-validator filtered to committee addresses."
)

aleo = {"tvl": tvl, "staking": staking}

__all__ = [
    "methodology",
    "aleo",
    "staking",
    "tvl",
    "compute_total_stake",
    "AleoStakeFetcher",
    "CommitteeUnavailable",
    "StakeAdapterError",
]
