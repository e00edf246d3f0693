"""
Aleo Native Stake Fetcher

Computes the total stake of the current Aleo validator committee from the
block explorer API:
1) Fetch the current committee.
2) If the committee carries stake values, sum them.
3) Otherwise fetch bonded rows at the latest height and sum only
   committee addresses.

ENV (optional):
    NEXT_PUBLIC_API_ROOT: defaults to https://api.explorer.provable.com/v1
    ALEO_NETWORK:         defaults to mainnet
"""

import asyncio
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional

from aleo_stake.adapters.amounts import parse_micros
from aleo_stake.adapters.committee import normalize_committee, parse_bonded_rows
from aleo_stake.adapters.reporting import as_sink, report
from aleo_stake.core.config import Config, get_config
from aleo_stake.core.exceptions import CommitteeUnavailable
from aleo_stake.core.http import ExplorerHTTP
from aleo_stake.models.stake import CommitteeEntry, StakeReport
from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)

GetJSON = Callable[[str], Awaitable[Any]]

SOURCE_COMMITTEE = "committee"
SOURCE_BONDED = "bonded"


def to_height(resp: Any) -> int:
    """Read a block height from a bare value or a {"height": ...} object."""
    if isinstance(resp, dict) and "height" in resp:
        resp = resp["height"]
    try:
        return int(resp)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Unreadable height response: {resp!r}") from e


class AleoStakeFetcher:
    """
    Fetches committee and bonded data for one network.

    Args:
        get: async callable returning decoded JSON for a URL
        config: Config instance (default: global config)
        api_root: override for the explorer root
        network: override for the network name
    """

    def __init__(
        self,
        get: GetJSON,
        config: Optional[Config] = None,
        api_root: Optional[str] = None,
        network: Optional[str] = None
    ):
        config = config or get_config()
        self.get = get
        self.api_root = (api_root or config.api_root).rstrip("/")
        self.network = network or config.network

    def url(self, path: str) -> str:
        return f"{self.api_root}/{self.network}/{path}"

    @property
    def committee_urls(self) -> List[str]:
        return [self.url("latest/committee"), self.url("committee")]

    async def fetch_committee(self) -> List[CommitteeEntry]:
        """
        Fetch and normalize the current committee.

        Candidates are tried in order; a failing or empty candidate moves on
        to the next one.

        Raises:
            CommitteeUnavailable: when no candidate yields a usable committee
        """
        last_error: Optional[Exception] = None

        for url in self.committee_urls:
            try:
                data = await self.get(url)
            except Exception as e:
                # any getter failure moves on to the next candidate
                logger.warning(f"Committee fetch failed for {url}: {e}")
                last_error = e
                continue

            if not data:
                logger.warning(f"Empty committee response from {url}")
                continue

            committee = normalize_committee(data)
            if committee:
                logger.info(f"Fetched {len(committee)} committee members from {url}")
                return committee

            logger.warning(f"No usable committee rows in response from {url}")

        raise CommitteeUnavailable(self.committee_urls, last_error)

    async def latest_height(self) -> int:
        return to_height(await self.get(self.url("latest/height")))

    async def bonded_at_height(self, height: int) -> Any:
        """Raw bonded rows at a height, e.g. [[validator, "microcredits: 1"], ...]"""
        return await self.get(self.url(f"block/{height}/history/bonded"))

    async def compute_total_stake(self) -> StakeReport:
        committee = await self.fetch_committee()

        # Committee stake values are preferred when present
        total_micro = sum(entry.stake_micro for entry in committee)
        if total_micro:
            return StakeReport(
                total_micro=total_micro,
                source=SOURCE_COMMITTEE,
                validator_count=len(committee)
            )

        logger.info("Committee carries no stake values, falling back to bonded history")
        height = await self.latest_height()
        rows = await self.bonded_at_height(height)

        allow = {entry.address for entry in committee}
        total_micro = sum(
            parse_micros(row.raw_amount)
            for row in parse_bonded_rows(rows)
            if row.address in allow
        )

        return StakeReport(
            total_micro=total_micro,
            source=SOURCE_BONDED,
            validator_count=len(committee),
            height=height
        )


async def compute_total_stake(
    get: Optional[GetJSON] = None,
    config: Optional[Config] = None,
    api_root: Optional[str] = None,
    network: Optional[str] = None
) -> StakeReport:
    """
    Compute the committee's total stake.

    Uses a fresh ExplorerHTTP client unless a get callable is supplied.
    """
    if get is not None:
        return await AleoStakeFetcher(get, config, api_root, network).compute_total_stake()

    config = config or get_config()
    async with ExplorerHTTP(timeout=config.http_timeout) as http:
        return await AleoStakeFetcher(http.get, config, api_root, network).compute_total_stake()


def compute_total_stake_sync(
    config: Optional[Config] = None,
    api_root: Optional[str] = None,
    network: Optional[str] = None
) -> StakeReport:
    """Synchronous wrapper for compute_total_stake."""
    return asyncio.run(compute_total_stake(config=config, api_root=api_root, network=network))


async def staking(
    api: Any,
    get: Optional[GetJSON] = None,
    config: Optional[Config] = None,
    api_root: Optional[str] = None,
    network: Optional[str] = None
) -> StakeReport:
    """
    Compute the total stake and report it to a TVL accumulator.

    Args:
        api: accumulator exposing addCGToken, addGasToken or add
        get: optional async JSON getter (default: ExplorerHTTP)
        config: Config instance (default: global config)
        api_root: override for the explorer root
        network: override for the network name

    Returns:
        The computed StakeReport
    """
    sink = as_sink(api)
    result = await compute_total_stake(get, config, api_root, network)
    report(result.total_micro, sink)
    logger.info(
        f"Total stake {result.total_micro} microcredits "
        f"from {result.validator_count} validators ({result.source})"
    )
    return result


# Staking doubles as the core TVL figure
tvl = staking


def get_staking_summary_text(
    stake_report: StakeReport,
    network: Optional[str] = None,
    reference_date: Optional[datetime] = None
) -> str:
    """
    Generate a summary sentence for a stake report.

    Example output:
        "As of January 15, 2026, 1,234,567.000000 ALEO is staked across
        16 mainnet validators (committee)."
    """
    network = network or get_config().network
    date_str = (reference_date or datetime.now()).strftime("%B %d, %Y")
    formatted_amount = f"{stake_report.total_credits:,.6f}"

    text = (
        f"As of {date_str}, {formatted_amount} ALEO is staked across "
        f"{stake_report.validator_count} {network} validators ({stake_report.source}"
    )
    if stake_report.height is not None:
        text += f" at height {stake_report.height}"
    return text + ")."
