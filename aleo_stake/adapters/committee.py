"""
Committee response normalization

The committee endpoint has served several shapes over time:
- a list of [address, stakeLike] pairs
- a list (or a "committee" field) of objects with address/stake keys
- a list of bare address strings
- an object whose "members" field maps address -> [stakeLike, ...]

Each row is classified, then turned into a CommitteeEntry.
"""

from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from aleo_stake.adapters.amounts import parse_micros
from aleo_stake.models.stake import BondedRow, CommitteeEntry
from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)

ADDRESS_KEYS = ("address", "validator", "owner", "0")
STAKE_KEYS = ("stake", "power", "bonded", "1")


class RowShape(Enum):
    PAIR = "pair"
    OBJECT = "object"
    STRING = "string"
    UNRECOGNIZED = "unrecognized"


def classify_row(row: Any) -> RowShape:
    if isinstance(row, (list, tuple)):
        return RowShape.PAIR
    if isinstance(row, Mapping):
        return RowShape.OBJECT
    if isinstance(row, str):
        return RowShape.STRING
    return RowShape.UNRECOGNIZED


def extract_rows(data: Any) -> List[Any]:
    """Pull the list of committee rows out of a response body."""
    if isinstance(data, list):
        return data

    if isinstance(data, Mapping):
        committee = data.get("committee")
        if isinstance(committee, list):
            return committee

        members = data.get("members")
        if isinstance(members, Mapping):
            rows = []
            for address, value in members.items():
                # {address: [stake, is_open, commission]} or {address: stake}
                stake_like = value[0] if isinstance(value, (list, tuple)) and value else value
                rows.append([address, stake_like])
            return rows

    return []


def _first_address(row: Mapping) -> Any:
    for key in ADDRESS_KEYS:
        if row.get(key):
            return row[key]
    return None


def _first_stake(row: Mapping) -> Any:
    # 0 is a real stake value, only missing/null keys fall through
    for key in STAKE_KEYS:
        if row.get(key) is not None:
            return row[key]
    return None


def _row_to_pair(row: Any) -> Optional[Tuple[Any, Any]]:
    shape = classify_row(row)

    if shape is RowShape.PAIR:
        if not row:
            return None
        address = row[0]
        stake_like = row[1] if len(row) > 1 else None
        return address, stake_like

    if shape is RowShape.OBJECT:
        return _first_address(row), _first_stake(row)

    if shape is RowShape.STRING:
        return row, None

    return None


def normalize_committee(data: Any) -> List[CommitteeEntry]:
    """
    Normalize a committee response into unique CommitteeEntry items.

    Entries without a usable address and unrecognized rows are dropped.
    When an address repeats, the first occurrence wins.
    """
    committee: List[CommitteeEntry] = []
    seen = set()
    dropped = 0

    for row in extract_rows(data):
        pair = _row_to_pair(row)
        if pair is None:
            dropped += 1
            continue

        address, stake_like = pair
        if not address or not isinstance(address, str):
            dropped += 1
            continue
        if address in seen:
            continue

        seen.add(address)
        committee.append(CommitteeEntry(address=address, stake_micro=parse_micros(stake_like)))

    if dropped:
        logger.debug(f"Dropped {dropped} unusable committee rows")

    return committee


def parse_bonded_rows(rows: Any) -> List[BondedRow]:
    """
    Read BondedRow items from a bonded-history response.

    The payload must be a list of [address, amount] pairs; individual
    malformed rows are skipped.

    Raises:
        ValueError: when the payload is not a list (e.g. an error object)
    """
    if not isinstance(rows, list):
        raise ValueError(f"Unexpected bonded rows payload: {rows!r}")

    bonded: List[BondedRow] = []
    for pair in rows:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2 or not isinstance(pair[0], str):
            continue
        bonded.append(BondedRow(address=pair[0], raw_amount=pair[1]))
    return bonded
