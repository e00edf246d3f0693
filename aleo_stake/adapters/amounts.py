"""
Stake amount parsing

The explorer reports stake in several encodings ("microcredits: 123",
"123u64", "123", 123). Everything is normalized to an exact int of
microcredits; anything unreadable counts as zero.
"""

import math
import re
from typing import Any

from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)

ALEO_DECIMALS = 6

_DIGITS = re.compile(r"(\d+)", re.ASCII)


def parse_micros(raw: Any) -> int:
    """
    Convert a raw stake value to microcredits.

    Strings yield their first run of digits, so "12.5" reads as 12.
    Non-integral floats are truncated toward zero. Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return 0

    if isinstance(raw, int):
        if raw < 0:
            logger.warning(f"Negative stake amount {raw} treated as 0")
            return 0
        return raw

    if isinstance(raw, float):
        if not math.isfinite(raw) or raw < 0:
            return 0
        if not raw.is_integer():
            logger.debug(f"Fractional stake amount {raw} truncated")
        return int(raw)

    match = _DIGITS.search(str(raw))
    return int(match.group(1)) if match else 0

