"""
Stake Models

Pydantic models for committee entries and computed stake totals.
All amounts are microcredits held as Python ints.
"""

from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field

MICROCREDITS_PER_CREDIT = 10**6


class CommitteeEntry(BaseModel):
    """One validator of the current committee"""
    address: str = Field(min_length=1)
    stake_micro: int = Field(default=0, ge=0)


class BondedRow(BaseModel):
    """A (validator, bonded amount) row from the bonded history endpoint"""
    address: str
    raw_amount: Any = None


class StakeReport(BaseModel):
    """
    Result of one stake computation

    source is "committee" when the committee carried stake values,
    "bonded" when the bonded-history fallback produced the total.
    """
    total_micro: int = Field(ge=0)
    source: str
    validator_count: int = 0
    height: Optional[int] = None

    @property
    def total_credits(self) -> Decimal:
        whole, frac = divmod(self.total_micro, MICROCREDITS_PER_CREDIT)
        return Decimal(f"{whole}.{frac:06d}")
