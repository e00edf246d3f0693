from .stake import CommitteeEntry, BondedRow, StakeReport

__all__ = ["CommitteeEntry", "BondedRow", "StakeReport"]
