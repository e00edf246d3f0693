"""
Reporting sinks

A TVL accumulator can take the total in one of three ways:
- PreScaledTokenSink: add_cg_token(symbol, microcredits)
- GasTokenSink: add_gas_token(symbol, microcredits, {"decimals": 6})
- GenericAmountSink: add(identifier, credits_as_float)

report() dispatches on the sink type. as_sink() wraps a duck-typed
accumulator object into the first variant it supports.
"""

from dataclasses import dataclass
from typing import Any, Callable, Union

from aleo_stake.adapters.amounts import ALEO_DECIMALS
from aleo_stake.models.stake import MICROCREDITS_PER_CREDIT
from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)

TOKEN_SYMBOL = "aleo"
COINGECKO_ID = "coingecko:aleo"


@dataclass(frozen=True)
class PreScaledTokenSink:
    add_cg_token: Callable[[str, int], Any]


@dataclass(frozen=True)
class GasTokenSink:
    add_gas_token: Callable[..., Any]
    decimals: int = ALEO_DECIMALS


@dataclass(frozen=True)
class GenericAmountSink:
    add: Callable[[str, float], Any]


Sink = Union[PreScaledTokenSink, GasTokenSink, GenericAmountSink]

# (variant, accepted method names) in priority order
_CAPABILITIES = (
    (PreScaledTokenSink, ("addCGToken", "add_cg_token")),
    (GasTokenSink, ("addGasToken", "add_gas_token")),
    (GenericAmountSink, ("add",)),
)


def as_sink(api: Any) -> Sink:
    """
    Wrap an accumulator in the highest-priority sink it supports.

    Already-built sinks are returned unchanged.

    Raises:
        TypeError: if the accumulator exposes none of the reporting methods
    """
    if isinstance(api, (PreScaledTokenSink, GasTokenSink, GenericAmountSink)):
        return api

    for variant, names in _CAPABILITIES:
        for name in names:
            method = getattr(api, name, None)
            if callable(method):
                return variant(method)

    raise TypeError(f"{type(api).__name__} exposes no supported reporting method")


def report(total_micro: int, sink: Sink) -> None:
    """Report the total through exactly one sink call."""
    if isinstance(sink, PreScaledTokenSink):
        sink.add_cg_token(TOKEN_SYMBOL, total_micro)
    elif isinstance(sink, GasTokenSink):
        sink.add_gas_token(TOKEN_SYMBOL, total_micro, {"decimals": sink.decimals})
    elif isinstance(sink, GenericAmountSink):
        sink.add(COINGECKO_ID, total_micro / MICROCREDITS_PER_CREDIT)
    else:
        raise TypeError(f"Unsupported sink: {type(sink).__name__}")

    logger.debug(f"Reported {total_micro} microcredits via {type(sink).__name__}")
