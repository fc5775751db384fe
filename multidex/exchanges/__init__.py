"""
Exchange Layer

A single Exchange class implements quoting, swapping and pair probing for
every Uniswap V2 style router. Concrete DEXes are ExchangeConfig entries,
registered in dex_constants and built through the factory.

Usage:
    from multidex.exchanges.factory import create_exchange, create_token

    exchange = create_exchange("pancakeswap_bsc", client)
    await exchange.initialize()
"""

from multidex.exchanges.exchange import SWAP_CONFIRMATIONS, Exchange, ExchangeConfig
from multidex.exchanges.swap_log import SwapAmounts, find_output_amount, parse_swap_log

__all__ = [
    "SWAP_CONFIRMATIONS",
    "Exchange",
    "ExchangeConfig",
    "SwapAmounts",
    "find_output_amount",
    "parse_swap_log",
]
