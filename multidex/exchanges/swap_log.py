"""
Swap receipt log decoding.

The default layout is the two-amount constant-product convention: the two
"in" amounts sit in the first two topics, the two "out" amounts are the first
two 32-byte big-endian words of the data payload. This is an ABI convention,
not a universal truth; exchanges whose event differs supply their own parser
through ExchangeConfig.swap_log_parser.
"""

from decimal import Decimal
from typing import Callable, NamedTuple

from multidex.chain_client.base import TxLog, TxReceipt
from multidex.exceptions import OutputNotFoundError, SwapLogError
from multidex.units import normalize_fixed18

WORD_SIZE = 32


class SwapAmounts(NamedTuple):
    amount0_in: int
    amount1_in: int
    amount0_out: int
    amount1_out: int

    @property
    def total_out(self) -> int:
        return self.amount0_out + self.amount1_out


SwapLogParser = Callable[[TxLog], SwapAmounts]


def parse_swap_log(log: TxLog) -> SwapAmounts:
    """
    Decode a two-amount swap log.

    Raises:
        SwapLogError: fewer than two topics, or less than two data words
    """
    if len(log.topics) < 2 or len(log.data) < 2 * WORD_SIZE:
        raise SwapLogError(
            f"Log from {log.address} does not have enough topics/data for parsing swap "
            f"(topics={len(log.topics)}, data_bytes={len(log.data)})"
        )

    amount0_in = int.from_bytes(log.topics[0], "big")
    amount1_in = int.from_bytes(log.topics[1], "big")
    amount0_out = int.from_bytes(log.data[0:WORD_SIZE], "big")
    amount1_out = int.from_bytes(log.data[WORD_SIZE:2 * WORD_SIZE], "big")

    return SwapAmounts(amount0_in, amount1_in, amount0_out, amount1_out)


def find_output_amount(
    receipt: TxReceipt,
    output_address: str,
    parser: SwapLogParser = parse_swap_log,
) -> Decimal:
    """
    Locate the first log emitted by output_address and return its total "out"
    amount as an 18-decimal fixed-point Decimal (still in base units).

    Raises:
        OutputNotFoundError: no log from output_address
        SwapLogError: the matching log could not be decoded
    """
    wanted = output_address.lower()
    for log in receipt.logs:
        if log.address.lower() == wanted:
            amounts = parser(log)
            return normalize_fixed18(amounts.total_out)

    raise OutputNotFoundError(
        f"Output amount not found in transaction logs (tx={receipt.transaction_hash}, token={output_address})"
    )
