"""
multidex: one API for quoting and swapping across Uniswap V2 style DEX
routers on several EVM chains.
"""

from multidex.chain_client import ChainClient, PendingTransaction, TxLog, TxReceipt, Web3ChainClient
from multidex.chains import Chain
from multidex.exceptions import (
    AbiLoadError,
    DataExtractionError,
    DeadlineError,
    DexError,
    MethodEncodingError,
    NumericConversionError,
    OutputNotFoundError,
    PreconditionError,
    RemoteCallError,
    SwapLogError,
    TransactionFailedError,
)
from multidex.exchanges import Exchange, ExchangeConfig
from multidex.tokens import FungibleToken, TokenPair

__all__ = [
    "AbiLoadError",
    "Chain",
    "ChainClient",
    "DataExtractionError",
    "DeadlineError",
    "DexError",
    "Exchange",
    "ExchangeConfig",
    "FungibleToken",
    "MethodEncodingError",
    "NumericConversionError",
    "OutputNotFoundError",
    "PendingTransaction",
    "PreconditionError",
    "RemoteCallError",
    "SwapLogError",
    "TokenPair",
    "TransactionFailedError",
    "TxLog",
    "TxReceipt",
    "Web3ChainClient",
]
