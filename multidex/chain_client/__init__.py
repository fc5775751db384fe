"""
Chain Client Layer

ChainClient is the only path from the trading core to a blockchain. The core
depends on the abstract interface; Web3ChainClient is the shipped
implementation.
"""

from multidex.chain_client.base import ChainClient, PendingTransaction, TxLog, TxReceipt
from multidex.chain_client.contract import ContractHandle
from multidex.chain_client.web3_client import Web3ChainClient

__all__ = [
    "ChainClient",
    "ContractHandle",
    "PendingTransaction",
    "TxLog",
    "TxReceipt",
    "Web3ChainClient",
]
