"""
Shared test fixtures for multidex tests.

Provides reusable fixtures for:
- Mock chain clients (read-only and signing)
- Token and token-pair factories
- Initialized exchanges bound to a mock router
"""

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from multidex.chain_client.base import ChainClient, PendingTransaction
from multidex.chains import Chain
from multidex.exchanges.exchange import Exchange, ExchangeConfig
from multidex.tokens.pair import TokenPair
from multidex.tokens.token import FungibleToken

ROUTER_ADDRESS = "0x10ED43C718714eb63d5aA57B78B54704E256024E"
WBNB_ADDRESS = "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"
USDC_ADDRESS = "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d"
WALLET_ADDRESS = "0x1234567890AbcdEF1234567890aBcdef12345678"
TX_HASH = "0x" + "ab" * 32


# ---------------------------------------------------------------------------
# Mock chain clients
# ---------------------------------------------------------------------------


def _make_client(can_sign: bool):
    client = MagicMock(spec=ChainClient)
    client.can_sign = can_sign
    client.call = AsyncMock(return_value=None)
    client.send = AsyncMock(return_value=PendingTransaction(tx_hash=TX_HASH))
    client.wait_for_confirmations = AsyncMock(return_value=None)
    return client


@pytest.fixture
def mock_client():
    """Read-only chain client; set client.call.side_effect / return_value per test."""
    return _make_client(can_sign=False)


@pytest.fixture
def signing_client():
    """Signing chain client; send() returns a fixed PendingTransaction."""
    return _make_client(can_sign=True)


@pytest.fixture
def route_calls():
    """Dispatch client.call by method name: route_calls(client, getAmountsOut=lambda amount, path: [...])."""

    def _route(client, **handlers):
        async def _call(address, abi, method, args):
            return handlers[method](*args)

        client.call.side_effect = _call

    return _route


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


@pytest.fixture
def make_token(mock_client):
    """Build a FungibleToken on BSC with the mock client."""

    def _make(symbol="WBNB", address=WBNB_ADDRESS, decimals=18, client=None):
        return FungibleToken(
            chain=Chain.BSC,
            client=client or mock_client,
            address=address,
            symbol=symbol,
            decimals=decimals,
        )

    return _make


@pytest.fixture
def wbnb(make_token):
    return make_token("WBNB", WBNB_ADDRESS, 18)


@pytest.fixture
def usdc(make_token):
    return make_token("USDC", USDC_ADDRESS, 6)


@pytest.fixture
def pair(wbnb, usdc):
    """WBNB (18 decimals) -> USDC (6 decimals)."""
    return TokenPair(input_token=wbnb, output_token=usdc)


# ---------------------------------------------------------------------------
# Exchanges
# ---------------------------------------------------------------------------


@pytest.fixture
def exchange(mock_client):
    """Uninitialized PancakeSwap exchange on the mock client."""
    return Exchange(ExchangeConfig(name="PancakeSwap", router_address=ROUTER_ADDRESS), mock_client)


@pytest_asyncio.fixture
async def initialized_exchange(exchange):
    await exchange.initialize()
    return exchange
