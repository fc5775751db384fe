"""
Exchange Factory

Builds exchanges, tokens and chain clients from the registries in
dex_constants and the configured Settings. Adding a DEX means adding a
DEX_ROUTERS entry, not writing a class.
"""

from typing import List, Optional

from multidex.chain_client.base import ChainClient
from multidex.chain_client.web3_client import Web3ChainClient
from multidex.chains import Chain
from multidex.config import Settings
from multidex.config import settings as default_settings
from multidex.exchanges.dex_constants import DEX_ROUTERS, TOKEN_ADDRESSES, TOKEN_DECIMALS
from multidex.exchanges.exchange import Exchange, ExchangeConfig
from multidex.tokens.token import FungibleToken


def exchange_config(dex_key: str, router_address: Optional[str] = None) -> ExchangeConfig:
    """
    Build the ExchangeConfig for a registered DEX.

    Raises:
        ValueError: If dex_key is not in DEX_ROUTERS
    """
    entry = DEX_ROUTERS.get(dex_key)
    if entry is None:
        raise ValueError(f"Unknown exchange: {dex_key}. Known: {', '.join(sorted(DEX_ROUTERS))}")

    return ExchangeConfig(
        name=entry["name"],
        router_address=router_address or entry["router"],
        abi=entry["abi"],
        chain=entry["chain"],
    )


def create_exchange(
    dex_key: str,
    client: ChainClient,
    router_address: Optional[str] = None,
) -> Exchange:
    """
    Create an (uninitialized) Exchange for a registered DEX.

    Args:
        dex_key: DEX_ROUTERS key (e.g. "pancakeswap_bsc")
        client: Shared read-only chain client
        router_address: Override the registered router address

    Example:
        exchange = create_exchange("quickswap", client)
        await exchange.initialize()
    """
    return Exchange(exchange_config(dex_key, router_address), client)


def create_token(chain: Chain, symbol: str, client: ChainClient) -> FungibleToken:
    """
    Create a well-known token with decimals pre-filled (no chain read needed).

    Raises:
        ValueError: If symbol is not registered for chain
    """
    addresses = TOKEN_ADDRESSES.get(chain, {})
    if symbol not in addresses:
        raise ValueError(f"Unsupported token on {chain.display_name}: {symbol}")

    return FungibleToken(
        chain=chain,
        client=client,
        address=addresses[symbol],
        symbol=symbol,
        decimals=TOKEN_DECIMALS[chain][symbol],
    )


def create_chain_client(
    chain: Chain,
    settings: Optional[Settings] = None,
    signing: bool = False,
) -> Web3ChainClient:
    """
    Create a Web3ChainClient for chain using the configured RPC URL.

    Raises:
        ValueError: If signing is requested but no wallet_private_key is configured
    """
    settings = settings or default_settings
    private_key = None
    if signing:
        if not settings.wallet_private_key:
            raise ValueError("Signing client requires MULTIDEX_WALLET_PRIVATE_KEY")
        private_key = settings.wallet_private_key

    return Web3ChainClient(
        rpc_url=settings.rpc_url_for(chain),
        private_key=private_key,
        chain=chain,
        settings=settings,
    )


def list_exchanges(chain: Optional[Chain] = None) -> List[str]:
    """Registered DEX keys, optionally filtered by chain"""
    return sorted(
        key for key, entry in DEX_ROUTERS.items()
        if chain is None or entry["chain"] == chain
    )
