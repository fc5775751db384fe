"""
DEX Constants

Router contracts and well-known tokens for the supported chains. Every router
listed here speaks the Uniswap V2 router interface, so they share one bundled
ABI resource unless an entry says otherwise.
"""

from multidex.abi import UNISWAP_V2_ROUTER_ABI_RESOURCE
from multidex.chains import Chain

# Router registry: key -> display name, chain, router address, ABI resource
DEX_ROUTERS = {
    # BNB Smart Chain
    "pancakeswap_bsc": {
        "name": "PancakeSwap",
        "chain": Chain.BSC,
        "router": "0x10ED43C718714eb63d5aA57B78B54704E256024E",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "apeswap_bsc": {
        "name": "ApeSwap",
        "chain": Chain.BSC,
        "router": "0xcF0feBd3f17CEf5b47b0cD257aCf6025c5BFf3b7",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "biswap": {
        "name": "BiSwap",
        "chain": Chain.BSC,
        "router": "0x3a6d8cA21D1CF76F653A67577FA0D27453350dD8",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "bakeryswap": {
        "name": "BakerySwap",
        "chain": Chain.BSC,
        "router": "0xCDe540d7eAFE93aC5fE6233Bee57E1270D3E330F",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "babydoge": {
        "name": "BabyDoge",
        "chain": Chain.BSC,
        "router": "0xC9a0F685F39d05D835c369036251ee3aEaaF3c47",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    # Polygon
    "apeswap_polygon": {
        "name": "ApeSwapPolygon",
        "chain": Chain.POLYGON,
        "router": "0xC0788A3aD43d79aa53B09c2EaCc313A787d1d607",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "quickswap": {
        "name": "QuickSwap",
        "chain": Chain.POLYGON,
        "router": "0xa5E0829CaCEd8fFDD4De3c43696c57F7D7A678ff",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "sushiswap_polygon": {
        "name": "SushiSwap",
        "chain": Chain.POLYGON,
        "router": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "meshswap": {
        "name": "MeshSwap",
        "chain": Chain.POLYGON,
        "router": "0x10f4A785F458Bc144e3706575924889954946639",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    # Base
    "baseswap": {
        "name": "BaseSwap",
        "chain": Chain.BASE,
        "router": "0x327Df1E6de05895d2ab08513aaDD9313Fe505d86",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
    "pancakeswap_base": {
        "name": "PancakeSwapBase",
        "chain": Chain.BASE,
        "router": "0x8cFe327CEc66d1C090Dd72bd0FF11d690C33a2Eb",
        "abi": UNISWAP_V2_ROUTER_ABI_RESOURCE,
    },
}

# Common ERC-20 token addresses per chain
TOKEN_ADDRESSES = {
    Chain.BSC: {
        "WBNB": "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",  # Wrapped BNB
        "BUSD": "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56",  # Binance USD
        "USDT": "0x55d398326f99059fF775485246999027B3197955",  # Tether (BEP-20)
    },
    Chain.POLYGON: {
        "WMATIC": "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270",  # Wrapped MATIC
        "WETH": "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619",  # Wrapped Ether
        "USDC": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",  # Bridged USD Coin
    },
    Chain.BASE: {
        "WETH": "0x4200000000000000000000000000000000000006",  # Wrapped Ether
        "USDC": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",  # USD Coin
    },
}

# Token decimals per chain (BEP-20 stablecoins use 18, unlike Ethereum)
TOKEN_DECIMALS = {
    Chain.BSC: {
        "WBNB": 18,
        "BUSD": 18,
        "USDT": 18,
    },
    Chain.POLYGON: {
        "WMATIC": 18,
        "WETH": 18,
        "USDC": 6,
    },
    Chain.BASE: {
        "WETH": 18,
        "USDC": 6,
    },
}
