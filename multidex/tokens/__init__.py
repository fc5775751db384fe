from multidex.tokens.pair import TokenPair
from multidex.tokens.token import FungibleToken

__all__ = ["FungibleToken", "TokenPair"]
