from dataclasses import dataclass
from typing import List

from multidex.tokens.token import FungibleToken


@dataclass(frozen=True)
class TokenPair:
    """Ordered (input, output) legs of a trade. Tokens are shared, not copied."""

    input_token: FungibleToken
    output_token: FungibleToken

    def swap(self) -> "TokenPair":
        """Return a new pair with input and output exchanged."""
        return TokenPair(input_token=self.output_token, output_token=self.input_token)

    @property
    def path(self) -> List[str]:
        return [self.input_token.address, self.output_token.address]

    def __str__(self) -> str:
        return f"{self.input_token.symbol}->{self.output_token.symbol}"
