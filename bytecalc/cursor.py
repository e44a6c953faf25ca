from typing import Sequence

from bytecalc.errors import EndOfInput
from bytecalc.tokens import Token


class TokenCursor:
    """Position in a token sequence, owned by a single parse.

    Only the current token is visible; there is no further lookahead.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.position = 0

    def current(self) -> Token:
        if self.at_end():
            raise EndOfInput("Unexpected end of input", tokens=self.tokens, error_token_idx=self.position)
        return self.tokens[self.position]

    def advance(self) -> None:
        self.position += 1

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)
