import enum
import re
from dataclasses import dataclass
from typing import Sequence, Union

from bytecalc.errors import ExpectedOperand, UnknownOperator
from bytecalc.utils import PrintableEnum


class Operator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator(f"Unknown operator symbol: {symbol!r}") from None


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[int, Operator]

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(type=TokenType.NUMBER, value=value)

    @classmethod
    def operator(cls, op: Operator) -> "Token":
        return cls(type=TokenType.OPERATOR, value=op)

    @property
    def lexeme(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.lexeme


TokenSource = Union[int, str, Operator]

_INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def make_tokens(items: Sequence[TokenSource]) -> list[Token]:
    """Classify already split items into typed tokens.

    Integers and integer strings (``"12"``, ``"-3"``) become ``NUMBER`` tokens,
    operator symbols and ``Operator`` members become ``OPERATOR`` tokens.
    """
    tokens: list[Token] = []
    rendered = [str(item) for item in items]
    for i, item in enumerate(items):
        if isinstance(item, Operator):
            tokens.append(Token.operator(item))
        elif isinstance(item, bool):
            raise ExpectedOperand(f"Not a literal or operator: {item!r}", tokens=rendered, error_token_idx=i)
        elif isinstance(item, int):
            tokens.append(Token.number(item))
        elif isinstance(item, str):
            if _INTEGER_LITERAL.fullmatch(item):
                tokens.append(Token.number(int(item)))
            else:
                try:
                    tokens.append(Token.operator(Operator.from_symbol(item)))
                except UnknownOperator as e:
                    raise UnknownOperator(e.errmsg, tokens=rendered, error_token_idx=i) from None
        else:
            raise ExpectedOperand(f"Not a literal or operator: {item!r}", tokens=rendered, error_token_idx=i)
    return tokens


def untokenize(tokens: Sequence[Token]) -> str:
    return " ".join(t.lexeme for t in tokens)
