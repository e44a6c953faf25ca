"""Precedence climbing parser emitting stack bytecode.

No syntax tree is built: every operand is emitted as ``PUSH`` as soon as it is
read, and every operator as ``BINOP`` right after its right operand has been
emitted, so both operands are always on the stack before the operator runs.
"""
import logging
from typing import Sequence

from bytecalc.bytecode import BinOp, Instruction, Program, Push
from bytecalc.cursor import TokenCursor
from bytecalc.errors import CompileError, ExpectedOperand, UnknownOperator
from bytecalc.precedence import DEFAULT_PRECEDENCE, PrecedenceTable
from bytecalc.tokens import Operator, Token, TokenType

logger = logging.getLogger(__name__)


def compile(tokens: Sequence[Token], precedence: PrecedenceTable = DEFAULT_PRECEDENCE) -> Program:
    cursor = TokenCursor(tokens)
    instructions: list[Instruction] = []
    parse_expression(cursor, precedence, instructions, min_binding_power=0)
    if not cursor.at_end():
        raise CompileError("Internal error, input not fully consumed", tokens=tokens, error_token_idx=cursor.position)
    return Program(tuple(instructions))


def parse_expression(
    cursor: TokenCursor,
    precedence: PrecedenceTable,
    instructions: list[Instruction],
    min_binding_power: int,
) -> None:
    _consume_operand(cursor, instructions)
    while not cursor.at_end():
        operator = _peek_operator(cursor)
        binding_power = _binding_power(cursor, precedence, operator)
        if binding_power < min_binding_power:
            break
        cursor.advance()
        if precedence.is_right_associative(operator):
            _consume_right_associative_chain(cursor, precedence, instructions, operator, binding_power)
        else:
            parse_expression(cursor, precedence, instructions, precedence.next_min_binding_power(operator))
            _emit(instructions, BinOp(operator))


def _consume_right_associative_chain(
    cursor: TokenCursor,
    precedence: PrecedenceTable,
    instructions: list[Instruction],
    operator: Operator,
    binding_power: int,
) -> None:
    """a ^ b ^ c: all operands first, then the operators innermost first.

    Looping over the chain keeps the recursion depth at one level per binding power.
    """
    pending = [operator]
    parse_expression(cursor, precedence, instructions, binding_power + 1)
    while not cursor.at_end():
        next_operator = _peek_operator(cursor)
        if _binding_power(cursor, precedence, next_operator) != binding_power:
            break
        cursor.advance()
        pending.append(next_operator)
        parse_expression(cursor, precedence, instructions, binding_power + 1)
    for op in reversed(pending):
        _emit(instructions, BinOp(op))


def _consume_operand(cursor: TokenCursor, instructions: list[Instruction]) -> None:
    token = cursor.current()
    if not isinstance(token, Token) or token.type is not TokenType.NUMBER:
        raise ExpectedOperand(
            f"Operand expected, found {_describe(token)}",
            tokens=cursor.tokens,
            error_token_idx=cursor.position,
        )
    _emit(instructions, Push(token.value))  # type: ignore
    cursor.advance()


def _peek_operator(cursor: TokenCursor) -> Operator:
    token = cursor.current()
    if not isinstance(token, Token) or token.type is not TokenType.OPERATOR:
        raise UnknownOperator(
            f"Binary operator expected, found {_describe(token)}",
            tokens=cursor.tokens,
            error_token_idx=cursor.position,
        )
    return token.value  # type: ignore


def _describe(token: object) -> str:
    if isinstance(token, Token):
        return f"{token.type} {token.lexeme!r}"
    return f"untyped {token!r}"


def _binding_power(cursor: TokenCursor, precedence: PrecedenceTable, operator: Operator) -> int:
    try:
        return precedence.binding_power(operator)
    except UnknownOperator as e:
        raise UnknownOperator(e.errmsg, tokens=cursor.tokens, error_token_idx=cursor.position) from None


def _emit(instructions: list[Instruction], instruction: Instruction) -> None:
    logger.debug("emit %04d %s", len(instructions), instruction)
    instructions.append(instruction)
