import logging
from typing import Callable, Sequence

from bytecalc import parser
from bytecalc.bytecode import BinOp, Program, Push
from bytecalc.errors import DivisionByZero, MalformedProgram
from bytecalc.precedence import DEFAULT_PRECEDENCE, PrecedenceTable
from bytecalc.tokens import Operator, Token

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[int, int], int]

# kept separate from the precedence table, must cover every operator it configures.
# '/' is floor division like Python's '//': -7 / 2 == -4, not -3
OPERATIONS: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: lambda a, b: a // b,
}


def evaluate(tokens: Sequence[Token], precedence: PrecedenceTable = DEFAULT_PRECEDENCE, trace: bool = False) -> int:
    return execute(parser.compile(tokens, precedence), trace=trace)


def execute(program: Program, trace: bool = False) -> int:
    """Run ``program`` on a fresh operand stack and return the single value left on it."""
    trace_level = logging.INFO if trace else logging.DEBUG
    stack: list[int] = []
    for idx, instruction in enumerate(program):
        if logger.isEnabledFor(trace_level):
            logger.log(trace_level, "stack %s | %s", list(stack), program.disassemble_instruction(idx))
        if isinstance(instruction, Push):
            if not isinstance(instruction.value, int) or isinstance(instruction.value, bool):
                raise MalformedProgram(
                    f"PUSH operand must be an integer, got {instruction.value!r}", program=program, instruction_idx=idx
                )
            stack.append(instruction.value)
        elif isinstance(instruction, BinOp):
            if len(stack) < 2:
                raise MalformedProgram(
                    f"Stack underflow: {instruction.operator} needs 2 operands, stack holds {len(stack)}",
                    program=program,
                    instruction_idx=idx,
                )
            impl = OPERATIONS.get(instruction.operator) if isinstance(instruction.operator, Operator) else None
            if impl is None:
                raise MalformedProgram(
                    f"No operation for operator {instruction.operator}", program=program, instruction_idx=idx
                )
            right = stack.pop()
            left = stack.pop()
            try:
                result = impl(left, right)
            except ZeroDivisionError:
                raise DivisionByZero(
                    f"Division by zero: {left} {instruction.operator} {right}", program=program, instruction_idx=idx
                ) from None
            stack.append(result)
        else:
            raise MalformedProgram(f"Unexpected instruction: {instruction!r}", program=program, instruction_idx=idx)

    if len(stack) != 1:
        raise MalformedProgram(
            f"Expected exactly one value on the stack after execution, found {len(stack)}", program=program
        )
    if logger.isEnabledFor(trace_level):
        logger.log(trace_level, "result %d", stack[0])
    return stack[0]
