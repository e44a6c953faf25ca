"""Error types raised while compiling and executing expressions.

Compile errors point at a token of the input, execution errors point at an
instruction of the program. Both abort the current call; there is no partial
result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

from bytecalc.utils import caret_line

if TYPE_CHECKING:
    from bytecalc.bytecode import Program
    from bytecalc.tokens import Token


class BytecalcError(Exception):
    """Base error for bytecalc."""

    pass


@dataclass
class CompileError(BytecalcError):
    errmsg: str
    tokens: Sequence[Union[Token, str]] = ()
    error_token_idx: Optional[int] = None

    def __str__(self) -> str:
        header = f"[Compile error] {self.errmsg}"
        if not self.tokens or self.error_token_idx is None:
            return header
        lexemes = [str(t) for t in self.tokens]
        parsed = " ".join(lexemes[: self.error_token_idx])
        return "\n".join([header, " ".join(lexemes), caret_line(parsed, pad=1 if parsed else 0)])


class EndOfInput(CompileError):
    pass


class ExpectedOperand(CompileError):
    pass


class UnknownOperator(CompileError):
    pass


@dataclass
class ExecutionError(BytecalcError):
    errmsg: str
    program: Optional[Program] = None
    instruction_idx: Optional[int] = None

    def __str__(self) -> str:
        header = f"[Execution error] {self.errmsg}"
        if self.program is None or self.instruction_idx is None:
            return header
        return "\n".join([header, "at " + self.program.disassemble_instruction(self.instruction_idx)])


class MalformedProgram(ExecutionError):
    pass


class DivisionByZero(ExecutionError):
    pass
