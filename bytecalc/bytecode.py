import enum
from dataclasses import dataclass
from typing import Iterator, Union

from bytecalc.tokens import Operator
from bytecalc.utils import PrintableEnum


class Opcode(PrintableEnum):
    PUSH = enum.auto()
    BINOP = enum.auto()


@dataclass(frozen=True)
class Push:
    value: int

    @property
    def opcode(self) -> Opcode:
        return Opcode.PUSH

    def __str__(self) -> str:
        return f"{self.opcode} {self.value}"


@dataclass(frozen=True)
class BinOp:
    operator: Operator

    @property
    def opcode(self) -> Opcode:
        return Opcode.BINOP

    def __str__(self) -> str:
        return f"{self.opcode} {self.operator}"


Instruction = Union[Push, BinOp]


@dataclass(frozen=True)
class Program:
    """Flat instruction sequence, complete once handed to the stack machine."""

    instructions: tuple[Instruction, ...]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, idx: int) -> Instruction:
        return self.instructions[idx]

    def count(self, opcode: Opcode) -> int:
        return sum(1 for instruction in self.instructions if instruction.opcode is opcode)

    def disassemble_instruction(self, idx: int) -> str:
        return f"{idx:04d} {self.instructions[idx]}"

    def disassemble(self) -> str:
        return "\n".join(self.disassemble_instruction(i) for i in range(len(self.instructions)))

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.instructions) + "]"
