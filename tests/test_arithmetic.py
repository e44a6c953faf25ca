import random

import pytest

from bytecalc.bytecode import BinOp, Opcode, Push
from bytecalc.parser import compile
from bytecalc.precedence import PrecedenceTable
from bytecalc.runtime import evaluate, execute
from bytecalc.tokens import Operator, TokenType, make_tokens


@pytest.mark.parametrize(
    "items, expected_ret_val",
    [
        pytest.param([1], 1),
        pytest.param([-1], -1),
        pytest.param(["42"], 42),
        pytest.param([1, "+", 2], 3),
        pytest.param([1, "-", 2, "-", 3], -4),
        pytest.param([1, "+", 2, "*", 3], 7),
        pytest.param([1, "*", 2, "+", 3], 5),
        pytest.param([1, "+", 2, "-", 3, "+", 4], 4),
        pytest.param([1, "+", 2, "*", 3, "+", 4], 11),
        pytest.param([2, "*", 3, "*", 4, "-", 5], 19),
        pytest.param([10, "-", 2, "*", 3, "-", 1], 3),
        pytest.param([10, "/", 5, "/", 2], 1),
        pytest.param([7, "/", 2], 3),
        pytest.param([-7, "/", 2], -4),
        pytest.param([1, "+", 8, "/", 2, "*", 3], 13),
        pytest.param(["10", "+", "2", "*", "5"], 20),
        pytest.param([99999999999, "*", 99999999999], 9999999999800000000001),
    ],
)
def test_eval_arithmetic(items: list, expected_ret_val: int) -> None:
    assert evaluate(make_tokens(items)) == expected_ret_val


def _reference_eval(items: list) -> int:
    # '/' binds like '*' and floors, same as Python's '//'
    return eval(" ".join("//" if item == "/" else str(item) for item in items))


def _random_items(rng: random.Random, n_operands: int) -> list:
    # nonzero literals: the right operand of '/' is always a single literal
    items: list = [rng.randint(1, 50)]
    for _ in range(n_operands - 1):
        items.append(rng.choice("+-*/"))
        items.append(rng.randint(1, 50))
    return items


RANDOM_EXPRESSIONS = [_random_items(random.Random(seed), n_operands=1 + seed % 9) for seed in range(200)]


@pytest.mark.parametrize("items", RANDOM_EXPRESSIONS)
def test_compile_then_execute_matches_reference(items: list) -> None:
    assert execute(compile(make_tokens(items))) == _reference_eval(items)


@pytest.mark.parametrize("items", RANDOM_EXPRESSIONS)
def test_instruction_counts_match_tokens(items: list) -> None:
    tokens = make_tokens(items)
    program = compile(tokens)
    assert program.count(Opcode.PUSH) == sum(1 for t in tokens if t.type is TokenType.NUMBER)
    assert program.count(Opcode.BINOP) == sum(1 for t in tokens if t.type is TokenType.OPERATOR)
    assert len(program) == len(tokens)


@pytest.mark.parametrize("items", RANDOM_EXPRESSIONS)
def test_compiled_program_never_underflows(items: list) -> None:
    depth = 0
    for instruction in compile(make_tokens(items)):
        if isinstance(instruction, BinOp):
            assert depth >= 2
            depth -= 1
        else:
            depth += 1
        assert depth >= 1
    assert depth == 1


@pytest.mark.parametrize(
    "items, precedence, expected_program, expected_ret_val",
    [
        pytest.param(
            [1, "+", 2, "-", 3, "+", 4],
            {"+": 1, "-": 1},
            [
                Push(1),
                Push(2),
                BinOp(Operator.ADD),
                Push(3),
                BinOp(Operator.SUB),
                Push(4),
                BinOp(Operator.ADD),
            ],
            4,
            id="equal-precedence",
        ),
        pytest.param(
            [1, "+", 2, "*", 3, "+", 4],
            {"+": 1, "*": 2},
            [
                Push(1),
                Push(2),
                Push(3),
                BinOp(Operator.MUL),
                BinOp(Operator.ADD),
                Push(4),
                BinOp(Operator.ADD),
            ],
            11,
            id="mixed-precedence",
        ),
        pytest.param(
            [2, "-", 3, "-", 4],
            PrecedenceTable.from_symbols({"-": 1}, right_associative="-"),
            [Push(2), Push(3), Push(4), BinOp(Operator.SUB), BinOp(Operator.SUB)],
            3,
            id="right-associative",
        ),
        pytest.param(
            [2, "*", 3, "+", 4],
            {"+": 3, "*": 1},
            [Push(2), Push(3), Push(4), BinOp(Operator.ADD), BinOp(Operator.MUL)],
            14,
            id="custom-precedence",
        ),
    ],
)
def test_end_to_end(items: list, precedence, expected_program: list, expected_ret_val: int) -> None:
    if isinstance(precedence, dict):
        precedence = PrecedenceTable.from_symbols(precedence)
    program = compile(make_tokens(items), precedence)
    assert list(program) == expected_program
    assert execute(program) == expected_ret_val
    assert evaluate(make_tokens(items), precedence) == expected_ret_val
