from bytecalc.errors import CompileError, ExecutionError
from bytecalc.parser import compile
from bytecalc.precedence import PrecedenceTable
from bytecalc.runtime import execute
from bytecalc.tokens import make_tokens

for items, precedence in [
    ([5], None),
    ([1, "+", 2, "-", 3, "+", 4], {"+": 1, "-": 1}),
    ([1, "+", 2, "*", 3, "+", 4], {"+": 1, "*": 2}),
    ([1, "-", 2, "-", 3], None),
    ([1, "*", 2, "+", 3], None),
    (["80225", "/", "5", "/", "2"], None),
    ([2, "-", 3, "-", 4], {"-": 1, "*": 2}),
    ([7, "/", 0], None),
    (["+", 1], None),
    ([1, "+"], None),
    ([1, 2], None),
    ([1, "%", 2], None),
    ([1, "*", 2], {"+": 1}),
]:
    print("=" * 10)
    print(f"items: {items!r}")
    table = PrecedenceTable.from_symbols(precedence) if precedence else None
    try:
        tokens = make_tokens(items)
        print(f"tokens: {' '.join(f'<{t.type}>{t.lexeme}' for t in tokens)}")
        program = compile(tokens, table) if table else compile(tokens)
    except CompileError as e:
        print(e)
        continue

    print(f"program:\n{program.disassemble()}")

    try:
        result = execute(program)
    except ExecutionError as e:
        print(e)
        continue
    print(f"result: {result}")
