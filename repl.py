import argparse
import logging

from bytecalc.errors import BytecalcError
from bytecalc.parser import compile
from bytecalc.precedence import DEFAULT_PRECEDENCE, PrecedenceTable
from bytecalc.runtime import execute
from bytecalc.tokens import make_tokens


def parse_precedence(binding_power_list: str, right_associative: str) -> PrecedenceTable:
    """'+=1,-=1,*=2' -> PrecedenceTable"""
    binding_powers: dict[str, int] = {}
    for entry in binding_power_list.split(","):
        symbol, _, power = entry.strip().partition("=")
        binding_powers[symbol] = int(power)
    return PrecedenceTable.from_symbols(binding_powers, right_associative=[s for s in right_associative if s not in ", "])


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(
        description="Evaluate whitespace separated integer expressions, e.g. '1 + 2 * 3'"
    )
    arg_parser.add_argument("-p", "--precedence", default=None, help="Binding powers, e.g. '+=1,-=1,*=2'")
    arg_parser.add_argument("-r", "--right-assoc", default="", help="Right associative operator symbols, e.g. '-'")
    arg_parser.add_argument("-d", "--disassemble", action="store_true", help="Print the compiled program")
    arg_parser.add_argument("-t", "--trace", action="store_true", help="Log emitted instructions and execution steps")
    args = arg_parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        precedence = parse_precedence(args.precedence, args.right_assoc) if args.precedence else DEFAULT_PRECEDENCE
    except (BytecalcError, ValueError) as e:
        arg_parser.error(str(e))

    while True:
        try:
            code = input("> ")
        except EOFError:
            break

        if not code.strip():
            continue

        try:
            program = compile(make_tokens(code.split()), precedence)
        except BytecalcError as e:
            print(e)
            continue

        if args.disassemble:
            print(program.disassemble())

        try:
            result = execute(program)
        except BytecalcError as e:
            print(e)
            continue

        print(result)
