import random

from bytecalc.errors import BytecalcError
from bytecalc.runtime import evaluate
from bytecalc.tokens import make_tokens


def eval_py(items: list) -> int | str:
    # '/' means floor division here
    code = " ".join("//" if item == "/" else str(item) for item in items)
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(items: list) -> int | str:
    try:
        return evaluate(make_tokens(items))
    except BytecalcError as e:
        return str(e)


if __name__ == "__main__":

    def generate(n_operands: int) -> list:
        items: list = [random.randint(0, 99)]
        for _ in range(n_operands - 1):
            items.append(random.choice("+-*/"))
            items.append(random.randint(0, 99))
        return items

    while True:
        items = generate(random.randint(1, 8))

        res_py = eval_py(items)
        res_my = eval_my(items)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue  # both failed, e.g. division by zero
        print(f"{items!r}\npy: {res_py}\nmy: {res_my}\n\n")
