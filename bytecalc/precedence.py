from typing import Iterable, Mapping

from bytecalc.errors import UnknownOperator
from bytecalc.tokens import Operator


class PrecedenceTable:
    """Binding power of each operator, higher binds tighter.

    Operators are left associative unless listed in ``right_associative``.
    """

    def __init__(self, binding_powers: Mapping[Operator, int], right_associative: Iterable[Operator] = ()) -> None:
        for op, power in binding_powers.items():
            if power <= 0:
                raise ValueError(f"Binding power of {op} must be positive, got {power}")
        self._binding_powers = dict(binding_powers)
        self._right_associative = frozenset(right_associative)
        unknown = self._right_associative - self._binding_powers.keys()
        if unknown:
            raise ValueError(f"Right associative operators without binding power: {sorted(map(str, unknown))}")
        # one associativity per binding power
        for power in set(self._binding_powers.values()):
            level = {op for op, p in self._binding_powers.items() if p == power}
            if level & self._right_associative and level - self._right_associative:
                raise ValueError(
                    f"Operators {sorted(map(str, level))} share binding power {power} but not associativity"
                )

    @classmethod
    def from_symbols(cls, binding_powers: Mapping[str, int], right_associative: Iterable[str] = ()) -> "PrecedenceTable":
        return cls(
            {Operator.from_symbol(symbol): power for symbol, power in binding_powers.items()},
            right_associative=[Operator.from_symbol(symbol) for symbol in right_associative],
        )

    def binding_power(self, op: Operator) -> int:
        if op not in self._binding_powers:
            raise UnknownOperator(f"No binding power configured for operator {op}")
        return self._binding_powers[op]

    def is_right_associative(self, op: Operator) -> bool:
        return op in self._right_associative

    def next_min_binding_power(self, op: Operator) -> int:
        # an equal-power operator on the right is left for the caller's loop
        power = self.binding_power(op)
        return power if self.is_right_associative(op) else power + 1

    def operators(self) -> list[Operator]:
        return list(self._binding_powers)

    def __contains__(self, op: object) -> bool:
        return op in self._binding_powers

    def __repr__(self) -> str:
        powers = ", ".join(f"{op}: {power}" for op, power in self._binding_powers.items())
        return f"PrecedenceTable({{{powers}}})"


DEFAULT_PRECEDENCE = PrecedenceTable(
    {
        Operator.ADD: 1,
        Operator.SUB: 1,
        Operator.MUL: 2,
        Operator.DIV: 2,
    }
)
