"""Linguistic variables and the universes that group them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .fuzzifiers import Fuzzifier, TriangleFuzzifier
from .sets import FuzzySet


def _default_fuzzifier() -> Fuzzifier:
    return TriangleFuzzifier(0.0, 0.1, 0.1)


@dataclass
class Variable:
    """A linguistic variable: a range, its fuzzy sets and an input fuzzifier.

    ``num_intervals`` is the number of steps used when sampling the range.
    """

    name: str = ""
    range_min: float = 0.0
    range_max: float = 1.0
    num_intervals: int = 10
    sets: list[FuzzySet] = field(default_factory=list)
    fuzzifier: Fuzzifier = field(default_factory=_default_fuzzifier)

    @property
    def interval(self) -> float:
        """Step between sample points across the range."""
        return (self.range_max - self.range_min) / self.num_intervals

    def add_set(self, fuzzy_set: FuzzySet) -> None:
        """Append a fuzzy set (linguistic value)."""
        self.sets.append(fuzzy_set)

    def remove_set(self, index: int) -> FuzzySet:
        """Remove the fuzzy set at *index* and return it."""
        return self.sets.pop(index)

    def clear_sets(self) -> None:
        """Remove every fuzzy set."""
        self.sets.clear()

    def membership(self, index: int, x: float) -> float:
        """Membership of *x* in the fuzzy set at *index*."""
        return self.sets[index].membership(x)

    def fuzzifier_membership(self, x: float) -> float:
        """Membership of *x* in the input fuzzifier."""
        return self.fuzzifier.membership(x)


@dataclass
class Universe:
    """An ordered collection of linguistic variables."""

    variables: list[Variable] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.variables)

    def __getitem__(self, index: int) -> Variable:
        return self.variables[index]

    def add_variable(self, variable: Variable) -> None:
        """Append a variable."""
        self.variables.append(variable)

    def remove_variable(self, index: int) -> Variable:
        """Remove the variable at *index* and return it."""
        return self.variables.pop(index)

    def clear(self) -> None:
        """Remove every variable."""
        self.variables.clear()

    def set_inputs(self, values: Sequence[float]) -> None:
        """Centre each variable's fuzzifier on the matching crisp value."""
        if len(values) < len(self.variables):
            raise ValueError(
                f"expected {len(self.variables)} input values, got {len(values)}"
            )
        for variable, value in zip(self.variables, values):
            variable.fuzzifier.move_to(value)

    def membership(self, var_index: int, set_index: int, x: float) -> float:
        """Membership of *x* in set *set_index* of variable *var_index*."""
        return self.variables[var_index].membership(set_index, x)

    def fuzzifier_membership(self, var_index: int, x: float) -> float:
        """Membership of *x* in the fuzzifier of variable *var_index*."""
        return self.variables[var_index].fuzzifier_membership(x)