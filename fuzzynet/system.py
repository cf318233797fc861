"""A complete fuzzy logic system: universes, inference engine and defuzzification."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .defuzzifiers import DefuzzificationBlock
from .inference import InferenceEngine
from .variables import Universe, Variable


@dataclass
class FuzzyLogicSystem:
    """Maps crisp inputs to crisp outputs through a fuzzy rule base."""

    inputs: Universe
    outputs: Universe
    engine: InferenceEngine
    defuzzification: DefuzzificationBlock
    name: str = ""
    description: str = ""

    @property
    def num_inputs(self) -> int:
        return len(self.inputs)

    @property
    def num_outputs(self) -> int:
        return len(self.outputs)

    def input_variable(self, index: int) -> Variable | None:
        """Input variable at *index*, or None when there is no such variable."""
        if 0 <= index < self.num_inputs:
            return self.inputs[index]
        return None

    def output_variable(self, index: int) -> Variable | None:
        """Output variable at *index*, or None when there is no such variable."""
        if 0 <= index < self.num_outputs:
            return self.outputs[index]
        return None

    def input_name(self, index: int) -> str:
        """Name of the input variable at *index*."""
        return self.inputs[index].name

    def output_name(self, index: int) -> str:
        """Name of the output variable at *index*."""
        return self.outputs[index].name

    def compute(self, inputs: Sequence[float]) -> list[float]:
        """Crisp outputs for the crisp *inputs*."""
        return self.defuzzification.crisp_outputs(inputs)

    def train_fixed(self, antecedent: Sequence[float], consequent: Sequence[float]) -> None:
        """Learn a rule from one example without changing the fuzzy sets."""
        self.engine.train_fixed(antecedent, consequent)

    def train_variable(
        self, antecedent: Sequence[float], consequent: Sequence[float]
    ) -> None:
        """Learn a rule from one example by adding sets centred on it."""
        self.engine.train_variable(antecedent, consequent)