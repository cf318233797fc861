"""A small one-input, one-output fuzzy logic system and an interactive calculator."""

from __future__ import annotations

import argparse

from .defuzzifiers import CenterOfGravity, DefuzzificationBlock
from .fuzzifiers import SingletonFuzzifier
from .implications import MinimumImplication
from .inference import InferenceEngine
from .norms import Maximum, Minimum
from .rules import Rule
from .sets import GammaSet, LSet, TriangleSet
from .system import FuzzyLogicSystem
from .variables import Universe, Variable


def _three_sets():
    return [LSet(-1, -1, 0), TriangleSet(-1, 0, 1), GammaSet(0, 1, 1)]


def build_example_system() -> FuzzyLogicSystem:
    """A system on [-1, 1] whose three rules map each input set to the same output set."""
    fuzzifier = SingletonFuzzifier(1, 0.01)
    fuzzifier.set_points(1)
    inputs = Universe()
    inputs.add_variable(
        Variable(
            name="Entrada 1",
            range_min=-1,
            range_max=1,
            num_intervals=20,
            sets=_three_sets(),
            fuzzifier=fuzzifier,
        )
    )
    outputs = Universe()
    outputs.add_variable(
        Variable(
            name="Salida 1",
            range_min=-1,
            range_max=1,
            num_intervals=20,
            sets=_three_sets(),
        )
    )
    engine = InferenceEngine(inputs, outputs)
    engine.and_norm = Minimum()
    engine.min_composition = Minimum()
    engine.max_composition = Maximum()
    engine.implication = MinimumImplication()
    for index in range(3):
        engine.add_rule(
            Rule(antecedent=[index], consequent=[index], modifiers=[1.0], certainty=1.0)
        )
    conjunction = Maximum()
    block = DefuzzificationBlock(engine, conjunction)
    block.add(CenterOfGravity(engine, 0, conjunction))
    block.set_engine(engine)
    block.set_conjunction(conjunction)
    return FuzzyLogicSystem(inputs, outputs, engine, block)


def _read_float(prompt: str) -> float:
    while True:
        text = input(prompt)
        try:
            return float(text)
        except ValueError:
            print("Please enter a number.")


def main(argv: list[str] | None = None) -> int:
    """Repeatedly read inputs from the terminal and print the system's outputs."""
    parser = argparse.ArgumentParser(
        description="Evaluate the example fuzzy logic system interactively."
    )
    parser.parse_args(argv)
    system = build_example_system()
    try:
        while True:
            values = [
                _read_float(f"{system.input_name(i)} : ")
                for i in range(system.num_inputs)
            ]
            for i, value in enumerate(system.compute(values)):
                print(f"{system.output_name(i)} : {value:g}")
            answer = input("Another calculation? (y/n) ")
            if answer.strip().lower() != "y":
                break
    except EOFError:
        pass
    return 0