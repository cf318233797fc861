"""Defuzzifiers that turn the fuzzy output of an inference engine into crisp values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from .inference import InferenceEngine
from .norms import Maximum, Norm

_NEGLIGIBLE = 0.000001
_EMPTY_WEIGHT = 100000.0


@dataclass
class Defuzzifier(ABC):
    """Produces the crisp value of one output variable.

    ``conjunction`` joins the fuzzy sets produced by the individual rules.
    """

    engine: InferenceEngine
    output_index: int
    conjunction: Norm = field(default_factory=Maximum)

    identifier: ClassVar[int]
    name: ClassVar[str]

    def default(self) -> float:
        """Degree contributed by a rule that cannot fire."""
        return self.engine.implication.default()

    @abstractmethod
    def crisp_output(self, inputs: Sequence[float]) -> float:
        """Crisp value of the output for the crisp *inputs*."""

    def _aggregated(self, y: float) -> float:
        degree = self.default()
        for rule_index in range(self.engine.num_rules):
            degree = self.conjunction.apply(
                degree,
                self.engine.composition_membership(self.output_index, rule_index, y),
            )
        return degree

    def _samples(self) -> Iterator[tuple[float, float]]:
        """Pairs of sample point and aggregated degree across the output range."""
        variable = self.engine.outputs[self.output_index]
        for i in range(variable.num_intervals + 1):
            y = variable.range_min + i * variable.interval
            yield y, self._aggregated(y)

    def _range_min(self) -> float:
        return self.engine.outputs[self.output_index].range_min


def _weighted_mean(weighted: float, weights: float) -> float:
    if abs(weights) < _NEGLIGIBLE:
        weights = _EMPTY_WEIGHT
    if abs(weighted) < _NEGLIGIBLE:
        weighted = 0.0
    return weighted / weights


class FirstMaximum(Defuzzifier):
    """First sample point where the aggregated output reaches its maximum."""

    identifier: ClassVar[int] = 0
    name: ClassVar[str] = "First maximum"

    def crisp_output(self, inputs: Sequence[float]) -> float:
        best = 0.0
        best_y = self._range_min()
        self.engine.update_inputs(inputs)
        for y, degree in self._samples():
            if best < degree:
                best = degree
                best_y = y
        return best_y


class LastMaximum(Defuzzifier):
    """Last sample point where the aggregated output reaches its maximum."""

    identifier: ClassVar[int] = 1
    name: ClassVar[str] = "Last maximum"

    def crisp_output(self, inputs: Sequence[float]) -> float:
        best = 0.0
        best_y = self._range_min()
        self.engine.update_inputs(inputs)
        for y, degree in self._samples():
            if best <= degree:
                best = degree
                best_y = y
        return best_y


class MeanOfMaxima(Defuzzifier):
    """Midpoint between the first and the last maximum."""

    identifier: ClassVar[int] = 2
    name: ClassVar[str] = "Mean of maxima"

    def crisp_output(self, inputs: Sequence[float]) -> float:
        first = last = 0.0
        first_y = last_y = self._range_min()
        self.engine.update_inputs(inputs)
        for y, degree in self._samples():
            if first < degree:
                first = degree
                first_y = y
            if last <= degree:
                last = degree
                last_y = y
        return (first_y + last_y) / 2


class CenterOfGravity(Defuzzifier):
    """Centroid of the aggregated output over the sample points."""

    identifier: ClassVar[int] = 3
    name: ClassVar[str] = "Center of gravity"

    def crisp_output(self, inputs: Sequence[float]) -> float:
        weighted = 0.0
        weights = 0.0
        self.engine.update_inputs(inputs)
        for y, degree in self._samples():
            weighted += y * degree
            weights += degree
        return _weighted_mean(weighted, weights)


class Height(Defuzzifier):
    """Mean of the consequent height centres weighted by each active rule's degree."""

    identifier: ClassVar[int] = 4
    name: ClassVar[str] = "Height"

    def crisp_output(self, inputs: Sequence[float]) -> float:
        weighted = 0.0
        weights = 0.0
        self.engine.update_inputs(inputs)
        for rule_index in range(self.engine.num_rules):
            if self.engine.rule_active(rule_index):
                y = self.engine.output_set(rule_index, self.output_index).height_center()
                degree = self.engine.composition_membership(
                    self.output_index, rule_index, y
                )
                weighted += degree * y
                weights += degree
        return _weighted_mean(weighted, weights)


@dataclass
class DefuzzificationBlock:
    """One defuzzifier per output variable of an inference engine."""

    engine: InferenceEngine
    conjunction: Norm = field(default_factory=Maximum)
    defuzzifiers: list[Defuzzifier] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.defuzzifiers)

    def __getitem__(self, index: int) -> Defuzzifier:
        return self.defuzzifiers[index]

    def add(self, defuzzifier: Defuzzifier) -> None:
        """Append a defuzzifier."""
        self.defuzzifiers.append(defuzzifier)

    def remove(self, index: int) -> Defuzzifier:
        """Remove the defuzzifier at *index* and return it."""
        return self.defuzzifiers.pop(index)

    def clear(self) -> None:
        """Remove every defuzzifier."""
        self.defuzzifiers.clear()

    def set_engine(self, engine: InferenceEngine) -> None:
        """Point the block and all its defuzzifiers at *engine*."""
        self.engine = engine
        for defuzzifier in self.defuzzifiers:
            defuzzifier.engine = engine

    def set_conjunction(self, norm: Norm) -> None:
        """Use *norm* as the conjunction of every defuzzifier."""
        self.conjunction = norm
        for defuzzifier in self.defuzzifiers:
            defuzzifier.conjunction = norm

    def crisp_output(self, index: int, inputs: Sequence[float]) -> float:
        """Crisp value of output *index* for the crisp *inputs*."""
        return self.defuzzifiers[index].crisp_output(inputs)

    def crisp_outputs(self, inputs: Sequence[float]) -> list[float]:
        """Crisp values of every output for the crisp *inputs*."""
        return [
            self.crisp_output(index, inputs) for index in range(self.engine.num_outputs)
        ]