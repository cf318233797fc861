"""The inference engine: a rule base with the operators that evaluate it."""

from __future__ import annotations

import copy
from collections.abc import Sequence

from .implications import Implication, MinimumImplication
from .norms import Maximum, Minimum, Norm
from .rules import Rule
from .sets import FuzzySet
from .variables import Universe


def _clamp(value: float, low: float, high: float) -> float:
    if value > high:
        value = high
    if value < low:
        value = low
    return value


class InferenceEngine:
    """Evaluates a rule base between an input and an output universe.

    ``and_norm`` joins the antecedent terms of a rule and the fuzzifiers;
    ``min_composition`` and ``max_composition`` perform the sup-min style
    composition of the fuzzified input with each rule's implication.
    """

    def __init__(self, inputs: Universe, outputs: Universe, num_rules: int = 0) -> None:
        self.inputs = inputs
        self.outputs = outputs
        self.rules: list[Rule] = [
            Rule.blank(len(inputs), len(outputs)) for _ in range(num_rules)
        ]
        self.implication: Implication = MinimumImplication()
        self.min_composition: Norm = Minimum()
        self.max_composition: Norm = Maximum()
        self.and_norm: Norm = Minimum()

    @property
    def num_inputs(self) -> int:
        return len(self.inputs)

    @property
    def num_outputs(self) -> int:
        return len(self.outputs)

    @property
    def num_rules(self) -> int:
        return len(self.rules)

    def add_rule(self, rule: Rule) -> None:
        """Append a rule to the rule base."""
        self.rules.append(rule)

    def remove_rule(self, index: int) -> Rule:
        """Remove the rule at *index* and return it."""
        return self.rules.pop(index)

    def input_set(self, rule_index: int, var_index: int) -> FuzzySet:
        """Fuzzy set that rule *rule_index* uses for input *var_index*."""
        set_index = self.rules[rule_index].antecedent[var_index]
        return self.inputs[var_index].sets[set_index]

    def output_set(self, rule_index: int, var_index: int) -> FuzzySet:
        """Fuzzy set that rule *rule_index* uses for output *var_index*."""
        set_index = self.rules[rule_index].consequent[var_index]
        return self.outputs[var_index].sets[set_index]

    def reset(self) -> None:
        """Set every modifier to 1 and every consequent to the first set."""
        for rule in self.rules:
            rule.modifiers[: self.num_inputs] = [1.0] * self.num_inputs
            rule.consequent[: self.num_outputs] = [0] * self.num_outputs

    def update_inputs(self, inputs: Sequence[float]) -> None:
        """Centre the input fuzzifiers on the crisp *inputs*."""
        self.inputs.set_inputs(inputs)

    def fuzzifier_membership(self, inputs: Sequence[float]) -> float:
        """Joint membership of the point *inputs* in all input fuzzifiers."""
        degree = self.inputs.fuzzifier_membership(0, inputs[0])
        for j in range(1, self.num_inputs):
            degree = self.and_norm.apply(
                degree, self.inputs.fuzzifier_membership(j, inputs[j])
            )
        return degree

    def implication_membership(
        self, output_index: int, rule_index: int, inputs: Sequence[float], y: float
    ) -> float:
        """Degree of the rule's implication at the point (*inputs*, *y*)."""
        antecedent = self.antecedent_membership(rule_index, inputs)
        consequent = self.consequent_membership(output_index, rule_index, y)
        return self.implication.implies(antecedent, consequent)

    def consequent_membership(self, output_index: int, rule_index: int, y: float) -> float:
        """Membership of *y* in the rule's consequent set for an output."""
        set_index = self.rules[rule_index].consequent[output_index]
        return self.outputs.membership(output_index, set_index, y)

    def antecedent_membership(self, rule_index: int, inputs: Sequence[float]) -> float:
        """Degree to which *inputs* satisfy the antecedent of a rule."""
        rule = self.rules[rule_index]
        first_modifier = rule.modifiers[0]
        ux = self.inputs.membership(0, rule.antecedent[0], inputs[0])
        degree = ux**first_modifier if first_modifier > 0.0 else 1.0
        for j in range(1, self.num_inputs):
            ux = self.inputs.membership(j, rule.antecedent[j], inputs[j])
            # Every term is raised to the first input's modifier.
            ux = ux**first_modifier if rule.modifiers[j] != 0 else 1.0
            degree = self.and_norm.apply(degree, ux)
        return degree

    def composition_membership(self, output_index: int, rule_index: int, y: float) -> float:
        """Membership of *y* in the fuzzy output a rule yields for the current inputs."""
        if not self.rule_active(rule_index):
            return self.implication.default()
        fuzzifiers = [variable.fuzzifier for variable in self.inputs]
        cases = 1
        for fuzzifier in fuzzifiers:
            cases *= fuzzifier.points
        steps = [1] * len(fuzzifiers)
        composition = 0.0
        for _ in range(cases):
            x = []
            for k, fuzzifier in enumerate(fuzzifiers):
                x.append(fuzzifier.minimum + fuzzifier.interval * steps[k])
                steps[k] += 1
                if steps[k] >= fuzzifier.points:
                    steps[k] = 1
            implied = self.implication_membership(output_index, rule_index, x, y)
            fuzzified = self.fuzzifier_membership(x)
            degree = self.min_composition.apply(fuzzified, implied)
            composition = self.max_composition.apply(composition, degree)
        return composition

    def rule_active(self, rule_index: int) -> bool:
        """Whether every antecedent set overlaps the support of its fuzzifier."""
        rule = self.rules[rule_index]
        for variable, set_index in zip(self.inputs, rule.antecedent):
            fuzzy_set = variable.sets[set_index]
            fuzzifier = variable.fuzzifier
            if fuzzy_set.minimum > fuzzifier.maximum or fuzzy_set.maximum < fuzzifier.minimum:
                return False
        return True

    def empty_rule_base(self) -> None:
        """Leave a single rule with first sets everywhere and zero modifiers."""
        if self.rules:
            del self.rules[:-1]
        else:
            self.rules.append(Rule.blank(self.num_inputs, self.num_outputs))
        rule = self.rules[0]
        rule.antecedent[: self.num_inputs] = [0] * self.num_inputs
        rule.modifiers[: self.num_inputs] = [0.0] * self.num_inputs
        rule.consequent[: self.num_outputs] = [0] * self.num_outputs

    def train_fixed(self, antecedent: Sequence[float], consequent: Sequence[float]) -> None:
        """Learn a rule from one example, keeping the fuzzy sets unchanged.

        A rule with the same antecedent is replaced only when the new rule
        has a higher certainty.
        """
        candidate = Rule.blank(self.num_inputs, self.num_outputs)
        self.fill_rule(candidate, antecedent, consequent)
        for index, rule in enumerate(self.rules):
            if self.same_antecedent(candidate, rule):
                if candidate.certainty > rule.certainty:
                    self.add_rule(candidate)
                    self.remove_rule(index)
                return
        self.add_rule(candidate)

    def fill_rule(
        self, rule: Rule, antecedent: Sequence[float], consequent: Sequence[float]
    ) -> None:
        """Point *rule* at the sets that best match an example and rate it."""
        certainty = 1.0
        for i, variable in enumerate(self.inputs):
            value = _clamp(antecedent[i], variable.range_min, variable.range_max)
            best = 0.0
            for j in range(len(variable.sets)):
                degree = variable.membership(j, value)
                if best < degree:
                    best = degree
                    rule.antecedent[i] = j
            certainty *= best
            rule.modifiers[i] = 1.0
        for i, variable in enumerate(self.outputs):
            value = _clamp(consequent[i], variable.range_min, variable.range_max)
            best = 0.0
            for j in range(len(variable.sets)):
                degree = variable.membership(j, value)
                if best < degree:
                    best = degree
                    rule.consequent[i] = j
            certainty *= best
        rule.certainty = certainty

    def same_antecedent(self, first: Rule, second: Rule) -> bool:
        """Whether two rules use the same input sets."""
        return all(
            first.antecedent[i] == second.antecedent[i] for i in range(self.num_inputs)
        )

    def train_variable(self, antecedent: Sequence[float], consequent: Sequence[float]) -> None:
        """Learn a rule from one example by adding new sets centred on it.

        Each variable gets a copy of its first set moved so that its height
        centre sits on the example value, and a rule using those sets is added.
        """
        self._add_centred_sets(self.inputs, antecedent)
        self._add_centred_sets(self.outputs, consequent)
        rule = Rule(
            antecedent=[len(variable.sets) - 1 for variable in self.inputs],
            consequent=[len(variable.sets) - 1 for variable in self.outputs],
            modifiers=[1.0] * self.num_inputs,
            certainty=1.0,
        )
        self.add_rule(rule)

    @staticmethod
    def _add_centred_sets(universe: Universe, values: Sequence[float]) -> None:
        for variable, value in zip(universe, values):
            template = variable.sets[0]
            points = template.key_points()
            new_set = copy.deepcopy(template)
            delta = value - new_set.height_center()
            for j, point in enumerate(points):
                new_set.set_key_point(j, point + delta)
            variable.add_set(new_set)