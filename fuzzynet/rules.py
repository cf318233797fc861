"""Rules of a fuzzy rule base."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Rule:
    """An IF-THEN rule that refers to linguistic values by index.

    ``antecedent[i]`` is the index of the fuzzy set used for input *i*, and
    ``modifiers[i]`` is the exponent applied to its membership degree.
    ``consequent[j]`` is the index of the fuzzy set used for output *j*.
    ``certainty`` measures how well training data supported the rule.
    """

    antecedent: list[int] = field(default_factory=list)
    consequent: list[int] = field(default_factory=list)
    modifiers: list[float] = field(default_factory=list)
    certainty: float = 1.0

    @classmethod
    def blank(cls, num_inputs: int, num_outputs: int) -> Rule:
        """A rule that uses the first set everywhere, with unit modifiers."""
        return cls(
            antecedent=[0] * num_inputs,
            consequent=[0] * num_outputs,
            modifiers=[1.0] * num_inputs,
            certainty=1.0,
        )