"""Fuzzy implication operators used by the inference engine."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implication(ABC):
    """Relates the antecedent degree *x* to the consequent degree *y*."""

    @abstractmethod
    def implies(self, x: float, y: float) -> float:
        """Degree of the implication ``x -> y``."""

    @abstractmethod
    def default(self) -> float:
        """Value used for a rule that cannot fire."""


class TNormImplication(Implication):
    """Implications built on a T-norm; inactive rules contribute 0."""

    def default(self) -> float:
        return 0.0


class IfThenImplication(Implication):
    """Logical if-then implications; inactive rules contribute 1."""

    def default(self) -> float:
        return 1.0


class ProductImplication(TNormImplication):
    """``x * y``."""

    def implies(self, x: float, y: float) -> float:
        return x * y


class MinimumImplication(TNormImplication):
    """``min(x, y)``."""

    def implies(self, x: float, y: float) -> float:
        return x if x < y else y


class KleeneDienesImplication(IfThenImplication):
    """``max(1 - x, y)``."""

    def implies(self, x: float, y: float) -> float:
        x = 1 - x
        return x if x > y else y


class LukasiewiczImplication(IfThenImplication):
    """``min(1, 1 - x + y)``."""

    def implies(self, x: float, y: float) -> float:
        rel = 1 - x + y
        return 1.0 if rel > 1 else rel


class ZadehImplication(IfThenImplication):
    """``max(min(x, y), 1 - x)``."""

    def implies(self, x: float, y: float) -> float:
        rel = x if x < y else y
        complement = 1 - x
        return complement if rel < complement else rel


class StochasticImplication(IfThenImplication):
    """``max(x * y, 1 - x)``."""

    def implies(self, x: float, y: float) -> float:
        rel = x * y
        complement = 1 - x
        return complement if rel < complement else rel


class GoguenImplication(IfThenImplication):
    """``min(1, y / x)``, taken as 1 when *x* is practically zero."""

    def implies(self, x: float, y: float) -> float:
        rel = y / x if x > 0.00001 else 1000.0
        return 1.0 if rel > 1 else rel


class GodelImplication(IfThenImplication):
    """1 when ``x <= y``, otherwise *y*."""

    def implies(self, x: float, y: float) -> float:
        return 1.0 if x <= y else y


class SharpImplication(IfThenImplication):
    """1 when ``x <= y``, otherwise 0."""

    def implies(self, x: float, y: float) -> float:
        return 1.0 if x <= y else 0.0