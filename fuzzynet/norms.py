"""Triangular norms and conorms used to combine membership degrees."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class Norm(ABC):
    """A binary operation on membership degrees.

    ``neutral`` is the element that leaves the other operand unchanged:
    1 for T-norms and 0 for S-norms.
    """

    neutral: ClassVar[float]

    @abstractmethod
    def apply(self, x: float, y: float) -> float:
        """Combine the degrees *x* and *y*."""


class TNorm(Norm):
    """Intersection-like norm whose neutral element is 1."""

    neutral: ClassVar[float] = 1.0


class SNorm(Norm):
    """Union-like norm whose neutral element is 0."""

    neutral: ClassVar[float] = 0.0


class Product(TNorm):
    """Algebraic product."""

    def apply(self, x: float, y: float) -> float:
        return x * y


class Minimum(TNorm):
    """Smaller of the two degrees."""

    def apply(self, x: float, y: float) -> float:
        return x if x < y else y


class BoundedProduct(TNorm):
    """``max(0, x + y - 1)``."""

    def apply(self, x: float, y: float) -> float:
        z = x + y - 1
        return 0.0 if z < 0 else z


class DrasticProduct(TNorm):
    """Keeps one operand only when the other is exactly 1; otherwise 0."""

    def apply(self, x: float, y: float) -> float:
        z = 0.0
        if y == 1:
            z = x
        if x == 1:
            z = y
        if x < 1 and y < 1:
            z = 0.0
        return z


@dataclass
class FamilyTp(TNorm):
    """Parametric family of T-norms with parameter ``p``."""

    p: float = 1.0

    def apply(self, x: float, y: float) -> float:
        a = math.pow(1 - x, self.p)
        b = math.pow(1 - y, self.p)
        z = a + b - a * b
        return 1 - math.pow(z, 1 / self.p)


@dataclass
class FamilyHp(TNorm):
    """Parametric (Hamacher-style) family of T-norms with parameter ``p``."""

    p: float = 1.0

    def apply(self, x: float, y: float) -> float:
        z = self.p - (1 - self.p) * (x + y - x * y)
        return x * y / z


@dataclass
class FamilyFp(TNorm):
    """Parametric (Frank) family of T-norms with base ``p``."""

    p: float = 2.0

    def apply(self, x: float, y: float) -> float:
        p = self.p
        z = 1 + (math.pow(p, x) - 1) * (math.pow(p, y) - 1) / (p - 1)
        return math.log(z) / math.log(p)


@dataclass
class FamilyYp(TNorm):
    """Parametric (Yager) family of T-norms with parameter ``p``."""

    p: float = 1.0

    def apply(self, x: float, y: float) -> float:
        z = math.pow(1 - x, self.p) + math.pow(1 - y, self.p)
        z = math.pow(z, 1 / self.p)
        if z > 1:
            z = 1.0
        return 1 - z


@dataclass
class FamilyAp(TNorm):
    """Parametric (Dubois-Prade) family of T-norms with parameter ``p``."""

    p: float = 1.0

    def apply(self, x: float, y: float) -> float:
        z = x
        if y > z:
            z = y
        if self.p > z:
            z = self.p
        return x * y / z


class Maximum(SNorm):
    """Larger of the two degrees."""

    def apply(self, x: float, y: float) -> float:
        return x if x > y else y


class BoundedSum(SNorm):
    """``min(1, x + y)``."""

    def apply(self, x: float, y: float) -> float:
        z = x + y
        return 1.0 if z > 1 else z


class DrasticSum(SNorm):
    """Keeps one operand only when the other is exactly 0; otherwise 1."""

    def apply(self, x: float, y: float) -> float:
        z = 0.0
        if y == 0:
            z = x
        if x == 0:
            z = y
        if x > 0 and y > 0:
            z = 1.0
        return z


@dataclass
class FamilySp(SNorm):
    """Parametric family of S-norms: ``min(1, x + y + p*x*y)``."""

    p: float = 1.0

    def apply(self, x: float, y: float) -> float:
        z = x + y + self.p * x * y
        return 1.0 if z > 1 else z