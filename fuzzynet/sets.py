"""Fuzzy sets defined by a handful of key points and piecewise membership."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

MEMBERSHIP_FLOOR = 0.0001


def _floored(ux: float) -> float:
    """Treat membership degrees below the floor as exactly zero."""
    return 0.0 if ux < MEMBERSHIP_FLOOR else ux


class FuzzySet(ABC):
    """A fuzzy set on the real line with a support from ``minimum`` to ``maximum``."""

    identifier: ClassVar[int]
    num_key_points: ClassVar[int]
    minimum: float
    maximum: float

    @abstractmethod
    def membership(self, x: float) -> float:
        """Degree to which *x* belongs to the set, in [0, 1]."""

    @abstractmethod
    def key_points(self) -> list[float]:
        """The points that define the shape of the set."""

    @abstractmethod
    def set_key_point(self, index: int, x: float) -> None:
        """Move key point *index* to *x*; unknown indices are ignored."""

    @abstractmethod
    def height_center(self) -> float:
        """Centre of the region where the set reaches its height."""

    def _assign(self, names: tuple[str, ...], index: int, x: float) -> None:
        if 0 <= index < len(names):
            setattr(self, names[index], x)


@dataclass
class LSet(FuzzySet):
    """Full membership up to ``first_cut``, falling linearly to zero at ``maximum``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 0
    num_key_points: ClassVar[int] = 2

    def membership(self, x: float) -> float:
        ux = 0.0
        if x < self.minimum:
            ux = 1.0
        if self.minimum <= x < self.first_cut:
            ux = 1.0
        if self.first_cut <= x < self.maximum:
            ux = (self.maximum - x) / (self.maximum - self.first_cut)
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.first_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("first_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return (self.minimum + self.first_cut) / 2.0


@dataclass
class TriangleSet(FuzzySet):
    """Triangular set rising from ``minimum`` to a peak at ``first_cut``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 1
    num_key_points: ClassVar[int] = 3

    def membership(self, x: float) -> float:
        ux = 0.0
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < self.first_cut:
            ux = (x - self.minimum) / (self.first_cut - self.minimum)
        if self.first_cut <= x < self.maximum:
            ux = (self.maximum - x) / (self.maximum - self.first_cut)
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return self.first_cut


@dataclass
class PiSet(FuzzySet):
    """Trapezoidal set with a plateau between the two cuts."""

    minimum: float
    first_cut: float
    second_cut: float
    maximum: float

    identifier: ClassVar[int] = 2
    num_key_points: ClassVar[int] = 4

    def membership(self, x: float) -> float:
        ux = 0.0
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < self.first_cut:
            ux = (x - self.minimum) / (self.first_cut - self.minimum)
        if self.first_cut <= x < self.second_cut:
            ux = 1.0
        if self.second_cut <= x < self.maximum:
            ux = (self.maximum - x) / (self.maximum - self.second_cut)
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut, self.second_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut", "second_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return (self.first_cut + self.second_cut) / 2.0


@dataclass
class GammaSet(FuzzySet):
    """Rises linearly from ``minimum`` to full membership at ``first_cut``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 3
    num_key_points: ClassVar[int] = 2

    def membership(self, x: float) -> float:
        ux = 0.0
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < self.first_cut:
            ux = (x - self.minimum) / (self.first_cut - self.minimum)
        if self.first_cut <= x < self.maximum:
            ux = 1.0
        if x >= self.maximum:
            ux = 1.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut"), index, x)

    def height_center(self) -> float:
        return (self.maximum + self.first_cut) / 2.0


@dataclass
class ZSet(FuzzySet):
    """Smooth (quadratic) fall from ``first_cut`` to zero at ``maximum``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 4
    num_key_points: ClassVar[int] = 2

    def membership(self, x: float) -> float:
        ux = 0.0
        middle = (self.first_cut + self.maximum) / 2
        if x < self.minimum:
            ux = 1.0
        if x < self.first_cut:
            ux = 1.0
        if self.first_cut <= x < middle:
            t = (x - self.first_cut) / (self.maximum - self.first_cut)
            ux = 1 - 2 * t * t
        if middle <= x < self.maximum:
            t = (x - self.maximum) / (self.maximum - self.first_cut)
            ux = 2 * t * t
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.first_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("first_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return (self.minimum + self.first_cut) / 2.0


@dataclass
class BellSet(FuzzySet):
    """Smooth bell peaking at ``first_cut``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 5
    num_key_points: ClassVar[int] = 3

    def membership(self, x: float) -> float:
        ux = 0.0
        low_mid = (self.first_cut + self.minimum) / 2
        high_mid = (self.first_cut + self.maximum) / 2
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < low_mid:
            t = (x - self.minimum) / (self.first_cut - self.minimum)
            ux = 2 * t * t
        if low_mid <= x < self.first_cut:
            t = (x - self.first_cut) / (self.first_cut - self.minimum)
            ux = 1 - 2 * t * t
        if self.first_cut <= x < high_mid:
            t = (x - self.first_cut) / (self.maximum - self.first_cut)
            ux = 1 - 2 * t * t
        if high_mid <= x < self.maximum:
            t = (x - self.maximum) / (self.maximum - self.first_cut)
            ux = 2 * t * t
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return self.first_cut


@dataclass
class SSet(FuzzySet):
    """Smooth (quadratic) rise from ``minimum`` to full membership at ``first_cut``."""

    minimum: float
    first_cut: float
    maximum: float

    identifier: ClassVar[int] = 6
    num_key_points: ClassVar[int] = 2

    def membership(self, x: float) -> float:
        ux = 0.0
        middle = (self.first_cut + self.minimum) / 2
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < middle:
            t = (x - self.minimum) / (self.first_cut - self.minimum)
            ux = 2 * t * t
        if middle <= x < self.first_cut:
            t = (x - self.first_cut) / (self.first_cut - self.minimum)
            ux = 1 - 2 * t * t
        if x >= self.first_cut:
            ux = 1.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut"), index, x)

    def height_center(self) -> float:
        return (self.maximum + self.first_cut) / 2.0


@dataclass
class PiBellSet(FuzzySet):
    """Smooth set with a plateau between the two cuts."""

    minimum: float
    first_cut: float
    second_cut: float
    maximum: float

    identifier: ClassVar[int] = 7
    num_key_points: ClassVar[int] = 4

    def membership(self, x: float) -> float:
        ux = 0.0
        low_mid = (self.first_cut + self.minimum) / 2
        high_mid = (self.second_cut + self.maximum) / 2
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < low_mid:
            t = (x - self.minimum) / (self.first_cut - self.minimum)
            ux = 2 * t * t
        if low_mid <= x < self.first_cut:
            t = (x - self.first_cut) / (self.first_cut - self.minimum)
            ux = 1 - 2 * t * t
        if self.first_cut <= x < self.second_cut:
            ux = 1.0
        if self.second_cut <= x < high_mid:
            t = (x - self.second_cut) / (self.maximum - self.second_cut)
            ux = 1 - 2 * t * t
        if high_mid <= x < self.maximum:
            t = (x - self.maximum) / (self.maximum - self.second_cut)
            ux = 2 * t * t
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.first_cut, self.second_cut, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "first_cut", "second_cut", "maximum"), index, x)

    def height_center(self) -> float:
        return (self.first_cut + self.second_cut) / 2.0


@dataclass
class SingletonSet(FuzzySet):
    """Full membership on a narrow interval of width ``delta`` around ``peak``."""

    peak: float
    delta: float
    minimum: float = field(init=False)
    maximum: float = field(init=False)

    identifier: ClassVar[int] = 8
    num_key_points: ClassVar[int] = 2

    def __post_init__(self) -> None:
        self.minimum = self.peak - self.delta / 2
        self.maximum = self.peak + self.delta / 2

    def membership(self, x: float) -> float:
        ux = 0.0
        if x < self.minimum:
            ux = 0.0
        if self.minimum <= x < self.maximum:
            ux = 1.0
        if x >= self.maximum:
            ux = 0.0
        return _floored(ux)

    def key_points(self) -> list[float]:
        return [self.minimum, self.maximum]

    def set_key_point(self, index: int, x: float) -> None:
        self._assign(("minimum", "maximum"), index, x)

    def height_center(self) -> float:
        return self.peak