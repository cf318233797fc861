"""Fuzzifiers: fuzzy sets of fixed shape that are centred on a crisp input."""

from __future__ import annotations

from abc import abstractmethod

from .sets import BellSet, FuzzySet, PiBellSet, PiSet, SingletonSet, TriangleSet


class Fuzzifier(FuzzySet):
    """A fuzzy set that follows the crisp input and is sampled at ``points`` points.

    ``interval`` is the spacing used when sampling the support.
    """

    center: float
    points: int
    interval: float

    def _start(self, center: float) -> None:
        self.center = center
        self.points = 1
        self.set_points(1)

    def set_points(self, num: int) -> None:
        """Set the number of sample points (at least one) and recompute the spacing."""
        num = max(num, 1)
        self.points = num
        self.interval = (self.maximum - self.minimum) / (num + 1)

    def set_width(self, support: float) -> None:
        """Resize the support around its midpoint to width *support*."""
        middle = (self.maximum + self.minimum) / 2
        self.minimum = middle - support / 2
        self.maximum = middle + support / 2
        self.set_points(self.points)

    @abstractmethod
    def move_to(self, x: float) -> None:
        """Centre the fuzzifier on the crisp input *x*."""

    def height_center(self) -> float:
        return 0.0


class TriangleFuzzifier(Fuzzifier, TriangleSet):
    """Triangular fuzzifier reaching ``minus`` below and ``plus`` above the centre."""

    def __init__(self, x: float, minus: float, plus: float) -> None:
        TriangleSet.__init__(self, x - minus, x, x + plus)
        self.minus = minus
        self.plus = plus
        self._start(x)

    def move_to(self, x: float) -> None:
        self.minimum = x - self.minus
        self.maximum = x + self.plus
        self.first_cut = x
        self.center = x


class PiFuzzifier(Fuzzifier, PiSet):
    """Trapezoidal fuzzifier with offsets for each of its four key points."""

    def __init__(
        self, x: float, minus1: float, minus2: float, plus1: float, plus2: float
    ) -> None:
        PiSet.__init__(self, x - minus1, x - minus2, x + plus1, x + plus2)
        self.minus1 = minus1
        self.minus2 = minus2
        self.plus1 = plus1
        self.plus2 = plus2
        self._start(x)

    def move_to(self, x: float) -> None:
        self.minimum = x - self.minus1
        self.maximum = x + self.plus2
        self.first_cut = x - self.minus2
        self.second_cut = x + self.plus1
        self.center = x


class BellFuzzifier(Fuzzifier, BellSet):
    """Bell-shaped fuzzifier reaching ``minus`` below and ``plus`` above the centre."""

    def __init__(self, x: float, minus: float, plus: float) -> None:
        BellSet.__init__(self, x - minus, x, x + plus)
        self.minus = minus
        self.plus = plus
        self._start(x)

    def move_to(self, x: float) -> None:
        self.minimum = x - self.minus
        self.maximum = x + self.plus
        self.first_cut = x
        self.center = x


class PiBellFuzzifier(Fuzzifier, PiBellSet):
    """Smooth plateau fuzzifier with offsets for each of its four key points."""

    def __init__(
        self, x: float, minus1: float, minus2: float, plus1: float, plus2: float
    ) -> None:
        PiBellSet.__init__(self, x - minus1, x - minus2, x + plus1, x + plus2)
        self.minus1 = minus1
        self.minus2 = minus2
        self.plus1 = plus1
        self.plus2 = plus2
        self._start(x)

    def move_to(self, x: float) -> None:
        self.minimum = x - self.minus1
        self.maximum = x + self.plus2
        self.first_cut = x - self.minus2
        self.second_cut = x + self.plus1
        self.center = x


class SingletonFuzzifier(Fuzzifier, SingletonSet):
    """Narrow fuzzifier of width ``delta`` around the crisp input."""

    def __init__(self, x: float, delta: float) -> None:
        SingletonSet.__init__(self, x, delta)
        self._start(x)

    def move_to(self, x: float) -> None:
        self.minimum = x - self.delta / 2
        self.maximum = x + self.delta / 2
        self.center = x